"""
Routers module - API endpoint handlers organized by feature.

- resume: Generate, refine and summarize feedback on resume templates
"""
