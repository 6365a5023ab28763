"""
AI Module - model integration for resume generation.

Module Structure:
================
- providers/: The model capability (Gemini client behind AIProvider)
- resume/: Contracts, prompt templates, tools and the generation /
  refinement engines
- monitoring/: Structured logging for AI requests and responses

Flow:
=====
1. Caller: "A modern resume for a backend engineer at Stripe"
2. Action layer validates the prompt against its contract
3. ResumeGenerator renders the prompt template and calls Gemini, which
   may call the getCompanyLogo tool for branding
4. The JSON answer is validated, code fences are stripped
5. Caller receives {markup, style} or a failure reason
"""
