"""
ResumeForge - AI resume template generation and refinement.

Turns a free-text prompt into an editable resume document (HTML + CSS)
with a Gemini model, then refines that document from natural-language
feedback while keeping the user's manual edits.

Run the HTTP API with: uvicorn resumeforge.main:app --reload
"""

__version__ = "0.1.0"
