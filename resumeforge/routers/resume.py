"""
Resume Router - HTTP transport for the resume actions.

HTTP handling only: bodies are forwarded raw to ResumeActions, which
validates them and never raises. Every call answers 200 with a
discriminated {ok, value | reason, kind} payload so the client can show
the reason as-is.

Endpoints:
- POST /resume/generate: New design from {"prompt": "..."}
- POST /resume/refine: Replacement design from {"currentMarkup", "currentStyle", "feedback"}
- POST /resume/summarize-feedback: {"resumeTemplate", "userFeedback"} -> summary + refined template
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from resumeforge.schemas.resume import FeedbackSummaryResponse, ResumeActionResponse
from resumeforge.services.resume_actions import ResumeActions, get_resume_actions

# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/resume", tags=["resume"])


@router.post(
    "/generate",
    response_model=ResumeActionResponse,
    summary="Generate a resume template from a prompt",
)
async def generate_resume(
    payload: Any = Body(..., examples=[{"prompt": "A modern resume for a backend engineer role, minimalist style."}]),
    actions: ResumeActions = Depends(get_resume_actions),
):
    """Generate a new resume design (HTML + CSS)."""
    result = await actions.submit_generation(payload)
    if not result.ok:
        logger.info(f"Generation failed ({result.kind.value}): {result.reason}")
    return ResumeActionResponse.from_result(result)


@router.post(
    "/refine",
    response_model=ResumeActionResponse,
    summary="Refine the current resume from feedback",
)
async def refine_resume(
    payload: Any = Body(...),
    actions: ResumeActions = Depends(get_resume_actions),
):
    """Apply feedback to the caller's current (possibly hand-edited) resume."""
    result = await actions.submit_refinement(payload)
    if not result.ok:
        logger.info(f"Refinement failed ({result.kind.value}): {result.reason}")
    return ResumeActionResponse.from_result(result)


@router.post(
    "/summarize-feedback",
    response_model=FeedbackSummaryResponse,
    summary="Summarize feedback and refine the template",
)
async def summarize_feedback(
    payload: Any = Body(...),
    actions: ResumeActions = Depends(get_resume_actions),
):
    """Summarize user feedback on a template and return the refined template."""
    result = await actions.submit_feedback_summary(payload)
    return FeedbackSummaryResponse.from_result(result)
