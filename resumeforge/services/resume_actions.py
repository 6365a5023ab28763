"""
ResumeActions - Boundary between callers and the resume engines.

Every action:
1. Validates the raw caller input against its contract. An invalid input
   returns the contract's first-failure message and never reaches the model.
2. Runs the engine, whose expected failures already arrive as
   OperationResult.
3. Catches anything unexpected (network, provider, programming errors),
   logs it, and returns a generic retry-later failure.

Nothing raises past this module.

Usage:
    actions = ResumeActions()
    result = await actions.submit_generation("A resume for a marketing role at Google")
    result.to_dict()   # {"ok": True, "value": {"markup": ..., "style": ...}}
"""

import logging
from typing import Any, Optional, TYPE_CHECKING

from resumeforge.ai.resume.contracts import (
    FEEDBACK_SUMMARY_REQUEST,
    GENERATION_REQUEST,
    REFINEMENT_REQUEST,
    Artifact,
    FeedbackSummary,
)
from resumeforge.ai.resume.generator import ResumeGenerator
from resumeforge.ai.resume.refiner import ResumeRefiner
from resumeforge.ai.resume.results import FailureKind, OperationResult
from resumeforge.ai.resume.summarizer import FeedbackSummarizer

if TYPE_CHECKING:
    from resumeforge.ai.providers.base import AIProvider

logger = logging.getLogger(__name__)

GENERATION_ERROR_MESSAGE = "An unexpected error occurred while generating the resume. Please try again later."
REFINEMENT_ERROR_MESSAGE = "An unexpected error occurred while refining the resume. Please try again later."
SUMMARY_ERROR_MESSAGE = "An unexpected error occurred while summarizing the feedback. Please try again later."


class ResumeActions:
    """
    Action layer for resume generation, refinement and feedback summary.

    Engines are built from the given provider unless passed explicitly.
    """

    def __init__(
        self,
        provider: Optional["AIProvider"] = None,
        generator: Optional[ResumeGenerator] = None,
        refiner: Optional[ResumeRefiner] = None,
        summarizer: Optional[FeedbackSummarizer] = None,
    ):
        self._generator = generator or ResumeGenerator(provider=provider)
        self._refiner = refiner or ResumeRefiner(provider=provider)
        self._summarizer = summarizer or FeedbackSummarizer(provider=provider)

    async def submit_generation(self, raw_prompt: Any) -> OperationResult[Artifact]:
        """
        Generate a resume from a raw prompt.

        Args:
            raw_prompt: The prompt string (or a mapping with prompt_text/promptText/prompt)

        Returns:
            OperationResult with the Artifact or a failure reason
        """
        validation = GENERATION_REQUEST.validate(raw_prompt)
        if not validation.ok:
            logger.info(f"Rejected generation input: {validation.reason}")
            return validation

        try:
            return await self._generator.generate(validation.value)
        except Exception as e:
            logger.error(f"Error generating resume template: {e}", exc_info=True)
            return OperationResult.failure(GENERATION_ERROR_MESSAGE, FailureKind.OPERATIONAL_FAILURE)

    async def submit_refinement(self, raw_input: Any) -> OperationResult[Artifact]:
        """
        Refine the caller's current resume.

        Args:
            raw_input: Mapping with current markup/style and feedback

        Returns:
            OperationResult with the replacement Artifact or a failure reason
        """
        validation = REFINEMENT_REQUEST.validate(raw_input)
        if not validation.ok:
            logger.info(f"Rejected refinement input: {validation.reason}")
            return validation

        try:
            return await self._refiner.refine(validation.value)
        except Exception as e:
            logger.error(f"Error refining resume template: {e}", exc_info=True)
            return OperationResult.failure(REFINEMENT_ERROR_MESSAGE, FailureKind.OPERATIONAL_FAILURE)

    async def submit_feedback_summary(self, raw_input: Any) -> OperationResult[FeedbackSummary]:
        """Summarize feedback on a template and return the refined template."""
        validation = FEEDBACK_SUMMARY_REQUEST.validate(raw_input)
        if not validation.ok:
            logger.info(f"Rejected feedback summary input: {validation.reason}")
            return validation

        try:
            return await self._summarizer.summarize(validation.value)
        except Exception as e:
            logger.error(f"Error summarizing resume feedback: {e}", exc_info=True)
            return OperationResult.failure(SUMMARY_ERROR_MESSAGE, FailureKind.OPERATIONAL_FAILURE)


# ---------------------------------------------------------------------------
# DEFAULT INSTANCE
# ---------------------------------------------------------------------------
# Built on first use so importing this module does not need a configured provider
_default_actions: Optional[ResumeActions] = None


def get_resume_actions() -> ResumeActions:
    global _default_actions
    if _default_actions is None:
        _default_actions = ResumeActions()
    return _default_actions


async def submit_generation(raw_prompt: Any) -> OperationResult[Artifact]:
    return await get_resume_actions().submit_generation(raw_prompt)


async def submit_refinement(raw_input: Any) -> OperationResult[Artifact]:
    return await get_resume_actions().submit_refinement(raw_input)


async def submit_feedback_summary(raw_input: Any) -> OperationResult[FeedbackSummary]:
    return await get_resume_actions().submit_feedback_summary(raw_input)
