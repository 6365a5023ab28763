"""
ResumeRefiner - Applies natural-language feedback to the caller's resume.

The caller's current markup and style are the ground truth: they are
embedded verbatim, hand edits included. The result replaces the whole
document; nothing is merged with the previous version.
"""

import logging
from typing import Optional

from resumeforge.ai.resume.contracts import Artifact, RefinedResume, RefinementRequest
from resumeforge.ai.resume.engine import StructuredEngine
from resumeforge.ai.resume.prompts import REFINEMENT_TEMPLATE
from resumeforge.ai.resume.results import FailureKind, OperationResult
from resumeforge.ai.resume.sanitizer import inspect_markup, strip_code_fences

logger = logging.getLogger("resumeforge.ai.resume.refiner")

REFINEMENT_FAILED_MESSAGE = "AI failed to refine the template."


class ResumeRefiner(StructuredEngine[Artifact]):
    """Refinement engine: (current artifact, feedback) -> replacement Artifact."""

    operation = "refine"
    template = REFINEMENT_TEMPLATE
    failure_kind = FailureKind.REFINEMENT_FAILED
    failure_message = REFINEMENT_FAILED_MESSAGE

    def build_value(self, output: RefinedResume, request_id: str) -> Optional[Artifact]:
        markup = strip_code_fences(output.html)
        style = strip_code_fences(output.css)
        if not markup or not style:
            logger.warning(f"[{request_id}] Refined template is empty after sanitizing")
            return None

        inspect_markup(markup, request_id)
        return Artifact(markup=markup, style=style)

    async def refine(self, request: RefinementRequest) -> OperationResult[Artifact]:
        """
        Refine the caller's resume.

        Args:
            request: Current markup/style plus feedback

        Returns:
            OperationResult with the full replacement Artifact, or REFINEMENT_FAILED
        """
        return await self.run(request)
