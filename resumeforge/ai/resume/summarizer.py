"""
FeedbackSummarizer - Summarizes user feedback and folds it into a template.
"""

import logging
from typing import Optional

from resumeforge.ai.resume.contracts import FeedbackSummary, FeedbackSummaryRequest
from resumeforge.ai.resume.engine import StructuredEngine
from resumeforge.ai.resume.prompts import FEEDBACK_SUMMARY_TEMPLATE
from resumeforge.ai.resume.results import FailureKind, OperationResult
from resumeforge.ai.resume.sanitizer import strip_code_fences

logger = logging.getLogger("resumeforge.ai.resume.summarizer")

SUMMARY_FAILED_MESSAGE = "AI failed to summarize the feedback."


class FeedbackSummarizer(StructuredEngine[FeedbackSummary]):
    operation = "summarize"
    template = FEEDBACK_SUMMARY_TEMPLATE
    failure_kind = FailureKind.SUMMARY_FAILED
    failure_message = SUMMARY_FAILED_MESSAGE

    def build_value(self, output: FeedbackSummary, request_id: str) -> Optional[FeedbackSummary]:
        summary = output.summary.strip()
        refined = strip_code_fences(output.refined_template)
        if not summary or not refined:
            return None
        return FeedbackSummary(summary=summary, refined_template=refined)

    async def summarize(self, request: FeedbackSummaryRequest) -> OperationResult[FeedbackSummary]:
        return await self.run(request)
