"""
Pydantic schemas for the resume HTTP API.

Request bodies are NOT modeled here: they are passed raw to the action
layer, which validates them against the resume contracts and reports the
first violated constraint. These schemas only shape the responses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from resumeforge.ai.resume.contracts import Artifact, FeedbackSummary
from resumeforge.ai.resume.results import OperationResult


# ============== PAYLOADS ==============

class ArtifactPayload(BaseModel):
    """A resume design: HTML markup + CSS."""
    markup: str
    style: str


class FeedbackSummaryPayload(BaseModel):
    """Summary of the feedback and the refined template."""
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    refined_template: str = Field(alias="refinedTemplate")


# ============== RESPONSES ==============

class ResumeActionResponse(BaseModel):
    """Discriminated result of generate/refine."""
    ok: bool
    value: Optional[ArtifactPayload] = None
    reason: Optional[str] = None
    kind: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ok": True,
                "value": {
                    "markup": "<div class=\"resume-container\">...</div>",
                    "style": ".resume-container { width: 210mm; }",
                },
            }
        }
    )

    @classmethod
    def from_result(cls, result: OperationResult[Artifact]) -> "ResumeActionResponse":
        if result.ok:
            return cls(ok=True, value=ArtifactPayload(**result.value.model_dump()))
        return cls(ok=False, reason=result.reason, kind=result.kind.value if result.kind else None)


class FeedbackSummaryResponse(BaseModel):
    """Discriminated result of a feedback summary."""
    ok: bool
    value: Optional[FeedbackSummaryPayload] = None
    reason: Optional[str] = None
    kind: Optional[str] = None

    @classmethod
    def from_result(cls, result: OperationResult[FeedbackSummary]) -> "FeedbackSummaryResponse":
        if result.ok:
            return cls(ok=True, value=FeedbackSummaryPayload(**result.value.model_dump()))
        return cls(ok=False, reason=result.reason, kind=result.kind.value if result.kind else None)
