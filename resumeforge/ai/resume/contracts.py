"""
Resume Contracts - Shapes and constraints for every request and response.

Each pydantic model is wrapped in a SchemaContract. The same contract object
validates what a caller sends in and what the model sends back; only the
failure kind differs, so a caller can tell "your input was invalid" from
"the AI produced something unusable".

Usage:
======
```python
from resumeforge.ai.resume.contracts import GENERATION_REQUEST

result = GENERATION_REQUEST.validate("hi")
result.ok       # False
result.reason   # "Prompt must be at least 10 characters long."
```
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import (
    AliasChoices,
    AnyHttpUrl,
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from resumeforge.ai.resume.results import FailureKind, OperationResult

logger = logging.getLogger("resumeforge.ai.resume.contracts")

M = TypeVar("M", bound=BaseModel)

PROMPT_MIN_LENGTH = 10
FEEDBACK_MIN_LENGTH = 10

# Error types raised by this module carry their own user-facing message
_CUSTOM_ERROR_PREFIX = "resume_"

_http_url = TypeAdapter(AnyHttpUrl)


# ---------------------------------------------------------------------------
# CALLER REQUESTS
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """A request to design a new resume from a free-text prompt."""
    prompt_text: str = Field(
        validation_alias=AliasChoices("prompt_text", "promptText", "prompt"),
        description=(
            "A prompt describing the desired resume style "
            "(e.g., 'modern tech resume', 'resume for a marketing role at Google')."
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_prompt(cls, data: Any) -> Any:
        """The boundary receives the prompt itself, not an object."""
        if isinstance(data, Mapping):
            return data
        return {"prompt_text": data}

    @field_validator("prompt_text")
    @classmethod
    def validate_prompt_length(cls, v: str) -> str:
        if len(v) < PROMPT_MIN_LENGTH:
            raise PydanticCustomError(
                "resume_prompt_too_short",
                f"Prompt must be at least {PROMPT_MIN_LENGTH} characters long.",
            )
        return v


class RefinementRequest(BaseModel):
    """A request to modify the caller's current resume from feedback."""
    current_markup: str = Field(
        validation_alias=AliasChoices("current_markup", "currentMarkup", "html"),
        description="The current HTML content of the resume, including manual edits.",
    )
    current_style: str = Field(
        validation_alias=AliasChoices("current_style", "currentStyle", "css"),
        description="The current CSS styles for the resume.",
    )
    feedback: str = Field(
        description=(
            "The user's feedback describing the desired changes "
            "(e.g., \"change the accent color to blue\", \"make the font larger\")."
        ),
    )

    @field_validator("feedback")
    @classmethod
    def validate_feedback_length(cls, v: str) -> str:
        if len(v) < FEEDBACK_MIN_LENGTH:
            raise PydanticCustomError(
                "resume_feedback_too_short",
                f"Feedback must be at least {FEEDBACK_MIN_LENGTH} characters long.",
            )
        return v


class FeedbackSummaryRequest(BaseModel):
    """A request to summarize feedback on a resume and fold it into the template."""
    resume_template: str = Field(
        validation_alias=AliasChoices("resume_template", "resumeTemplate"),
        description="The generated resume template (CSS and content).",
    )
    user_feedback: str = Field(
        validation_alias=AliasChoices("user_feedback", "userFeedback"),
        description="The user feedback on the generated resume template.",
    )

    @field_validator("resume_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("resume_template_empty", "Resume template must not be empty.")
        return v

    @field_validator("user_feedback")
    @classmethod
    def validate_feedback(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("resume_feedback_empty", "Feedback must not be empty.")
        return v


# ---------------------------------------------------------------------------
# MODEL OUTPUTS
# ---------------------------------------------------------------------------

class GeneratedResume(BaseModel):
    """What the model must return for a new design."""
    css: str = Field(
        description=(
            "The complete, self-contained CSS for the resume template. "
            "No @import, no external fonts or resources."
        ),
    )
    design: str = Field(
        description=(
            "The complete HTML markup of the resume: a single root container "
            "with a main column and a sidebar, using placeholder text for personal details."
        ),
    )


class RefinedResume(BaseModel):
    """What the model must return for a refinement."""
    html: str = Field(description="The complete, updated HTML for the resume template.")
    css: str = Field(description="The complete, updated CSS for the resume template.")


class FeedbackSummary(BaseModel):
    """What the model must return for a feedback summary."""
    summary: str = Field(description="A concise summary of the user feedback.")
    refined_template: str = Field(
        description="The refined resume template incorporating the feedback.",
    )


# ---------------------------------------------------------------------------
# TOOL SHAPES
# ---------------------------------------------------------------------------

class CompanyLogoQuery(BaseModel):
    """Arguments the model passes to the getCompanyLogo tool."""
    company_name: str = Field(description="The name of the company to find the logo for.")


class CompanyDomain(BaseModel):
    """What the model must return for a domain lookup."""
    domain: str = Field(
        description="The official domain of the company (e.g., 'google.com', 'spotify.com').",
    )


class CompanyLogoResult(BaseModel):
    """Tool output: a logo URL, or an empty string when nothing was found."""
    logo_url: str = Field(default="", description="The URL of the company's logo.")

    @field_validator("logo_url")
    @classmethod
    def validate_logo_url(cls, v: str) -> str:
        if v == "":
            return v
        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise PydanticCustomError("resume_logo_url_invalid", "Logo URL must be a well-formed http(s) URL.")
        return v


# ---------------------------------------------------------------------------
# ARTIFACT
# ---------------------------------------------------------------------------

class Artifact(BaseModel):
    """
    One snapshot of the user's resume design.

    Produced by the generator, replaced wholesale by the refiner. The caller
    owns it; nothing in the pipeline keeps a copy between calls.
    """
    markup: str = Field(min_length=1, description="The resume HTML, a single root container.")
    style: str = Field(min_length=1, description="The resume CSS, self-contained.")


# ---------------------------------------------------------------------------
# SCHEMA CONTRACT
# ---------------------------------------------------------------------------

def first_error_message(exc: ValidationError) -> str:
    """Human-readable message for the first constraint that failed."""
    errors = exc.errors()
    if not errors:
        return str(exc)

    error = errors[0]
    message = error["msg"]
    if error["type"].startswith(_CUSTOM_ERROR_PREFIX) or not error["loc"]:
        return message

    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {message}"


class SchemaContract(Generic[M]):
    """
    Declarative contract for one data shape.

    Wraps a pydantic model; validate() never raises and reports the first
    violated constraint. The JSON schema is what the model is constrained to
    when the contract describes a model output.
    """

    def __init__(self, model: Type[M], name: Optional[str] = None):
        self.model = model
        self.name = name or model.__name__

    def validate(
        self,
        candidate: Any,
        failure_kind: FailureKind = FailureKind.INPUT_VALIDATION_FAILED,
    ) -> OperationResult[M]:
        """
        Validate a candidate value against this contract.

        Args:
            candidate: Raw caller input or decoded model output
            failure_kind: Kind reported on failure (input vs. output side)

        Returns:
            OperationResult with the typed model, or the first-failure message
        """
        if isinstance(candidate, self.model):
            return OperationResult.success(candidate)

        try:
            value = self.model.model_validate(candidate)
        except ValidationError as e:
            message = first_error_message(e)
            logger.debug(f"{self.name} rejected candidate: {message}")
            return OperationResult.failure(message, failure_kind)

        return OperationResult.success(value)

    @property
    def json_schema(self) -> Dict[str, Any]:
        return self.model.model_json_schema()

    def __repr__(self) -> str:
        return f"SchemaContract({self.name})"


GENERATION_REQUEST = SchemaContract(GenerationRequest)
REFINEMENT_REQUEST = SchemaContract(RefinementRequest)
FEEDBACK_SUMMARY_REQUEST = SchemaContract(FeedbackSummaryRequest)

GENERATED_RESUME = SchemaContract(GeneratedResume)
REFINED_RESUME = SchemaContract(RefinedResume)
FEEDBACK_SUMMARY = SchemaContract(FeedbackSummary)

COMPANY_LOGO_QUERY = SchemaContract(CompanyLogoQuery)
COMPANY_DOMAIN = SchemaContract(CompanyDomain)
COMPANY_LOGO_RESULT = SchemaContract(CompanyLogoResult)

ARTIFACT = SchemaContract(Artifact)
