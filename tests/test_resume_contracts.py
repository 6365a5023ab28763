"""
Tests for the resume contracts.

This module tests:
- Minimum-length rules and their exact messages
- Alias acceptance for raw caller input
- Input vs. output failure kinds on the same contract
- OperationResult serialization
"""

import pytest

from resumeforge.ai.resume.contracts import (
    ARTIFACT,
    COMPANY_LOGO_RESULT,
    FEEDBACK_SUMMARY_REQUEST,
    GENERATED_RESUME,
    GENERATION_REQUEST,
    REFINEMENT_REQUEST,
    Artifact,
    GenerationRequest,
    RefinementRequest,
)
from resumeforge.ai.resume.results import FailureKind, OperationResult


class TestGenerationRequestContract:
    """Tests for GENERATION_REQUEST."""

    def test_accepts_bare_prompt_string(self):
        """The boundary passes the prompt itself, not an object."""
        result = GENERATION_REQUEST.validate("A modern resume for a backend engineer role")

        assert result.ok is True
        assert isinstance(result.value, GenerationRequest)
        assert result.value.prompt_text == "A modern resume for a backend engineer role"

    @pytest.mark.parametrize("payload", [
        {"prompt_text": "Resume for a data analyst"},
        {"promptText": "Resume for a data analyst"},
        {"prompt": "Resume for a data analyst"},
    ])
    def test_accepts_mapping_aliases(self, payload):
        """Mappings may use snake_case, camelCase or the original 'prompt' key."""
        result = GENERATION_REQUEST.validate(payload)

        assert result.ok is True
        assert result.value.prompt_text == "Resume for a data analyst"

    @pytest.mark.parametrize("prompt", ["", "hi", "123456789"])
    def test_short_prompt_rejected_with_exact_message(self, prompt):
        """Prompts under 10 characters fail with the user-facing message."""
        result = GENERATION_REQUEST.validate(prompt)

        assert result.ok is False
        assert result.reason == "Prompt must be at least 10 characters long."
        assert result.kind == FailureKind.INPUT_VALIDATION_FAILED

    def test_exactly_ten_characters_accepted(self):
        """The minimum is inclusive."""
        assert GENERATION_REQUEST.validate("1234567890").ok is True

    def test_non_string_prompt_rejected(self):
        """A number is not a prompt."""
        result = GENERATION_REQUEST.validate(12345678901)

        assert result.ok is False
        assert "valid string" in result.reason

    def test_typed_request_passes_through(self):
        """An already-typed request is returned as-is."""
        request = GenerationRequest(prompt_text="Resume for a nurse, warm colors")

        result = GENERATION_REQUEST.validate(request)

        assert result.ok is True
        assert result.value is request


class TestRefinementRequestContract:
    """Tests for REFINEMENT_REQUEST."""

    def test_valid_request(self):
        """All three fields present and feedback long enough."""
        result = REFINEMENT_REQUEST.validate({
            "current_markup": "<div>X</div>",
            "current_style": "body{}",
            "feedback": "make the heading blue",
        })

        assert result.ok is True
        assert isinstance(result.value, RefinementRequest)

    def test_accepts_camel_case_and_original_keys(self):
        """currentMarkup/currentStyle and html/css are accepted."""
        camel = REFINEMENT_REQUEST.validate({
            "currentMarkup": "<div>X</div>",
            "currentStyle": "body{}",
            "feedback": "make the heading blue",
        })
        original = REFINEMENT_REQUEST.validate({
            "html": "<div>X</div>",
            "css": "body{}",
            "feedback": "make the heading blue",
        })

        assert camel.ok and original.ok
        assert camel.value == original.value

    def test_short_feedback_rejected_with_exact_message(self):
        """Feedback under 10 characters fails with the user-facing message."""
        result = REFINEMENT_REQUEST.validate({
            "current_markup": "<div>X</div>",
            "current_style": "body{}",
            "feedback": "blue",
        })

        assert result.ok is False
        assert result.reason == "Feedback must be at least 10 characters long."
        assert result.kind == FailureKind.INPUT_VALIDATION_FAILED

    def test_missing_field_names_the_field(self):
        """Generic pydantic errors are prefixed with the field."""
        result = REFINEMENT_REQUEST.validate({
            "current_markup": "<div>X</div>",
            "current_style": "body{}",
        })

        assert result.ok is False
        assert "feedback" in result.reason
        assert "Field required" in result.reason

    def test_non_mapping_rejected(self):
        """A bare string is not a refinement request."""
        result = REFINEMENT_REQUEST.validate("make the heading blue")

        assert result.ok is False
        assert result.kind == FailureKind.INPUT_VALIDATION_FAILED


class TestFeedbackSummaryRequestContract:
    """Tests for FEEDBACK_SUMMARY_REQUEST."""

    def test_blank_feedback_rejected(self):
        result = FEEDBACK_SUMMARY_REQUEST.validate({
            "resumeTemplate": "<div>X</div>",
            "userFeedback": "   ",
        })

        assert result.ok is False
        assert result.reason == "Feedback must not be empty."

    def test_valid_request(self):
        result = FEEDBACK_SUMMARY_REQUEST.validate({
            "resume_template": "<div>X</div>",
            "user_feedback": "Too much whitespace at the top",
        })

        assert result.ok is True


class TestOutputContracts:
    """Tests for contracts applied to model output."""

    def test_output_failure_uses_given_kind(self):
        """Same contract, output side: the caller can tell it apart from bad input."""
        result = GENERATED_RESUME.validate({"css": "body{}"}, FailureKind.GENERATION_FAILED)

        assert result.ok is False
        assert result.kind == FailureKind.GENERATION_FAILED
        assert "design" in result.reason

    def test_none_output_rejected(self):
        """No output at all fails validation."""
        result = GENERATED_RESUME.validate(None, FailureKind.GENERATION_FAILED)

        assert result.ok is False

    def test_artifact_requires_both_fields(self):
        """An artifact with an empty field is never valid."""
        assert ARTIFACT.validate({"markup": "<div/>", "style": ""}).ok is False
        assert ARTIFACT.validate({"markup": "", "style": "a{}"}).ok is False
        assert ARTIFACT.validate({"markup": "<div/>", "style": "a{}"}).ok is True

    def test_artifact_satisfies_refinement_input(self):
        """Any artifact can be fed back for a later refine call."""
        artifact = Artifact(markup="<div>X</div>", style="body{}")

        result = REFINEMENT_REQUEST.validate({
            "current_markup": artifact.markup,
            "current_style": artifact.style,
            "feedback": "no changes needed",
        })

        assert result.ok is True

    @pytest.mark.parametrize("url,ok", [
        ("", True),
        ("https://logo.clearbit.com/google.com", True),
        ("not a url", False),
        ("ftp://logo.example.com/x", False),
    ])
    def test_logo_result_url(self, url, ok):
        """The tool result is either empty or a well-formed http(s) URL."""
        assert COMPANY_LOGO_RESULT.validate({"logo_url": url}).ok is ok


class TestOperationResult:
    """Tests for OperationResult."""

    def test_success_to_dict_dumps_models(self):
        result = OperationResult.success(Artifact(markup="<div/>", style="a{}"))

        assert result.to_dict() == {"ok": True, "value": {"markup": "<div/>", "style": "a{}"}}

    def test_failure_to_dict(self):
        result = OperationResult.failure("nope", FailureKind.REFINEMENT_FAILED)

        assert result.to_dict() == {"ok": False, "reason": "nope", "kind": "refinement_failed"}
        assert result.value is None
