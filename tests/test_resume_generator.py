"""
Tests for ResumeGenerator.

This module tests:
- Fence stripping of the model's answer
- Tool registration and model-driven tool calls
- Failure handling (no output, missing field, empty after sanitizing)
"""

import pytest

from resumeforge.ai.providers.base import AIProviderError
from resumeforge.ai.resume.contracts import Artifact, GeneratedResume, GenerationRequest
from resumeforge.ai.resume.generator import GENERATION_FAILED_MESSAGE, ResumeGenerator
from resumeforge.ai.resume.results import FailureKind
from resumeforge.ai.resume.tools import CompanyLogoTool


REQUEST = GenerationRequest(prompt_text="A resume for a marketing role at Google")


class TestGenerationSuccess:
    """Tests for successful generation."""

    @pytest.mark.asyncio
    async def test_strips_fences_from_both_fields(self, make_stub, make_generator, generated_output, sample_design, sample_css):
        """Fenced answers come back as bare markup and style."""
        provider = make_stub(outputs=[generated_output])
        generator = make_generator(provider)

        result = await generator.generate(REQUEST)

        assert result.ok is True
        assert isinstance(result.value, Artifact)
        assert result.value.markup == sample_design
        assert result.value.style == sample_css
        assert "```" not in result.value.markup
        assert "```" not in result.value.style

    @pytest.mark.asyncio
    async def test_strips_uncommon_fence_tags(self, make_stub, make_generator):
        """Tags such as less/text never leak into the artifact."""
        provider = make_stub(outputs=[{"css": "```less\n.a{}\n```", "design": "```text\n<div>x</div>\n```"}])

        result = await make_generator(provider).generate(REQUEST)

        assert result.ok is True
        assert result.value.markup == "<div>x</div>"
        assert result.value.style == ".a{}"

    @pytest.mark.asyncio
    async def test_one_model_call_per_generation(self, make_stub, make_generator, generated_output):
        """The engine itself makes exactly one call."""
        provider = make_stub(outputs=[generated_output])

        await make_generator(provider).generate(REQUEST)

        assert len(provider.calls) == 1
        assert provider.calls[0]["output_schema"] is GeneratedResume
        assert "A resume for a marketing role at Google" in provider.calls[0]["prompt"]

    @pytest.mark.asyncio
    async def test_registers_logo_tool(self, make_stub, make_generator, generated_output):
        provider = make_stub(outputs=[generated_output])

        await make_generator(provider).generate(REQUEST)

        tools = provider.calls[0]["tools"]
        assert [t.name for t in tools] == ["getCompanyLogo"]

    @pytest.mark.asyncio
    async def test_tools_can_be_disabled(self, make_stub, make_generator, generated_output):
        provider = make_stub(outputs=[generated_output])

        await make_generator(provider, use_tools=False).generate(REQUEST)

        assert provider.calls[0]["tools"] == []

    @pytest.mark.asyncio
    async def test_model_calls_tool_during_generation(self, make_stub, make_generator, sample_design, sample_css):
        """The model may call the logo tool; its URL can end up in the design."""
        async def answer(prompt, tools):
            logo_url = await tools[0].invoke({"company_name": "Google"})
            return {"css": sample_css, "design": sample_design.replace("<h1>", f'<img src="{logo_url}"><h1>')}

        provider = make_stub(outputs=[answer, {"domain": "google.com"}])

        result = await make_generator(provider).generate(REQUEST)

        assert result.ok is True
        assert 'src="https://logo.clearbit.com/google.com"' in result.value.markup
        assert len(provider.calls) == 2

    @pytest.mark.asyncio
    async def test_failing_tool_does_not_fail_generation(self, make_stub, make_generator, sample_design, sample_css):
        """A broken domain lookup yields "" to the model and generation still succeeds."""
        seen = []

        async def answer(prompt, tools):
            seen.append(await tools[0].invoke({"company_name": "Acme"}))
            return {"css": sample_css, "design": sample_design}

        provider = make_stub(outputs=[answer])
        logo_tool = CompanyLogoTool(make_stub(error=AIProviderError("lookup down")))

        result = await make_generator(provider, logo_tool=logo_tool).generate(REQUEST)

        assert seen == [""]
        assert result.ok is True
        assert result.value.markup == sample_design


class TestGenerationFailure:
    """Tests for unusable model output."""

    @pytest.mark.asyncio
    async def test_no_output(self, make_stub, make_generator):
        provider = make_stub(outputs=[None])

        result = await make_generator(provider).generate(REQUEST)

        assert result.ok is False
        assert result.kind == FailureKind.GENERATION_FAILED
        assert result.reason == GENERATION_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_missing_field(self, make_stub, make_generator, sample_css):
        provider = make_stub(outputs=[{"css": sample_css}])

        result = await make_generator(provider).generate(REQUEST)

        assert result.ok is False
        assert result.reason == GENERATION_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_empty_after_sanitizing(self, make_stub, make_generator, sample_design):
        """A style that is only a fence makes the whole result fail, no partial artifact."""
        provider = make_stub(outputs=[{"css": "```css```", "design": sample_design}])

        result = await make_generator(provider).generate(REQUEST)

        assert result.ok is False
        assert result.value is None
        assert result.kind == FailureKind.GENERATION_FAILED

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, make_stub, make_generator):
        """Transport errors are not converted here; the action layer handles them."""
        provider = make_stub(error=AIProviderError("timeout"))

        with pytest.raises(AIProviderError):
            await make_generator(provider).generate(REQUEST)

    @pytest.mark.asyncio
    async def test_invalid_request_never_calls_model(self, make_stub, make_generator):
        provider = make_stub(outputs=[{"css": "a{}", "design": "<div/>"}])

        result = await make_generator(provider).run({"prompt_text": "short"})

        assert result.ok is False
        assert result.kind == FailureKind.INPUT_VALIDATION_FAILED
        assert provider.calls == []

    def test_repr(self, make_stub):
        generator = ResumeGenerator(provider=make_stub())

        assert "stub-model" in repr(generator)
