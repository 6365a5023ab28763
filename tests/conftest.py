"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- StubProvider: a scripted model capability that records every call
- Sample model outputs for generation and refinement
- Engines and actions wired to the stub

No test talks to a real model: the stub makes tests fast, deterministic
and free.
"""

import json
from typing import Any, Dict, List, Optional

import pytest

from resumeforge.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from resumeforge.ai.resume.generator import ResumeGenerator
from resumeforge.ai.resume.refiner import ResumeRefiner
from resumeforge.services.resume_actions import ResumeActions


# ---------------------------------------------------------------------------
# STUB PROVIDER
# ---------------------------------------------------------------------------

class StubProvider(AIProvider):
    """
    Scripted AIProvider.

    Each generate_structured() call pops the next scripted output:
    - a dict (or None) is returned as the parsed JSON
    - an async callable is awaited with (prompt, tools) and its result used
    If `error` is set, every structured call raises it instead.
    """

    provider_type = ProviderType.GEMINI

    def __init__(self, outputs: Optional[List[Any]] = None, error: Optional[Exception] = None):
        self.model = "stub-model"
        self.outputs = list(outputs or [])
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, prompt, system_prompt=None, temperature=0.7, max_tokens=1024, **kwargs):
        return AIResponse(content="ok", provider=self.provider_type, model=self.model)

    async def generate_structured(
        self,
        prompt,
        output_schema,
        tools=None,
        system_prompt=None,
        temperature=0.7,
        max_tokens=8192,
        **kwargs
    ):
        self.calls.append({
            "prompt": prompt,
            "output_schema": output_schema,
            "tools": list(tools or []),
        })
        if self.error is not None:
            raise self.error

        parsed = self.outputs.pop(0) if self.outputs else None
        if callable(parsed):
            parsed = await parsed(prompt, list(tools or []))

        return AIResponse(
            content=json.dumps(parsed) if parsed is not None else "",
            provider=self.provider_type,
            model=self.model,
            usage=TokenUsage(prompt_tokens=100, completion_tokens=50),
            parsed=parsed,
        )


# ---------------------------------------------------------------------------
# SAMPLE OUTPUTS
# ---------------------------------------------------------------------------

SAMPLE_DESIGN = (
    '<div class="resume-container">'
    '<header><h1>Your Name</h1><p>Backend Engineer</p></header>'
    '<main class="main-column"><section><h2>Experience</h2></section></main>'
    '<aside class="sidebar"><section><h2>Skills</h2></section></aside>'
    '</div>'
)

SAMPLE_CSS = ".resume-container { width: 210mm; min-height: 297mm; display: grid; }"


@pytest.fixture
def generated_output() -> Dict[str, str]:
    """A valid generation answer wrapped in code fences, as models often do."""
    return {
        "css": f"```css\n{SAMPLE_CSS}\n```",
        "design": f"```html\n{SAMPLE_DESIGN}\n```",
    }


@pytest.fixture
def refined_output() -> Dict[str, str]:
    """A valid refinement answer."""
    return {
        "html": '<div class="resume-container"><h1 class="title">Your Name</h1></div>',
        "css": ".title { color: #1d4ed8; }",
    }


# ---------------------------------------------------------------------------
# ENGINE / ACTION FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def stub_provider() -> StubProvider:
    """Stub with no scripted outputs (every call returns no output)."""
    return StubProvider()


@pytest.fixture
def make_actions():
    """Build ResumeActions around a StubProvider."""
    def _make(provider: StubProvider) -> ResumeActions:
        return ResumeActions(provider=provider)
    return _make


@pytest.fixture
def make_generator():
    """Build a ResumeGenerator around a StubProvider."""
    def _make(provider: StubProvider, **kwargs) -> ResumeGenerator:
        return ResumeGenerator(provider=provider, **kwargs)
    return _make


@pytest.fixture
def make_refiner():
    """Build a ResumeRefiner around a StubProvider."""
    def _make(provider: StubProvider) -> ResumeRefiner:
        return ResumeRefiner(provider=provider)
    return _make


@pytest.fixture
def make_stub():
    """Build a StubProvider with scripted outputs or an error."""
    def _make(outputs: Optional[List[Any]] = None, error: Optional[Exception] = None) -> StubProvider:
        return StubProvider(outputs=outputs, error=error)
    return _make


@pytest.fixture
def sample_design() -> str:
    return SAMPLE_DESIGN


@pytest.fixture
def sample_css() -> str:
    return SAMPLE_CSS
