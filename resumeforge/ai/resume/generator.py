"""
ResumeGenerator - Creates a new resume design from a free-text prompt.

The model receives the generation template and the getCompanyLogo tool. It
may call the tool (zero or more times) to brand the design; the engine does
not orchestrate those calls and does not depend on them.

Usage:
    generator = ResumeGenerator()
    result = await generator.generate(GenerationRequest(prompt_text="Modern resume for a data analyst"))

    if result.ok:
        markup, style = result.value.markup, result.value.style
"""

import logging
from typing import List, Optional, TYPE_CHECKING

from resumeforge.ai.resume.contracts import Artifact, GeneratedResume, GenerationRequest
from resumeforge.ai.resume.engine import StructuredEngine
from resumeforge.ai.resume.prompts import GENERATION_TEMPLATE
from resumeforge.ai.resume.results import FailureKind, OperationResult
from resumeforge.ai.resume.sanitizer import inspect_markup, strip_code_fences
from resumeforge.ai.resume.tools import CompanyLogoTool

if TYPE_CHECKING:
    from resumeforge.ai.providers.base import AIProvider, AITool

logger = logging.getLogger("resumeforge.ai.resume.generator")

GENERATION_FAILED_MESSAGE = "AI failed to generate a complete template. Please try a different prompt."


class ResumeGenerator(StructuredEngine[Artifact]):
    """Generation engine: prompt -> Artifact."""

    operation = "generate"
    template = GENERATION_TEMPLATE
    failure_kind = FailureKind.GENERATION_FAILED
    failure_message = GENERATION_FAILED_MESSAGE

    def __init__(
        self,
        provider: Optional["AIProvider"] = None,
        logo_tool: Optional[CompanyLogoTool] = None,
        use_tools: bool = True,
        **kwargs,
    ):
        super().__init__(provider=provider, **kwargs)
        self._use_tools = use_tools
        self._logo_tool = logo_tool or CompanyLogoTool(self.provider)

    def tools(self) -> List["AITool"]:
        return [self._logo_tool.as_tool()] if self._use_tools else []

    def build_value(self, output: GeneratedResume, request_id: str) -> Optional[Artifact]:
        markup = strip_code_fences(output.design)
        style = strip_code_fences(output.css)
        if not markup or not style:
            logger.warning(
                f"[{request_id}] Incomplete template after sanitizing "
                f"(markup={len(markup)} chars, style={len(style)} chars)"
            )
            return None

        inspect_markup(markup, request_id)
        return Artifact(markup=markup, style=style)

    async def generate(self, request: GenerationRequest) -> OperationResult[Artifact]:
        """
        Generate a new resume design.

        Args:
            request: Validated generation request

        Returns:
            OperationResult with the sanitized Artifact, or GENERATION_FAILED
        """
        return await self.run(request)

    def __repr__(self) -> str:
        return f"ResumeGenerator(model={getattr(self.provider, 'model', 'unknown')}, tools={self._use_tools})"
