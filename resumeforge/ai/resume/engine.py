"""
StructuredEngine - Shared pipeline of the resume engines.

render template -> one model call -> validate output contract -> sanitize

Generation, refinement and feedback summary differ only in their template,
the tools they register, their failure message and how the validated output
becomes the returned value. Expected failures come back as OperationResult;
transport errors from the provider are NOT caught here, the action layer
owns that.
"""

import logging
import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar, TYPE_CHECKING

from resumeforge.core.config import settings
from resumeforge.ai.monitoring.logger import AILogger, ai_logger
from resumeforge.ai.resume.prompts import PromptTemplate
from resumeforge.ai.resume.results import FailureKind, OperationResult

if TYPE_CHECKING:
    from resumeforge.ai.providers.base import AIProvider, AITool

logger = logging.getLogger("resumeforge.ai.resume.engine")

V = TypeVar("V")


def default_provider() -> "AIProvider":
    """The process-wide Gemini provider."""
    from resumeforge.ai.providers.gemini import gemini_provider
    return gemini_provider


class StructuredEngine(ABC, Generic[V]):
    """
    Base class for engines that turn one request into one validated value.

    Subclasses set:
        operation: Name used in logs ("generate", "refine", ...)
        template: PromptTemplate with input/output contracts
        failure_kind: FailureKind reported for unusable model output
        failure_message: Fixed, user-facing failure message
    """

    operation: str
    template: PromptTemplate
    failure_kind: FailureKind
    failure_message: str

    def __init__(
        self,
        provider: Optional["AIProvider"] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        monitor: Optional[AILogger] = None,
    ):
        self._provider = provider or default_provider()
        self._temperature = temperature if temperature is not None else settings.RESUME_TEMPERATURE
        self._max_tokens = max_tokens or settings.RESUME_MAX_TOKENS
        self._monitor = monitor or ai_logger

    @property
    def provider(self) -> "AIProvider":
        return self._provider

    def tools(self) -> List["AITool"]:
        """Capabilities registered with the model call."""
        return []

    @abstractmethod
    def build_value(self, output: Any, request_id: str) -> Optional[V]:
        """
        Turn validated model output into the returned value.

        Returns None when the output is unusable after sanitizing.
        """

    async def run(self, request: Any) -> OperationResult[V]:
        """
        Execute the pipeline for one request.

        Args:
            request: Typed request (raw mappings are validated first)

        Returns:
            OperationResult with the value or a failure reason
        """
        checked_request = self.template.input_contract.validate(request)
        if not checked_request.ok:
            return checked_request

        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        prompt = self.template.render(checked_request.value)
        model = getattr(self._provider, "model", "unknown")
        tools = self.tools()

        self._monitor.log_request(
            request_id,
            self.operation,
            prompt,
            model,
            metadata={"template": self.template.name, "tools": [t.name for t in tools]},
        )

        response = await self._provider.generate_structured(
            prompt=prompt,
            output_schema=self.template.output_contract.model,
            tools=tools or None,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        self._monitor.log_response(request_id, self.operation, response)

        if response.parsed is None:
            self._monitor.log_error(request_id, "Model returned no output", stage="model_call")
            return OperationResult.failure(self.failure_message, self.failure_kind)

        output = self.template.output_contract.validate(response.parsed, self.failure_kind)
        if not output.ok:
            self._monitor.log_error(request_id, output.reason, stage="output_validation")
            return OperationResult.failure(self.failure_message, self.failure_kind)

        value = self.build_value(output.value, request_id)
        if value is None:
            self._monitor.log_error(request_id, "Output empty after sanitizing", stage="sanitization")
            return OperationResult.failure(self.failure_message, self.failure_kind)

        logger.info(
            f"[{request_id}] {self.operation} succeeded in {(time.time() - start_time) * 1000:.0f}ms"
        )
        return OperationResult.success(value)
