"""
Base AI Provider - Abstract interface for the LLM capability.

This module defines the contract the resume engines depend on. The engines
never talk to a vendor SDK directly, they receive an AIProvider and call it,
which keeps the non-deterministic model behind one seam that tests can stub.

Two calling conventions exist:
- generate(): plain text in, plain text out. Never raises, errors are
  captured in AIResponse.error.
- generate_structured(): instruction + output schema (+ optional tools) in,
  decoded JSON object out. Transport failures raise AIProviderError so the
  action layer can tell an operational failure from a bad model answer.

Example:
    provider = GeminiProvider()
    response = await provider.generate_structured(prompt, GeneratedResume, tools=[logo_tool])
    if response.parsed is None:
        ...  # model produced nothing usable
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type
from enum import Enum
import logging

from pydantic import BaseModel

logger = logging.getLogger("resumeforge.ai")


class ProviderType(str, Enum):
    """Enum of supported AI providers."""
    GEMINI = "gemini"


class AIProviderError(Exception):
    """Raised when the model capability cannot be reached or fails mid-call."""

    def __init__(self, message: str, provider: Optional[ProviderType] = None):
        super().__init__(message)
        self.provider = provider


@dataclass
class TokenUsage:
    """
    Token usage statistics for an AI request.

    Used for cost tracking and for the structured AI logs.
    """
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        """Calculate total if not provided."""
        if self.total_tokens == 0:
            self.total_tokens = self.prompt_tokens + self.completion_tokens

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
        )


@dataclass
class AIResponse:
    """
    Standardized response from any AI provider.

    Attributes:
        content: The generated text response
        provider: Which provider generated this response
        model: The specific model used
        usage: Token usage statistics
        latency_ms: How long the request took
        success: Whether the request succeeded
        error: Error message if failed
        parsed: Decoded JSON object for structured calls (None if the model
            returned nothing usable)
        raw_response: Original provider response (for debugging)
        metadata: Additional provider-specific data (tool call counts, ...)
        created_at: Timestamp of the response
    """
    content: str
    provider: ProviderType
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None
    parsed: Optional[Dict[str, Any]] = None
    raw_response: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "content": self.content[:100] + "..." if len(self.content) > 100 else self.content,
            "provider": self.provider.value,
            "model": self.model,
            "tokens": {
                "prompt": self.usage.prompt_tokens,
                "completion": self.usage.completion_tokens,
                "total": self.usage.total_tokens,
            },
            "latency_ms": self.latency_ms,
            "success": self.success,
            "error": self.error,
            "has_output": self.parsed is not None,
            "created_at": self.created_at.isoformat(),
        }


@dataclass
class AITool:
    """
    A capability the model may call while it generates.

    The provider advertises name/description/input schema to the model and
    awaits the handler whenever the model asks for it. The engine that
    registers a tool does not control how many times, or in which order,
    the model calls it.
    """
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[Any], Awaitable[Any]]

    async def invoke(self, arguments: Dict[str, Any]) -> Any:
        """Validate the model's arguments and run the handler."""
        query = self.input_model.model_validate(arguments)
        return await self.handler(query)


class AIProvider(ABC):
    """
    Abstract base class for AI providers.

    Responsibilities:
    - Generate text responses from prompts
    - Generate JSON constrained to an output schema, running tool calls
      requested by the model along the way
    - Track token usage and latency
    """

    provider_type: ProviderType

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        **kwargs
    ) -> AIResponse:
        """
        Generate a response from the AI model.

        Args:
            prompt: The user's message/query
            system_prompt: Optional system instructions for the model
            temperature: Creativity level (0=deterministic, 1=creative)
            max_tokens: Maximum tokens in the response
            **kwargs: Provider-specific options

        Returns:
            AIResponse with the generated content

        Raises:
            This method should NOT raise exceptions.
            Errors are captured in AIResponse.error
        """
        pass

    @abstractmethod
    async def generate_structured(
        self,
        prompt: str,
        output_schema: Type[BaseModel],
        tools: Optional[List[AITool]] = None,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        **kwargs
    ) -> AIResponse:
        """
        Generate a JSON object constrained to output_schema.

        Args:
            prompt: Fully rendered instruction text
            output_schema: Pydantic model describing the expected object
            tools: Capabilities the model may call before answering
            system_prompt: Optional system instructions
            temperature: Creativity level
            max_tokens: Maximum tokens in the final answer

        Returns:
            AIResponse whose `parsed` holds the decoded object, or None when
            the model returned no usable JSON. The object is NOT validated
            against output_schema here, that is the caller's contract check.

        Raises:
            AIProviderError: the provider is not configured or the call failed
        """
        pass

    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.time() - start_time) * 1000

    def _create_error_response(
        self,
        error: str,
        model: str,
        latency_ms: float = 0.0
    ) -> AIResponse:
        """
        Create a standardized error response.

        Used when a provider fails to ensure consistent error handling.
        """
        logger.error(f"AI Provider Error [{self.provider_type.value}]: {error}")
        return AIResponse(
            content="",
            provider=self.provider_type,
            model=model,
            latency_ms=latency_ms,
            success=False,
            error=error,
        )

    async def health_check(self) -> bool:
        """
        Check if the provider is available and configured.

        Returns:
            True if provider is ready to use, False otherwise
        """
        try:
            response = await self.generate(
                prompt="Say 'ok' and nothing else.",
                max_tokens=10,
            )
            return response.success and len(response.content) > 0
        except Exception as e:
            logger.error(f"Health check failed for {self.provider_type.value}: {e}")
            return False
