"""
AI Providers Module - The model capability used by the resume engines.

Every provider exposes the same interface, so engines and tests can swap
the real Gemini client for a stub:
    response = await provider.generate_structured(prompt, OutputModel, tools=[...])
"""

from resumeforge.ai.providers.base import (
    AIProvider,
    AIProviderError,
    AIResponse,
    AITool,
    ProviderType,
    TokenUsage,
)
from resumeforge.ai.providers.gemini import GeminiProvider, gemini_provider

__all__ = [
    "AIProvider",
    "AIProviderError",
    "AIResponse",
    "AITool",
    "ProviderType",
    "TokenUsage",
    "GeminiProvider",
    "gemini_provider",
]
