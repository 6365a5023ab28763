"""
AI Logger - Structured logging for AI operations.

Every generation, refinement and tool sub-call emits JSON log lines:
- ai_request: operation, model, prompt preview
- ai_response: success, output presence, tokens, latency, tool calls
- ai_error: where in the pipeline a call failed and why

The prompt itself may contain personal details from the user's resume,
only a truncated preview is logged.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from resumeforge.ai.providers.base import AIResponse

# Configure the AI logger
logger = logging.getLogger("resumeforge.ai")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _preview(text: str, limit: int = 100) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class AILogger:
    """
    Structured logger for AI operations.

    Usage:
        ai_logger.log_request(request_id, operation="generate", prompt=prompt, model=model)
        ai_logger.log_response(request_id, operation="generate", response=response)
    """

    def __init__(self, base_logger: Optional[logging.Logger] = None):
        self._logger = base_logger or logger

    def log_request(
        self,
        request_id: str,
        operation: str,
        prompt: str,
        model: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an AI request.

        Args:
            request_id: Unique request identifier
            operation: Pipeline operation (generate, refine, summarize, domain_lookup)
            prompt: The rendered prompt (truncated in the log)
            model: Model name
            metadata: Additional metadata
        """
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "operation": operation,
            "model": model,
            "prompt_length": len(prompt),
            "prompt_preview": _preview(prompt),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.info(f"AI Request: {json.dumps(log_data)}")

    def log_response(
        self,
        request_id: str,
        operation: str,
        response: AIResponse,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an AI response.

        Args:
            request_id: Request identifier (for correlation)
            operation: Pipeline operation
            response: The AIResponse returned by the provider
            metadata: Additional metadata
        """
        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            "operation": operation,
            "provider": response.provider.value if hasattr(response.provider, "value") else str(response.provider),
            "model": response.model,
            "success": response.success,
            "has_output": response.parsed is not None,
            "latency_ms": round(response.latency_ms, 2),
            "tokens": {
                "prompt": response.usage.prompt_tokens,
                "completion": response.usage.completion_tokens,
                "total": response.usage.total_tokens,
            },
            "tool_calls": response.metadata.get("tool_calls", 0),
            "response_length": len(response.content),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if not response.success:
            log_data["error"] = response.error

        if metadata:
            log_data["metadata"] = metadata

        level = logging.INFO if response.success and response.parsed is not None else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")

    def log_error(
        self,
        request_id: str,
        error: str,
        stage: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an error in the AI pipeline.

        Args:
            request_id: Request identifier
            error: Error message
            stage: Where the error occurred (model_call, output_validation, sanitization)
            metadata: Additional context
        """
        log_data = {
            "event": "ai_error",
            "request_id": request_id,
            "error": error,
            "stage": stage,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.error(f"AI Error: {json.dumps(log_data)}")


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_logger = AILogger()
