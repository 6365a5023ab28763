"""
Monitoring Module - structured logging for AI operations.

Usage:
    from resumeforge.ai.monitoring import ai_logger

    ai_logger.log_request(request_id, "generate", prompt, model)
    ai_logger.log_response(request_id, "generate", response)
"""

from resumeforge.ai.monitoring.logger import AILogger, ai_logger

__all__ = [
    "AILogger",
    "ai_logger",
]
