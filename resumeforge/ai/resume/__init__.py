"""
Resume Module - structured generation and refinement of resume templates.

Usage:
    from resumeforge.ai.resume import ResumeGenerator, GenerationRequest

    generator = ResumeGenerator()
    result = await generator.generate(GenerationRequest(prompt_text="Minimalist resume for a designer"))
"""

from .contracts import (
    Artifact,
    FeedbackSummary,
    FeedbackSummaryRequest,
    GenerationRequest,
    RefinementRequest,
    SchemaContract,
)
from .generator import ResumeGenerator, GENERATION_FAILED_MESSAGE
from .refiner import ResumeRefiner, REFINEMENT_FAILED_MESSAGE
from .results import FailureKind, OperationResult
from .sanitizer import strip_code_fences
from .summarizer import FeedbackSummarizer, SUMMARY_FAILED_MESSAGE
from .tools import CompanyLogoTool

__all__ = [
    # Engines
    "ResumeGenerator",
    "ResumeRefiner",
    "FeedbackSummarizer",
    "CompanyLogoTool",
    # Contracts
    "Artifact",
    "GenerationRequest",
    "RefinementRequest",
    "FeedbackSummaryRequest",
    "FeedbackSummary",
    "SchemaContract",
    # Results
    "OperationResult",
    "FailureKind",
    "GENERATION_FAILED_MESSAGE",
    "REFINEMENT_FAILED_MESSAGE",
    "SUMMARY_FAILED_MESSAGE",
    # Sanitizing
    "strip_code_fences",
]
