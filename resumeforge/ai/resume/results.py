"""
Operation Result Types - Shared result shape for the resume pipeline.

Every public operation (contract validation, engines, action layer) returns
an OperationResult instead of raising, so the caller always receives a
discriminated value: either ok with a value, or not ok with a reason.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why an operation failed."""
    INPUT_VALIDATION_FAILED = "input_validation_failed"
    GENERATION_FAILED = "generation_failed"
    REFINEMENT_FAILED = "refinement_failed"
    SUMMARY_FAILED = "summary_failed"
    OPERATIONAL_FAILURE = "operational_failure"


@dataclass
class OperationResult(Generic[T]):
    """
    Discriminated result of a pipeline operation.

    Attributes:
        ok: Whether the operation succeeded
        value: The produced value (only when ok)
        reason: Human-readable failure message (only when not ok)
        kind: Failure category (only when not ok)
    """
    ok: bool
    value: Optional[T] = None
    reason: Optional[str] = None
    kind: Optional[FailureKind] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str, kind: FailureKind) -> "OperationResult[T]":
        return cls(ok=False, reason=reason, kind=kind)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for transport."""
        if self.ok:
            value = self.value.model_dump() if isinstance(self.value, BaseModel) else self.value
            return {"ok": True, "value": value}
        return {"ok": False, "reason": self.reason, "kind": self.kind.value if self.kind else None}
