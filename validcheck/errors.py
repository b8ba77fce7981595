"""Validation Error

A single exception kind, parameterized by one message (fail-fast) or many
(batch). Subclasses ValueError so it composes with existing handlers for
invalid arguments.

Batch message format:
    Validation failed with 2 error(s):
    - 'name' must not be empty
    - 'age' must be positive, but it was -1
"""
from __future__ import annotations

from enum import Enum
from traceback import StackSummary
from typing import Any, Iterable


class ValidationMode(str, Enum):
    """Error accumulation strategy of the context that raised."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


def format_fail_fast_message(errors: Iterable[str]) -> str: return ";".join(errors)


def format_batch_message(errors: Iterable[str]) -> str:
    """Summary line followed by one "- " bullet per message."""
    errors = list(errors)
    return "\n".join([f"Validation failed with {len(errors)} error(s):", *(f"- {e}" for e in errors)])


class ValidationError(ValueError):
    """Raised when one or more checks fail.

    Attributes:
        message: Combined, printable message
        errors: Individual check messages, in the order they failed
        mode: Which kind of context raised
        stack: Raising call site, when stack capture is enabled
    """

    def __init__(self, message: str, errors: Iterable[str], *, mode: ValidationMode = ValidationMode.FAIL_FAST,
                 stack: StackSummary | None = None):
        super().__init__(message)
        self.message, self.errors, self.mode, self.stack = message, tuple(errors), mode, stack

    def __str__(self) -> str: return self.message

    def __repr__(self) -> str: return f"ValidationError({self.message!r}, errors={list(self.errors)!r})"

    @property
    def first_error(self) -> str | None: return self.errors[0] if self.errors else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        return {"error": {"type": "validation_error", "message": self.message, "mode": self.mode.value,
            "error_count": len(self.errors), "errors": list(self.errors)}}
