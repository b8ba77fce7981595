"""Validation Contexts

A context builds validators bound to itself and decides what a failed check
means:

- ValidationContext: fail-fast, raises on the first failing check
- BatchValidationContext: collect-all, records failures until validate()
- ConfiguredCheck: fail-fast context on a custom config that can spawn batches

Usage:
    batch = BatchValidationContext(config)
    batch.check(name, "name").not_empty()
    batch.check(age, "age").is_positive()
    batch.validate()  # one ValidationError listing both failures

    with BatchValidationContext(config) as batch:
        batch.check(email, "email").is_email()
"""
from __future__ import annotations

import logging
import os
import traceback
from collections.abc import Callable, Collection, Mapping
from numbers import Complex, Number, Real
from typing import Any, NoReturn, Self, TypeVar, overload

from .config import ValidationConfig
from .errors import ValidationError, ValidationMode, format_batch_message, format_fail_fast_message
from .logging import batch_logger, check_logger
from .validators import CollectionValidator, MapValidator, NumericValidator, StringValidator, ValueValidator

T = TypeVar("T")
N = TypeVar("N", bound=Number)
C = TypeVar("C", bound=Collection)
M = TypeVar("M", bound=Mapping)


def _is_numeric(value: Any) -> bool:
    """Real numbers plus Decimal; bool and complex are excluded."""
    if isinstance(value, bool) or not isinstance(value, Number): return False
    return isinstance(value, Real) or not isinstance(value, Complex)


_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _caller_stack() -> traceback.StackSummary:
    """Current stack with the trailing validcheck frames removed."""
    stack = traceback.extract_stack()
    while stack and os.path.dirname(os.path.abspath(stack[-1].filename)) == _PACKAGE_DIR: stack.pop()
    return stack


class ValidationContext:
    """Fail-fast context: ``fail`` raises immediately."""

    __slots__ = ("config",)

    mode = ValidationMode.FAIL_FAST

    def __init__(self, config: ValidationConfig):
        self.config = config

    def __repr__(self) -> str: return f"{type(self).__name__}(config={self.config!r})"

    # ------------------------------------------------------------------
    # Validator factories
    # ------------------------------------------------------------------

    @overload
    def check(self, value: str, name: str | None = None) -> StringValidator: ...
    @overload
    def check(self, value: bool, name: str | None = None) -> ValueValidator[bool]: ...
    @overload
    def check(self, value: N, name: str | None = None) -> NumericValidator[N]: ...
    @overload
    def check(self, value: M, name: str | None = None) -> MapValidator[M]: ...
    @overload
    def check(self, value: C, name: str | None = None) -> CollectionValidator[C]: ...
    @overload
    def check(self, value: T, name: str | None = None) -> ValueValidator[T]: ...

    def check(self, value, name=None):
        """Validator for ``value``, chosen by its runtime type."""
        if isinstance(value, str): return StringValidator(self, name, value)
        if isinstance(value, bool): return ValueValidator(self, name, value)
        if _is_numeric(value): return NumericValidator(self, name, value)
        if isinstance(value, Mapping): return MapValidator(self, name, value)
        if isinstance(value, Collection): return CollectionValidator(self, name, value)
        return ValueValidator(self, name, value)

    # Typed factories for values that may be None.

    def check_value(self, value: T, name: str | None = None) -> ValueValidator[T]:
        return ValueValidator(self, name, value)

    def check_string(self, value: str | None, name: str | None = None) -> StringValidator:
        return StringValidator(self, name, value)

    def check_number(self, value: N | None, name: str | None = None) -> NumericValidator[N]:
        return NumericValidator(self, name, value)

    def check_collection(self, value: C | None, name: str | None = None) -> CollectionValidator[C]:
        return CollectionValidator(self, name, value)

    def check_map(self, value: M | None, name: str | None = None) -> MapValidator[M]:
        return MapValidator(self, name, value)

    # ------------------------------------------------------------------
    # Failure handling
    # ------------------------------------------------------------------

    def is_true(self, condition: bool, message: str) -> None:
        if not condition: self.fail(message)

    def is_false(self, condition: bool, message: str) -> None:
        self.is_true(not condition, message)

    def fail(self, message: str) -> None:
        if (logger := check_logger()).isEnabledFor(logging.DEBUG): logger.debug("validation_failed", error=message)
        self._raise_errors([message])

    def _format_message(self, errors: list[str]) -> str: return format_fail_fast_message(errors)

    def _raise_errors(self, errors: list[str]) -> NoReturn:
        if self.config.capture_stack_trace:
            raise ValidationError(self._format_message(errors), errors, mode=self.mode, stack=_caller_stack())
        raise ValidationError(self._format_message(errors), errors, mode=self.mode) from None


class BatchValidationContext(ValidationContext):
    """Collect-all context: ``fail`` records, ``validate`` raises once."""

    __slots__ = ("_errors",)

    mode = ValidationMode.COLLECT_ALL

    def __init__(self, config: ValidationConfig):
        super().__init__(config)
        self._errors: list[str] = []

    def __enter__(self) -> Self: return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None: self.validate()
        return False

    def fail(self, message: str) -> None:
        self._errors.append(message)

    def has_errors(self) -> bool: return bool(self._errors)

    @property
    def errors(self) -> tuple[str, ...]: return tuple(self._errors)

    def validate(self) -> None:
        """Raise one ValidationError listing every recorded failure, if any."""
        if not self._errors: return
        if (logger := batch_logger()).isEnabledFor(logging.DEBUG):
            logger.debug("batch_validation_failed", error_count=len(self._errors))
        self._raise_errors(list(self._errors))

    def include(self, other: BatchValidationContext) -> Self:
        """Append ``other``'s failures after this batch's own."""
        self._errors.extend(other._errors)
        if (logger := batch_logger()).isEnabledFor(logging.DEBUG):
            logger.debug("batch_included", included=len(other._errors), error_count=len(self._errors))
        return self

    def apply(self, value: T, then: Callable[[Any], Any], name: str | None = None) -> Self:
        """Run ``then`` against the validator for ``value`` and return the batch."""
        then(self.check(value, name))
        return self

    def _format_message(self, errors: list[str]) -> str: return format_batch_message(errors)


class ConfiguredCheck(ValidationContext):
    """Fail-fast context bound to a custom configuration."""

    __slots__ = ()

    def batch(self) -> BatchValidationContext:
        return BatchValidationContext(self.config)
