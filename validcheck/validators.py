"""Fluent Validators

A validator wraps one value (plus an optional parameter name) and exposes
chainable checks. Every check returns the validator itself, typed as Self,
so chains stay in the specialized type:

    check(name, "name").not_null().length_between(2, 50)
    check(age, "age").is_positive().max(150)

Failures are never handled here: each failing check hands its formatted
message to the bound context, which either raises (fail-fast) or records it
(batch). A failed check does not stop the chain, which is what lets batch
mode report every violation.

Message format:
    <'name' | parameter> <template>[, but it was <value>]
"""
from __future__ import annotations

import math
import re
from collections.abc import Callable, Collection, Mapping
from numbers import Number
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

if TYPE_CHECKING:
    from .context import ValidationContext

T = TypeVar("T")
N = TypeVar("N", bound=Number)
C = TypeVar("C", bound=Collection)
M = TypeVar("M", bound=Mapping)

PARAMETER_PLACEHOLDER = "parameter"
TRUNCATION_MARKER = "..."

# Bounded quantifiers only; MAX_EMAIL_LENGTH is enforced before matching.
MAX_EMAIL_LENGTH = 320
EMAIL_PATTERN = re.compile(r"[\w.%+-]{1,64}@(?:[^\W_]|[.-]){1,253}\.[^\W\d_]{2,63}")


def _present(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Typed checks fail on None instead of raising."""
    return lambda v: v is not None and predicate(v)


def _as_double(n: Any) -> float:
    """float(n), saturating to +/-inf like a double conversion instead of raising."""
    try: return float(n)
    except OverflowError: return math.inf if n > 0 else -math.inf


def _to_text(value: Any) -> str:
    # Ints past the interpreter's int-to-str digit limit cannot be rendered.
    try: return str(value)
    except ValueError: return f"{type(value).__name__}(...)"


class ValueValidator(Generic[T]):
    """Base validator with checks that apply to any value."""

    __slots__ = ("_context", "name", "value", "_custom_message")

    def __init__(self, context: ValidationContext, name: str | None, value: T):
        self._context, self.name, self.value, self._custom_message = context, name, value, None

    def __repr__(self) -> str: return f"{type(self).__name__}(name={self.name!r}, value={self.value!r})"

    # ------------------------------------------------------------------
    # Message formatting
    # ------------------------------------------------------------------

    def _format_message(self, template: str, include_actual_value: bool) -> str:
        if self._custom_message is not None: return self._custom_message
        subject = PARAMETER_PLACEHOLDER if self.name is None else f"'{self.name}'"
        message = f"{subject} {template}"
        if include_actual_value and self._context.config.include_actual_value:
            rendered = self._render_value()
            if isinstance(self.value, str): rendered = f"'{rendered}'"
            return f"{message}, but it was {rendered}"
        return message

    def _render_value(self) -> str:
        text, limit = _to_text(self.value), self._context.config.actual_value_max_length
        return text if len(text) <= limit else text[:limit] + TRUNCATION_MARKER

    def _check(self, predicate: Callable[[T], Any], template: str, include_actual_value: bool = False) -> Self:
        """Single funnel for every check: evaluate, format, report, keep chaining."""
        if not predicate(self.value):
            self._context.fail(self._format_message(template, include_actual_value))
        return self

    # ------------------------------------------------------------------
    # Generic checks
    # ------------------------------------------------------------------

    def not_null(self) -> Self:
        return self._check(lambda v: v is not None, "must not be null")

    def is_null(self) -> Self:
        return self._check(lambda v: v is None, "must be null", True)

    def satisfies(self, predicate: Callable[[T], Any], message: str) -> Self:
        """Escape hatch for any condition; the value is never appended to ``message``."""
        return self._check(predicate, message)

    def when(self, condition: bool, then: Callable[[Self], Any]) -> Self:
        """Apply ``then`` to this validator only if ``condition`` holds."""
        if condition: then(self)
        return self

    def with_message(self, message: str) -> Self:
        """Report ``message`` verbatim for every following check in this chain."""
        self._custom_message = message
        return self

    def one_of(self, *candidates: T) -> Self:
        options = list(candidates)
        return self._check(lambda v: v in options, f"must be one of {options}", True)


class StringValidator(ValueValidator[str]):
    """Checks for ``str`` values."""

    __slots__ = ()

    def empty(self) -> Self:
        return self._check(_present(lambda s: s == ""), "must be empty", True)

    def not_empty(self) -> Self:
        return self._check(_present(lambda s: s != ""), "must not be empty")

    def not_null_or_empty(self) -> Self:
        return self._check(lambda s: s is not None and s != "", "must not be null or empty")

    def has_text(self) -> Self:
        return self._check(lambda s: s is not None and s.strip() != "", "must have text")

    def is_blank(self) -> Self:
        return self._check(lambda s: s is None or s.strip() == "", "must be blank", True)

    def min_length(self, minimum: int) -> Self:
        return self._check(_present(lambda s: len(s) >= minimum), f"must be at least {minimum} characters long", True)

    def max_length(self, maximum: int) -> Self:
        return self._check(_present(lambda s: len(s) <= maximum), f"must be at most {maximum} characters long", True)

    def length(self, exact: int) -> Self:
        return self._check(_present(lambda s: len(s) == exact), f"must be exactly {exact} characters long", True)

    def length_between(self, minimum: int, maximum: int) -> Self:
        return self._check(_present(lambda s: minimum <= len(s) <= maximum),
            f"must be between {minimum} and {maximum} characters long", True)

    def matches(self, pattern: str | re.Pattern[str]) -> Self:
        """The whole string must match ``pattern``."""
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        return self._check(_present(lambda s: compiled.fullmatch(s) is not None),
            f"must match pattern {compiled.pattern}", True)

    def starts_with(self, prefix: str) -> Self:
        return self._check(_present(lambda s: s.startswith(prefix)), f"must start with '{prefix}'", True)

    def ends_with(self, suffix: str) -> Self:
        return self._check(_present(lambda s: s.endswith(suffix)), f"must end with '{suffix}'", True)

    def is_email(self) -> Self:
        """Simplified address shape: local@domain.tld with Unicode letters allowed.

        Not RFC 5322 complete. Length is capped before the pattern runs.
        """
        return self._check(_present(lambda s: len(s) <= MAX_EMAIL_LENGTH and EMAIL_PATTERN.fullmatch(s) is not None),
            "must be a valid email address", True)


class NumericValidator(ValueValidator[N]):
    """Checks for numbers; all comparisons go through double precision."""

    __slots__ = ()

    def is_positive(self) -> Self:
        return self._check(_present(lambda n: _as_double(n) > 0), "must be positive", True)

    def is_negative(self) -> Self:
        return self._check(_present(lambda n: _as_double(n) < 0), "must be negative", True)

    def is_zero(self) -> Self:
        return self._check(_present(lambda n: _as_double(n) == 0), "must be zero", True)

    def is_non_negative(self) -> Self:
        return self._check(_present(lambda n: _as_double(n) >= 0), "must be non-negative", True)

    def is_non_zero(self) -> Self:
        return self._check(_present(lambda n: _as_double(n) != 0), "must be non-zero", True)

    def min(self, minimum: Number) -> Self:
        return self._check(_present(lambda n: _as_double(n) >= _as_double(minimum)), f"must be at least {minimum}", True)

    def max(self, maximum: Number) -> Self:
        return self._check(_present(lambda n: _as_double(n) <= _as_double(maximum)), f"must be at most {maximum}", True)

    def between(self, minimum: Number, maximum: Number) -> Self:
        """Inclusive at both ends."""
        return self._check(_present(lambda n: _as_double(minimum) <= _as_double(n) <= _as_double(maximum)),
            f"must be between {minimum} and {maximum}", True)


class CollectionValidator(ValueValidator[C]):
    """Checks for sized containers (lists, tuples, sets, ...)."""

    __slots__ = ()

    def empty(self) -> Self:
        return self._check(_present(lambda c: len(c) == 0), "must be empty", True)

    def not_empty(self) -> Self:
        return self._check(_present(lambda c: len(c) > 0), "must not be empty")

    def size(self, expected: int) -> Self:
        return self._check(_present(lambda c: len(c) == expected), f"must have size {expected}", True)

    def min_size(self, minimum: int) -> Self:
        return self._check(_present(lambda c: len(c) >= minimum), f"must have at least {minimum} elements", True)

    def max_size(self, maximum: int) -> Self:
        return self._check(_present(lambda c: len(c) <= maximum), f"must have at most {maximum} elements", True)

    def size_between(self, minimum: int, maximum: int) -> Self:
        return self._check(_present(lambda c: minimum <= len(c) <= maximum),
            f"must have between {minimum} and {maximum} elements", True)


class MapValidator(ValueValidator[M]):
    """Checks for mappings, sized by entry count."""

    __slots__ = ()

    def empty(self) -> Self:
        return self._check(_present(lambda m: len(m) == 0), "must be empty", True)

    def not_empty(self) -> Self:
        return self._check(_present(lambda m: len(m) > 0), "must not be empty")

    def size(self, expected: int) -> Self:
        return self._check(_present(lambda m: len(m) == expected), f"must have size {expected}", True)

    def min_size(self, minimum: int) -> Self:
        return self._check(_present(lambda m: len(m) >= minimum), f"must have at least {minimum} entry(ies)", True)

    def max_size(self, maximum: int) -> Self:
        return self._check(_present(lambda m: len(m) <= maximum), f"must have at most {maximum} entry(ies)", True)

    def size_between(self, minimum: int, maximum: int) -> Self:
        return self._check(_present(lambda m: minimum <= len(m) <= maximum),
            f"must have between {minimum} and {maximum} entry(ies)", True)

    # Presence checks never append the map itself.

    def contains_key(self, key: Any) -> Self:
        return self._check(_present(lambda m: key in m), f"must contain key '{key}'")

    def does_not_contain_key(self, key: Any) -> Self:
        return self._check(_present(lambda m: key not in m), f"must not contain key '{key}'")

    def contains_value(self, value: Any) -> Self:
        return self._check(_present(lambda m: value in m.values()), f"must contain value '{value}'")

    def does_not_contain_value(self, value: Any) -> Self:
        return self._check(_present(lambda m: value not in m.values()), f"must not contain value '{value}'")

    def contains_all_keys(self, *keys: Any) -> Self:
        required = list(keys)
        return self._check(_present(lambda m: all(k in m for k in required)), f"must contain all keys {required}")
