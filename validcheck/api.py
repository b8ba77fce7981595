"""Static Entry Point

Module-level helpers backed by one shared fail-fast context built from the
environment defaults. The shared context is read-only, so these helpers are
safe to call from any thread; batches are always freshly allocated.

Usage:
    from validcheck import check, batch, with_config

    def __init__(self, name: str, age: int):
        check(name, "name").not_null().length_between(2, 50)
        check(age, "age").between(0, 150)
"""
from __future__ import annotations

from collections.abc import Collection, Mapping
from functools import lru_cache
from numbers import Number
from typing import TypeVar

from .config import ValidationConfig, default_config
from .context import BatchValidationContext, ConfiguredCheck, ValidationContext
from .validators import CollectionValidator, MapValidator, NumericValidator, StringValidator, ValueValidator

T = TypeVar("T")
N = TypeVar("N", bound=Number)
C = TypeVar("C", bound=Collection)
M = TypeVar("M", bound=Mapping)


@lru_cache
def get_default_context() -> ValidationContext:
    return ValidationContext(default_config())


def check(value, name: str | None = None):
    """Validator for ``value`` on the default context, chosen by its runtime type."""
    return get_default_context().check(value, name)


def check_value(value: T, name: str | None = None) -> ValueValidator[T]:
    return get_default_context().check_value(value, name)


def check_string(value: str | None, name: str | None = None) -> StringValidator:
    return get_default_context().check_string(value, name)


def check_number(value: N | None, name: str | None = None) -> NumericValidator[N]:
    return get_default_context().check_number(value, name)


def check_collection(value: C | None, name: str | None = None) -> CollectionValidator[C]:
    return get_default_context().check_collection(value, name)


def check_map(value: M | None, name: str | None = None) -> MapValidator[M]:
    return get_default_context().check_map(value, name)


def is_true(condition: bool, message: str) -> None:
    """Fail unless ``condition``; reported as ``parameter <message>``."""
    get_default_context().check_value(condition).satisfies(bool, message)


def is_false(condition: bool, message: str) -> None:
    is_true(not condition, message)


def fail(message: str) -> None:
    get_default_context().fail(message)


def batch() -> BatchValidationContext:
    return BatchValidationContext(get_default_context().config)


def with_config(config: ValidationConfig) -> ConfiguredCheck:
    return ConfiguredCheck(config)
