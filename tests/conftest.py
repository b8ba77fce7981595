"""Shared fixtures for the validcheck test-suite."""
from __future__ import annotations

import logging

import pytest
from structlog.testing import capture_logs

from validcheck import ValidationConfig, ValidationContext, BatchValidationContext
from validcheck.api import get_default_context
from validcheck.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_defaults():
    """Environment-derived defaults are cached; rebuild them for every test."""
    get_settings.cache_clear()
    get_default_context.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_context.cache_clear()


@pytest.fixture
def config() -> ValidationConfig:
    return ValidationConfig()


@pytest.fixture
def ctx(config) -> ValidationContext:
    return ValidationContext(config)


@pytest.fixture
def batch_ctx(config) -> BatchValidationContext:
    return BatchValidationContext(config)


@pytest.fixture
def quiet_ctx() -> ValidationContext:
    """Fail-fast context that never renders actual values."""
    return ValidationContext(ValidationConfig(include_actual_value=False))


@pytest.fixture
def debug_logs(caplog):
    """validcheck loggers opened to DEBUG, events captured as dicts."""
    caplog.set_level(logging.DEBUG, logger="validcheck")
    with capture_logs() as logs:
        yield logs
