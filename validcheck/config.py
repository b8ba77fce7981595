"""Validation Configuration

Controls how much detail a raised ValidationError carries:
- capture_stack_trace: record the raising call site (debuggability vs. speed)
- include_actual_value: append the offending value to messages (debuggability vs. secrecy)
- actual_value_max_length: truncate rendered values to this many characters

Process-wide defaults come from the environment (VALIDCHECK_* variables or .env).
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ACTUAL_VALUE_MAX_LENGTH = 128


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Immutable settings shared by every context and validator built from it."""
    capture_stack_trace: bool = True
    include_actual_value: bool = True
    actual_value_max_length: int | None = None

    def __post_init__(self):
        if self.actual_value_max_length is None:
            object.__setattr__(self, "actual_value_max_length", DEFAULT_ACTUAL_VALUE_MAX_LENGTH)


DEFAULT_CONFIG = ValidationConfig()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VALIDCHECK_", env_file=".env", extra="ignore")

    # Error detail
    CAPTURE_STACK_TRACE: bool = True
    INCLUDE_ACTUAL_VALUE: bool = True
    ACTUAL_VALUE_MAX_LENGTH: int = Field(default=DEFAULT_ACTUAL_VALUE_MAX_LENGTH, ge=0)

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    def to_config(self) -> ValidationConfig:
        return ValidationConfig(capture_stack_trace=self.CAPTURE_STACK_TRACE,
            include_actual_value=self.INCLUDE_ACTUAL_VALUE, actual_value_max_length=self.ACTUAL_VALUE_MAX_LENGTH)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def default_config() -> ValidationConfig:
    """Configuration derived from the cached environment settings."""
    return get_settings().to_config()
