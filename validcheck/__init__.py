"""validcheck: Fluent Runtime Parameter Validation

Chainable checks for strings, numbers, collections, mappings and arbitrary
values, either failing on the first violation or collecting every violation
and raising them together.

Key Features:
- Fail-fast checks that raise ValidationError (a ValueError) immediately
- Batch contexts that accumulate failures and raise once on validate()
- Typed validators whose chains keep their specialized type
- Configurable error detail: stack capture, actual-value rendering, truncation

Usage:
    from validcheck import check, batch, with_config, ValidationConfig

    check(name, "name").not_null().length_between(2, 50)

    with batch() as b:
        b.check(name, "name").not_empty()
        b.check(age, "age").is_positive()

    secure = with_config(ValidationConfig(include_actual_value=False))
    secure.check(password, "password").min_length(12)
"""
from .api import (
    batch,
    check,
    check_collection,
    check_map,
    check_number,
    check_string,
    check_value,
    fail,
    get_default_context,
    is_false,
    is_true,
    with_config,
)
from .config import (
    DEFAULT_ACTUAL_VALUE_MAX_LENGTH,
    DEFAULT_CONFIG,
    Settings,
    ValidationConfig,
    default_config,
    get_settings,
)
from .context import BatchValidationContext, ConfiguredCheck, ValidationContext
from .errors import ValidationError, ValidationMode, format_batch_message
from .logging import configure_logging, configure_logging_from_settings, get_logger
from .validators import (
    CollectionValidator,
    MapValidator,
    NumericValidator,
    StringValidator,
    ValueValidator,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "check",
    "check_value",
    "check_string",
    "check_number",
    "check_collection",
    "check_map",
    "is_true",
    "is_false",
    "fail",
    "batch",
    "with_config",
    "get_default_context",
    # Configuration
    "ValidationConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_ACTUAL_VALUE_MAX_LENGTH",
    "Settings",
    "get_settings",
    "default_config",
    # Contexts
    "ValidationContext",
    "BatchValidationContext",
    "ConfiguredCheck",
    # Validators
    "ValueValidator",
    "StringValidator",
    "NumericValidator",
    "CollectionValidator",
    "MapValidator",
    # Errors
    "ValidationError",
    "ValidationMode",
    "format_batch_message",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
