"""Structured Logging for validcheck

The library only emits DEBUG events under the ``validcheck.`` namespace and
never configures logging on import. Applications that want to see them call
``configure_logging`` (or route structlog through their own setup).
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that tags events with the emitting library."""
    event_dict.setdefault("library", "validcheck")
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both console and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
    ]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, colored console output.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def configure_logging_from_settings() -> None:
    """Configure logging from VALIDCHECK_LOG_LEVEL / VALIDCHECK_LOG_JSON."""
    from .config import get_settings

    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger of the same name.

    Events go through stdlib level filtering, so the library stays silent
    until the application lowers the level for ``validcheck``.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


class LoggerRegistry:
    """Registry of named loggers for the library's components."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"validcheck.{name}")
        return cls._loggers[name]


def check_logger() -> structlog.stdlib.BoundLogger:
    """Logger for fail-fast validation events."""
    return LoggerRegistry.get("check")


def batch_logger() -> structlog.stdlib.BoundLogger:
    """Logger for batch validation events."""
    return LoggerRegistry.get("batch")
