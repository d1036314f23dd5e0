"""
Structured logging for symref.

Configures structlog once per process and hands out named loggers. Library
modules only call ``get_logger(__name__)``; the CLI (or the embedding host)
decides the output format through ``configure_logging``.

Examples:
    >>> from symref.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> logger = get_logger(__name__)
    >>> logger.info("document_built", functions=3, classes=1)

Tags:
    logging, structlog, observability, symref
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "symref"

# "logger" itself collides with wrap_logger()'s first parameter.
_LOGGER_NAME_KEY = "logger_name"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _add_logger_name(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Expose the name given to ``get_logger`` as ``logger``."""
    name = event_dict.pop(_LOGGER_NAME_KEY, None)
    if name is not None:
        event_dict.setdefault("logger", name)
    return event_dict


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per call so a swapped sys.stderr is honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "symref",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Logs go to stderr so rendered markup printed on stdout stays clean.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stderr.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_logger_name,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    The logger stays a lazy proxy, so it is safe to create at import time
    and picks up a later ``configure_logging`` call.

    Returns:
        structlog BoundLogger
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(**{_LOGGER_NAME_KEY: name})


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(report="api", include_all=False):
            logger.info("document_built")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        structlog.contextvars.bind_contextvars(**self._context)
        return self

    def __exit__(self, *args) -> None:
        structlog.contextvars.unbind_contextvars(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "LogContext",
]
