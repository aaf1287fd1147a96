"""
Logging — structlog configuration and the library's trace events.

The library never logs on the success path. With ABORTABLE_TRACE enabled it
emits debug events when an abort is raised, when a try boundary recovers,
and when the process-wide hooks are replaced.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from abortable.config import effective_settings, get_settings


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structlog for human-readable console output.

    Defaults to the level from AbortableSettings; unknown level names
    fall back to INFO.
    """
    level_name = (log_level or get_settings().log_level).upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def is_tracing() -> bool:
    return effective_settings().trace


def trace(logger_name: str, event: str, **fields: Any) -> None:
    """Emit a debug event on the named logger when tracing is enabled."""
    if is_tracing():
        structlog.get_logger(logger_name).debug(event, **fields)
