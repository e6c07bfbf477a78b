"""Structured logging setup."""

from __future__ import annotations

import logging

import structlog

from lira.config import LoggingSettings, get_logging_settings


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for the service.

    Args:
        settings: Logging settings (defaults to the cached environment settings)
    """
    settings = settings or get_logging_settings()
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer: structlog.types.Processor
    if settings.json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
