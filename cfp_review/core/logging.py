"""
Logging Setup - CFP Review Scoring Service
cfp_review/core/logging.py

Configures structlog and the stdlib root logger from Settings.LOG_LEVEL
and Settings.LOG_FORMAT.
"""

import logging

import structlog

from cfp_review.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog with a JSON or console renderer."""
    level = getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(level=level, format="%(message)s")

    if settings.LOG_FORMAT == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
