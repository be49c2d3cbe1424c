"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from decimal_formats.config import Settings


def setup_logging(settings: Settings | None = None, stream: TextIO | None = None):
    """Configure structlog with JSON output, filtered at ``settings.log_level``.

    Meant to be called once by the application embedding the library. The
    numeral routines only emit ``debug`` events, so the default ``INFO`` level
    keeps them quiet.
    """
    if settings is None:
        settings = Settings()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[settings.log_level]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the numeral component *name*."""
    return structlog.get_logger(name)
