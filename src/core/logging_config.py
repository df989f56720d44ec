"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Events are printed to stderr so command output on stdout stays parseable.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog

_configured = False


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger emitting JSON lines on stderr.
    """
    global _configured
    if not _configured:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(sort_keys=True),
            ],
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        )
        _configured = True
    return structlog.get_logger(name)
