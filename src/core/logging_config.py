"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
The minimum level comes from the typed runtime config.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from core.config import EarthsimConfig


def configure_logging(config: EarthsimConfig) -> None:
    """Configure structlog processors and level filtering.

    Args:
        config: Runtime config carrying the minimum log level.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level)
        ),
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging(EarthsimConfig.from_env())
    return structlog.get_logger(name)
