"""
Seller Metrics — Structlog Configuration

Set up structured logging once at process start. Library code only calls
structlog.get_logger(__name__) and never configures anything itself.
"""

from __future__ import annotations

import logging
import sys

import structlog

from seller_metrics.config import settings


def configure_logging(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> None:
    """
    Set up structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to
            settings.LOG_LEVEL.
        json_output: Render JSON lines instead of the console renderer.
            Defaults to settings.LOG_JSON.

    Raises:
        ValueError: If log_level is not a known logging level name.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")

    if json_output is None:
        json_output = settings.LOG_JSON

    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
