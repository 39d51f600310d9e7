"""Calculation Logger for RenoCost.

Configures structlog for the engine and logs composed estimates.
"""

import logging
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with ISO timestamps and a console renderer.

    Args:
        level: Log level name. Defaults to settings.log_level.
    """
    if level is None:
        from renocost.config.settings import settings
        level = settings.log_level

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(level.upper(), logging.INFO)
        ),
    )


def log_estimate_complete(
    category: str,
    quality_tier: str,
    total: float,
    components: list
) -> None:
    """Log a composed project estimate."""
    logger.info(
        "estimate_complete",
        category=category,
        quality_tier=quality_tier,
        total=total,
        components=components
    )
