"""Loguru configuration."""

import sys

from loguru import logger

from gallery.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace the default loguru sink with one at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        backtrace=settings.debug,
        diagnose=settings.debug,
    )
