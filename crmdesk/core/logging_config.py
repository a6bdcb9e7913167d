"""Loguru configuration."""

import sys

from loguru import logger

from .config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace the default sink with the configured ones."""
    logger.remove()
    logger.add(sys.stdout, level=settings.log_level)
    if settings.log_file:
        logger.add(settings.log_file, rotation="10 MB", level="DEBUG")
