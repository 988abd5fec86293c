"""Logging setup."""

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
