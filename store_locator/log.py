"""
Logging setup.

All modules log through the shared loguru logger; configure_logging() swaps
the default sink for one with the project format and level.
"""

import sys

from loguru import logger

from .config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = LOG_LEVEL, sink=None):
    """Replace the loguru handlers with a single formatted sink.

    Args:
        level: Minimum level name (e.g. "INFO", "DEBUG").
        sink: Where to write; defaults to stderr so stdout stays clean for
            CLI output.

    Returns:
        The configured logger.
    """
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=LOG_FORMAT)
    return logger

