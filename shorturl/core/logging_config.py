"""Logging configuration for the ShortURL service."""

import logging
import sys

LOGGER_NAME = "shorturl"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Setup logging for the service logger hierarchy.

    Every module logs through ``logging.getLogger(__name__)`` below the
    ``shorturl`` logger, so a single console handler here covers them all.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured ``shorturl`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Re-running setup must not duplicate output
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
