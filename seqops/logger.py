"""Logger configuration for the seqops package."""

import logging
import os
import sys

from .constants import DEFAULT_LOG_LEVEL, LOGGER_NAME, LOG_LEVEL_ENV

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); falls back to
            the ``SEQOPS_LOG_LEVEL`` environment variable
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(name)

    # Handlers are attached once per logger name.
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    return logger


logger = setup_logger()
