"""Logging configuration for the error handler registry."""

import logging
import os
import sys
from typing import Union

LOG_LEVEL_ENV_VAR = "ERROR_HANDLER_REGISTRY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "ERROR"


def parse_level(level: str) -> Union[int, str]:
    """Convert a log level string into something `Logger.setLevel` accepts.

    Numeric strings (including negative ones) become ints, anything else is
    returned uppercased.
    """
    try:
        return int(level)
    except ValueError:
        return level.upper()


def get_logger(name: str = "error_handler_registry") -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses ERROR_HANDLER_REGISTRY_LOG_LEVEL (or LOG_LEVEL) to determine
    the log level. If not set, or set to something logging does not recognize,
    defaults to ERROR level, which effectively disables most package logging.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = os.getenv(LOG_LEVEL_ENV_VAR, os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        try:
            logger.setLevel(parse_level(level))
        except ValueError:
            logger.setLevel(DEFAULT_LOG_LEVEL)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


# Package logger instance
logger = get_logger()
