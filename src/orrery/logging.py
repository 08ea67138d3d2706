"""
Logging configuration for the orrery package.

This module provides a standardized logging setup for all modules
within orrery, ensuring consistent log formatting and control.
"""

import logging
import os
import sys

# Default logging level - Debug messages are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

# Environment variable that overrides the default level
LOG_LEVEL_ENV_VAR = "ORRERY_LOG_LEVEL"

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure the logger if it hasn't been already
    if not logger.handlers:
        # Follow the root orrery logger's level if one was set explicitly
        root_level = logging.getLogger("orrery").level
        logger.setLevel(root_level if root_level != logging.NOTSET else _get_log_level())

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)

    return logger


def _get_log_level() -> int:
    """
    Get the logging level based on environment variables.

    Returns:
        The appropriate logging level as an int
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()

    if log_level_str == "DEBUG":
        return logging.DEBUG
    elif log_level_str == "INFO":
        return logging.INFO
    elif log_level_str == "WARNING":
        return logging.WARNING
    elif log_level_str == "ERROR":
        return logging.ERROR
    elif log_level_str == "CRITICAL":
        return logging.CRITICAL
    else:
        return DEFAULT_LOG_LEVEL


def set_log_level(level: int) -> None:
    """
    Set the logging level for all orrery loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    root_logger = logging.getLogger("orrery")
    root_logger.setLevel(level)

    # Child loggers configured by get_logger carry their own level
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith("orrery.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
