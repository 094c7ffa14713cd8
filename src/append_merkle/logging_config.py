"""Centralized logging configuration for the append-merkle project."""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "append_merkle"

DEFAULT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def _resolve_level(level: Union[int, str]) -> int:
    """Accept a numeric level or a name such as ``"INFO"``."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        return resolved
    return level


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Set up the ``append_merkle`` logger with a stdout handler.

    Calling it again only changes the level, so scripts can apply their
    ``--log-level`` after library modules configured the defaults.

    Args:
        level: Logging level or level name (default: INFO)
        format_string: Custom format string (optional)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(stream_handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        setup_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests with appropriate configuration.

    Args:
        name: Test module name

    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

    return logger
