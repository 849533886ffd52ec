"""Logging setup for mcprovider."""

import logging
import os
import sys
from typing import Optional, Union

LEVEL_ENV = "MCPROVIDER_LOG_LEVEL"

# SDK loggers that only matter when debugging request handling.
_SDK_LOGGERS = ("boto3", "botocore", "urllib3")


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.getenv(LEVEL_ENV) or logging.INFO
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(level: Optional[Union[int, str]] = None, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for mcprovider.

    Args:
        level: Logging level or level name (default: $MCPROVIDER_LOG_LEVEL, then INFO)
        format_string: Custom format string (optional)

    Returns:
        The ``mcprovider`` logger
    """
    level = _resolve_level(level)
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    sdk_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    logger = logging.getLogger("mcprovider")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"mcprovider.{name}")
