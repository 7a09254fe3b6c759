"""
================================================================================
page_kit Common Utilities
================================================================================

Shared logging setup for the page framework and its test runs.

Exports:
    - init_logger: Function to initialize loguru logger with standard settings

Usage:
    from page_kit.common import init_logger

    init_logger()
    init_logger(level="DEBUG", log_file="logs/ui.log")

================================================================================
"""

import os
import sys

from loguru import logger

from page_kit.framework.config_loader import ConfigLoader

_logger_initialized = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = ConfigLoader()

    logger.remove()

    level = (level or config.get("logging.level")).upper()
    format_string = format_string or config.get("logging.format")

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or config.get("logging.file")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=config.get("logging.rotation"),
            retention=config.get("logging.retention"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """Allow the next init_logger() call to reconfigure sinks."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
]
