"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru logging configuration for the page-object layer.

The framework modules log through ``from loguru import logger``; this module
only decides where those records go.

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path

from loguru import logger

from .config_loader import get_config

_logger_initialized: bool = False


def init_logger(level: str = None, format_str: str = None, force: bool = False) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
        force: Re-apply configuration even if already initialized.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    log_level = level or get_config("logging.level", "INFO")
    log_format = format_str or get_config("logging.format")

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """Returns the configured Loguru logger, initializing it on first use."""
    if not _logger_initialized:
        init_logger()
    return logger


__all__ = [
    "init_logger",
    "get_logger",
]
