"""
================================================================================
Common
================================================================================

Shared configuration and logging utilities.

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, get_config
from .global_config import init_logger, get_logger

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "get_config",
    "init_logger",
    "get_logger",
]
