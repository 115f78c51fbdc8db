"""
================================================================================
Configuration Loader
================================================================================

Settings for browser sessions and logging.

A key such as ``browser.timeout`` is looked up in the environment first
(``BROWSER_TIMEOUT``), then in ``config/config.yaml`` (or the file named by
``$PAGEDROPS_CONFIG``), then in DEFAULTS.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path("config") / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "browser": {
        "timeout": 30.0,
        "poll_interval": 0.1,
        "base_url": "http://localhost:3000",
    },
    "logging": {
        "level": "INFO",
        "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        "file": None,
    },
}


class ConfigurationError(Exception):
    """The configuration file exists but cannot be parsed."""


class ConfigLoader:
    """
    Process-wide settings, loaded once.

    Usage:
        >>> ConfigLoader().get("browser.timeout")
        30.0
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get("PAGEDROPS_CONFIG")
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.debug(f"No configuration file at {self._config_path}, using defaults")
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self._config_path}: {e}") from e
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value for a dot-separated ``key``.

        Environment values are strings; they are converted to the type of the
        built-in (or caller) default when one exists.
        """
        fallback = _lookup(DEFAULTS, key)
        if fallback is None:
            fallback = default

        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            return _convert(env_value, fallback)

        value = _lookup(self._config, key)
        return fallback if value is None else value

    def reload(self) -> None:
        """Re-read the configuration file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded instance so the next call reads config again."""
        cls._instance = None
        cls._config = {}


def _lookup(data: Dict[str, Any], key: str) -> Any:
    value: Any = data
    for part in key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
        if value is None:
            return None
    return value


def _convert(value: str, reference: Any) -> Any:
    # bool before int: bool is an int subclass
    if isinstance(reference, bool):
        return value.lower() in ("true", "1", "yes", "on")
    for kind in (int, float):
        if isinstance(reference, kind):
            try:
                return kind(value)
            except ValueError:
                return value
    return value


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ``ConfigLoader().get(key, default)``."""
    return ConfigLoader().get(key, default)


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULTS",
    "get_config",
]
