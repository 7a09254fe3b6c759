"""
================================================================================
Configuration Loader
================================================================================

Settings for page objects, the browser harness and logging.

Each key resolves in this order:
    1. Environment variable named after the dotted key
       (ui.highlight.enabled -> UI_HIGHLIGHT_ENABLED)
    2. config/config.yaml (or the file named by PAGE_KIT_CONFIG)
    3. The built-in DEFAULTS table

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


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

DEFAULTS: Dict[str, Any] = {
    "ui": {
        "base_url": "http://localhost:3000",
        "browser": "chromium",
        "headless": True,
        "default_timeout": 5000,
        "highlight": {
            "enabled": True,
            "border": "2px dashed red",
            "duration_ms": 500,
        },
    },
    "logging": {
        "level": "INFO",
        "format": DEFAULT_LOG_FORMAT,
        "file": None,
        "rotation": "10 MB",
        "retention": "7 days",
    },
}

_TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be parsed."""
    pass


def _lookup(tree: Dict[str, Any], key: str) -> Any:
    node: Any = tree
    for part in key.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node


def env_name(key: str) -> str:
    """Environment variable that overrides ``key``."""
    return key.upper().replace(".", "_")


class ConfigLoader:
    """
    Process-wide settings.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.highlight.border")
        '2px dashed red'
        >>> config.get("ui.retries", 3)   # keys outside DEFAULTS take a fallback
        3
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Args:
            config_path: YAML file to read. Only the first construction
                counts; later calls return the same instance.
        """
        if self._initialized:
            return

        self._config_path = Path(
            config_path or os.getenv("PAGE_KIT_CONFIG", DEFAULT_CONFIG_PATH)
        )
        self._file_values: Dict[str, Any] = {}
        self._load_config()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using built-in defaults and environment variables."
            )
            self._file_values = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._file_values = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self._config_path}: {e}"
            ) from e
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Resolve a dotted key.

        Args:
            key: Dotted path such as "ui.highlight.duration_ms"
            default: Fallback for keys missing from DEFAULTS. For known keys
                the built-in default wins over this argument.

        Returns:
            The resolved value. Environment strings are converted to the
            type of the built-in (or supplied) default.
        """
        fallback = _lookup(DEFAULTS, key)
        if fallback is None:
            fallback = default

        env_value = os.environ.get(env_name(key))
        if env_value is not None:
            return self._convert_type(env_value, fallback)

        value = _lookup(self._file_values, key)
        return fallback if value is None else value

    def reload(self) -> None:
        """Read the configuration file again."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @staticmethod
    def _convert_type(value: str, reference: Any) -> Any:
        if isinstance(reference, bool):
            return value.lower() in _TRUE_VALUES
        for number_type in (int, float):
            if isinstance(reference, number_type):
                try:
                    return number_type(value)
                except ValueError:
                    return value
        return value

    @classmethod
    def reset(cls) -> None:
        """Forget the current instance so the next one re-reads the file."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULTS",
    "DEFAULT_LOG_FORMAT",
    "env_name",
]
