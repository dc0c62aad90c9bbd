"""
config.py

Configuration management for BlockWatch.
Loads settings from config.yaml and provides access throughout the application.
Keys missing from the file fall back to the built-in defaults below.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULTS: Dict[str, Any] = {
    "listen": {
        "host": "0.0.0.0",
        "port": 514,
        "buffer_size": 65535,
    },
    "geolocation": {
        "endpoint": "http://ip-api.com/json/",
        "timeout": 5,
    },
    "notify": {
        "enabled": True,
        "sound_file": None,
        "max_wait": 5,
    },
    "logging": {
        "level": "INFO",
        "console_output": True,
        "file_output": False,
        "max_log_size_mb": 10,
        "backup_count": 5,
    },
    "paths": {
        "logs_dir": "logs",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay ``override`` onto ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """
    Singleton configuration manager that loads and provides access to settings.
    """

    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from config.yaml, layered over DEFAULTS."""
        config_path = Path(config_path or "config.yaml")

        if not config_path.exists():
            self._config = copy.deepcopy(DEFAULTS)
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}")

        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid YAML in {config_path}: top level must be a mapping")

        self._config = _merge(DEFAULTS, loaded)

    def reload(self, config_path: Optional[Path] = None) -> None:
        """Re-read configuration, optionally from a different file."""
        self._load_config(config_path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Example:
            config.get("listen.port")
            config.get("geolocation.endpoint")
        """
        keys = key_path.split(".")
        value = self._config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_all(self) -> Dict[str, Any]:
        """Return the entire configuration dictionary."""
        return copy.deepcopy(self._config)


# Create a global instance for easy import
config = ConfigManager()
