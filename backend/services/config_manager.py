"""
Configuration Manager - Handle toolkit settings persistence
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "MOGOST_CONFIG_DIR"


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _valid_value(value: Any, default: Any) -> bool:
    if isinstance(default, int):
        # bool is an int subclass
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    return isinstance(value, type(default))


def _sanitize(config: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    """Replace sections and values whose type differs from the defaults"""
    for section, section_defaults in defaults.items():
        values = config.get(section)
        if not isinstance(values, dict):
            print(f"[ConfigManager] Invalid '{section}' section, using defaults")
            config[section] = copy.deepcopy(section_defaults)
            continue

        for key, default in section_defaults.items():
            if not _valid_value(values.get(key), default):
                print(f"[ConfigManager] Invalid value for {section}.{key}: {values.get(key)!r}, using {default!r}")
                values[key] = default
    return config


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1st choice: environment variable, 2nd: ~/.mogost_toolkit
        config_dir = os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.mogost_toolkit")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
            self._config_file = None

        # Last resort: system temp dir
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "mogost_toolkit"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access rereads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, layered over the defaults"""
        defaults = self._default_config()
        if not self._config_file.exists():
            return defaults

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return defaults

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return defaults

        return _sanitize(_merge(defaults, stored), defaults)

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "server": {"host": "0.0.0.0", "port": 8080},
            "storage": {"upload_dir": "uploads", "temp_dir": "temp"},
            "csv": {"preview_rows": 10},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Merge config into the current settings and write them to file"""
        self._config = _merge(self._config, config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self.get_config().get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self.save_config({key: value})
