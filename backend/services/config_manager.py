"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from services.diff_generator import DEFAULT_MAX_CELLS, DEFAULT_MAX_LINES

CONFIG_DIR_ENV = "TEXT_DIFF_CONFIG_DIR"


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1. environment variable
            config_dir = os.environ.get(CONFIG_DIR_ENV)

            # 2. home directory ~/.text_diff
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.text_diff")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"[Config] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # 3. fall back to the system temp directory
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "text_diff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[Config] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[Config] Critical Error in ConfigManager init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "text_diff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling gaps from the defaults"""
        defaults = self._default_config()
        if not self._config_file.exists():
            return defaults

        try:
            with open(self._config_file) as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[Config] Error loading config: {e}")
            return defaults

        if not isinstance(loaded, dict):
            print(f"[Config] Ignoring config file with unexpected format: {self._config_file}")
            return defaults

        return _merge(defaults, loaded)

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {
                # Ceilings for the O(m*n) table; 0 disables a check
                "maxLines": DEFAULT_MAX_LINES,
                "maxCells": DEFAULT_MAX_CELLS,
            },
            "server": {"host": "0.0.0.0", "port": 8080},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base"""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
