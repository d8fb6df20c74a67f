"""Configuration service for the rrdescribe CLI.

This module provides the ConfigService class, the single source of truth
for persisted CLI defaults. It handles:

- Loading and saving config.json
- Reading and writing values by dotted key ("describe.limits")
- Resetting a key or the whole file to defaults
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from rrdescribe.models.config_models import AppConfig
from rrdescribe.utils.logger import get_logger


class ConfigService:
    """Service for loading and updating the application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("rrdescribe"))
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, falling back to defaults."""
        if not self.config_path.exists():
            return AppConfig()
        try:
            with open(self.config_path, encoding="utf-8") as f:
                return AppConfig.model_validate_json(f.read())
        except (ValidationError, OSError) as e:
            get_logger().warning("ignoring unreadable config %s: %s", self.config_path, e)
            return AppConfig()

    def save_config(self, config: AppConfig | None = None) -> None:
        """Write configuration to disk."""
        if config is not None:
            self._config = config
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(self.config.model_dump_json(indent=2))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, k)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and persist it.

        Raises:
            KeyError: Unknown key
            ValidationError: Value rejected by the config model
        """
        self.get(key)
        keys = key.split(".")
        data = self.config.model_dump()
        current = data
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value
        self.save_config(AppConfig.model_validate(data))

    def reset(self, key: str | None = None) -> None:
        """Reset a key, or the whole configuration, to defaults."""
        if key is None:
            self.save_config(AppConfig())
            return
        self.get(key)
        default_value = self._get_from(AppConfig(), key)
        self.set(key, default_value.model_dump() if isinstance(default_value, BaseModel) else default_value)

    @staticmethod
    def _get_from(config: AppConfig, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            value = getattr(value, k)
        return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide ConfigService."""
    return ConfigService()
