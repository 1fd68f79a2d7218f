"""Configuration service for managing RepeatRule CLI configuration.

This module provides the ConfigService class, the single source of truth
for configuration. It handles:

- Loading and saving config.json
- Reading and updating values by dot-separated key
- Resetting to defaults
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from repeatrule_cli.models.config_models import AppConfig


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("repeatrule_cli"))
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
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self):
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key (e.g. "preview.limit")."""
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                return None
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and persist it.

        Raises:
            KeyError: If the key does not name a configuration value
            ValueError: If the value fails validation
        """
        parts = key.split(".")
        data = self.config.model_dump()

        target = data
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                raise KeyError(key)
            target = target[part]
        if parts[-1] not in target or isinstance(target[parts[-1]], dict):
            raise KeyError(key)
        target[parts[-1]] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value!r}") from e
        self.save_config()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide ConfigService."""
    return ConfigService()
