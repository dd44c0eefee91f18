"""Configuration model for tasklist."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError

# Default config location
TASKLIST_DIR = Path(".tasklist")
CONFIG_FILE = TASKLIST_DIR / "config.json"


class ConfigError(Exception):
    """Raised when a config file can't be read or fails validation."""


class TasklistConfig(BaseModel):
    """Main configuration for tasklist."""

    strict_indices: bool = False
    """Report out-of-range completion indices instead of ignoring them."""

    color: Literal["auto", "always", "never"] = "auto"
    """When to emit terminal colors."""

    @classmethod
    def load(cls, path: Path | None = None) -> TasklistConfig:
        """Load configuration from file or return defaults.

        Raises:
            ConfigError: If the file can't be read, isn't valid UTF-8 JSON, or has
                invalid values.
        """
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)
