"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from yaml_datastore.errors import ConfigError, ConfigNotFoundError
from yaml_datastore.keypath import DEFAULT_EXTENSIONS

__all__ = ["Config", "DatastoreSettings"]


class DatastoreSettings(BaseModel):
    """Validated ``datastore`` section of a configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    extensions: tuple[str, ...] = Field(default=DEFAULT_EXTENSIONS)
    precedence: Literal["path", "key"] = "path"
    reject_duplicate_keys: bool = True

    @field_validator("extensions")
    @classmethod
    def _strip_leading_dots(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(ext.lstrip(".") for ext in v)

    @property
    def reverse(self) -> bool:
        """True when in-file keys take precedence over nested file paths."""
        return self.precedence == "key"


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file {file_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config file {file_path} must be a YAML mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def datastore_settings(self) -> DatastoreSettings:
        """Validate the ``datastore`` section into :class:`DatastoreSettings`."""
        section = self.get("datastore", {})
        if section is None:
            section = {}
        try:
            return DatastoreSettings.model_validate(section)
        except ValidationError as e:
            raise ConfigError(
                message=f"Invalid datastore configuration: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
                cause=e,
            ) from e
