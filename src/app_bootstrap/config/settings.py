"""Typed configuration models: runtime knobs via pydantic-settings, app settings via pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BootSettings(BaseSettings):
    """Knobs for the bootstrap itself, resolved from env > .env > defaults."""

    model_config = SettingsConfigDict(
        env_prefix="APP_BOOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    assets_dir: Path = Field(default=Path("assets"), description="Directory holding bundled assets")
    settings_file: str = Field(default="appsettings.json", description="Asset name of the settings file")
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")


class AppSettings(BaseModel):
    """The deserialized ``appsettings.json``.

    ``ApiUrl`` and ``Timeout`` are required and strictly typed; any other key
    the file declares is kept as-is and is readable as an attribute or via
    ``get``. Instances are frozen once validated.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        strict=True,
    )

    api_url: str = Field(alias="ApiUrl")
    timeout: int = Field(alias="Timeout")

    @model_validator(mode="after")
    def reject_field_names_as_keys(self) -> AppSettings:
        # An extra key named like a field is hidden behind the field attribute
        clashes = sorted(set(self.model_extra or {}) & set(type(self).model_fields))
        if clashes:
            raise ValueError(f"use the JSON key names, not {', '.join(clashes)}")
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a value by its JSON key name."""
        for name, field in type(self).model_fields.items():
            if key in (field.alias, name):
                return getattr(self, name)
        return (self.model_extra or {}).get(key, default)

    def as_dict(self) -> dict[str, Any]:
        """All values keyed by their JSON key names."""
        return self.model_dump(by_alias=True)
