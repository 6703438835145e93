"""Application settings loaded from environment variables and .env files."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pedal_inventory.constants import APP_NAME, INVENTORY_KEY, TEMPLATES_KEY


def _default_data_dir() -> Path:
    return Path(user_data_dir(APP_NAME))


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden with a ``PEDAL_INVENTORY_`` prefixed
    environment variable, e.g. ``PEDAL_INVENTORY_DATA_DIR=/tmp/pedals``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PEDAL_INVENTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(
        default_factory=_default_data_dir,
        description="Directory holding the persisted inventory and templates",
    )
    catalog_path: Path | None = Field(
        default=None, description="Optional YAML file overriding the bundled catalog"
    )
    log_level: str = Field(default="WARNING", description="Logging level")
    async_persistence: bool = Field(
        default=True, description="Write snapshots on a background worker"
    )
    inventory_key: str = Field(default=INVENTORY_KEY, min_length=1)
    templates_key: str = Field(default=TEMPLATES_KEY, min_length=1)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("catalog_path")
    @classmethod
    def _validate_catalog_path(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_file():
            raise ValueError(f"Catalog file not found: {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next call re-reads the environment."""
    get_settings.cache_clear()
