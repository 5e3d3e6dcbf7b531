"""
Configuration settings for the Brickset catalog queries.

Uses Pydantic Settings to load environment variables for the data source
location and logging. The catalog is read from a single JSON file; when no
file is configured, the sample export bundled with the package is used.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path(__file__).parent / "data" / "brickset.json"


class Settings(BaseSettings):
    # Data source
    data_file: Optional[Path] = Field(None, alias="BRICKSET_DATA_FILE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


def resolve_data_file(settings: Optional[Settings] = None) -> Path:
    """Return the configured catalog file, falling back to the bundled sample."""
    settings = settings or get_settings()
    return settings.data_file or DEFAULT_DATA_FILE


__all__ = ["DEFAULT_DATA_FILE", "Settings", "get_settings", "resolve_data_file"]
