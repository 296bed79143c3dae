"""
Configuration and settings for the catalog.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings shared by the web server and the CLI."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Document store (MongoDB expected)
    mongo_url: Optional[str] = Field(default=None)
    mongo_db_name: str = Field(default="infs3201_fall2025")

    # Web server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    log_level: str = Field(default="INFO")

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, validation_alias="CATALOG_USE_IN_MEMORY_BACKENDS"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
