"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the user management service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_title: str = "User Management API"
    api_version: str = "v1"
    docs_enabled: bool = True
    diagnostics_enabled: bool = True
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


__all__ = ["BackendSettings", "get_settings"]
