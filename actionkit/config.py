"""Settings and configuration management."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATE_FILE = Path.home() / ".config" / "actionkit" / "state.json"


class Settings(BaseSettings):
    """Runtime settings.

    Priority chain: init kwargs > env vars (ACTIONKIT_*) > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="ACTIONKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    state_file: Path = Field(
        default=DEFAULT_STATE_FILE,
        description="JSON file backing durable UI preferences",
    )
    integration_store_url: str = "http://localhost:3000"
    directory_api_url: str = "https://api.vercel.com"
    ai_gateway_managed_keys_enabled: bool = False
    linked_provider: str = "vercel"
    http_timeout: float = Field(default=30.0, gt=0)
    host: str = "127.0.0.1"
    port: int = 8005


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance"""
    return Settings()
