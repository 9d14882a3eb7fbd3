"""Configuration handling for the Untappd client."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    base_url: str = "https://api.untappd.com"
    http_timeout_seconds: int = 30
    access_token: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="UNTAPPD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
