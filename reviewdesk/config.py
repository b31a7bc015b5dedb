"""Runtime settings, loaded from ``REVIEWDESK_*`` environment variables or a ``.env`` file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the review/question service."""

    model_config = SettingsConfigDict(
        env_prefix="REVIEWDESK_",
        env_file=".env",
        extra="ignore",
    )

    # Banned-word source, one word per line
    banned_words_path: str = Field(default="banned_words.txt")

    # Raise NotFoundError instead of silently succeeding on unknown keys
    strict_not_found: bool = Field(default=False)

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
