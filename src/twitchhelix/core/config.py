"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.twitch.tv/helix/"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Twitch credentials
    twitch_client_id: str = ""
    twitch_auth_token: str = ""

    # Helix API
    helix_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = Field(default=30.0, gt=0)

    # Rate limiting
    ratelimit_points_max: int = Field(default=800, gt=1)
    ratelimit_window_seconds: float = Field(default=60.0, gt=0)
    ratelimit_poll_interval: float = Field(default=0.01, gt=0)

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"

    @field_validator("helix_base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended directly to the base URL."""
        return v if v.endswith("/") else f"{v}/"

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
