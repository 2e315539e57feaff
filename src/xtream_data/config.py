"""
Configuration management for the Xtream-Codes client.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via ``XTREAM_``-prefixed environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings, e.g. ``XTREAM_BASE_URL=http://panel.example:8080``."""

    model_config = SettingsConfigDict(
        env_prefix="XTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Panel credentials
    # ==========================================================================
    base_url: str = Field(default="", description="Panel root, e.g. http://host:port")
    username: Optional[str] = None
    password: Optional[str] = None

    # ==========================================================================
    # HTTP behaviour
    # ==========================================================================
    user_agent: str = "xtream-data/0.1.0"
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=1, le=10)
    requests_per_minute: int = Field(default=600, ge=1)

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
