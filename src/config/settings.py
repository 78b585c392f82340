"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Listener configuration
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Echo service configuration
    echo_url: str = "https://httpbin.org/post"
    echo_timeout_seconds: float = Field(default=10.0, gt=0)  # Per outbound call
    retry_malformed_echo: bool = False  # Re-request once on unparsable body

    # Chain settings
    chain_steps: int = Field(default=3, ge=1, le=10)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
