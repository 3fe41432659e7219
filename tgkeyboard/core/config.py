"""
Library configuration using Pydantic Settings.

Values come from the environment or a ``.env`` file. Keyboard defaults are
applied by the markup adapters when a builder leaves an option unset.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings with environment variable support."""

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Reply keyboard defaults
    keyboard_resize_default: bool = True
    keyboard_one_time_default: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
