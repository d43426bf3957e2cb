"""
Settings loaded from environment variables.

Uses pydantic-settings for automatic loading from .env file.
All settings have sensible defaults, nothing is required.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    addrcodec configuration.

    All values are loaded from ADDRCODEC_* environment variables.

    Attributes:
        log_level: Logging verbosity for the CLI
        display_chars: Characters kept on each side when shortening
            an address for display
    """

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Display
    display_chars: int = Field(default=6, ge=4, le=29)

    # Pydantic settings config
    model_config = SettingsConfigDict(
        env_prefix="ADDRCODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        # Case-insensitive env var names
        case_sensitive=False,
        # Don't fail if .env doesn't exist
        env_ignore_empty=True,
        # .env may hold settings of other tools
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Uses lru_cache to avoid re-reading .env file on every call.

    Returns:
        Settings instance with all configuration values.
    """
    return Settings()
