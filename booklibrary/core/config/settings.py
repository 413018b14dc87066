"""
Application settings module.

This module provides configuration settings for the library, loaded from
environment variables and an optional ``.env`` file.
"""

# Standard Library Imports
import logging
from functools import lru_cache

# Third-Party Imports
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Library settings using Pydantic for validation and environment variable loading."""

    # Environment
    ENVIRONMENT: str = "development"  # development, test, production

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None  # Adds a rotating file handler when set

    # Repository Settings
    SEED_SAMPLE_DATA: bool = True  # Seed the shared repository with the sample catalog
    SEARCH_MAX_WORKERS: int = Field(default=1, ge=1)  # >1 scans entities in parallel

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the library settings.

    The result is cached; call ``get_settings.cache_clear()`` to reload
    after changing the environment.

    Returns:
        The settings instance
    """
    current_settings = Settings()
    logger.debug("Loaded settings for environment %s", current_settings.ENVIRONMENT)
    return current_settings
