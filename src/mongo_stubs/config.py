"""Configuration management for mongo_stubs.

This module provides typed configuration using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "StubSettings",
    "get_settings",
]


class StubSettings(BaseSettings):
    """Settings shared by every stub factory.

    Example usage:
        settings = StubSettings(auto_return=True)
        collection = mock_collection(settings=settings)
    """

    model_config = SettingsConfigDict(
        env_prefix="MONGO_STUBS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Unconfigured methods return None unless this is enabled, in which
    # case they return the usual unittest.mock auto-created child.
    auto_return: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    json_logs: bool = False


@lru_cache
def get_settings() -> StubSettings:
    """Get the process-wide settings loaded from the environment."""
    return StubSettings()
