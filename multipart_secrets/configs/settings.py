"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from multipart_secrets.configs.base import BaseSettings
from multipart_secrets.configs.secrets_store import SecretsStoreSettings
from multipart_secrets.configs.tagging import TaggingSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    secrets_store: SecretsStoreSettings = Field(default_factory=SecretsStoreSettings)
    tagging: TaggingSettings = Field(default_factory=TaggingSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables loaded once per process.

    Returns:
        Settings: Application settings instance

    Usage:
        from multipart_secrets.configs import get_settings
        settings = get_settings()
    """
    return Settings()
