"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from multipart_secrets.configs.secrets_store import SecretsStoreSettings
from multipart_secrets.configs.settings import Settings, get_settings
from multipart_secrets.configs.tagging import TaggingSettings

__all__ = ["Settings", "get_settings", "SecretsStoreSettings", "TaggingSettings"]
