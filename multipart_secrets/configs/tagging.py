"""
Tagging configuration.

Values for the provenance tags attached to newly created parts.

Dependencies: pydantic_settings
System role: Tag defaults for created secrets
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaggingSettings(BaseSettings):
    """Provenance tag values."""

    model_config = SettingsConfigDict(
        env_prefix="SECRET_TAGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    prefix: str = Field(default="temp:", description="Prefix added to every tag key")
    data_classification: str = Field(default="undefined")
    compliance: str = Field(default="undefined")
    resource: str = Field(default="aws_secretsmanager_secret")
    feature: str = Field(default="multipart_secret_management_v2")
