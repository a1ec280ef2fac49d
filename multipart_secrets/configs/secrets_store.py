"""
Secrets store configuration.

Settings for the AWS Secrets Manager boundary and the part layout limits.

Dependencies: pydantic_settings
System role: Secrets Manager and partitioning configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SecretsStoreSettings(BaseSettings):
    """Settings for Secrets Manager access and part sizing."""

    model_config = SettingsConfigDict(
        env_prefix="SECRETS_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    region: str | None = Field(
        default=None,
        description="AWS region (None uses the boto3 default chain)",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Override endpoint, e.g. for a local emulator",
    )
    max_part_bytes: int = Field(
        default=50 * 1024,
        gt=0,
        description="Maximum encoded size of one part in bytes",
    )
    max_part_index: int = Field(
        default=5,
        ge=0,
        description="Highest overflow part index that may be created",
    )
    batch_size: int = Field(
        default=20,
        ge=1,
        le=20,
        description="Secret ids per BatchGetSecretValue call (AWS limit 20)",
    )
