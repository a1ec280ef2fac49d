"""
AWS boundary modules.

Exports: SecretsManagerPartStore
"""

from .secrets_manager_client import SecretsManagerPartStore

__all__ = ["SecretsManagerPartStore"]
