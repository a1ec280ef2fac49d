"""
Core business logic module.

Contains the exception hierarchy and the multipart redistribution engine.
All partitioning rules and conflict policies reside here.
"""

from multipart_secrets.core.exceptions import (
    MultipartSecretError,
    MergeError,
    MutationError,
    PartitionError,
    AllocationError,
    StoreError,
)

from multipart_secrets.core.redistribution import MultipartSecretEngine

__all__ = [
    # Exceptions
    "MultipartSecretError",
    "MergeError",
    "MutationError",
    "PartitionError",
    "AllocationError",
    "StoreError",
    # Business logic
    "MultipartSecretEngine",
]
