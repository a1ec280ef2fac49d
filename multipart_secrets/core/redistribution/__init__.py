"""
Redistribution engine for multipart secrets.

Merges stored parts into one logical document, applies mutations under
add/update conflict rules, and re-partitions the result into size-bounded
parts with stable numbering.

Dependencies: pydantic, configs
System role: Multipart secret engine entrypoint
"""

from .entrypoint import MultipartSecretEngine
from .models import (
    FindResult,
    MutationRequest,
    MutationResult,
    PartSummary,
    SecretDescription,
)
from .naming import PartNamer, validate_base_name
from .store import PartStore

__all__ = [
    "MultipartSecretEngine",
    "MutationRequest",
    "MutationResult",
    "FindResult",
    "PartSummary",
    "SecretDescription",
    "PartNamer",
    "PartStore",
    "validate_base_name",
]
