"""
Domain models for multipart secrets.

Exports: MutationRequest, MutationResult, FindResult, PartSummary, SecretDescription
"""

from .mutation import MutationRequest, MutationResult
from .secret import FindResult, PartSummary, SecretDescription

__all__ = [
    "MutationRequest",
    "MutationResult",
    "FindResult",
    "PartSummary",
    "SecretDescription",
]
