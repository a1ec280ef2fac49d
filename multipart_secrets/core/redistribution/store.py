"""Protocol for the secret store that holds the physical parts."""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class PartStore(Protocol):
    """Protocol for secret store backends.

    The engine only ever talks to the store through these three calls,
    so any backend (AWS Secrets Manager, an in-memory fake) can be used.
    """

    def list_part_indices(self, base_name: str) -> list[int]:
        """Return the sorted part indices that exist for base_name."""
        ...

    def fetch_parts(self, base_name: str, indices: list[int]) -> dict[int, str]:
        """Return the raw payload of every requested part.

        Raises PartNotFoundError if any requested index is missing.
        """
        ...

    def upsert_part(self, name: str, payload: str, tags: Mapping[str, str]) -> bool:
        """Overwrite the named record, or create it with tags.

        Returns True when the record was created.
        """
        ...
