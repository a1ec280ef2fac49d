"""
Part naming conventions for multipart secrets.

Follows pattern: {base} for part 0, {base}-{index} for overflow parts.
"""

from dataclasses import dataclass

from multipart_secrets.core.exceptions import InvalidBaseNameError

BASE_PART_INDEX = 0


def _is_canonical_index(suffix: str) -> bool:
    # "1", "12" but never "0", "01" or "" (those would alias another name)
    return suffix.isascii() and suffix.isdigit() and not suffix.startswith("0")


def validate_base_name(name: str) -> str:
    """
    Clean a user-supplied secret name and ensure it names a base record.

    Args:
        name: Raw secret name from the caller

    Returns:
        str: Name with surrounding whitespace removed

    Raises:
        InvalidBaseNameError: Name is empty or ends in a numeric part suffix
    """
    clean = name.strip()
    if not clean:
        raise InvalidBaseNameError(name, "Secret name must not be empty")

    _, sep, tail = clean.rpartition("-")
    if sep and tail.isascii() and tail.isdigit():
        raise InvalidBaseNameError(
            clean,
            f"Multipart secret name provided: {clean}. "
            "Please provide the base secret name instead",
        )
    return clean


@dataclass(frozen=True)
class PartNamer:
    """
    Maps part indices of one logical secret to physical record names.

    Attributes:
        base_name: User-facing logical secret name
    """
    base_name: str

    def name(self, index: int) -> str:
        """
        Generate the physical record name for a part index.

        Args:
            index: 0 for the base record, 1..K for overflow parts

        Returns:
            Physical record name
        """
        if index < 0:
            raise ValueError(f"Part index must be non-negative, got {index}")
        if index == BASE_PART_INDEX:
            return self.base_name
        return f"{self.base_name}-{index}"

    def parse_index(self, name: str) -> int | None:
        """
        Recognise a physical record name as a part of this secret.

        Args:
            name: Physical record name as listed by the store

        Returns:
            The part index, or None if the name belongs to another secret
        """
        if name == self.base_name:
            return BASE_PART_INDEX
        prefix = f"{self.base_name}-"
        if not name.startswith(prefix):
            return None
        suffix = name[len(prefix):]
        if not _is_canonical_index(suffix):
            return None
        return int(suffix)

    def names(self, indices: list[int]) -> list[str]:
        """Names for several indices, in the given order."""
        return [self.name(index) for index in indices]
