"""
Read-only views over a multipart secret.

Dependencies: pydantic
System role: Return types for MultipartSecretEngine.run_find() and describe()
"""

from pydantic import BaseModel, Field


class FindResult(BaseModel):
    """Location of the first part holding a key path."""

    base_name: str
    key_path: str
    found: bool = False
    part_index: int | None = None
    part_name: str | None = None


class PartSummary(BaseModel):
    """Size and key statistics for one physical part."""

    index: int = Field(description="Part index (0 = base record)")
    name: str = Field(description="Physical record name")
    key_count: int = Field(description="Top-level keys stored in this part")
    size_bytes: int = Field(description="Canonical encoded size in bytes")


class SecretDescription(BaseModel):
    """All parts of a logical secret and the merged key count."""

    base_name: str
    parts: list[PartSummary] = Field(default_factory=list)
    key_count: int = 0
    max_part_bytes: int

    @property
    def part_count(self) -> int:
        return len(self.parts)
