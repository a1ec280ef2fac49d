"""
Mutation request and result models.

Represents a user change set (flat or at a nested path) and the outcome of
applying it to a multipart secret.

Dependencies: pydantic
System role: Input/output contract for MultipartSecretEngine.run_mutation()
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from multipart_secrets.core.exceptions import InvalidMutationInputError
from ..path_lookup import split_path


class MutationRequest(BaseModel):
    """Change set to merge into the logical secret document."""

    values: dict[str, Any] = Field(
        description="Key-value pairs to add or update",
    )
    path: str | None = Field(
        default=None,
        description="Dot-separated path of the nested object to mutate (None = root)",
    )
    force_update: bool = Field(
        default=False,
        description="Require keys to exist (update) instead of requiring absence (add)",
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "values": {"Pass": "s3cr3t"},
                "path": "Database",
                "force_update": False,
            }
        },
    )

    @field_validator("values")
    @classmethod
    def _values_not_empty(cls, values: dict[str, Any]) -> dict[str, Any]:
        if not values:
            raise ValueError("JSON data is empty")
        return values

    @field_validator("path")
    @classmethod
    def _path_well_formed(cls, path: str | None) -> str | None:
        if path is not None:
            split_path(path)
        return path

    @property
    def path_segments(self) -> list[str]:
        """Segments of the target path, empty for root mutations."""
        if self.path is None:
            return []
        return split_path(self.path)

    @classmethod
    def from_json(
        cls,
        json_data: str,
        path: str | None = None,
        force_update: bool = False,
    ) -> "MutationRequest":
        """
        Build a request from the raw JSON text supplied by the user.

        Args:
            json_data: JSON object text with the key-value pairs to apply
            path: Optional dot-separated target path
            force_update: Selects update semantics instead of add

        Returns:
            MutationRequest: Validated request

        Raises:
            InvalidMutationInputError: Invalid JSON, non-object or empty input
        """
        try:
            values = json.loads(json_data)
        except json.JSONDecodeError as e:
            raise InvalidMutationInputError(f"Invalid JSON data: {e}", field="json_data") from e

        if not isinstance(values, dict):
            raise InvalidMutationInputError(
                "JSON data must be an object of key-value pairs",
                field="json_data",
            )

        try:
            return cls(values=values, path=path, force_update=force_update)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first.get("loc", ())) or None
            raise InvalidMutationInputError(first.get("msg", str(e)), field=field) from e


class MutationResult(BaseModel):
    """Outcome of a successful mutation and redistribution."""

    base_name: str = Field(description="Logical secret name")
    key_count: int = Field(description="Total top-level keys after the mutation")
    part_count: int = Field(description="Number of parts written")
    part_names: list[str] = Field(default_factory=list, description="Physical names written, in chunk order")
    created_parts: list[str] = Field(default_factory=list, description="Parts that did not exist before")
