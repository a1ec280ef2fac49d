"""
Dot-path helpers over parsed JSON documents.

Dependencies: None
System role: Path parsing for nested mutations and the read-only find query
"""

from typing import Any

# Parsed JSON: dict | list | str | int | float | bool | None
JsonValue = Any
JsonObject = dict[str, Any]

_MISSING = object()


def split_path(path: str) -> list[str]:
    """
    Split a dot-separated path into key segments.

    Args:
        path: Path such as "Database.Credentials"

    Returns:
        list[str]: Ordered segments

    Raises:
        ValueError: Path is empty or contains an empty segment
    """
    segments = path.split(".")
    if not path or any(segment == "" for segment in segments):
        raise ValueError(f"Invalid key path '{path}': segments must be non-empty")
    return segments


def json_type_name(value: JsonValue) -> str:
    """Return the JSON type name of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def lookup(document: JsonObject, segments: list[str]) -> tuple[bool, JsonValue]:
    """
    Descend through nested objects following the given segments.

    Only objects are descended into; arrays and scalars end the walk.

    Returns:
        tuple[bool, JsonValue]: (found, value at path)
    """
    current: JsonValue = document
    for segment in segments:
        if not isinstance(current, dict):
            return False, None
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return False, None
    return True, current
