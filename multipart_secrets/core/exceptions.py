"""
Exception hierarchy for multipart secret management.

Provides layered exception structure for every phase of a read-modify-write
cycle: merge, mutation, partitioning, slot allocation and store I/O.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MultipartSecretError(Exception):
    """Base exception for all multipart secret errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidBaseNameError(MultipartSecretError):
    """Raised when a secret name is empty or names an overflow part."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(reason, {"secret_name": name})


class InvalidMutationInputError(MultipartSecretError):
    """Raised when the user-supplied change set cannot be used."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize input validation error.

        Args:
            message: Error message
            field: Input field that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


# ---------------------------------------------------------------------------
# Merge-time
# ---------------------------------------------------------------------------


class MergeError(MultipartSecretError):
    """Base exception for failures while folding parts into one document."""

    def __init__(
        self,
        message: str,
        part_name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["part"] = part_name
        self.part_name = part_name
        super().__init__(message, details)


class MalformedPartError(MergeError):
    """Raised when a part payload is not a JSON object."""

    def __init__(self, part_name: str, reason: str) -> None:
        super().__init__(
            f"Part '{part_name}' is not a valid JSON object: {reason}",
            part_name,
        )


class EmptyPartError(MergeError):
    """Raised when a part payload parses to an empty object."""

    def __init__(self, part_name: str) -> None:
        super().__init__(f"Part '{part_name}' contains empty/null JSON data", part_name)


class DuplicateKeyError(MergeError):
    """Raised when the same key is stored in two different parts."""

    def __init__(self, key: str, part_name: str, first_part_name: str) -> None:
        self.key = key
        self.first_part_name = first_part_name
        super().__init__(
            f"Duplicate key '{key}' found in part '{part_name}' "
            f"(already present in '{first_part_name}')",
            part_name,
            {"key": key, "first_part": first_part_name},
        )


# ---------------------------------------------------------------------------
# Mutation-time
# ---------------------------------------------------------------------------


class MutationError(MultipartSecretError):
    """Base exception for rejected mutations."""


class KeyExistsError(MutationError):
    """Raised when adding a key that is already present."""

    def __init__(self, key: str, path: str | None = None) -> None:
        self.key = key
        self.path = path
        location = f" at path '{path}'" if path else ""
        details: dict[str, Any] = {"key": key}
        if path:
            details["path"] = path
        super().__init__(f"Key already exists{location}: {key}", details)


class KeyMissingError(MutationError):
    """Raised when force-updating a key that does not exist."""

    def __init__(self, key: str, path: str | None = None) -> None:
        self.key = key
        self.path = path
        location = f" at path '{path}'" if path else ""
        details: dict[str, Any] = {"key": key}
        if path:
            details["path"] = path
        super().__init__(f"Key does not exist{location}: {key}", details)


class PathSegmentMissingError(MutationError):
    """Raised when an intermediate path segment is absent."""

    def __init__(self, segment: str, path: str) -> None:
        self.segment = segment
        self.path = path
        super().__init__(
            f"Path segment '{segment}' not found while resolving '{path}'",
            {"segment": segment, "path": path},
        )


class PathSegmentNotObjectError(MutationError):
    """Raised when an intermediate path segment is not a JSON object."""

    def __init__(self, segment: str, path: str, found_type: str) -> None:
        self.segment = segment
        self.path = path
        self.found_type = found_type
        super().__init__(
            f"Path segment '{segment}' in '{path}' is a {found_type}, not an object",
            {"segment": segment, "path": path, "found_type": found_type},
        )


# ---------------------------------------------------------------------------
# Partition-time
# ---------------------------------------------------------------------------


class PartitionError(MultipartSecretError):
    """Base exception for partitioning failures."""


class KeyTooLargeError(PartitionError):
    """Raised when a single key-value pair exceeds the part size limit."""

    def __init__(self, key: str, size: int, limit: int) -> None:
        self.key = key
        self.size = size
        self.limit = limit
        super().__init__(
            f"Key '{key}' exceeds max chunk size ({limit} bytes): got {size}",
            {"key": key, "size": size, "limit": limit},
        )


# ---------------------------------------------------------------------------
# Allocation-time
# ---------------------------------------------------------------------------


class AllocationError(MultipartSecretError):
    """Base exception for slot allocation failures."""


class InsufficientChunksError(AllocationError):
    """Raised when fewer chunks than existing parts were produced."""

    def __init__(self, chunk_count: int, part_count: int) -> None:
        self.chunk_count = chunk_count
        self.part_count = part_count
        super().__init__(
            f"Number of new chunks ({chunk_count}) is less than existing multipart "
            f"secrets ({part_count}). This would leave duplicated keys in extra "
            "secrets. Please manually delete extra secrets or check your input",
            {"chunks": chunk_count, "parts": part_count},
        )


class PartLimitExceededError(AllocationError):
    """Raised when redistribution would need a part index above the ceiling."""

    def __init__(self, index: int, max_index: int) -> None:
        self.index = index
        self.max_index = max_index
        super().__init__(
            f"Part index {index} exceeds the configured maximum of {max_index}",
            {"index": index, "max_index": max_index},
        )


# ---------------------------------------------------------------------------
# Store I/O
# ---------------------------------------------------------------------------


class StoreError(MultipartSecretError):
    """Base exception for secret store collaborator failures."""


class PartNotFoundError(StoreError):
    """Raised when a requested part is missing from the store response."""

    def __init__(self, part_name: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["part"] = part_name
        self.part_name = part_name
        super().__init__(f"Secret '{part_name}' not found in store response", details)


class BaseSecretNotFoundError(StoreError):
    """Raised when the base record of a logical secret does not exist."""

    def __init__(self, base_name: str) -> None:
        self.base_name = base_name
        super().__init__(
            f"Base secret '{base_name}' does not exist or cannot be accessed",
            {"secret_name": base_name},
        )


class StoreUnavailableError(StoreError):
    """Raised when the secret store rejects or cannot serve a request."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Operation that failed (connect, list, fetch, describe, update, create)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
