"""
Mutation task.

Applies an add or force-update change set to the merged document, either at
the root or at a nested object addressed by a key path.

Dependencies: copy
System role: Second stage of the redistribution pipeline
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from multipart_secrets.core.exceptions import (
    KeyExistsError,
    KeyMissingError,
    PathSegmentMissingError,
    PathSegmentNotObjectError,
)
from multipart_secrets.core.redistribution.path_lookup import JsonObject, json_type_name

logger = logging.getLogger(__name__)


class MutationTask:
    """Validate-then-write mutation of a logical document."""

    def apply(
        self,
        document: JsonObject,
        values: Mapping[str, Any],
        path: list[str] | None = None,
        force_update: bool = False,
    ) -> JsonObject:
        """
        Apply a change set and return the mutated copy of the document.

        Every key is checked before anything is written, so the input
        document is never partially modified.

        Args:
            document: Merged document (left untouched)
            values: Key-value pairs to add or update
            path: Segments of the nested object to mutate (None/[] = root)
            force_update: True requires keys to exist, False requires absence

        Returns:
            JsonObject: New document with the change applied

        Raises:
            KeyExistsError: Adding a key that is already present
            KeyMissingError: Updating a key that is absent
            PathSegmentMissingError: A path segment does not exist
            PathSegmentNotObjectError: A path segment is not an object
        """
        result = copy.deepcopy(document)
        segments = list(path or [])
        target = self._resolve(result, segments)
        dotted = ".".join(segments) or None

        for key in values:
            exists = key in target
            if force_update and not exists:
                raise KeyMissingError(key, dotted)
            if not force_update and exists:
                raise KeyExistsError(key, dotted)

        for key, value in values.items():
            target[key] = copy.deepcopy(value)

        logger.info(
            f"{'Updated' if force_update else 'Added'} {len(values)} keys"
            + (f" at path '{dotted}'" if dotted else "")
        )
        return {key: result[key] for key in sorted(result)}

    def _resolve(self, document: JsonObject, segments: list[str]) -> JsonObject:
        """Descend to the object addressed by the path segments."""
        current = document
        full_path = ".".join(segments)
        for segment in segments:
            if segment not in current:
                raise PathSegmentMissingError(segment, full_path)
            child = current[segment]
            if not isinstance(child, dict):
                raise PathSegmentNotObjectError(segment, full_path, json_type_name(child))
            current = child
        return current
