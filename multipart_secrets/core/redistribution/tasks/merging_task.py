"""
Part merging task.

Folds the JSON payloads of every stored part into one logical document,
refusing empty parts and keys that are stored in more than one part.

Dependencies: json
System role: First stage of the redistribution pipeline
"""

import json
import logging
from collections.abc import Mapping

from multipart_secrets.core.exceptions import (
    DuplicateKeyError,
    EmptyPartError,
    MalformedPartError,
)
from multipart_secrets.core.redistribution.naming import PartNamer
from multipart_secrets.core.redistribution.path_lookup import JsonObject

logger = logging.getLogger(__name__)


class MergingTask:
    """Merge fetched part payloads into a single key-sorted document."""

    def parse_part(self, part_name: str, payload: str | bytes) -> JsonObject:
        """
        Parse one part payload.

        Args:
            part_name: Physical record name (for error context)
            payload: Raw JSON text as stored

        Returns:
            JsonObject: Parsed top-level object

        Raises:
            MalformedPartError: Payload is not JSON or not an object
            EmptyPartError: Payload is null or an empty object
        """
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedPartError(part_name, str(e)) from e

        if data is None:
            raise EmptyPartError(part_name)
        if not isinstance(data, dict):
            raise MalformedPartError(part_name, f"top level is {type(data).__name__}, expected object")
        if not data:
            raise EmptyPartError(part_name)
        return data

    def merge(self, payloads: Mapping[int, str | bytes], namer: PartNamer) -> JsonObject:
        """
        Merge part payloads in ascending index order.

        Args:
            payloads: Raw payload per part index
            namer: Naming scheme of the logical secret

        Returns:
            JsonObject: Merged document with keys in sorted order

        Raises:
            MalformedPartError: A payload is not a JSON object
            EmptyPartError: A payload is empty
            DuplicateKeyError: A key appears in two parts
        """
        merged: JsonObject = {}
        owner: dict[str, str] = {}

        for index in sorted(payloads):
            part_name = namer.name(index)
            data = self.parse_part(part_name, payloads[index])
            for key, value in data.items():
                if key in owner:
                    raise DuplicateKeyError(key, part_name, owner[key])
                owner[key] = part_name
                merged[key] = value
            logger.debug(f"Merged {len(data)} keys from {part_name}")

        return {key: merged[key] for key in sorted(merged)}
