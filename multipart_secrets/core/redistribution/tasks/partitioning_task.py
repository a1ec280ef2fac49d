"""
Partitioning task using greedy first-fit over sorted keys.

Splits the logical document into size-bounded chunks. Keys are visited in
lexicographic order so identical documents always yield identical chunk
boundaries, regardless of the order keys were inserted.

Dependencies: json
System role: Third stage of the redistribution pipeline
"""

import json
import logging

from multipart_secrets.core.exceptions import KeyTooLargeError
from multipart_secrets.core.redistribution.path_lookup import JsonObject

logger = logging.getLogger(__name__)

DEFAULT_MAX_PART_BYTES = 50 * 1024


def encode_chunk(chunk: JsonObject) -> str:
    """
    Canonical JSON encoding of a chunk, exactly as it is persisted.

    Args:
        chunk: Chunk mapping

    Returns:
        str: Compact, key-sorted JSON text
    """
    return json.dumps(chunk, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def encoded_size(chunk: JsonObject) -> int:
    """UTF-8 byte length of the canonical encoding."""
    return len(encode_chunk(chunk).encode("utf-8"))


class PartitioningTask:
    """Split a document into chunks whose encoded size stays under a limit."""

    def __init__(self, max_part_bytes: int = DEFAULT_MAX_PART_BYTES) -> None:
        """
        Initialize partitioning task with the size limit.

        Args:
            max_part_bytes: Maximum encoded size of one chunk in bytes

        Raises:
            ValueError: When max_part_bytes is not positive
        """
        if max_part_bytes <= 0:
            raise ValueError("max_part_bytes must be positive")
        self.max_part_bytes = max_part_bytes

    def partition(self, document: JsonObject) -> list[JsonObject]:
        """
        Split a document into chunks.

        Args:
            document: Logical document to split

        Returns:
            list[JsonObject]: Ordered chunks; empty for an empty document

        Raises:
            KeyTooLargeError: A single key-value pair exceeds the limit
        """
        chunks: list[JsonObject] = []
        current: JsonObject = {}

        for key in sorted(document):
            value = document[key]
            single_size = encoded_size({key: value})
            if single_size > self.max_part_bytes:
                raise KeyTooLargeError(key, single_size, self.max_part_bytes)

            candidate = {**current, key: value}
            if current and encoded_size(candidate) > self.max_part_bytes:
                logger.debug(f"Closing chunk {len(chunks)} with {len(current)} keys before '{key}'")
                chunks.append(current)
                current = {key: value}
            else:
                current = candidate

        if current:
            chunks.append(current)

        logger.info(f"Partitioned {len(document)} keys into {len(chunks)} chunks")
        return chunks
