"""
Slot allocation task.

Maps the ordered chunk sequence onto physical part slots: existing indices
are reused in ascending order, extra chunks get fresh indices past the
highest existing one.

Dependencies: dataclasses
System role: Fourth stage of the redistribution pipeline
"""

import logging
from dataclasses import dataclass

from multipart_secrets.core.exceptions import (
    InsufficientChunksError,
    PartLimitExceededError,
)
from multipart_secrets.core.redistribution.naming import PartNamer
from multipart_secrets.core.redistribution.path_lookup import JsonObject

logger = logging.getLogger(__name__)

DEFAULT_MAX_PART_INDEX = 5


@dataclass(frozen=True)
class PartAssignment:
    """
    One chunk bound to its physical slot.

    Attributes:
        index: Part index (0 = base record)
        name: Physical record name
        chunk: Chunk contents to persist
        is_new: True when the slot did not exist before
    """
    index: int
    name: str
    chunk: JsonObject
    is_new: bool = False


class SlotAllocationTask:
    """Assign chunks to part indices without ever shrinking the part set."""

    def __init__(self, max_part_index: int | None = DEFAULT_MAX_PART_INDEX) -> None:
        """
        Initialize allocation task.

        Args:
            max_part_index: Highest overflow index that may be allocated
                (None disables the ceiling)
        """
        if max_part_index is not None and max_part_index < 0:
            raise ValueError("max_part_index must be non-negative")
        self.max_part_index = max_part_index

    def allocate(
        self,
        existing: list[int],
        chunks: list[JsonObject],
        namer: PartNamer,
    ) -> list[PartAssignment]:
        """
        Map chunks to part slots.

        Args:
            existing: Part indices currently in the store (any order)
            chunks: Ordered chunks from the partitioner
            namer: Naming scheme of the logical secret

        Returns:
            list[PartAssignment]: One assignment per chunk, in chunk order

        Raises:
            InsufficientChunksError: Fewer chunks than existing parts
            PartLimitExceededError: A new index would exceed max_part_index
        """
        indices = sorted(set(existing))
        if len(chunks) < len(indices):
            raise InsufficientChunksError(len(chunks), len(indices))

        next_index = indices[-1] + 1 if indices else 0
        assignments: list[PartAssignment] = []

        for position, chunk in enumerate(chunks):
            if position < len(indices):
                index = indices[position]
                is_new = False
            else:
                index = next_index
                next_index += 1
                is_new = True
                if self.max_part_index is not None and index > self.max_part_index:
                    raise PartLimitExceededError(index, self.max_part_index)
            assignments.append(
                PartAssignment(index=index, name=namer.name(index), chunk=chunk, is_new=is_new)
            )

        new_count = sum(1 for a in assignments if a.is_new)
        logger.info(f"Allocated {len(assignments)} slots ({new_count} new) for {namer.base_name}")
        return assignments
