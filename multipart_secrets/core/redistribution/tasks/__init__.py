"""
Task modules for the redistribution pipeline.

Exports: MergingTask, MutationTask, PartitioningTask, SlotAllocationTask, PartAssignment
"""

from .allocation_task import DEFAULT_MAX_PART_INDEX, PartAssignment, SlotAllocationTask
from .merging_task import MergingTask
from .mutation_task import MutationTask
from .partitioning_task import (
    DEFAULT_MAX_PART_BYTES,
    PartitioningTask,
    encode_chunk,
    encoded_size,
)

__all__ = [
    "MergingTask",
    "MutationTask",
    "PartitioningTask",
    "SlotAllocationTask",
    "PartAssignment",
    "encode_chunk",
    "encoded_size",
    "DEFAULT_MAX_PART_BYTES",
    "DEFAULT_MAX_PART_INDEX",
]
