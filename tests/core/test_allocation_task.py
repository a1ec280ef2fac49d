"""Tests for SlotAllocationTask."""

import pytest

from multipart_secrets.core.exceptions import (
    AllocationError,
    InsufficientChunksError,
    PartLimitExceededError,
)
from multipart_secrets.core.redistribution.naming import PartNamer
from multipart_secrets.core.redistribution.tasks import PartAssignment, SlotAllocationTask


def _chunks(count: int) -> list[dict]:
    return [{f"k{i}": i} for i in range(count)]


@pytest.fixture
def namer() -> PartNamer:
    return PartNamer("app")


class TestSlotAllocationTask:
    """Positional reuse, sequential growth, no shrink."""

    def test_reuse_single_base_slot(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask().allocate([0], _chunks(1), namer)
        assert assignments == [PartAssignment(index=0, name="app", chunk={"k0": 0}, is_new=False)]

    def test_grow_past_highest_existing_index(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask().allocate([0, 1], _chunks(3), namer)
        assert [a.index for a in assignments] == [0, 1, 2]
        assert [a.name for a in assignments] == ["app", "app-1", "app-2"]
        assert [a.is_new for a in assignments] == [False, False, True]
        assert assignments[2].chunk == {"k2": 2}

    def test_gaps_reused_in_ascending_order(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask().allocate([3, 0], _chunks(4), namer)
        assert [a.index for a in assignments] == [0, 3, 4, 5]

    def test_same_count_reuses_every_slot(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask().allocate([0, 1, 2], _chunks(3), namer)
        assert not any(a.is_new for a in assignments)

    def test_shrink_refused(self, namer: PartNamer) -> None:
        with pytest.raises(InsufficientChunksError) as exc_info:
            SlotAllocationTask().allocate([0, 1, 2], _chunks(2), namer)
        assert exc_info.value.chunk_count == 2
        assert exc_info.value.part_count == 3
        assert isinstance(exc_info.value, AllocationError)

    def test_no_existing_parts_starts_at_base(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask().allocate([], _chunks(2), namer)
        assert [a.name for a in assignments] == ["app", "app-1"]
        assert all(a.is_new for a in assignments)

    def test_duplicate_indices_collapsed(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask().allocate([0, 0, 1], _chunks(2), namer)
        assert [a.index for a in assignments] == [0, 1]

    def test_part_limit_exceeded(self, namer: PartNamer) -> None:
        with pytest.raises(PartLimitExceededError) as exc_info:
            SlotAllocationTask(max_part_index=2).allocate([0, 1, 2], _chunks(4), namer)
        assert exc_info.value.index == 3
        assert exc_info.value.max_index == 2

    def test_part_limit_reached_exactly(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask(max_part_index=2).allocate([0], _chunks(3), namer)
        assert assignments[-1].index == 2

    def test_part_limit_disabled(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask(max_part_index=None).allocate([0], _chunks(10), namer)
        assert assignments[-1].name == "app-9"

    def test_existing_parts_above_limit_are_still_reused(self, namer: PartNamer) -> None:
        assignments = SlotAllocationTask(max_part_index=2).allocate([0, 7], _chunks(2), namer)
        assert [a.index for a in assignments] == [0, 7]

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            SlotAllocationTask(max_part_index=-1)
