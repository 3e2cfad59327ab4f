"""Tests for message id allocation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from msg_catalog.core.ids import IdAllocator, shared_allocator


def test_allocator_starts_at_one_and_increments() -> None:
    allocator = IdAllocator()

    assert allocator.peek() == 1
    assert [allocator.next_id() for _ in range(3)] == [1, 2, 3]
    assert allocator.peek() == 4


def test_allocator_rejects_non_positive_start() -> None:
    with pytest.raises(ValueError):
        IdAllocator(start=0)


def test_shared_allocator_is_a_single_instance() -> None:
    assert shared_allocator() is shared_allocator()


def test_concurrent_allocation_hands_out_unique_ids() -> None:
    allocator = IdAllocator()

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: allocator.next_id(), range(400)))

    assert sorted(ids) == list(range(1, 401))
