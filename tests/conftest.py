"""
Shared test fixtures.

- min_heap / max_heap: fresh empty heaps for each ordering
- assert_heap_invariant: checks every parent against its children
  using the heap's own ordering, straight off the backing list
"""

import pytest

from heap.priority_heap import PriorityHeap
from models.enums import HeapOrdering


@pytest.fixture
def min_heap():
    return PriorityHeap(HeapOrdering.REGULAR)


@pytest.fixture
def max_heap():
    return PriorityHeap(HeapOrdering.REVERSE)


@pytest.fixture
def assert_heap_invariant():
    """
    Returns a checker: no child may be preferred over its parent.

    Reads heap._data directly — the invariant is about the array
    layout, which the public API deliberately hides.
    """
    def check(heap: PriorityHeap) -> None:
        data = heap._data
        prefers = heap.ordering.prefers
        for i in range(1, len(data)):
            parent = (i - 1) // 2
            assert not prefers(data[i], data[parent]), (
                f"index {i} ({data[i]!r}) beats parent {parent} ({data[parent]!r})"
            )
    return check
