"""
Array-backed binary heap with a pluggable ordering.

The tree lives in a plain list:
- index 0 is the root
- children of i are at 2i+1 and 2i+2
- the parent of i is at (i-1)//2

Heap invariant: no element is preferred (by the active ordering) over
its parent, so the root is always the "best" element.

Operations:
- push: append, then sift up   → O(log n)
- pop:  take root, move last element to the root, sift down → O(log n)
- peek: read the root          → O(1)

One class serves as both min-heap and max-heap — the ordering object
decides which element wins every comparison:

    PriorityHeap(HeapOrdering.REGULAR)   # min-heap
    PriorityHeap(HeapOrdering.REVERSE)   # max-heap

Empty pop/peek return None. That's a normal outcome, not an error.

Sifting only moves an element when it is strictly preferred, so equal
elements never swap. It does NOT make equal elements come out in
insertion order — if you need FIFO among ties, push (priority, counter, item).

Each sift runs all of its comparisons first and only then moves
elements. If a comparison raises IncomparableElementsError, push/pop
propagate it and the list is left exactly as it was.

Not thread-safe. Wrap it in a lock if several threads share one heap.
"""

import logging
from typing import Generic, Optional, TypeVar, Union

from config.settings import settings
from models.enums import HeapOrdering
from ordering.base import AbstractOrdering
from ordering.registry import create_ordering

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PriorityHeap(Generic[T]):

    def __init__(self, ordering: Union[AbstractOrdering, HeapOrdering, str, None] = None):
        if ordering is None:
            ordering = settings.DEFAULT_HEAP_ORDERING
        if not isinstance(ordering, AbstractOrdering):
            ordering = create_ordering(ordering)
        self._ordering: AbstractOrdering = ordering
        self._data: list[T] = []
        logger.debug(f"Created {self._ordering.name} heap")

    @property
    def ordering(self) -> AbstractOrdering:
        return self._ordering

    @property
    def ordering_name(self) -> str:
        return self._ordering.name

    def push(self, item: T) -> None:
        self._data.append(item)
        try:
            self._sift_up(len(self._data) - 1)
        except Exception:
            # Nothing moved yet; drop the new slot so the heap is unchanged.
            self._data.pop()
            raise

    def pop(self) -> Optional[T]:
        """Remove and return the root, or None if the heap is empty."""
        data = self._data
        if not data:
            return None

        last = len(data) - 1
        # Plan the sift before touching the list: the old last element
        # will fill the root of a heap that is one slot shorter.
        path = self._sift_down_path(data[last], size=last)

        data[0], data[last] = data[last], data[0]
        root = data.pop()
        self._move_down(path)
        return root

    def peek(self) -> Optional[T]:
        """View the root without removing it. Returns None if empty."""
        return self._data[0] if self._data else None

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def clear(self) -> None:
        self._data.clear()

    def _sift_up(self, index: int) -> None:
        """
        Move the element at index up while it beats its parent.

        First walk up comparing only, to find where the element belongs.
        Then shift each parent on that path down one level.
        """
        data = self._data
        item = data[index]
        target = index
        while target > 0:
            parent = (target - 1) // 2
            if not self._ordering.prefers(item, data[parent]):
                break
            target = parent

        while index > target:
            parent = (index - 1) // 2
            data[index] = data[parent]
            index = parent
        data[target] = item

    def _sift_down_path(self, item: T, size: int) -> list[int]:
        """
        Indices of the children that `item` would swap with, starting at the root.

        At each node we pick the best of (node, left, right). Ties stay
        with the node, and left wins a tie between the two children.
        """
        data = self._data
        prefers = self._ordering.prefers
        path: list[int] = []
        index = 0
        while 2 * index + 1 < size:
            left = 2 * index + 1
            right = left + 1

            best, best_value = index, item
            if prefers(data[left], best_value):
                best, best_value = left, data[left]
            if right < size and prefers(data[right], best_value):
                best = right
            if best == index:
                break
            path.append(best)
            index = best
        return path

    def _move_down(self, path: list[int]) -> None:
        """Apply a planned sift: the root walks down, each child on the path moves up."""
        data = self._data
        index = 0
        for child in path:
            data[index], data[child] = data[child], data[index]
            index = child

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"PriorityHeap(ordering={self._ordering.name!r}, size={len(self._data)})"
