"""
Element wrapper that inverts comparisons.

This is the second way to get a max-heap out of a min-heap:
instead of giving the heap a ReverseOrdering, wrap every element.

    heap = PriorityHeap(HeapOrdering.REGULAR)
    heap.push(Reverse(5))
    heap.push(Reverse(8))
    heap.pop().value  # 8

Both approaches give the same pop order. The wrapper is handy when
the heap is shared code you can't reconfigure, or when only some
keys of a tuple should be reversed: (Reverse(score), name).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Reverse(Generic[T]):
    """
    Holds one value and compares backwards.

    Equality is the wrapped value's equality, so Reverse(4) == Reverse(4).
    That matters: the heap relies on == to tell ties apart from
    incomparable values.
    """
    value: T

    def __lt__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value

    def __gt__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value <= self.value

    def __ge__(self, other: "Reverse[T]") -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.value <= other.value
