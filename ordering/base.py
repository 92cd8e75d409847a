"""
Abstract base class for heap orderings (Strategy pattern).

The Strategy pattern lets the same heap code serve as a min-heap or a
max-heap. PriorityHeap only knows about AbstractOrdering — it asks
prefers(a, b) and never looks at the elements itself.

To add a new ordering:
1. Create a new class that inherits AbstractOrdering
2. Implement prefers() and name
3. Register it in ordering/registry.py

natural_compare() is the one place that actually compares two elements.
It is strict about partial orders: if neither a < b, b < a nor a == b
holds (float NaN, two disjoint sets), the elements are incomparable and
we fail fast instead of quietly treating them as a tie. A tie that isn't
really a tie would corrupt the heap invariant with no error at all.
"""

from abc import ABC, abstractmethod
from typing import Any


class IncomparableElementsError(ValueError):
    """Raised when two heap elements have no defined order between them."""

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right
        super().__init__(f"Cannot order {left!r} against {right!r}")


def natural_compare(a: Any, b: Any) -> int:
    """
    Three-way comparison using the elements' own operators.

    Returns -1 if a < b, 1 if b < a, 0 if a == b.
    Raises IncomparableElementsError if none of those hold, or if the
    types can't be compared at all (e.g. 3 vs "3").
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
        if a == b:
            return 0
    except TypeError as e:
        raise IncomparableElementsError(a, b) from e
    raise IncomparableElementsError(a, b)


class AbstractOrdering(ABC):
    """
    Interface that both orderings implement.

    The whole contract:
    - prefers: should a sit closer to the root than b?
    - name: the registry name ('regular', 'reverse')
    """

    @abstractmethod
    def prefers(self, a: Any, b: Any) -> bool:
        """True if a is strictly better than b. Ties return False."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this ordering (e.g., 'regular')."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
