"""
Reverse ordering: inverted comparison.

The larger element is preferred, so the root holds the maximum.
Swapping RegularOrdering for this class is the only change needed
to turn a min-heap into a max-heap.
"""

from typing import Any

from ordering.base import AbstractOrdering, natural_compare


class ReverseOrdering(AbstractOrdering):

    def prefers(self, a: Any, b: Any) -> bool:
        return natural_compare(a, b) > 0

    @property
    def name(self) -> str:
        return "reverse"
