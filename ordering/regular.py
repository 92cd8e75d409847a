"""
Regular ordering: natural ascending comparison.

The smaller element is preferred, so the root holds the minimum.
Same behaviour as Python's heapq module.
"""

from typing import Any

from ordering.base import AbstractOrdering, natural_compare


class RegularOrdering(AbstractOrdering):

    def prefers(self, a: Any, b: Any) -> bool:
        return natural_compare(a, b) < 0

    @property
    def name(self) -> str:
        return "regular"
