"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("regular", not "HeapOrdering.REGULAR")
- They can be built straight from settings values and CLI arguments
- Typos become immediate errors instead of silent bugs
"""

import enum


class HeapOrdering(str, enum.Enum):
    REGULAR = "regular"  # natural order, smallest element at the root (min-heap)
    REVERSE = "reverse"  # inverted order, largest element at the root (max-heap)
