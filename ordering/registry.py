"""
Ordering factory — maps ordering names to ordering classes.

One place knows how to turn "regular" / "reverse" (from settings,
CLI flags, or code) into a strategy object.
"""

from typing import Union

from models.enums import HeapOrdering
from ordering.base import AbstractOrdering
from ordering.regular import RegularOrdering
from ordering.reverse import ReverseOrdering


_REGISTRY: dict[HeapOrdering, type[AbstractOrdering]] = {
    HeapOrdering.REGULAR: RegularOrdering,
    HeapOrdering.REVERSE: ReverseOrdering,
}


def create_ordering(ordering: Union[HeapOrdering, str]) -> AbstractOrdering:
    """
    Create an ordering instance for the given name.

        create_ordering(HeapOrdering.REVERSE)
        create_ordering("regular")

    Raises ValueError for names that aren't registered.
    """
    try:
        key = HeapOrdering(ordering)
    except ValueError:
        raise ValueError(f"Unknown heap ordering: {ordering}") from None

    return _REGISTRY[key]()
