"""
Switching a heap to another ordering.

A heap's ordering can't change while it holds elements — the existing
layout was built for the old ordering and would violate the invariant
under the new one. So switching means: build a fresh heap with the new
ordering, copy the old heap's elements into it, and only then empty the
old heap.

If any push into the new heap fails (IncomparableElementsError), the
old heap still holds every element and the new heap is discarded.
"""

import logging
from typing import TypeVar, Union

from heap.priority_heap import PriorityHeap
from models.enums import HeapOrdering
from ordering.base import AbstractOrdering

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rebuild_heap(
    heap: PriorityHeap[T],
    ordering: Union[AbstractOrdering, HeapOrdering, str],
) -> PriorityHeap[T]:
    """
    Move every element of `heap` into a new heap with `ordering`.

    The old heap is empty afterwards. Returns the new heap.
    On failure the old heap is left untouched and the error propagates.
    """
    new_heap: PriorityHeap[T] = PriorityHeap(ordering)
    logger.info(f"Rebuilding heap: {heap.ordering_name} → {new_heap.ordering_name}")

    # Array order is fine here: the new heap re-sifts every element anyway.
    for item in list(heap._data):
        new_heap.push(item)
    heap.clear()

    if new_heap:
        logger.info(f"Re-pushed {len(new_heap)} elements under ordering: {new_heap.ordering_name}")
    return new_heap
