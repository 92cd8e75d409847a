"""
Tests for the Reverse element wrapper.

Wrapping every element in Reverse and using a regular heap must give
the same pop order as a reverse heap on the raw values.
"""

import pytest

from heap.priority_heap import PriorityHeap
from models.enums import HeapOrdering
from models.reverse import Reverse


def test_comparisons_are_inverted():
    assert Reverse(5) < Reverse(3)
    assert Reverse(3) > Reverse(5)
    assert Reverse(5) <= Reverse(5)
    assert Reverse(3) >= Reverse(5)
    assert not Reverse(3) < Reverse(5)


def test_equality_uses_wrapped_value():
    assert Reverse(4) == Reverse(4)
    assert Reverse(4) != Reverse(5)


def test_comparing_with_unwrapped_value_raises_type_error():
    with pytest.raises(TypeError):
        Reverse(1) < 2


def test_regular_heap_of_wrapped_values_acts_as_max_heap():
    heap = PriorityHeap(HeapOrdering.REGULAR)
    for v in [5, 3, 8]:
        heap.push(Reverse(v))

    assert [heap.pop().value for _ in range(3)] == [8, 5, 3]


def test_wrapper_matches_reverse_ordering():
    values = [5, 3, 8, 1, 9, 2, 7, 7]
    wrapped = PriorityHeap(HeapOrdering.REGULAR)
    reverse = PriorityHeap(HeapOrdering.REVERSE)
    for v in values:
        wrapped.push(Reverse(v))
        reverse.push(v)

    from_wrapped = [wrapped.pop().value for _ in values]
    from_reverse = [reverse.pop() for _ in values]
    assert from_wrapped == from_reverse == sorted(values, reverse=True)


def test_wrapping_twice_restores_natural_order():
    heap = PriorityHeap(HeapOrdering.REVERSE)
    for v in [2, 9, 4]:
        heap.push(Reverse(v))

    # reverse heap of reversed values → ascending
    assert [heap.pop().value for _ in range(3)] == [2, 4, 9]


def test_wrapper_inside_tuple_reverses_only_that_key():
    heap = PriorityHeap(HeapOrdering.REGULAR)
    heap.push((Reverse(10), "b"))
    heap.push((Reverse(10), "a"))
    heap.push((Reverse(20), "c"))

    assert [name for _, name in (heap.pop() for _ in range(3))] == ["c", "a", "b"]
