"""
Demo script — pushes a handful of values into a heap and prints the pop order.

Usage:
    python -m scripts.heap_sort_demo 5 3 8 1 9 2                  # min-heap: 1 2 3 5 8 9
    python -m scripts.heap_sort_demo --ordering reverse 5 3 8 1   # max-heap: 8 5 3 1
    printf '3\\n1\\n2\\n' | python -m scripts.heap_sort_demo         # one value per line on stdin

Each value is read as an int if it can be, else a float, else kept as a string.
Mixing numbers and strings is an error: the heap refuses to order them.
"""

import argparse
import logging
import sys
from typing import Iterable, Union

from config.settings import settings
from heap.priority_heap import PriorityHeap
from models.enums import HeapOrdering
from ordering.base import IncomparableElementsError

logger = logging.getLogger(__name__)

Value = Union[int, float, str]


def parse_value(raw: str) -> Value:
    text = raw.strip()
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            pass
    return text


def read_values(lines: Iterable[str]) -> list[Value]:
    """One value per line; blank lines are skipped."""
    return [parse_value(line) for line in lines if line.strip()]


def heap_sort(values: Iterable[Value], ordering: HeapOrdering) -> list[Value]:
    heap: PriorityHeap[Value] = PriorityHeap(ordering)
    for value in values:
        heap.push(value)

    result = []
    while (value := heap.pop()) is not None:
        result.append(value)
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print values in heap pop order")
    parser.add_argument(
        "values", nargs="*",
        help="Values to push (default: read one per line from stdin)",
    )
    parser.add_argument(
        "--ordering", type=str, default=settings.DEFAULT_HEAP_ORDERING.value,
        choices=[o.value for o in HeapOrdering],
        help=f"regular = smallest first, reverse = largest first (default: {settings.DEFAULT_HEAP_ORDERING.value})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    values = [parse_value(v) for v in args.values] if args.values else read_values(sys.stdin)

    try:
        ordered = heap_sort(values, HeapOrdering(args.ordering))
    except IncomparableElementsError as e:
        logger.error(f"Cannot build heap: {e}")
        return 1

    for value in ordered:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
