"""
Throughput benchmark — measures push/pop operations per second under each ordering.

How it works:
1. Generate N random integers (seeded, so every ordering sees the same input)
2. Push all of them into a fresh heap, timing the pushes
3. Pop until empty, timing the pops
4. Check the pop sequence is sorted the way the ordering promises

Both orderings run the exact same heap code, so the numbers should be
close. A big gap would point at the comparison path, not the heap.
"""

import logging
import random
import time

from pydantic import BaseModel

from config.settings import settings
from heap.priority_heap import PriorityHeap
from models.enums import HeapOrdering

logger = logging.getLogger(__name__)


class BenchmarkResult(BaseModel):
    """One benchmark run for one ordering."""

    ordering: HeapOrdering
    num_items: int
    push_sec: float
    pop_sec: float
    ops_per_sec: float
    sorted_output: bool  # did pops come out in the ordering's sort order?


class HeapBenchmark:

    def __init__(self, num_items: int = settings.BENCHMARK_NUM_ITEMS, seed: int = settings.BENCHMARK_SEED):
        if num_items < 0:
            raise ValueError(f"num_items must be >= 0, got {num_items}")
        self.num_items = num_items
        self.seed = seed

    def make_values(self) -> list[int]:
        """Same seed → same values, so orderings are compared on identical input."""
        rng = random.Random(self.seed)
        return [rng.randint(0, self.num_items * 10) for _ in range(self.num_items)]

    def run(self, ordering: HeapOrdering) -> BenchmarkResult:
        """Run the benchmark for a single ordering."""
        values = self.make_values()
        heap: PriorityHeap[int] = PriorityHeap(ordering)

        start = time.perf_counter()
        for value in values:
            heap.push(value)
        push_sec = time.perf_counter() - start

        popped = []
        start = time.perf_counter()
        while heap:
            popped.append(heap.pop())
        pop_sec = time.perf_counter() - start

        expected = sorted(values, reverse=(HeapOrdering(ordering) == HeapOrdering.REVERSE))
        total = push_sec + pop_sec
        ops = 2 * self.num_items

        result = BenchmarkResult(
            ordering=ordering,
            num_items=self.num_items,
            push_sec=round(push_sec, 6),
            pop_sec=round(pop_sec, 6),
            ops_per_sec=round(ops / total, 2) if total > 0 else 0.0,
            sorted_output=popped == expected,
        )
        logger.info(
            f"{result.ordering.value}: {ops} ops in {total:.4f}s "
            f"({result.ops_per_sec} ops/s)"
        )
        return result

    def run_all_orderings(self) -> list[BenchmarkResult]:
        return [self.run(ordering) for ordering in HeapOrdering]
