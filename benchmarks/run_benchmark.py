"""
CLI entry point for running heap throughput benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # both orderings, default size
    python -m benchmarks.run_benchmark --ordering reverse       # single ordering
    python -m benchmarks.run_benchmark --num-items 100000       # more items
    python -m benchmarks.run_benchmark --ordering all --seed 7
"""

import argparse
import json
import logging

from benchmarks.throughput import HeapBenchmark
from config.settings import settings
from models.enums import HeapOrdering


def main(argv=None):
    parser = argparse.ArgumentParser(description="Priority Heap Throughput Benchmark")
    parser.add_argument(
        "--num-items", type=int, default=settings.BENCHMARK_NUM_ITEMS,
        help=f"Number of values to push and pop (default: {settings.BENCHMARK_NUM_ITEMS})",
    )
    parser.add_argument(
        "--ordering", type=str, default="all",
        choices=[o.value for o in HeapOrdering] + ["all"],
        help="Which ordering to benchmark (default: all)",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.BENCHMARK_SEED,
        help=f"Random seed for the input values (default: {settings.BENCHMARK_SEED})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("=== Priority Heap Throughput Benchmark ===")
    print(f"Items: {args.num_items} | Ordering: {args.ordering}\n")

    bench = HeapBenchmark(num_items=args.num_items, seed=args.seed)

    if args.ordering == "all":
        results = bench.run_all_orderings()
    else:
        results = [bench.run(HeapOrdering(args.ordering))]

    print("\n=== RESULTS ===")
    print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))

    # Summary table
    print("\n{:<10} {:>10} {:>10} {:>15} {:>8}".format("Ordering", "Push (s)", "Pop (s)", "Throughput", "Sorted"))
    print("-" * 57)
    for r in results:
        print("{:<10} {:>10.4f} {:>10.4f} {:>11.0f} op/s {:>8}".format(
            r.ordering.value, r.push_sec, r.pop_sec, r.ops_per_sec, "yes" if r.sorted_output else "NO"
        ))
    return results


if __name__ == "__main__":
    main()
