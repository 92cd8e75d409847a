"""
Tests for the heap throughput benchmark and its CLI.

Small item counts keep these fast — we only check the shape of the
results and that the heap sorted correctly, not the timings.
"""

import json

import pytest

from benchmarks.run_benchmark import main
from benchmarks.throughput import BenchmarkResult, HeapBenchmark
from models.enums import HeapOrdering


def test_same_seed_gives_same_values():
    assert HeapBenchmark(num_items=50, seed=3).make_values() == HeapBenchmark(num_items=50, seed=3).make_values()


@pytest.mark.parametrize("ordering", list(HeapOrdering))
def test_run_reports_sorted_output(ordering):
    result = HeapBenchmark(num_items=500, seed=1).run(ordering)

    assert isinstance(result, BenchmarkResult)
    assert result.ordering == ordering
    assert result.num_items == 500
    assert result.sorted_output is True
    assert result.push_sec >= 0
    assert result.pop_sec >= 0


def test_run_all_orderings_covers_every_ordering():
    results = HeapBenchmark(num_items=100).run_all_orderings()
    assert [r.ordering for r in results] == list(HeapOrdering)


def test_zero_items():
    result = HeapBenchmark(num_items=0).run(HeapOrdering.REGULAR)
    assert result.sorted_output is True
    assert result.num_items == 0


def test_negative_items_rejected():
    with pytest.raises(ValueError):
        HeapBenchmark(num_items=-1)


def test_result_serializes_ordering_as_string():
    result = HeapBenchmark(num_items=10).run(HeapOrdering.REVERSE)
    assert result.model_dump(mode="json")["ordering"] == "reverse"


def test_cli_single_ordering(capsys):
    results = main(["--ordering", "reverse", "--num-items", "200", "--seed", "5"])

    assert len(results) == 1
    assert results[0].ordering == HeapOrdering.REVERSE

    out = capsys.readouterr().out
    payload = out.split("=== RESULTS ===")[1].split("\n\n")[0]
    assert json.loads(payload)[0]["ordering"] == "reverse"


def test_cli_all_orderings(capsys):
    results = main(["--num-items", "50"])
    assert {r.ordering for r in results} == set(HeapOrdering)
    assert "Throughput" in capsys.readouterr().out
