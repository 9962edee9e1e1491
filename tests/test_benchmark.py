import math

import pytest

from voyageur.benchmark.runner import BenchmarkRunner, random_graph
from voyageur.config import INF


def test_random_graph_is_reproducible():
    a = random_graph(6, seed=42)
    b = random_graph(6, seed=42)
    assert a.adj == b.adj
    for i in range(6):
        for j in range(6):
            assert a.edge_cost(i, j) == a.edge_cost(j, i)
            if i != j and a.edge_cost(i, j) != INF:
                assert 1 <= a.edge_cost(i, j) <= 100


def test_complete_random_graph():
    g = random_graph(5, density=1.0, seed=1)
    assert all(len(g.neighbors(i)) == 4 for i in range(5))


def test_runner_counts_permutations():
    runner = BenchmarkRunner(start=0, seed=7)
    results = runner.run([2, 3, 4, 5], repeat=2)
    assert len(results) == 8

    df = runner.to_dataframe()
    assert list(df.columns) == ["size", "run", "cost", "evaluated", "time_sec", "tour"]
    for row in df.itertuples():
        assert row.evaluated == math.factorial(row.size - 1)
        assert row.time_sec >= 0


def test_runner_with_pruning():
    plain = BenchmarkRunner(seed=3).run([6], repeat=3)
    pruned = BenchmarkRunner(seed=3).run([6], repeat=3, prune=True)
    for a, b in zip(plain, pruned):
        assert a.cost == b.cost
        assert a.tour == b.tour
        assert b.evaluated <= a.evaluated


def test_runner_rejects_sizes_above_hard_limit():
    with pytest.raises(ValueError):
        BenchmarkRunner(seed=0).run([13])
