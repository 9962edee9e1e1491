import time
import numpy as np
import pandas as pd
from dataclasses import dataclass, asdict
from typing import List, Optional, Sequence

from ..graph.dijkstra import all_pairs_shortest_paths
from ..graph.weighted_graph import WeightedGraph
from ..tsp.brute_force import BruteForceSolver


@dataclass
class RunResult:
    size: int
    run: int
    cost: float
    evaluated: int
    time_sec: float
    tour: List[int]


def random_graph(
    num_cities: int,
    density: float = 0.6,
    max_weight: int = 100,
    seed: Optional[int] = None,
    max_cities: Optional[int] = None,
) -> WeightedGraph:
    """
    Graphe aléatoire symétrique : chaque paire reçoit une route
    avec probabilité 'density', poids entier dans [1, max_weight].
    """
    rng = np.random.default_rng(seed)
    graph = WeightedGraph(num_cities, max_cities=max_cities)
    for i in range(num_cities):
        for j in range(i + 1, num_cities):
            if rng.random() < density:
                graph.add_edge(i, j, int(rng.integers(1, max_weight + 1)))
    return graph


class BenchmarkRunner:
    """
    Mesure la croissance factorielle de la recherche exhaustive
    en fonction du nombre de villes.
    """

    def __init__(self, start: int = 0, seed: Optional[int] = None):
        self.start = start
        self.seed = seed
        self.results: List[RunResult] = []

    def run_on_size(self, size: int, repeat: int = 1, prune: bool = False):
        for r in range(1, repeat + 1):
            seed = None if self.seed is None else self.seed + 1000 * size + r
            graph = random_graph(size, seed=seed, max_cities=size)
            matrix = all_pairs_shortest_paths(graph)

            solver = BruteForceSolver(
                matrix, start=self.start, max_cities=size, prune=prune
            )

            t0 = time.perf_counter()
            result = solver.solve()
            t1 = time.perf_counter()

            self.results.append(
                RunResult(
                    size=size,
                    run=r,
                    cost=result.total_distance,
                    evaluated=solver.last_evaluated,
                    time_sec=t1 - t0,
                    tour=result.tour,
                )
            )

    def run(self, sizes: Sequence[int], repeat: int = 1, prune: bool = False) -> List[RunResult]:
        for size in sizes:
            self.run_on_size(size, repeat, prune)
        return self.results

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(r) for r in self.results])
