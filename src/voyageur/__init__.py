"""
voyageur : plus courts chemins (Dijkstra) et voyageur de commerce exact
(force brute) sur un petit réseau routier pondéré.
"""
from .config import INF, Settings, get_settings, load_settings
from .graph import (
    DistanceMatrix,
    PathResult,
    WeightedGraph,
    all_pairs_shortest_paths,
    shortest_path,
)
from .tsp import BruteForceSolver, TSPResult, solve_optimal_tour, tour_distance

__all__ = [
    "INF",
    "Settings",
    "get_settings",
    "load_settings",
    "WeightedGraph",
    "DistanceMatrix",
    "PathResult",
    "shortest_path",
    "all_pairs_shortest_paths",
    "BruteForceSolver",
    "TSPResult",
    "solve_optimal_tour",
    "tour_distance",
]
