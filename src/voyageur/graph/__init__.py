from .weighted_graph import WeightedGraph
from .distance_matrix import DistanceMatrix
from .dijkstra import PathResult, shortest_path, all_pairs_shortest_paths

__all__ = [
    "WeightedGraph",
    "DistanceMatrix",
    "PathResult",
    "shortest_path",
    "all_pairs_shortest_paths",
]
