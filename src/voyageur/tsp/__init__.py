from .base import TSPResult, TSPSolverBase, tour_distance
from .brute_force import BruteForceSolver, permutation_count, solve_optimal_tour

__all__ = [
    "TSPResult",
    "TSPSolverBase",
    "BruteForceSolver",
    "tour_distance",
    "permutation_count",
    "solve_optimal_tour",
]
