from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import INF
from ..graph.distance_matrix import DistanceMatrix
from .base import TSPResult, TSPSolverBase


logger = logging.getLogger(__name__)


def permutation_count(num_cities: int) -> int:
    """Nombre de tours testés par la recherche exhaustive : (n-1)!"""
    if num_cities <= 1:
        return 1
    return math.factorial(num_cities - 1)


@dataclass
class _SearchState:
    """
    État de travail d'une seule recherche (jamais partagé entre appels).
    """
    cities: List[int]
    best_distance: float = INF
    best_tour: List[int] = field(default_factory=list)
    evaluated: int = 0
    pruned: int = 0


class BruteForceSolver(TSPSolverBase):
    """
    Solveur TSP exact par force brute.
    - ville de départ fixée en position 0
    - toutes les permutations des n-1 autres villes (swap / récursion / swap)
    - comparaison stricte : à coût égal, le premier tour généré est conservé

    Complexité : O((n-1)! x n). L'élagage optionnel (prune=True) coupe une
    branche dès que son coût partiel atteint le meilleur coût complet ;
    le résultat est identique, seul le nombre de tours évalués change.
    """

    def __init__(
        self,
        distance_matrix: DistanceMatrix,
        num_cities: Optional[int] = None,
        start: int = 0,
        max_cities: Optional[int] = None,
        prune: bool = False,
    ):
        super().__init__(distance_matrix, num_cities, start, max_cities, name="BruteForce")
        self.prune = prune
        self.last_evaluated = 0

    # ---------------------------------------------------------
    # Permutations récursives
    # ---------------------------------------------------------
    def _permute(self, state: _SearchState, pos: int, partial: float) -> None:
        cities = state.cities

        if pos == self.n:
            # permutation complète : arête de retour vers le départ
            back = self.D[cities[-1], cities[0]]
            total = INF if back == INF else partial + back
            state.evaluated += 1
            if total < state.best_distance:
                state.best_distance = total
                state.best_tour = cities + [cities[0]]
            return

        for i in range(pos, self.n):
            cities[pos], cities[i] = cities[i], cities[pos]

            step = self.D[cities[pos - 1], cities[pos]]
            cost = INF if step == INF else partial + step

            if self.prune and cost >= state.best_distance:
                state.pruned += 1
            else:
                self._permute(state, pos + 1, cost)

            cities[pos], cities[i] = cities[i], cities[pos]

    # ---------------------------------------------------------
    # Résolution
    # ---------------------------------------------------------
    def solve(self) -> TSPResult:
        if self.n == 1:
            return TSPResult([self.start, self.start], 0)

        cities = [self.start] + [i for i in range(self.n) if i != self.start]
        state = _SearchState(cities=cities)

        logger.info(
            "Résolution du TSP par force brute : %d villes, départ %d, %d permutations.",
            self.n, self.start, permutation_count(self.n),
        )
        self._permute(state, 1, 0.0)
        self.last_evaluated = state.evaluated
        logger.debug("%d tours évalués, %d branches élaguées.", state.evaluated, state.pruned)

        if state.best_distance == INF:
            logger.info("Aucun tour valide : certaines villes ne sont pas connectées.")
            return TSPResult.no_tour()

        return TSPResult(state.best_tour, float(state.best_distance))


def solve_optimal_tour(
    distance_matrix: Optional[DistanceMatrix],
    num_cities: int,
    start: int,
    prune: bool = False,
    max_cities: Optional[int] = None,
) -> TSPResult:
    """
    Tour optimal (cycle hamiltonien de coût minimal) depuis 'start'.

    Entrée invalide : signalée, retourne TSPResult.invalid().
    Graphe déconnecté : TSPResult.no_tour().
    """
    try:
        solver = BruteForceSolver(
            distance_matrix,
            num_cities=num_cities,
            start=start,
            max_cities=max_cities,
            prune=prune,
        )
    except ValueError as e:
        logger.warning("TSP non résolu : %s", e)
        return TSPResult.invalid()

    return solver.solve()
