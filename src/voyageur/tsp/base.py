from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from ..config import HARD_MAX_CITIES, INF, get_settings
from ..graph.distance_matrix import DistanceMatrix


@dataclass
class TSPResult:
    """
    Résultat du TSP : tour (retour au départ inclus) et distance totale.
    Tour vide + INF = entrée invalide ou aucun tour valide.
    """
    tour: List[int] = field(default_factory=list)
    total_distance: float = INF
    valid_input: bool = True

    @classmethod
    def invalid(cls) -> "TSPResult":
        return cls(valid_input=False)

    @classmethod
    def no_tour(cls) -> "TSPResult":
        return cls()

    @property
    def found(self) -> bool:
        return bool(self.tour) and self.total_distance != INF

    @property
    def tour_length(self) -> int:
        return len(self.tour)


def tour_distance(tour: Sequence[int], D) -> float:
    """
    Distance totale d'un tour, retour à la ville de départ inclus.
    Si le tour est déjà fermé (dernier == premier), l'arête de retour
    n'est pas ajoutée deux fois. INF dès qu'une arête manque.
    """
    if len(tour) < 2:
        return 0.0
    closed = list(tour)
    if closed[-1] != closed[0]:
        closed.append(closed[0])

    total = 0.0
    for a, b in zip(closed, closed[1:]):
        d = D[a, b]
        if d == INF:
            return INF
        total += d
    return total


class TSPSolverBase(ABC):
    """
    Classe de base pour les solveurs TSP cycle (départ fixe, retour au départ).
    """

    def __init__(
        self,
        distance_matrix: DistanceMatrix,
        num_cities: Optional[int] = None,
        start: int = 0,
        max_cities: Optional[int] = None,
        name: str = "BaseSolver",
    ):
        if distance_matrix is not None and not isinstance(distance_matrix, DistanceMatrix):
            # liste imbriquée ou np.ndarray : validée par DistanceMatrix
            distance_matrix = DistanceMatrix(distance_matrix)

        self.matrix = distance_matrix
        self.n = num_cities if num_cities is not None else (
            distance_matrix.n if distance_matrix is not None else 0
        )
        self.start = start
        if max_cities is None:
            max_cities = get_settings().max_cities
        self.max_cities = min(max_cities, HARD_MAX_CITIES)
        self.name = name
        self.validate()
        self.D: np.ndarray = self.matrix.D

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------
    def validate(self):
        if self.matrix is None:
            raise ValueError("Matrice des distances absente.")
        if self.n <= 0 or self.n > self.max_cities:
            raise ValueError(
                f"Nombre de villes invalide : {self.n} (doit être entre 1 et {self.max_cities})."
            )
        if self.matrix.n < self.n:
            raise ValueError("La matrice est plus petite que le nombre de villes.")
        if not (0 <= self.start < self.n):
            raise ValueError("Index de départ invalide.")

    # ---------------------------------------------------------
    # Coût d'une route
    # ---------------------------------------------------------
    def route_cost(self, route: List[int]) -> float:
        return tour_distance(route, self.D)

    # ---------------------------------------------------------
    # Interface solveur
    # ---------------------------------------------------------
    @abstractmethod
    def solve(self) -> TSPResult:
        """
        Chaque solveur doit implémenter cette méthode.
        """
        pass
