from __future__ import annotations
import math
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..config import HARD_MAX_CITIES, INF, get_settings


MAX_NAME_LENGTH = 49


class WeightedGraph:
    """
    Graphe non orienté pondéré stocké sous forme de matrice d'adjacence.
    - diagonale (i, i) = 0
    - INF = pas de route directe
    - poids négatifs refusés (Dijkstra)
    """

    def __init__(self, num_cities: int, max_cities: Optional[int] = None):
        if max_cities is None:
            max_cities = get_settings().max_cities
        max_cities = min(max_cities, HARD_MAX_CITIES)
        if num_cities <= 0 or num_cities > max_cities:
            raise ValueError(
                f"Nombre de villes invalide : {num_cities} (doit être entre 1 et {max_cities})."
            )

        self.n = num_cities
        self.max_cities = max_cities
        self.adj: List[List[float]] = [
            [0 if i == j else INF for j in range(num_cities)]
            for i in range(num_cities)
        ]
        self._names = [f"Ville {i}" for i in range(num_cities)]
        self.version = 0

    @classmethod
    def from_edges(
        cls,
        num_cities: int,
        edges: Iterable[Tuple[int, int, float]],
        names: Optional[Sequence[str]] = None,
        max_cities: Optional[int] = None,
    ) -> "WeightedGraph":
        graph = cls(num_cities, max_cities=max_cities)
        for src, dest, weight in edges:
            graph.add_edge(src, dest, weight)
        if names is not None:
            for i, name in enumerate(names):
                graph.set_city_name(i, name)
        return graph

    # ---------------------------------------------------------
    # Mutations
    # ---------------------------------------------------------
    def _check_index(self, index: int) -> None:
        if not (0 <= index < self.n):
            raise ValueError(f"Index de ville invalide : {index}.")

    def add_edge(self, src: int, dest: int, weight: float) -> None:
        """
        Ajoute une route bidirectionnelle entre deux villes.
        """
        self._check_index(src)
        self._check_index(dest)
        if src == dest:
            raise ValueError("Une route doit relier deux villes différentes.")
        if math.isnan(weight):
            raise ValueError("Poids NaN invalide.")
        if weight < 0:
            raise ValueError("Poids négatif non supporté par Dijkstra.")

        self.adj[src][dest] = weight
        self.adj[dest][src] = weight
        self.version += 1

    def set_city_name(self, index: int, name: str) -> None:
        self._check_index(index)
        self._names[index] = name[:MAX_NAME_LENGTH]

    # ---------------------------------------------------------
    # Lecture
    # ---------------------------------------------------------
    def num_nodes(self) -> int:
        return self.n

    def edge_cost(self, i: int, j: int) -> float:
        return self.adj[i][j]

    def neighbors(self, u: int) -> List[int]:
        return [v for v in range(self.n) if v != u and self.adj[u][v] != INF]

    def city_name(self, index: int) -> str:
        self._check_index(index)
        return self._names[index]

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def to_dataframe(self) -> pd.DataFrame:
        """Matrice d'adjacence étiquetée par les noms de villes."""
        return pd.DataFrame(self.adj, index=self._names, columns=range(self.n))

    def __repr__(self) -> str:
        return f"WeightedGraph(n={self.n}, version={self.version})"
