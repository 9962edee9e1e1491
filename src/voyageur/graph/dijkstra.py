from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import INF
from .distance_matrix import DistanceMatrix
from .weighted_graph import WeightedGraph


logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    distance: float
    path: List[int] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return self.distance != INF


# ---------------------------------------------------------
# Sélection du sommet courant
# ---------------------------------------------------------
def _find_min_distance(dist: List[float], visited: List[bool]) -> Optional[int]:
    """
    Sommet non visité de distance finie minimale.
    En cas d'égalité, le plus petit index gagne (comparaison stricte).
    """
    best = INF
    best_index = None
    for v, d in enumerate(dist):
        if not visited[v] and d < best:
            best = d
            best_index = v
    return best_index


def _reconstruct_path(parent: List[Optional[int]], target: int) -> List[int]:
    path = []
    node = target
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


# ---------------------------------------------------------
# Dijkstra (variante dense O(n²))
# ---------------------------------------------------------
def shortest_path(graph: Optional[WeightedGraph], source: int, target: int) -> PathResult:
    """
    Plus court chemin entre deux villes.

    Retourne PathResult(distance, path). Si la cible est inaccessible,
    distance = INF et path = []. Une entrée invalide (graphe absent,
    index hors bornes) est signalée et produit le même résultat sentinelle.
    Pour source == target : distance 0, chemin [source].
    """
    if graph is None:
        logger.warning("Graphe absent : aucun chemin calculé.")
        return PathResult(INF)

    n = graph.num_nodes()
    if not (0 <= source < n and 0 <= target < n):
        logger.warning("Index de ville invalide (source=%s, target=%s).", source, target)
        return PathResult(INF)

    dist = [INF] * n
    visited = [False] * n
    parent: List[Optional[int]] = [None] * n
    dist[source] = 0

    for _ in range(n - 1):
        u = _find_min_distance(dist, visited)
        if u is None:
            break
        visited[u] = True

        for v in range(n):
            if visited[v]:
                continue
            w = graph.edge_cost(u, v)
            if w == INF:
                continue
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u

    if dist[target] == INF:
        return PathResult(INF)

    return PathResult(dist[target], _reconstruct_path(parent, target))


def all_pairs_shortest_paths(graph: Optional[WeightedGraph]) -> Optional[DistanceMatrix]:
    """
    Distances minimales entre toutes les paires (Dijkstra sur chaque couple).
    """
    if graph is None:
        logger.warning("Graphe absent : matrice des distances non calculée.")
        return None

    n = graph.num_nodes()
    logger.info("Calcul des plus courts chemins entre toutes les paires (%d villes)...", n)

    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            if i == j:
                row.append(0)
            else:
                row.append(shortest_path(graph, i, j).distance)
        rows.append(row)

    logger.info("Calcul terminé.")
    return DistanceMatrix(rows, graph_version=graph.version)
