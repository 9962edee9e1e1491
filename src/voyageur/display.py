from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .graph.dijkstra import PathResult
from .graph.distance_matrix import DistanceMatrix
from .graph.weighted_graph import WeightedGraph
from .tsp.base import TSPResult


def _format_cost(value) -> str:
    if value is None or (isinstance(value, float) and np.isinf(value)):
        return "INF"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def _matrix_to_string(df: pd.DataFrame) -> str:
    return df.map(_format_cost).to_string()


# ---------------------------------------------------------
# Graphe
# ---------------------------------------------------------
def format_graph(graph: Optional[WeightedGraph]) -> str:
    if graph is None:
        return "Graphe vide\n"

    lines = [
        "===== MATRICE D'ADJACENCE =====",
        "(INF = pas de connexion directe)",
        "",
        _matrix_to_string(graph.to_dataframe()),
        "",
    ]
    return "\n".join(lines)


def format_distance_matrix(
    matrix: DistanceMatrix,
    names: Optional[Sequence[str]] = None,
) -> str:
    lines = [
        "Matrice des distances minimales :",
        "(calculées avec Dijkstra)",
        "",
        _matrix_to_string(matrix.to_dataframe(names)),
        "",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------
# Résultats
# ---------------------------------------------------------
def format_path(result: PathResult, graph: Optional[WeightedGraph] = None) -> str:
    if not result.reachable:
        return "Aucun chemin trouve!"

    if graph is not None:
        steps = [graph.city_name(i) for i in result.path]
    else:
        steps = [f"Ville {i}" for i in result.path]

    return (
        f"Distance minimale : {_format_cost(result.distance)} km\n"
        f"Chemin : {' -> '.join(steps)}"
    )


def format_tsp_result(result: Optional[TSPResult], graph: Optional[WeightedGraph] = None) -> str:
    if result is None:
        return "Resultat NULL\n"

    lines = ["===== RESULTAT DU TSP =====", ""]

    if not result.valid_input:
        lines.append("Entree invalide : aucun tour calcule.")
        return "\n".join(lines) + "\n"

    if not result.found:
        lines.append("Aucun tour valide trouve!")
        lines.append("(Certaines villes ne sont pas connectees)")
        return "\n".join(lines) + "\n"

    lines.append(f"Distance totale minimale : {_format_cost(result.total_distance)}")
    lines.append("")
    lines.append("Tour optimal :")
    for step, city in enumerate(result.tour, start=1):
        if graph is not None:
            label = f"  {step}. {graph.city_name(city)} (ville {city})"
        else:
            label = f"  {step}. Ville {city}"
        if step < result.tour_length:
            label += " --->"
        lines.append(label)

    return "\n".join(lines) + "\n"
