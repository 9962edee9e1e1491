from voyageur.display import format_distance_matrix, format_graph, format_path, format_tsp_result
from voyageur.graph.dijkstra import PathResult, shortest_path
from voyageur.tsp.base import TSPResult
from voyageur.tsp.brute_force import solve_optimal_tour


def test_format_graph(morocco):
    text = format_graph(morocco)
    assert "MATRICE D'ADJACENCE" in text
    assert "INF" in text
    assert "Casablanca" in text
    assert format_graph(None) == "Graphe vide\n"


def test_format_distance_matrix(morocco, morocco_matrix):
    text = format_distance_matrix(morocco_matrix, morocco.names)
    assert "617" in text
    assert "INF" not in text


def test_format_path(morocco):
    text = format_path(shortest_path(morocco, 0, 7), morocco)
    assert "Distance minimale : 617 km" in text
    assert "Casablanca -> Rabat -> Meknes -> Fes -> Oujda" in text
    assert format_path(PathResult(float("inf"))) == "Aucun chemin trouve!"
    assert "Ville 0 -> Ville 1" in format_path(PathResult(3.5, [0, 1]))


def test_format_tsp_result(morocco_matrix, morocco):
    result = solve_optimal_tour(morocco_matrix, 10, 0)
    text = format_tsp_result(result, morocco)
    assert "Tour optimal :" in text
    assert "1. Casablanca (ville 0) --->" in text
    assert "11. Casablanca (ville 0)\n" in text

    assert "Aucun tour valide trouve!" in format_tsp_result(TSPResult.no_tour())
    assert "Entree invalide" in format_tsp_result(TSPResult.invalid())
    assert format_tsp_result(None) == "Resultat NULL\n"
    assert "  1. Ville 0 --->" in format_tsp_result(TSPResult([0, 0], 0))
