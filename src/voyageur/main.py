import argparse
import logging
from typing import Callable, List, Optional

from .benchmark.runner import BenchmarkRunner
from .config import LOG_LEVELS, configure_logging, get_settings
from .data.morocco import create_test_graph
from .display import format_distance_matrix, format_graph, format_path, format_tsp_result
from .graph.dijkstra import all_pairs_shortest_paths, shortest_path
from .graph.weighted_graph import WeightedGraph
from .tsp.brute_force import solve_optimal_tour


logger = logging.getLogger(__name__)

MENU = """
+========================================+
|           MENU PRINCIPAL               |
+========================================+
|  1. Afficher le graphe                 |
|  2. Trouver le plus court chemin       |
|     (Dijkstra)                         |
|  3. Resoudre le TSP                    |
|  4. Ajouter une route                  |
|  5. Quitter                            |
+========================================+
"""


# ---------------------------------------------------------
# Démonstration
# ---------------------------------------------------------
def run_demo(graph: WeightedGraph, start: int = 0) -> None:
    print(format_graph(graph))

    print("=== Test de l'algorithme de Dijkstra ===\n")
    for src, dest in [(0, 7), (5, 8)]:
        print(f"{graph.city_name(src)} -> {graph.city_name(dest)}")
        print(format_path(shortest_path(graph, src, dest), graph))
        print()

    print("=== Test du TSP (force brute) ===\n")
    matrix = all_pairs_shortest_paths(graph)
    print(format_distance_matrix(matrix, graph.names))

    result = solve_optimal_tour(matrix, graph.num_nodes(), start)
    print(format_tsp_result(result, graph))


# ---------------------------------------------------------
# Menu interactif
# ---------------------------------------------------------
def _ask_int(prompt: str, input_fn: Callable[[str], str]) -> Optional[int]:
    try:
        return int(input_fn(prompt).strip())
    except ValueError:
        return None


def interactive_menu(graph: WeightedGraph, input_fn: Callable[[str], str] = input) -> None:
    """
    Menu texte. La matrice des distances est gardée en cache tant
    qu'aucune route n'est ajoutée (version du graphe inchangée).
    Fin de l'entrée standard (Ctrl-D) = quitter.
    """
    try:
        _menu_loop(graph, input_fn)
    except EOFError:
        print("\nAu revoir!")


def _menu_loop(graph: WeightedGraph, input_fn: Callable[[str], str]) -> None:
    matrix = None
    last = graph.num_nodes() - 1

    while True:
        print(MENU)
        choice = _ask_int("Votre choix : ", input_fn)

        if choice == 1:
            print(format_graph(graph))

        elif choice == 2:
            src = _ask_int(f"Ville de depart (0-{last}) : ", input_fn)
            dest = _ask_int(f"Ville d'arrivee (0-{last}) : ", input_fn)
            if src is None or dest is None:
                print("\nChoix invalide.")
                continue
            print("\n--- Resultat ---")
            print(format_path(shortest_path(graph, src, dest), graph))

        elif choice == 3:
            start = _ask_int(f"Ville de depart pour le tour (0-{last}) : ", input_fn)
            if start is None:
                print("\nChoix invalide.")
                continue
            if matrix is None or matrix.graph_version != graph.version:
                matrix = all_pairs_shortest_paths(graph)
            result = solve_optimal_tour(matrix, graph.num_nodes(), start)
            print(format_tsp_result(result, graph))

        elif choice == 4:
            src = _ask_int(f"Ville source (0-{last}) : ", input_fn)
            dest = _ask_int(f"Ville destination (0-{last}) : ", input_fn)
            weight = _ask_int("Distance (km) : ", input_fn)
            if src is None or dest is None or weight is None:
                print("\nChoix invalide.")
                continue
            try:
                graph.add_edge(src, dest, weight)
            except ValueError as e:
                print(f"Erreur : {e}")
                continue
            print("Route ajoutee!")

        elif choice == 5:
            print("\nAu revoir!")
            return

        else:
            print("\nChoix invalide.")


# ---------------------------------------------------------
# Programme principal
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="voyageur",
        description="Problème du voyageur de commerce : Dijkstra + force brute",
    )
    parser.add_argument("--interactive", action="store_true", help="lancer le menu interactif")
    parser.add_argument("--start", type=int, default=0, help="ville de départ du tour")
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
        help="niveau de log (DEBUG, INFO, ...)",
    )
    parser.add_argument(
        "--benchmark", type=int, default=None, metavar="N",
        help="mesurer la force brute sur des graphes aléatoires de 2 à N villes",
    )
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
        graph = create_test_graph()
    except ValueError as e:
        logger.error("Erreur au démarrage : %s", e)
        return 1

    if args.benchmark is not None:
        max_cities = get_settings().max_cities
        if not (2 <= args.benchmark <= max_cities):
            print(f"Erreur : le benchmark accepte de 2 à {max_cities} villes.")
            return 1
        runner = BenchmarkRunner(start=0, seed=0)
        runner.run(range(2, args.benchmark + 1), repeat=3)
        print("\n=== Benchmark force brute ===")
        print(runner.to_dataframe().groupby("size")[["evaluated", "time_sec"]].mean())
        return 0

    if args.interactive:
        interactive_menu(graph)
    else:
        run_demo(graph, start=args.start)

    print("\nProgramme termine avec succes!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
