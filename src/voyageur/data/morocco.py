from ..graph.weighted_graph import WeightedGraph


# 10 villes marocaines
CITY_NAMES = [
    "Casablanca",
    "Rabat",
    "Marrakech",
    "Fes",
    "Tanger",
    "Agadir",
    "Meknes",
    "Oujda",
    "Tetouan",
    "El Jadida",
]

# Routes directes (distances en km)
ROADS = [
    (0, 1, 87),    # Casablanca - Rabat
    (0, 2, 243),   # Casablanca - Marrakech
    (0, 9, 96),    # Casablanca - El Jadida
    (0, 3, 295),   # Casablanca - Fes
    (1, 4, 250),   # Rabat - Tanger
    (1, 3, 207),   # Rabat - Fes
    (1, 6, 138),   # Rabat - Meknes
    (2, 5, 258),   # Marrakech - Agadir
    (2, 9, 200),   # Marrakech - El Jadida
    (3, 6, 60),    # Fes - Meknes
    (3, 7, 332),   # Fes - Oujda
    (3, 4, 303),   # Fes - Tanger
    (4, 8, 60),    # Tanger - Tetouan
    (5, 9, 296),   # Agadir - El Jadida
]


def create_test_graph() -> WeightedGraph:
    """
    Graphe de test : 10 villes marocaines et les routes qui les relient.
    """
    return WeightedGraph.from_edges(len(CITY_NAMES), ROADS, names=CITY_NAMES)
