import pytest

from voyageur.config import get_settings
from voyageur.data.morocco import create_test_graph
from voyageur.graph.dijkstra import all_pairs_shortest_paths
from voyageur.graph.weighted_graph import WeightedGraph


ENV_VARS = ["VOYAGEUR_MAX_CITIES", "VOYAGEUR_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    # setenv puis delenv : la variable est supprimée pendant le test
    # et tout ce qu'un .env y aura chargé est retiré à la fin
    for var in ENV_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def morocco():
    return create_test_graph()


@pytest.fixture
def morocco_matrix(morocco):
    return all_pairs_shortest_paths(morocco)


@pytest.fixture
def cycle4():
    # 0 - 1 - 2 - 3 - 0, toutes les routes à 10
    return WeightedGraph.from_edges(4, [(0, 1, 10), (1, 2, 10), (2, 3, 10), (3, 0, 10)])


@pytest.fixture
def disconnected():
    # deux composantes : {0, 1} et {2, 3}
    return WeightedGraph.from_edges(4, [(0, 1, 5), (2, 3, 7)])
