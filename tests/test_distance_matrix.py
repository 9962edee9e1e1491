import numpy as np
import pytest

from voyageur.config import INF
from voyageur.graph.distance_matrix import DistanceMatrix


def test_matrix_is_read_only():
    m = DistanceMatrix.from_list([[0, 3], [3, 0]])
    assert m.n == 2
    assert m[0, 1] == 3
    with pytest.raises(ValueError):
        m.D[0, 1] = 1


@pytest.mark.parametrize(
    "rows",
    [
        [[0, 1, 2], [1, 0, 2]],
        [[0, np.nan], [1, 0]],
        [[0, -1], [-1, 0]],
    ],
)
def test_invalid_matrices_are_rejected(rows):
    with pytest.raises(ValueError):
        DistanceMatrix(rows)


def test_reachability_and_symmetry():
    m = DistanceMatrix([[0, INF], [INF, 0]])
    assert not m.is_reachable(0, 1)
    assert m.is_reachable(1, 1)
    assert m.is_symmetric()
    assert not DistanceMatrix([[0, 1], [2, 0]]).is_symmetric()


def test_to_dataframe_uses_names():
    m = DistanceMatrix([[0, 4], [4, 0]])
    df = m.to_dataframe(["A", "B"])
    assert list(df.index) == ["A", "B"]
    assert df.loc["B", 0] == 4
    assert m.to_list() == [[0.0, 4.0], [4.0, 0.0]]
