from __future__ import annotations
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd


class DistanceMatrix:
    """
    Matrice NxN des distances minimales entre toutes les paires de villes.
    Immuable après construction (tableau numpy en lecture seule).
    """

    def __init__(self, values, graph_version: Optional[int] = None):
        try:
            D = np.array(values, dtype=float)
        except TypeError as e:
            raise ValueError(f"Matrice non numérique : {e}") from e
        if D.ndim != 2 or D.shape[0] != D.shape[1]:
            raise ValueError("La matrice doit être carrée.")
        if np.any(np.isnan(D)):
            raise ValueError("La matrice contient des NaN.")
        if np.any(D < 0):
            raise ValueError("La matrice contient des distances négatives.")

        D.setflags(write=False)
        self.D = D
        self.graph_version = graph_version

    @classmethod
    def from_list(cls, rows: Sequence[Sequence[float]]) -> "DistanceMatrix":
        return cls(rows)

    @property
    def n(self) -> int:
        return self.D.shape[0]

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, key) -> float:
        i, j = key
        return float(self.D[i, j])

    def is_reachable(self, i: int, j: int) -> bool:
        return bool(np.isfinite(self.D[i, j]))

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.D, self.D.T))

    def to_list(self) -> List[List[float]]:
        return self.D.tolist()

    def to_dataframe(self, names: Optional[Sequence[str]] = None) -> pd.DataFrame:
        index = list(names) if names is not None else range(self.n)
        return pd.DataFrame(self.D, index=index, columns=range(self.n))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return bool(np.array_equal(self.D, other.D))

    def __repr__(self) -> str:
        return f"DistanceMatrix(n={self.n})"
