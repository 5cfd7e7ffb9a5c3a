"""Evaluated candidate ("ant") batches kept as aligned arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass
class CandidateSet:
    """Decision vectors with their raw outputs, total violation and discovery ids.

    ``ids`` grow monotonically over a run and break ranking ties in favour of
    earlier discoveries.
    """

    X: np.ndarray
    F: np.ndarray
    G: np.ndarray | None
    H: np.ndarray | None
    violation: np.ndarray
    ids: np.ndarray

    def __len__(self) -> int:
        return int(self.X.shape[0])

    @property
    def objective(self) -> np.ndarray:
        return self.F[:, 0]

    @property
    def feasible(self) -> np.ndarray:
        return self.violation <= 0.0

    def take(self, idx: np.ndarray) -> "CandidateSet":
        return CandidateSet(
            X=self.X[idx],
            F=self.F[idx],
            G=None if self.G is None else self.G[idx],
            H=None if self.H is None else self.H[idx],
            violation=self.violation[idx],
            ids=self.ids[idx],
        )

    def concat(self, other: "CandidateSet") -> "CandidateSet":
        return CandidateSet(
            X=np.vstack([self.X, other.X]),
            F=np.vstack([self.F, other.F]),
            G=_vstack(self.G, other.G),
            H=_vstack(self.H, other.H),
            violation=np.concatenate([self.violation, other.violation]),
            ids=np.concatenate([self.ids, other.ids]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "X": self.X.tolist(),
            "F": self.F.tolist(),
            "G": None if self.G is None else self.G.tolist(),
            "H": None if self.H is None else self.H.tolist(),
            "violation": self.violation.tolist(),
            "ids": self.ids.tolist(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CandidateSet":
        def _opt(key: str) -> np.ndarray | None:
            value = data.get(key)
            return None if value is None else np.asarray(value, dtype=float)

        return cls(
            X=np.asarray(data["X"], dtype=float),
            F=np.asarray(data["F"], dtype=float),
            G=_opt("G"),
            H=_opt("H"),
            violation=np.asarray(data["violation"], dtype=float),
            ids=np.asarray(data["ids"], dtype=np.int64),
        )


def _vstack(a: np.ndarray | None, b: np.ndarray | None) -> np.ndarray | None:
    if a is None or b is None:
        return None
    return np.vstack([a, b])


__all__ = ["CandidateSet"]
