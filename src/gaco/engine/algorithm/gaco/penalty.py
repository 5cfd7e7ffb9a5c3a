"""Oracle penalty: one scalar ranking key for constrained and unconstrained problems.

Reference:
    Schlüter, M. and Gerdts, M. (2010). The oracle penalty method.
    Journal of Global Optimization, 47(2), 293-325.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from gaco.engine.algorithm.components.candidates import CandidateSet

_SQRT3 = math.sqrt(3.0)
_ALPHA_LOW = (6.0 * _SQRT3 - 2.0) / (6.0 * _SQRT3)


def oracle_penalty(objective: np.ndarray, violation: np.ndarray, oracle: float, accuracy: float = 0.0) -> np.ndarray:
    """Residual-dependent oracle penalty plus ``accuracy * violation**2``.

    Feasible points below the oracle score ``f - oracle`` (negative); every
    other point gets a blend of its distance to the oracle and its violation.
    Lower is better.
    """
    f = np.asarray(objective, dtype=float)
    res = np.asarray(violation, dtype=float)
    d = f - oracle
    above = d > 0.0
    alpha = np.zeros_like(f)

    low = above & (res < d / 3.0)
    mid = above & (res >= d / 3.0) & (res <= d)
    high = above & (res > d)
    with np.errstate(divide="ignore", invalid="ignore"):
        alpha = np.where(low, (d * _ALPHA_LOW - res) / (d - res), alpha)
        alpha = np.where(mid, 1.0 - 1.0 / (2.0 * np.sqrt(d / res)), alpha)
        alpha = np.where(high, 0.5 * np.sqrt(d / res), alpha)

    penalized = np.where(above | (res > 0.0), alpha * np.abs(d) + (1.0 - alpha) * res, -np.abs(d))
    if accuracy:
        penalized = penalized + accuracy * res**2
    return penalized


@dataclass
class OracleState:
    """Current oracle and the best penalized fitness seen under it."""

    oracle: float
    best_penalty: float = math.inf

    def penalize(self, candidates: CandidateSet, accuracy: float) -> np.ndarray:
        return oracle_penalty(candidates.objective, candidates.violation, self.oracle, accuracy)

    def update(self, pool: CandidateSet, adaptation_rate: float, accuracy: float) -> float:
        """Move the oracle toward the best feasible (else least infeasible) objective.

        The oracle only ever decreases. ``best_penalty`` is re-scored under the
        resulting oracle.
        """
        feasible = pool.feasible
        if feasible.any():
            target = float(pool.objective[feasible].min())
        else:
            target = float(pool.objective[int(np.argmin(pool.violation))])
        if target < self.oracle:
            self.oracle += adaptation_rate * (target - self.oracle)
        self.best_penalty = float(self.penalize(pool, accuracy).min(initial=math.inf))
        return self.oracle

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OracleState":
        return cls(**data)


__all__ = ["oracle_penalty", "OracleState"]
