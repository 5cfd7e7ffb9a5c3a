"""GACO run context: everything that evolves during a run and may outlive it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from gaco.engine.algorithm.components.candidates import CandidateSet
from gaco.engine.algorithm.components.termination import StagnationCounters
from gaco.foundation.checkpoint import restore_rng
from gaco.foundation.constraints.utils import compute_violation

from .penalty import OracleState


@dataclass
class RunContext:
    """Mutable state threaded through the evolve loop.

    A fresh context is created for every ``evolve`` call unless the engine runs
    with ``memory``, in which case the previous one (oracle, counters, kernel
    archive, generation counter and RNG stream) is carried forward.
    """

    rng: np.random.Generator
    oracle: OracleState
    counters: StagnationCounters = field(default_factory=StagnationCounters)
    generation: int = 0
    n_eval: int = 0
    next_id: int = 0
    archive: CandidateSet | None = None

    @classmethod
    def fresh(cls, oracle: float, seed: int) -> "RunContext":
        return cls(rng=np.random.default_rng(seed), oracle=OracleState(oracle=float(oracle)))

    def register(
        self,
        X: np.ndarray,
        F: np.ndarray,
        G: np.ndarray | None,
        H: np.ndarray | None,
        c_tol: float,
    ) -> CandidateSet:
        """Wrap evaluated vectors into candidates with new discovery ids."""
        n = X.shape[0]
        ids = np.arange(self.next_id, self.next_id + n, dtype=np.int64)
        self.next_id += n
        return CandidateSet(
            X=np.array(X, dtype=float),
            F=np.array(F, dtype=float),
            G=None if G is None else np.array(G, dtype=float),
            H=None if H is None else np.array(H, dtype=float),
            violation=compute_violation(G, H, c_tol=c_tol, n=n),
            ids=ids,
        )

    def rank(self, pool: CandidateSet, accuracy: float) -> tuple[CandidateSet, np.ndarray]:
        """Sort by penalized fitness, then violation, then discovery order."""
        penalties = self.oracle.penalize(pool, accuracy)
        order = np.lexsort((pool.ids, pool.violation, penalties))
        return pool.take(order), penalties[order]

    def to_dict(self) -> dict[str, Any]:
        return {
            "rng_state": self.rng.bit_generator.state,
            "oracle": self.oracle.to_dict(),
            "counters": self.counters.to_dict(),
            "generation": self.generation,
            "n_eval": self.n_eval,
            "next_id": self.next_id,
            "archive": None if self.archive is None else self.archive.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunContext":
        rng = np.random.default_rng()
        restore_rng(rng, data["rng_state"])
        archive = data.get("archive")
        return cls(
            rng=rng,
            oracle=OracleState.from_dict(data["oracle"]),
            counters=StagnationCounters.from_dict(data["counters"]),
            generation=int(data["generation"]),
            n_eval=int(data["n_eval"]),
            next_id=int(data["next_id"]),
            archive=None if archive is None else CandidateSet.from_dict(archive),
        )


__all__ = ["RunContext"]
