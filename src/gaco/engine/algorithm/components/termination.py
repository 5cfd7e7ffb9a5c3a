from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

import numpy as np


class StopReason(str, Enum):
    MAX_GENERATIONS = "max-generations"
    NO_IMPROVEMENT_GENERATIONS = "no-improvement-generations"
    NO_IMPROVEMENT_EVALUATIONS = "no-improvement-evaluations"
    FITNESS_TARGET = "fitness-target-reached"


@dataclass
class StagnationCounters:
    """Progress of the best (violation, objective) pair seen during a run."""

    generations_without_improvement: int = 0
    evaluations_without_improvement: int = 0
    best_violation: float = math.inf
    best_objective: float = math.inf
    fitness_stop_reached: bool = False

    def observe(self, objective: np.ndarray, violation: np.ndarray) -> bool:
        """Update the best pair from a batch without touching the stagnation counters."""
        if objective.shape[0] == 0:
            return False
        i = int(np.lexsort((objective, violation))[0])
        v, f = float(violation[i]), float(objective[i])
        if v < self.best_violation or (v == self.best_violation and f < self.best_objective):
            self.best_violation = v
            self.best_objective = f
            return True
        return False

    def record(self, objective: np.ndarray, violation: np.ndarray) -> bool:
        """Account for one evaluated batch; return True when it improved the best."""
        n = int(objective.shape[0])
        if n == 0:
            return False
        improved = self.observe(objective, violation)
        if improved:
            self.generations_without_improvement = 0
            self.evaluations_without_improvement = 0
        else:
            self.generations_without_improvement += 1
            self.evaluations_without_improvement += n
        return improved

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StagnationCounters":
        return cls(**data)


class StoppingCriteria:
    """Generation budget plus the stagnation and fitness-target watchdogs.

    Checked once per completed generation; the first satisfied criterion wins,
    in the order generations, impstop, evalstop, fitness target.
    """

    def __init__(self, generations: int, impstop: int, evalstop: int, fitness_stop: float | None) -> None:
        self.generations = generations
        self.impstop = impstop
        self.evalstop = evalstop
        self.fitness_stop = fitness_stop

    def check(self, generation: int, counters: StagnationCounters) -> StopReason | None:
        if generation >= self.generations:
            return StopReason.MAX_GENERATIONS
        if counters.generations_without_improvement >= self.impstop:
            return StopReason.NO_IMPROVEMENT_GENERATIONS
        if counters.evaluations_without_improvement >= self.evalstop:
            return StopReason.NO_IMPROVEMENT_EVALUATIONS
        if self.target_reached(counters):
            counters.fitness_stop_reached = True
            return StopReason.FITNESS_TARGET
        return None

    def target_reached(self, counters: StagnationCounters) -> bool:
        if self.fitness_stop is None:
            return False
        return counters.best_violation <= 0.0 and counters.best_objective <= self.fitness_stop


__all__ = ["StopReason", "StagnationCounters", "StoppingCriteria"]
