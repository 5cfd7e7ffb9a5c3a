from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gaco.foundation.exceptions import ProblemDimensionError


@dataclass
class EvaluationResult:
    F: np.ndarray
    G: np.ndarray | None = None
    H: np.ndarray | None = None


def evaluate_population_with_constraints(problem, X: np.ndarray) -> EvaluationResult:
    """
    Evaluate a batch and return objectives plus inequality (G) and equality (H)
    constraint values when the problem declares them.
    """
    n = X.shape[0]
    out = {"F": np.empty((n, problem.n_obj))}
    n_ieq = int(getattr(problem, "n_constraints", 0) or 0)
    n_eq = int(getattr(problem, "n_eq_constraints", 0) or 0)
    if n_ieq > 0:
        out["G"] = np.empty((n, n_ieq))
    if n_eq > 0:
        out["H"] = np.empty((n, n_eq))
    problem.evaluate(X, out)
    F = np.asarray(out["F"], dtype=float)
    if F.ndim == 1:
        F = F.reshape(n, -1)
    if F.shape != (n, problem.n_obj):
        raise ProblemDimensionError(
            f"evaluate() produced objectives of shape {F.shape}, expected {(n, problem.n_obj)}.",
            n_var=problem.n_var,
            n_obj=problem.n_obj,
        )
    return EvaluationResult(F=F, G=out.get("G"), H=out.get("H"))


__all__ = ["EvaluationResult", "evaluate_population_with_constraints"]
