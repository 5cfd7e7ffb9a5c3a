from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gaco.foundation.constraints.utils import compute_violation
from gaco.foundation.eval.population import evaluate_population_with_constraints
from gaco.foundation.exceptions import BoundsError

if TYPE_CHECKING:
    from gaco.foundation.problem.types import ProblemProtocol


def resolve_bounds(problem) -> tuple[np.ndarray, np.ndarray]:
    xl = np.asarray(problem.xl, dtype=float)
    xu = np.asarray(problem.xu, dtype=float)
    n_var = problem.n_var
    if xl.ndim == 0:
        xl = np.full(n_var, xl, dtype=float)
    if xu.ndim == 0:
        xu = np.full(n_var, xu, dtype=float)
    if xl.shape != (n_var,) or xu.shape != (n_var,):
        raise BoundsError(f"Bounds must have shape ({n_var},); got {xl.shape} and {xu.shape}.")
    if np.any(xl > xu):
        raise BoundsError("Lower bounds must not exceed upper bounds.")
    return np.ascontiguousarray(xl), np.ascontiguousarray(xu)


def initialize_population(
    pop_size: int,
    n_var: int,
    xl: np.ndarray,
    xu: np.ndarray,
    rng: np.random.Generator,
    n_int: int = 0,
) -> np.ndarray:
    if pop_size < 0:
        raise ValueError("pop_size must be non-negative.")
    X = rng.uniform(xl, xu, size=(pop_size, n_var))
    if n_int:
        lo = np.ceil(xl[-n_int:])
        hi = np.floor(xu[-n_int:])
        X[:, -n_int:] = rng.integers(lo.astype(int), hi.astype(int), size=(pop_size, n_int), endpoint=True)
    return X


class Population:
    """Evaluated set of decision vectors for one problem.

    Decision vectors are drawn uniformly inside the problem bounds (integer
    variables uniformly among the admissible integers) and evaluated at
    construction, so every row of ``X`` always has its ``F``/``G``/``H``.
    """

    def __init__(self, problem: "ProblemProtocol", size: int = 0, seed: int | None = None) -> None:
        self.problem = problem
        self.seed = seed
        self.n_eval = 0
        xl, xu = resolve_bounds(problem)
        rng = np.random.default_rng(seed)
        X = initialize_population(int(size), problem.n_var, xl, xu, rng, int(getattr(problem, "n_int", 0) or 0))
        self._X = np.empty((0, problem.n_var))
        self._F = np.empty((0, problem.n_obj))
        self._G: np.ndarray | None = None
        self._H: np.ndarray | None = None
        if X.shape[0]:
            result = evaluate_population_with_constraints(problem, X)
            self.n_eval += X.shape[0]
            self.replace(X, result.F, result.G, result.H)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return int(self._X.shape[0])

    @property
    def size(self) -> int:
        return len(self)

    @property
    def X(self) -> np.ndarray:
        return self._X

    @property
    def F(self) -> np.ndarray:
        return self._F

    @property
    def G(self) -> np.ndarray | None:
        return self._G

    @property
    def H(self) -> np.ndarray | None:
        return self._H

    def get_x(self) -> np.ndarray:
        return self._X.copy()

    def get_f(self) -> np.ndarray:
        return self._F.copy()

    def violation(self) -> np.ndarray:
        return compute_violation(self._G, self._H, c_tol=float(getattr(self.problem, "c_tol", 0.0)), n=len(self))

    def best_idx(self) -> int:
        """Index of the best individual: least violation first, then lowest first objective."""
        if not len(self):
            raise ValueError("An empty population has no best individual.")
        return int(np.lexsort((self._F[:, 0], self.violation()))[0])

    @property
    def champion_x(self) -> np.ndarray:
        return self._X[self.best_idx()].copy()

    @property
    def champion_f(self) -> np.ndarray:
        return self._F[self.best_idx()].copy()

    # ------------------------------------------------------------------
    # Write access
    # ------------------------------------------------------------------

    def replace(
        self,
        X: np.ndarray,
        F: np.ndarray,
        G: np.ndarray | None = None,
        H: np.ndarray | None = None,
    ) -> None:
        X = np.array(X, dtype=float, ndmin=2)
        F = np.array(F, dtype=float, ndmin=2)
        if X.shape[1] != self.problem.n_var or F.shape[0] != X.shape[0]:
            raise ValueError("X and F must describe the same number of individuals.")
        self._X = X
        self._F = F
        self._G = None if G is None else np.array(G, dtype=float, ndmin=2)
        self._H = None if H is None else np.array(H, dtype=float, ndmin=2)

    def set_xf(
        self,
        i: int,
        x: np.ndarray,
        f: np.ndarray,
        g: np.ndarray | None = None,
        h: np.ndarray | None = None,
    ) -> None:
        if not 0 <= i < len(self):
            raise IndexError(f"Individual index {i} out of range for population of size {len(self)}.")
        self._X[i] = x
        self._F[i] = f
        if g is not None and self._G is not None:
            self._G[i] = g
        if h is not None and self._H is not None:
            self._H[i] = h

    def push_back(self, x: np.ndarray) -> None:
        """Evaluate ``x`` and append it."""
        X_new = np.asarray(x, dtype=float).reshape(1, -1)
        result = evaluate_population_with_constraints(self.problem, X_new)
        self.n_eval += 1
        self.replace(
            np.vstack([self._X, X_new]),
            np.vstack([self._F, result.F]),
            _stack(self._G, result.G),
            _stack(self._H, result.H),
        )

    def __repr__(self) -> str:
        return f"Population(problem={type(self.problem).__name__}, size={len(self)}, n_eval={self.n_eval})"


def _stack(old: np.ndarray | None, new: np.ndarray | None) -> np.ndarray | None:
    if new is None:
        return old
    if old is None:
        return new
    return np.vstack([old, new])


__all__ = ["resolve_bounds", "initialize_population", "Population"]
