"""
Base class for class-based custom optimization problems.
"""

from __future__ import annotations

import numpy as np


class Problem:
    """Base class for class-based custom optimization problems.

    Subclass this when your problem needs state (a dataset, a simulator,
    or any data set up in ``__init__``).

    **Required:** set ``n_var``, ``xl``, ``xu`` in ``__init__``.
    **Optional:** override ``n_obj``, ``n_constraints``, ``n_eq_constraints``,
    ``n_int``, ``c_tol`` and ``stochastic`` as class-level attributes or
    instance attributes.

    Example, unconstrained::

        import numpy as np
        from gaco import GACO, Population, Problem

        class Sphere(Problem):
            def __init__(self):
                self.n_var = 3
                self.xl = np.full(3, -5.0)
                self.xu = np.full(3, 5.0)

            def objectives(self, X: np.ndarray) -> np.ndarray:
                return np.sum(X ** 2, axis=1)

        pop = GACO(generations=50, kernel_size=10).evolve(Population(Sphere(), 20, seed=1))

    Example, constrained::

        class Disk(Sphere):
            n_constraints = 1

            def constraints(self, X):
                # Sign convention: g(x) <= 0 means feasible.
                g = 1.0 - np.sum(X, axis=1)   # sum(x) >= 1
                return g.reshape(-1, 1)
    """

    # ------------------------------------------------------------------
    # Class-level defaults; override at class body level or in __init__
    # ------------------------------------------------------------------

    encoding: str = "real"
    """Variable encoding. ``"real"``, ``"integer"`` or ``"mixed"``."""

    n_obj: int = 1
    """Number of objectives. GACO only handles ``1``."""

    n_constraints: int = 0
    """Number of inequality constraints ``g(x) <= 0``."""

    n_eq_constraints: int = 0
    """Number of equality constraints ``h(x) = 0``."""

    n_int: int = 0
    """Number of trailing integer decision variables."""

    c_tol: float = 0.0
    """Tolerance under which a constraint is considered satisfied."""

    stochastic: bool = False
    """Whether ``evaluate`` may return different values for identical inputs."""

    # ------------------------------------------------------------------
    # Engine compatibility
    # ------------------------------------------------------------------

    @property
    def n_constr(self) -> int:
        """Total number of constraints (equalities and inequalities)."""
        return self.n_constraints + self.n_eq_constraints

    def set_c_tol(self, value: float) -> None:
        if value < 0:
            raise ValueError("c_tol must be non-negative.")
        self.c_tol = float(value)

    # ------------------------------------------------------------------
    # User-overridable interface
    # ------------------------------------------------------------------

    def objectives(self, X: np.ndarray) -> np.ndarray:
        """Compute objective values for a batch of solutions.

        Args:
            X: Decision matrix of shape ``(N, n_var)`` where each row is a
               candidate solution.

        Returns:
            Array of shape ``(N, n_obj)`` with objective values to
            **minimize**. A single-objective problem may return a 1-D array
            of length ``N``.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement objectives(self, X).")

    def constraints(self, X: np.ndarray) -> np.ndarray | None:
        """Inequality constraints, shape ``(N, n_constraints)``; ``g(x) <= 0`` is feasible."""
        return None

    def eq_constraints(self, X: np.ndarray) -> np.ndarray | None:
        """Equality constraints, shape ``(N, n_eq_constraints)``; ``h(x) = 0`` is feasible."""
        return None

    # ------------------------------------------------------------------
    # Framework entry point; do not override
    # ------------------------------------------------------------------

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        """Framework evaluation entry point. Override :meth:`objectives`
        (and optionally :meth:`constraints` / :meth:`eq_constraints`) instead of this method."""
        X = np.asarray(X, dtype=float)

        F_computed = np.asarray(self.objectives(X), dtype=float)
        if F_computed.ndim == 1:
            F_computed = F_computed.reshape(-1, self.n_obj)
        _store(out, "F", F_computed)

        if self.n_constraints > 0:
            G_computed = self.constraints(X)
            if G_computed is not None:
                G_computed = np.asarray(G_computed, dtype=float)
                if G_computed.ndim == 1:
                    G_computed = G_computed.reshape(-1, self.n_constraints)
                _store(out, "G", G_computed)

        if self.n_eq_constraints > 0:
            H_computed = self.eq_constraints(X)
            if H_computed is not None:
                H_computed = np.asarray(H_computed, dtype=float)
                if H_computed.ndim == 1:
                    H_computed = H_computed.reshape(-1, self.n_eq_constraints)
                _store(out, "H", H_computed)


def _store(out: dict[str, np.ndarray], key: str, values: np.ndarray) -> None:
    buf = out.get(key)
    if buf is not None and buf.shape == values.shape:
        buf[:] = values
    else:
        out[key] = values


__all__ = ["Problem"]
