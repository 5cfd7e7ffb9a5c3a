"""
Utility helpers for constraint handling.
"""

from __future__ import annotations

import numpy as np


def compute_violation(
    G: np.ndarray | None,
    H: np.ndarray | None = None,
    *,
    c_tol: float = 0.0,
    n: int | None = None,
) -> np.ndarray:
    """Total constraint violation per solution.

    Inequalities contribute ``max(g - c_tol, 0)`` (``g <= 0`` satisfied) and
    equalities ``max(|h| - c_tol, 0)``. When both *G* and *H* are ``None``
    (unconstrained) the result is an array of zeros of length *n* (0 if not given).
    """
    parts = []
    if G is not None:
        parts.append(np.sum(np.maximum(np.asarray(G, dtype=float) - c_tol, 0.0), axis=1))
    if H is not None:
        parts.append(np.sum(np.maximum(np.abs(np.asarray(H, dtype=float)) - c_tol, 0.0), axis=1))
    if not parts:
        return np.zeros(n or 0, dtype=float)
    return np.asarray(np.sum(parts, axis=0), dtype=float)


def is_feasible(
    G: np.ndarray | None,
    H: np.ndarray | None = None,
    *,
    c_tol: float = 0.0,
    n: int | None = None,
) -> np.ndarray:
    """Boolean feasibility mask; all-``True`` for unconstrained solutions."""
    return compute_violation(G, H, c_tol=c_tol, n=n) <= 0.0


__all__ = ["compute_violation", "is_feasible"]
