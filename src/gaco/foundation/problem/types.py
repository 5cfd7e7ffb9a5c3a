from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from gaco.foundation.encoding import EncodingLike


@runtime_checkable
class ProblemProtocol(Protocol):
    n_var: int
    n_obj: int
    n_constraints: int
    n_eq_constraints: int
    n_int: int
    xl: float | int | np.ndarray
    xu: float | int | np.ndarray
    c_tol: float
    stochastic: bool
    encoding: EncodingLike

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None: ...


__all__ = ["ProblemProtocol"]
