# problem/hock_schittkowsky.py
import numpy as np
from gaco.foundation.problem.base import Problem


class HockSchittkowsky71Problem(Problem):
    """Problem 71 of the Hock-Schittkowsky collection.

    One equality and one inequality constraint on the box [1, 5]^4.
    Best known objective is about 17.014.
    """

    n_constraints = 1
    n_eq_constraints = 1

    def __init__(self) -> None:
        self.n_var = 4
        self.xl = np.full(4, 1.0)
        self.xu = np.full(4, 5.0)

    def objectives(self, X: np.ndarray) -> np.ndarray:
        return X[:, 0] * X[:, 3] * (X[:, 0] + X[:, 1] + X[:, 2]) + X[:, 2]

    def eq_constraints(self, X: np.ndarray) -> np.ndarray:
        return (np.sum(X**2, axis=1) - 40.0).reshape(-1, 1)

    def constraints(self, X: np.ndarray) -> np.ndarray:
        return (25.0 - np.prod(X, axis=1)).reshape(-1, 1)

    def best_known(self) -> np.ndarray:
        return np.array([1.0, 4.74299963, 3.82114998, 1.37940829])
