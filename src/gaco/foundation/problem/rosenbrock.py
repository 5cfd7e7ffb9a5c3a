# problem/rosenbrock.py
import numpy as np
from gaco.foundation.problem.base import Problem


class RosenbrockProblem(Problem):
    """Rosenbrock valley, box [-5, 10]^n, minimum 0 at x = (1, ..., 1)."""

    def __init__(self, n_var: int = 2) -> None:
        if n_var < 2:
            raise ValueError("Rosenbrock requires at least 2 variables.")
        self.n_var = int(n_var)
        self.xl = np.full(self.n_var, -5.0)
        self.xu = np.full(self.n_var, 10.0)

    def objectives(self, X: np.ndarray) -> np.ndarray:
        head = X[:, :-1]
        tail = X[:, 1:]
        return np.sum(100.0 * (tail - head**2) ** 2 + (head - 1.0) ** 2, axis=1)

    def best_known(self) -> np.ndarray:
        return np.ones(self.n_var)
