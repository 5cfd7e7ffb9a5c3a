# problem/minlp_rastrigin.py
import numpy as np
from gaco.foundation.problem.base import Problem


class MINLPRastriginProblem(Problem):
    """Mixed-integer Rastrigin: ``n_cont`` real variables followed by ``n_int`` integer ones."""

    encoding = "mixed"

    def __init__(self, n_cont: int = 1, n_int: int = 1) -> None:
        if n_cont < 0 or n_int < 0 or n_cont + n_int == 0:
            raise ValueError("MINLP Rastrigin needs at least one variable.")
        self.n_var = n_cont + n_int
        self.n_int = n_int
        self.xl = np.concatenate([np.full(n_cont, -5.12), np.full(n_int, -10.0)])
        self.xu = np.concatenate([np.full(n_cont, 5.12), np.full(n_int, -5.0)])

    def objectives(self, X: np.ndarray) -> np.ndarray:
        X = X.copy()
        if self.n_int:
            X[:, -self.n_int :] = np.rint(X[:, -self.n_int :])
        return 10.0 * self.n_var + np.sum(X**2 - 10.0 * np.cos(2.0 * np.pi * X), axis=1)
