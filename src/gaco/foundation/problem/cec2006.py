# problem/cec2006.py
import numpy as np
from gaco.foundation.problem.base import Problem


class CEC2006G01Problem(Problem):
    """Problem g01 of the CEC 2006 constrained benchmark.

    Quadratic objective with nine linear inequality constraints, 13 variables.
    The global minimum is -15 at x* = (1, ..., 1, 3, 3, 3, 1).
    """

    n_constraints = 9

    def __init__(self) -> None:
        self.n_var = 13
        self.xl = np.zeros(13)
        self.xu = np.ones(13)
        self.xu[9:12] = 100.0

    def objectives(self, X: np.ndarray) -> np.ndarray:
        head = X[:, :4]
        return 5.0 * np.sum(head, axis=1) - 5.0 * np.sum(head**2, axis=1) - np.sum(X[:, 4:], axis=1)

    def constraints(self, X: np.ndarray) -> np.ndarray:
        x = X.T
        G = np.column_stack(
            [
                2.0 * x[0] + 2.0 * x[1] + x[9] + x[10] - 10.0,
                2.0 * x[0] + 2.0 * x[2] + x[9] + x[11] - 10.0,
                2.0 * x[1] + 2.0 * x[2] + x[10] + x[11] - 10.0,
                -8.0 * x[0] + x[9],
                -8.0 * x[1] + x[10],
                -8.0 * x[2] + x[11],
                -2.0 * x[3] - x[4] + x[9],
                -2.0 * x[5] - x[6] + x[10],
                -2.0 * x[7] - x[8] + x[11],
            ]
        )
        return G

    def best_known(self) -> np.ndarray:
        x = np.ones(13)
        x[9:12] = 3.0
        return x
