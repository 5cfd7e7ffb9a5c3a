# problem/inventory.py
import numpy as np
from gaco.foundation.problem.base import Problem


class InventoryProblem(Problem):
    """Stochastic multi-period inventory problem.

    Each variable is the quantity ordered in one week; the objective is the
    sample-average cost (purchase, holding and backorder) over random demand
    scenarios drawn from a generator that advances at every evaluation.
    """

    stochastic = True

    def __init__(self, weeks: int = 4, sample_size: int = 10, seed: int = 0) -> None:
        if weeks <= 0 or sample_size <= 0:
            raise ValueError("weeks and sample_size must be positive.")
        self.n_var = int(weeks)
        self.sample_size = int(sample_size)
        self.seed = int(seed)
        self.xl = np.zeros(self.n_var)
        self.xu = np.full(self.n_var, 200.0)
        self._rng = np.random.default_rng(self.seed)

    def set_seed(self, seed: int) -> None:
        self.seed = int(seed)
        self._rng = np.random.default_rng(self.seed)

    def objectives(self, X: np.ndarray) -> np.ndarray:
        purchase, holding, backorder = 1.0, 0.1, 1.5
        demand = self._rng.uniform(0.0, 100.0, size=(self.sample_size, self.n_var))
        cost = np.zeros(X.shape[0])
        for scenario in demand:
            stock = np.zeros(X.shape[0])
            for week in range(self.n_var):
                stock = stock + X[:, week] - scenario[week]
                cost += purchase * X[:, week] + np.where(stock >= 0, holding * stock, -backorder * stock)
        return cost / self.sample_size
