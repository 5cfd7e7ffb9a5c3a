"""Kernel model (the pheromone analogue) and the sampler drawing new ants from it.

Reference:
    Socha, K. and Dorigo, M. (2008). Ant colony optimization for continuous
    domains. European Journal of Operational Research, 185(3), 1155-1173.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from gaco.engine.algorithm.config.gaco import GREEDY_CONVERGENCE_SPEED


def kernel_weights(kernel_size: int, convergence_speed: float) -> np.ndarray:
    """Normalized Gaussian rank weights; rank 1 is the heaviest."""
    if kernel_size == 1:
        return np.ones(1)
    spread = convergence_speed * kernel_size
    ranks = np.arange(kernel_size, dtype=float)
    omega = np.exp(-(ranks**2) / (2.0 * spread**2)) / (spread * math.sqrt(2.0 * math.pi))
    return omega / omega.sum()


def focus_factor(focus: float, generation: int, n_gen_mark: int) -> float:
    """Divisor applied to every standard deviation after ``generation`` completed generations."""
    return (1.0 + focus) * (1.0 + generation / n_gen_mark)


@dataclass
class KernelModel:
    """Per-variable Gaussian mixtures built from the ranked kernel.

    Row ``i`` of ``means``/``sigmas`` is the component of rank ``i + 1``;
    ``weights[i]`` is its mixture weight, shared by all variables.
    """

    means: np.ndarray
    sigmas: np.ndarray
    weights: np.ndarray
    focus_effective: float

    @property
    def size(self) -> int:
        return int(self.means.shape[0])

    @property
    def kernel_spread(self) -> float:
        return float(self.sigmas.mean())

    def mixture(self, variable: int) -> dict[int, tuple[float, float, float]]:
        """Rank (1-based) -> (mean, standard deviation, weight) for one variable."""
        return {
            rank + 1: (float(self.means[rank, variable]), float(self.sigmas[rank, variable]), float(self.weights[rank]))
            for rank in range(self.size)
        }

    @classmethod
    def build(
        cls,
        kernel_X: np.ndarray,
        xl: np.ndarray,
        xu: np.ndarray,
        *,
        generation: int,
        convergence_speed: float,
        threshold: int,
        focus: float,
        n_gen_mark: int,
    ) -> "KernelModel":
        """Build the model from kernel decision vectors sorted best first.

        From ``threshold`` completed generations on, the greedy convergence
        speed replaces the configured one.
        """
        k, n_var = kernel_X.shape
        q = GREEDY_CONVERGENCE_SPEED if generation >= threshold else convergence_speed
        weights = kernel_weights(k, q)
        divisor = focus_factor(focus, generation, n_gen_mark)
        if k == 1:
            sigmas = np.broadcast_to((xu - xl) / 2.0, (1, n_var)).copy()
        else:
            distances = np.abs(kernel_X[:, None, :] - kernel_X[None, :, :])
            sigmas = distances.sum(axis=1) / (k - 1)
        return cls(means=kernel_X.copy(), sigmas=sigmas / divisor, weights=weights, focus_effective=divisor)


def sample_ants(
    model: KernelModel,
    n_ants: int,
    xl: np.ndarray,
    xu: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw ``n_ants`` vectors: per variable, pick a component by weight and sample its Gaussian."""
    n_var = model.means.shape[1]
    components = rng.choice(model.size, size=(n_ants, n_var), p=model.weights)
    noise = rng.standard_normal((n_ants, n_var))
    cols = np.arange(n_var)
    X = model.means[components, cols] + model.sigmas[components, cols] * noise
    np.clip(X, xl, xu, out=X)
    return X


__all__ = ["KernelModel", "kernel_weights", "focus_factor", "sample_ants"]
