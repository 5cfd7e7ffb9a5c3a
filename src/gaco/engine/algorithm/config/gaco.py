"""GACO configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from gaco.foundation.exceptions import InvalidParameterError

from .base import _SerializableConfig

GREEDY_CONVERGENCE_SPEED = 0.01


def threshold_upper_bound(generations: int) -> int | None:
    """Largest admissible ``threshold`` for a configuration, ``None`` when unbounded.

    ``threshold`` is the generation from which the kernel weights switch to the
    greedy convergence speed, so it has to be reachable within one call:
    ``1 <= threshold <= generations``. The bound is lifted only when
    ``generations`` is 0, since nothing runs. The kernel size does not tighten
    it: a kernel of 15 ants with threshold 150 over 200 generations is valid.
    """
    if generations == 0:
        return None
    return generations


def _draw_seed() -> int:
    return int(np.random.SeedSequence().entropy % (2**32))


@dataclass(frozen=True)
class GACOConfigData(_SerializableConfig):
    generations: int = 1
    kernel_size: int = 63
    convergence_speed: float = 1.0
    oracle: float = 0.0
    accuracy: float = 0.01
    threshold: int = 1
    fitness_stop: Optional[float] = None
    n_gen_mark: int = 7
    impstop: int = 100000
    evalstop: int = 100000
    focus: float = 0.0
    memory: bool = False
    adaptation_rate: float = 1.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        validate_gaco_config(self)
        object.__setattr__(self, "memory", bool(self.memory))
        if self.fitness_stop is not None:
            object.__setattr__(self, "fitness_stop", float(self.fitness_stop))
        if self.seed is None:
            object.__setattr__(self, "seed", _draw_seed())


def _require_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(name, value, "it must be an integer")
    if value < minimum:
        raise InvalidParameterError(name, value, f"it must be >= {minimum}")


def _require_real(name: str, value: Any) -> float:
    try:
        real = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, "it must be a real number") from None
    if math.isnan(real):
        raise InvalidParameterError(name, value, "it must not be NaN")
    return real


def validate_gaco_config(cfg: GACOConfigData) -> None:
    """Reject an invalid configuration, naming the first offending parameter."""
    _require_int("generations", cfg.generations, 0)
    _require_int("kernel_size", cfg.kernel_size, 1)
    _require_int("n_gen_mark", cfg.n_gen_mark, 1)
    _require_int("impstop", cfg.impstop, 1)
    _require_int("evalstop", cfg.evalstop, 1)
    if _require_real("convergence_speed", cfg.convergence_speed) <= 0.0:
        raise InvalidParameterError("convergence_speed", cfg.convergence_speed, "it must be > 0")
    if not math.isfinite(_require_real("oracle", cfg.oracle)):
        raise InvalidParameterError("oracle", cfg.oracle, "it must be finite")
    if _require_real("accuracy", cfg.accuracy) < 0.0:
        raise InvalidParameterError("accuracy", cfg.accuracy, "it must be >= 0")
    if cfg.fitness_stop is not None:
        _require_real("fitness_stop", cfg.fitness_stop)
    if _require_real("focus", cfg.focus) < 0.0:
        raise InvalidParameterError("focus", cfg.focus, "it must be >= 0")
    rate = _require_real("adaptation_rate", cfg.adaptation_rate)
    if rate < 0.0 or rate > 1.0:
        raise InvalidParameterError("adaptation_rate", cfg.adaptation_rate, "it must lie in [0, 1]")
    _require_int("threshold", cfg.threshold, 1)
    bound = threshold_upper_bound(cfg.generations)
    if bound is not None and cfg.threshold > bound:
        raise InvalidParameterError("threshold", cfg.threshold, f"it must be <= generations ({bound})")
    if cfg.seed is not None:
        _require_int("seed", cfg.seed, 0)


class GACOConfig:
    """Declarative configuration holder for GACO settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def generations(self, value: int) -> "GACOConfig":
        self._cfg["generations"] = value
        return self

    def kernel_size(self, value: int) -> "GACOConfig":
        self._cfg["kernel_size"] = value
        return self

    def convergence_speed(self, value: float) -> "GACOConfig":
        self._cfg["convergence_speed"] = value
        return self

    def oracle(self, value: float) -> "GACOConfig":
        self._cfg["oracle"] = value
        return self

    def accuracy(self, value: float) -> "GACOConfig":
        self._cfg["accuracy"] = value
        return self

    def threshold(self, value: int) -> "GACOConfig":
        self._cfg["threshold"] = value
        return self

    def fitness_stop(self, value: float | None) -> "GACOConfig":
        self._cfg["fitness_stop"] = value
        return self

    def n_gen_mark(self, value: int) -> "GACOConfig":
        self._cfg["n_gen_mark"] = value
        return self

    def impstop(self, value: int) -> "GACOConfig":
        self._cfg["impstop"] = value
        return self

    def evalstop(self, value: int) -> "GACOConfig":
        self._cfg["evalstop"] = value
        return self

    def focus(self, value: float) -> "GACOConfig":
        self._cfg["focus"] = value
        return self

    def memory(self, enabled: bool = True) -> "GACOConfig":
        self._cfg["memory"] = bool(enabled)
        return self

    def adaptation_rate(self, value: float) -> "GACOConfig":
        self._cfg["adaptation_rate"] = value
        return self

    def seed(self, value: int) -> "GACOConfig":
        self._cfg["seed"] = value
        return self

    def fixed(self) -> GACOConfigData:
        return GACOConfigData(**self._cfg)


__all__ = [
    "GACOConfig",
    "GACOConfigData",
    "GREEDY_CONVERGENCE_SPEED",
    "threshold_upper_bound",
    "validate_gaco_config",
]
