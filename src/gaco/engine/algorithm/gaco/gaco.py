"""GACO core algorithm implementation.

Extended ant colony optimization for single-objective continuous problems,
with constraints handled through the oracle penalty method. Each generation
the best ``kernel_size`` solutions found so far (the kernel) define a
Gaussian mixture per variable from which a new colony of ants is sampled.

Reference:
    Schlüter, M., Egea, J.A. and Banga, J.R. (2009). Extended ant colony
    optimization for non-convex mixed integer nonlinear programming.
    Computers & Operations Research, 36(7), 2217-2229.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from gaco.engine.algorithm.components.population import resolve_bounds
from gaco.engine.algorithm.components.termination import StopReason, StoppingCriteria
from gaco.engine.algorithm.config.gaco import GACOConfigData
from gaco.foundation.checkpoint import load_checkpoint, save_checkpoint
from gaco.foundation.eval.population import evaluate_population_with_constraints
from .applicability import check_population, check_problem
from .kernel import KernelModel, sample_ants
from .log import HEADER, LogRecord, format_record, record_from_sequence
from .state import RunContext

if TYPE_CHECKING:
    from gaco.engine.algorithm.components.candidates import CandidateSet
    from gaco.engine.algorithm.components.population import Population

__all__ = ["GACO"]

STATE_VERSION = 1


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class GACO:
    """Extended Ant Colony Optimization.

    Parameters
    ----------
    generations : int
        Number of generations per ``evolve`` call.
    kernel_size : int
        Number of solutions kept in the kernel (the solution archive).
    convergence_speed : float
        Spread of the rank weights; small values favour the best ranked ants.
    oracle : float
        Initial oracle of the penalty method.
    accuracy : float
        Weight of the quadratic violation term added to the oracle penalty.
    threshold : int
        Generation from which the greedy convergence speed (0.01) is used.
    fitness_stop : float, optional
        Stop once a feasible objective at or below this value has been found.
    n_gen_mark : int
        Generations over which the standard deviations shrink by one unit of the focus divisor.
    impstop : int
        Stop after this many consecutive generations without improvement.
    evalstop : int
        Stop after this many evaluations without improvement.
    focus : float
        Extra contraction of the standard deviations (greedier search).
    memory : bool
        Carry oracle, counters, kernel, log and RNG across ``evolve`` calls.
    adaptation_rate : float
        Fraction of the gap to the best objective closed by each oracle update.
    seed : int, optional
        Seed of the random stream; drawn from OS entropy when omitted.
    config : GACOConfigData, optional
        A prebuilt configuration, replacing all the values above.

    Examples
    --------
    >>> from gaco import GACO, Population, RosenbrockProblem
    >>> pop = Population(RosenbrockProblem(2), 20, seed=23)
    >>> algo = GACO(generations=50, kernel_size=15, seed=23)
    >>> algo.set_verbosity(1)
    >>> pop = algo.evolve(pop)
    >>> len(algo.get_log())
    50
    """

    def __init__(
        self,
        generations: int = 1,
        kernel_size: int = 63,
        convergence_speed: float = 1.0,
        oracle: float = 0.0,
        accuracy: float = 0.01,
        threshold: int = 1,
        fitness_stop: float | None = None,
        n_gen_mark: int = 7,
        impstop: int = 100000,
        evalstop: int = 100000,
        focus: float = 0.0,
        memory: bool = False,
        adaptation_rate: float = 1.0,
        seed: int | None = None,
        *,
        config: GACOConfigData | None = None,
    ) -> None:
        if config is None:
            config = GACOConfigData(
                generations=generations,
                kernel_size=kernel_size,
                convergence_speed=convergence_speed,
                oracle=oracle,
                accuracy=accuracy,
                threshold=threshold,
                fitness_stop=fitness_stop,
                n_gen_mark=n_gen_mark,
                impstop=impstop,
                evalstop=evalstop,
                focus=focus,
                memory=memory,
                adaptation_rate=adaptation_rate,
                seed=seed,
            )
        self.cfg = config
        self._seed = int(config.seed)  # type: ignore[arg-type]
        self._verbosity = 0
        self._log: list[LogRecord] = []
        self._ctx: RunContext | None = None
        self.stop_reason: StopReason | None = None

    # -------------------------------------------------------------------------
    # Main entry point
    # -------------------------------------------------------------------------

    def evolve(self, pop: "Population") -> "Population":
        """Evolve ``pop`` in place and return it.

        Raises
        ------
        ApplicabilityError
            For multi-objective, integer or stochastic problems, empty
            populations and populations smaller than the kernel.
        """
        cfg = self.cfg
        problem = pop.problem
        check_problem(problem)
        if not cfg.memory:
            self._log = []
        self.stop_reason = None
        if cfg.generations == 0:
            return pop
        check_population(pop, cfg.kernel_size)

        xl, xu = resolve_bounds(problem)
        c_tol = float(getattr(problem, "c_tol", 0.0))
        if cfg.memory and self._ctx is not None:
            ctx = self._ctx
        else:
            ctx = RunContext.fresh(cfg.oracle, self._seed)
        self._ctx = ctx

        initial = ctx.register(pop.X, pop.F, pop.G, pop.H, c_tol)
        ctx.counters.observe(initial.objective, initial.violation)
        pool = initial if ctx.archive is None else ctx.archive.concat(initial)
        pool = self._update_kernel(ctx, pool)
        model = self._build_model(ctx, xl, xu)

        criteria = StoppingCriteria(cfg.generations, cfg.impstop, cfg.evalstop, cfg.fitness_stop)
        n_ants = len(pop)
        n_eval_start = ctx.n_eval
        if self._verbosity > 0:
            _logger().info(HEADER)

        generation = 0
        while True:
            X = sample_ants(model, n_ants, xl, xu, ctx.rng)
            result = evaluate_population_with_constraints(problem, X)
            ants = ctx.register(X, result.F, result.G, result.H, c_tol)
            ctx.n_eval += n_ants
            ctx.generation += 1
            generation += 1

            ctx.counters.record(ants.objective, ants.violation)
            pool = self._update_kernel(ctx, ctx.archive.concat(ants))  # type: ignore[union-attr]
            model = self._build_model(ctx, xl, xu)
            reason = criteria.check(generation, ctx.counters)

            if self._verbosity > 0 and (ctx.generation - 1) % self._verbosity == 0:
                self._append_log(ctx, ants, model)
            if reason is not None:
                self.stop_reason = reason
                break

        _logger().debug("GACO stopped after %d generations: %s", generation, reason.value)
        best, _ = ctx.rank(pool, cfg.accuracy)
        best = best.take(np.arange(n_ants))
        pop.replace(best.X, best.F, best.G, best.H)
        pop.n_eval += ctx.n_eval - n_eval_start
        return pop

    def _update_kernel(self, ctx: RunContext, pool: "CandidateSet") -> "CandidateSet":
        ranked, _ = ctx.rank(pool, self.cfg.accuracy)
        ctx.oracle.update(ranked, self.cfg.adaptation_rate, self.cfg.accuracy)
        ctx.archive = ranked.take(np.arange(min(self.cfg.kernel_size, len(ranked))))
        return ranked

    def _build_model(self, ctx: RunContext, xl: np.ndarray, xu: np.ndarray) -> KernelModel:
        cfg = self.cfg
        return KernelModel.build(
            ctx.archive.X,  # type: ignore[union-attr]
            xl,
            xu,
            generation=ctx.generation,
            convergence_speed=cfg.convergence_speed,
            threshold=cfg.threshold,
            focus=cfg.focus,
            n_gen_mark=cfg.n_gen_mark,
        )

    def _append_log(self, ctx: RunContext, ants: "CandidateSet", model: KernelModel) -> None:
        archive = ctx.archive
        assert archive is not None
        record = LogRecord(
            generation=ctx.generation,
            evaluations=ctx.n_eval,
            best_fitness=float(archive.objective[0]),
            dx=float(np.linalg.norm(ants.X.max(axis=0) - ants.X.min(axis=0))),
            feasible_count=int(ants.feasible.sum()),
            constraint_violation=float(archive.violation[0]),
            oracle_value=float(ctx.oracle.oracle),
            kernel_spread=model.kernel_spread,
            focus_effective=model.focus_effective,
        )
        self._log.append(record)
        _logger().info(format_record(record))

    # -------------------------------------------------------------------------
    # Runtime controls
    # -------------------------------------------------------------------------

    def set_verbosity(self, level: int) -> None:
        """0 disables the log; ``n > 0`` records every ``n``-th generation."""
        if level < 0:
            raise ValueError("verbosity must be non-negative.")
        self._verbosity = int(level)

    def get_verbosity(self) -> int:
        return self._verbosity

    def set_seed(self, seed: int) -> None:
        """Reseed the random stream used by the next run."""
        if seed < 0:
            raise ValueError("seed must be non-negative.")
        self._seed = int(seed)
        if self._ctx is not None:
            self._ctx.rng = np.random.default_rng(self._seed)

    def get_seed(self) -> int:
        return self._seed

    def get_log(self) -> list[LogRecord]:
        return list(self._log)

    @property
    def state(self) -> RunContext | None:
        """Context of the last run (oracle, counters, kernel archive)."""
        return self._ctx

    @property
    def current_oracle(self) -> float:
        return self.cfg.oracle if self._ctx is None else self._ctx.oracle.oracle

    @property
    def best_penalty(self) -> float:
        """Lowest penalized fitness in the kernel pool under the current oracle."""
        return math.inf if self._ctx is None else self._ctx.oracle.best_penalty

    def get_name(self) -> str:
        return "GACO: Ant Colony Optimization"

    def get_extra_info(self) -> str:
        cfg = self.cfg
        lines = [
            f"Generations: {cfg.generations}",
            f"Accuracy parameter: {cfg.accuracy!r}",
            f"Kernel size: {cfg.kernel_size}",
            f"Convergence speed parameter: {cfg.convergence_speed!r}",
            f"Threshold parameter: {cfg.threshold}",
            f"Standard deviations convergence speed parameter: {cfg.n_gen_mark}",
            f"Improvement stopping criterion: {cfg.impstop}",
            f"Evaluation stopping criterion: {cfg.evalstop}",
            f"Fitness stopping criterion: {cfg.fitness_stop!r}",
            f"Focus parameter: {cfg.focus!r}",
            f"Memory: {cfg.memory}",
            f"Adaptation rate: {cfg.adaptation_rate!r}",
            f"Oracle parameter: {cfg.oracle!r}",
            f"Current oracle: {self.current_oracle!r}",
            f"Best penalized fitness: {self.best_penalty!r}",
            f"Seed: {self._seed}",
            f"Verbosity: {self._verbosity}",
        ]
        return "".join(f"\t{line}\n" for line in lines)

    def __str__(self) -> str:
        return f"Algorithm name: {self.get_name()} [stochastic]\nExtra info:\n{self.get_extra_info()}"

    def __repr__(self) -> str:
        return f"GACO(generations={self.cfg.generations}, kernel_size={self.cfg.kernel_size}, seed={self._seed})"

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": STATE_VERSION,
            "config": self.cfg.to_dict(),
            "seed": self._seed,
            "verbosity": self._verbosity,
            "log": [list(record) for record in self._log],
            "context": None if self._ctx is None else self._ctx.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GACO":
        version = data.get("version", 0)
        if version != STATE_VERSION:
            raise ValueError(f"Unsupported GACO state version: {version}")
        algo = cls(config=GACOConfigData.from_dict(data["config"]))
        algo._seed = int(data["seed"])
        algo._verbosity = int(data["verbosity"])
        algo._log = [record_from_sequence(values) for values in data["log"]]
        context = data.get("context")
        algo._ctx = None if context is None else RunContext.from_dict(context)
        return algo

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "GACO":
        return cls.from_dict(json.loads(text))

    def save(self, path: str | Path) -> Path:
        return save_checkpoint(path, self.to_dict())

    @classmethod
    def load(cls, path: str | Path) -> "GACO":
        return cls.from_dict(load_checkpoint(path))
