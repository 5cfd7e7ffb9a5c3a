"""Checks rejecting problem/population pairs GACO cannot handle.

Nothing here evaluates the problem, so a rejected call spends no evaluation
budget. Problem-level checks run for every ``evolve`` call; population checks
only once there is at least one generation to run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gaco.foundation.encoding import normalize_encoding
from gaco.foundation.exceptions import ApplicabilityError

if TYPE_CHECKING:
    from gaco.engine.algorithm.components.population import Population
    from gaco.foundation.problem.types import ProblemProtocol

NAME = "GACO"


def check_problem(problem: "ProblemProtocol") -> None:
    n_obj = int(getattr(problem, "n_obj", 1))
    if n_obj != 1:
        raise ApplicabilityError(
            f"Multiple objectives detected in {type(problem).__name__} instance. {NAME} cannot deal with them.",
            reason="multi-objective",
            suggestion="Use a multi-objective algorithm or scalarize the objectives.",
        )
    n_int = int(getattr(problem, "n_int", 0) or 0)
    encoding = normalize_encoding(getattr(problem, "encoding", "real"))
    if n_int > 0 or encoding != "real":
        raise ApplicabilityError(
            f"The problem {type(problem).__name__} has integer variables. {NAME} cannot deal with them.",
            reason="integer-variables",
        )
    if bool(getattr(problem, "stochastic", False)):
        raise ApplicabilityError(
            f"The problem {type(problem).__name__} appears to be stochastic. {NAME} cannot deal with it.",
            reason="stochastic",
            suggestion="Fix the problem seed so that evaluations are repeatable.",
        )


def check_population(pop: "Population", kernel_size: int) -> None:
    size = len(pop)
    if size == 0:
        raise ApplicabilityError(
            f"{NAME} cannot evolve an empty population.",
            reason="empty-population",
        )
    if size < kernel_size:
        raise ApplicabilityError(
            f"{NAME} needs at least {kernel_size} individuals in the population (the kernel size), {size} detected.",
            reason="population-too-small",
            suggestion="Grow the population or reduce kernel_size.",
        )


__all__ = ["check_problem", "check_population"]
