"""GACO: extended ant colony optimization for constrained continuous problems."""

from .engine.algorithm.components.population import Population
from .engine.algorithm.config import GACOConfig, GACOConfigData
from .engine.algorithm.gaco import GACO, LogRecord
from .foundation.exceptions import (
    ApplicabilityError,
    BoundsError,
    ConfigurationError,
    GACOError,
    InvalidParameterError,
    ProblemDimensionError,
    ProblemError,
)
from .foundation.logging import configure_gaco_logging
from .foundation.problem import (
    CEC2006G01Problem,
    HockSchittkowsky71Problem,
    InventoryProblem,
    MINLPRastriginProblem,
    Problem,
    ProblemProtocol,
    RosenbrockProblem,
    ZDT1Problem,
)
from .foundation.version import get_version

__version__ = get_version()

__all__ = [
    "GACO",
    "GACOConfig",
    "GACOConfigData",
    "LogRecord",
    "Population",
    "Problem",
    "ProblemProtocol",
    "RosenbrockProblem",
    "HockSchittkowsky71Problem",
    "CEC2006G01Problem",
    "ZDT1Problem",
    "MINLPRastriginProblem",
    "InventoryProblem",
    "GACOError",
    "ConfigurationError",
    "InvalidParameterError",
    "ProblemError",
    "ApplicabilityError",
    "ProblemDimensionError",
    "BoundsError",
    "configure_gaco_logging",
    "get_version",
    "__version__",
]
