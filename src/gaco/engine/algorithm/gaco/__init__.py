"""
GACO algorithm module.

This package provides the extended ant colony optimizer with modular components:
- `gaco.py`: main GACO class (evolve loop, runtime controls, persistence)
- `applicability.py`: problem/population checks run before any evaluation
- `penalty.py`: oracle penalty and oracle state
- `kernel.py`: kernel model (weighted Gaussian mixtures) and ant sampler
- `state.py`: RunContext carried through (and optionally across) runs
- `log.py`: LogRecord and log comparison helpers

References:
    Schlüter, M., Egea, J.A. and Banga, J.R. (2009). Extended ant colony
    optimization for non-convex mixed integer nonlinear programming.
    Computers & Operations Research, 36(7), 2217-2229.
"""

from .applicability import check_population, check_problem
from .gaco import GACO
from .kernel import KernelModel, focus_factor, kernel_weights, sample_ants
from .log import APPROX_FIELDS, EXACT_FIELDS, LogRecord, logs_match, records_match
from .penalty import OracleState, oracle_penalty
from .state import RunContext

__all__ = [
    "GACO",
    # Applicability
    "check_problem",
    "check_population",
    # Kernel
    "KernelModel",
    "kernel_weights",
    "focus_factor",
    "sample_ants",
    # Penalty
    "OracleState",
    "oracle_penalty",
    # State
    "RunContext",
    # Log
    "LogRecord",
    "EXACT_FIELDS",
    "APPROX_FIELDS",
    "records_match",
    "logs_match",
]
