"""Building blocks shared by the algorithm implementation."""

from .candidates import CandidateSet
from .population import Population, initialize_population, resolve_bounds
from .termination import StagnationCounters, StopReason, StoppingCriteria

__all__ = [
    "CandidateSet",
    "Population",
    "initialize_population",
    "resolve_bounds",
    "StagnationCounters",
    "StopReason",
    "StoppingCriteria",
]
