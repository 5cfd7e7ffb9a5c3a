"""Algorithm configuration dataclasses, builders and validation."""

from .gaco import (
    GREEDY_CONVERGENCE_SPEED,
    GACOConfig,
    GACOConfigData,
    threshold_upper_bound,
    validate_gaco_config,
)

__all__ = [
    "GACOConfig",
    "GACOConfigData",
    "GREEDY_CONVERGENCE_SPEED",
    "threshold_upper_bound",
    "validate_gaco_config",
]
