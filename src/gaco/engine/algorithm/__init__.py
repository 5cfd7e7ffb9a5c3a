"""Algorithm implementations, configuration and shared components."""

from .config import GACOConfig, GACOConfigData
from .gaco import GACO

__all__ = ["GACO", "GACOConfig", "GACOConfigData"]
