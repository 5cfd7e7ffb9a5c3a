from .utils import compute_violation, is_feasible

__all__ = ["compute_violation", "is_feasible"]
