"""
GACO exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All GACO-specific exceptions inherit from GACOError for easy catching.

Example:
    try:
        algo = GACO(generations=10, accuracy=-1.0)
    except GACOError as e:
        print(f"Construction failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class GACOError(Exception):
    """
    Base exception for all GACO errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GACOError, ValueError):
    """Raised when a configuration is invalid."""

    pass


class InvalidParameterError(ConfigurationError):
    """Raised when a single configuration value violates its admissible range."""

    def __init__(self, parameter: str, value: Any, requirement: str) -> None:
        message = f"Invalid value for '{parameter}': {value!r} ({requirement})."
        suggestion = f"Choose '{parameter}' so that {requirement}"
        super().__init__(
            message,
            suggestion,
            {"parameter": parameter, "value": value, "requirement": requirement},
        )
        self.parameter = parameter


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(GACOError):
    """Base class for problem-related errors."""

    pass


class ApplicabilityError(ProblemError, ValueError):
    """Raised when a problem/population pair cannot be handled by the algorithm."""

    def __init__(self, message: str, reason: str, suggestion: str | None = None) -> None:
        super().__init__(message, suggestion, {"reason": reason})
        self.reason = reason


class ProblemDimensionError(ProblemError):
    """Raised when problem dimensions are invalid."""

    def __init__(
        self,
        message: str,
        n_var: int | None = None,
        n_obj: int | None = None,
    ) -> None:
        suggestion = "Check problem dimensions: n_var (variables), n_obj (objectives)"
        super().__init__(message, suggestion, {"n_var": n_var, "n_obj": n_obj})


class BoundsError(ProblemError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure xl <= xu for all variables and bounds have correct shape"
        super().__init__(message, suggestion)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "GACOError",
    # Configuration
    "ConfigurationError",
    "InvalidParameterError",
    # Problem
    "ProblemError",
    "ApplicabilityError",
    "ProblemDimensionError",
    "BoundsError",
]
