"""
moeadkit exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All moeadkit-specific exceptions inherit from MOEADKitError for easy catching.

Example:
    try:
        moead = MOEAD(...)
    except InvalidArgumentError as e:
        print(f"Bad configuration: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOEADKitError(Exception):
    """
    Base exception for all moeadkit errors.

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


class ConfigurationError(MOEADKitError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidArgumentError(ConfigurationError, ValueError):
    """Raised when a count, size or vector argument is out of its valid range."""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, suggestion, details)


class InvalidParameterError(InvalidArgumentError):
    """Raised when a named algorithm parameter has an invalid value."""

    def __init__(self, name: str, value: Any, requirement: str) -> None:
        message = f"Invalid {name}: {value!r}."
        suggestion = f"'{name}' must be {requirement}"
        super().__init__(message, suggestion, {"parameter": name, "value": value})


class DimensionMismatchError(InvalidArgumentError):
    """Raised when two vectors that must share a length do not."""

    def __init__(self, expected: int, actual: int, what: str = "weight vector") -> None:
        message = f"Cannot combine {what}s of different sizes ({expected} != {actual})."
        suggestion = "Generate all weight vectors with the same number of objectives"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class MissingInputError(InvalidArgumentError):
    """Raised when a required input (weight vector, neighborhood) is absent."""

    def __init__(self, what: str) -> None:
        message = f"Provided {what} is None."
        super().__init__(message, None, {"input": what})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}.default() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown operator is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} operator '{operator_name}'."
        suggestion = f"Available {operator_type} operators: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class InvalidProblemError(ConfigurationError):
    """Raised when an unknown benchmark problem is requested."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        suggestion = f"Available problems: {', '.join(available)}" if available else None
        super().__init__(message, suggestion, {"problem": problem})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MOEADKitError):
    """Raised when the optimizer is driven in an invalid order."""

    pass


class NotInitializedError(OptimizationError):
    """Raised when a generation is requested before initialization."""

    def __init__(self, operation: str) -> None:
        message = f"{operation}() called before initialize()."
        suggestion = "Call initialize() first, or use run() which initializes on demand"
        super().__init__(message, suggestion, {"operation": operation})


__all__ = [
    "MOEADKitError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidParameterError",
    "DimensionMismatchError",
    "MissingInputError",
    "MissingConfigError",
    "InvalidOperatorError",
    "InvalidProblemError",
    "OptimizationError",
    "NotInitializedError",
]
