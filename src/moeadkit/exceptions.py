"""
Public exceptions namespace.

``from moeadkit.exceptions import InvalidArgumentError`` is the supported
import path; the classes live in moeadkit.foundation.exceptions.
"""

from __future__ import annotations

from .foundation.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidOperatorError,
    InvalidParameterError,
    InvalidProblemError,
    MissingConfigError,
    MissingInputError,
    MOEADKitError,
    NotInitializedError,
    OptimizationError,
)

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
