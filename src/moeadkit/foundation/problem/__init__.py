"""Benchmark problems in the ``evaluate(X, out)`` batch protocol."""

from __future__ import annotations

from typing import Any, Callable

from moeadkit.foundation.exceptions import InvalidProblemError

from .dtlz2 import DTLZ2Problem
from .types import ProblemProtocol, resolve_bounds_array
from .zdt1 import ZDT1Problem

PROBLEMS: dict[str, Callable[..., Any]] = {
    "zdt1": ZDT1Problem,
    "dtlz2": DTLZ2Problem,
}


def make_problem(name: str, **kwargs: Any) -> ProblemProtocol:
    """Instantiate a benchmark problem by name (case-insensitive)."""
    key = name.lower()
    if key not in PROBLEMS:
        raise InvalidProblemError(name, sorted(PROBLEMS))
    return PROBLEMS[key](**kwargs)


__all__ = [
    "DTLZ2Problem",
    "PROBLEMS",
    "ProblemProtocol",
    "ZDT1Problem",
    "make_problem",
    "resolve_bounds_array",
]
