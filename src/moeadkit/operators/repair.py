"""
Repair collaborators applied to the best offspring of each subproblem.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from moeadkit.foundation.individual import Individual


class IdentityRepair:
    """Returns the solution unchanged."""

    def repair_solution(self, solution: Any) -> Any:
        return solution


class ClampRepair:
    """
    Clips the genotype back into ``[lower, upper]``.

    Repair happens in place: a clipped individual is invalidated and, when a
    completer is given, re-evaluated immediately so that it can take part in
    the dominance checks that follow.
    """

    def __init__(self, lower: np.ndarray, upper: np.ndarray, completer: Any | None = None) -> None:
        self.lower = np.asarray(lower, dtype=float)
        self.upper = np.asarray(upper, dtype=float)
        self.completer = completer

    def repair_solution(self, solution: Individual) -> Individual:
        x = np.asarray(solution.x, dtype=float)
        clipped = np.clip(x, self.lower, self.upper)
        if np.array_equal(clipped, x):
            return solution
        solution.x = clipped
        solution.invalidate()
        if self.completer is not None:
            self.completer.complete([solution])
        return solution


__all__ = ["ClampRepair", "IdentityRepair"]
