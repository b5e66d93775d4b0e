"""
Candidate-solution model used when moeadkit drives a problem by itself.

The decomposition loop only relies on the collaborator protocols in
``moeadkit.engine.algorithm.components.protocol``; these classes are the
default implementation of those protocols for real-valued problems.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from moeadkit.foundation.exceptions import DimensionMismatchError
from moeadkit.foundation.problem.types import ProblemProtocol, resolve_bounds_array


class Objectives:
    """Objective values of one solution (all objectives are minimized)."""

    __slots__ = ("_values",)

    def __init__(self, values) -> None:
        arr = np.array(values, dtype=float).reshape(-1)
        arr.setflags(write=False)
        self._values = arr

    @property
    def values(self) -> np.ndarray:
        return self._values

    def size(self) -> int:
        return int(self._values.shape[0])

    def __len__(self) -> int:
        return self.size()

    def _check(self, other: "Objectives") -> np.ndarray:
        if other._values.shape != self._values.shape:
            raise DimensionMismatchError(self.size(), other.size(), what="objective vector")
        return other._values

    def weakly_dominates(self, other: "Objectives") -> bool:
        """True when this vector is no worse than ``other`` in every objective.

        Equal vectors weakly dominate each other, so the relation is not
        antisymmetric and callers must not treat it as a total order.
        """
        return bool(np.all(self._values <= self._check(other)))

    def dominates(self, other: "Objectives") -> bool:
        """True when no worse everywhere and strictly better somewhere."""
        theirs = self._check(other)
        return bool(np.all(self._values <= theirs) and np.any(self._values < theirs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Objectives):
            return NotImplemented
        return self._values.shape == other._values.shape and bool(np.all(self._values == other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Objectives({self._values.tolist()})"


@dataclass(eq=False)
class Individual:
    """
    A real-valued genotype with (lazily computed) objectives.

    Instances compare and hash by identity, which is what the population and
    the representative array rely on when a solution is displaced.
    """

    x: np.ndarray
    objectives: Objectives | None = field(default=None)

    @property
    def is_evaluated(self) -> bool:
        return self.objectives is not None

    def get_objectives(self) -> Objectives:
        if self.objectives is None:
            raise ValueError("Individual has not been evaluated yet.")
        return self.objectives

    def invalidate(self) -> None:
        self.objectives = None


class IndividualFactory:
    """Creates individuals with genotypes drawn uniformly inside the problem bounds."""

    def __init__(self, problem: ProblemProtocol, rng: np.random.Generator) -> None:
        self.xl, self.xu = resolve_bounds_array(problem)
        self.rng = rng

    def create(self) -> Individual:
        return Individual(x=self.rng.uniform(self.xl, self.xu))


__all__ = ["Individual", "IndividualFactory", "Objectives"]
