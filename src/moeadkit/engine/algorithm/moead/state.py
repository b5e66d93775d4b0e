"""
MOEA/D state container and result building.

This module provides the MOEADState dataclass that holds all mutable state
of a decomposition run: the representative array ``x``, the working
population and the external archive, next to the read-only weight vectors
and neighborhoods computed at initialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from moeadkit.engine.algorithm.components.weight_vectors import WeightVector, as_matrix


@dataclass
class MOEADState:
    """
    Mutable state container for MOEA/D.

    Attributes
    ----------
    weights : list[WeightVector]
        One weight vector per subproblem.
    neighborhoods : np.ndarray
        Neighborhood indices, shape (num_problems, neighborhood_size), most
        similar first.
    x : list
        Current representative solution of each subproblem.
    population : Any
        Working population; always holds exactly the solutions referenced by ``x``.
    archive : Any
        External non-dominated archive.
    generation : int
        Number of completed generations.
    replacements : int
        Total number of neighbor replacements so far.
    """

    weights: list[WeightVector]
    neighborhoods: np.ndarray
    x: list[Any]
    population: Any
    archive: Any
    generation: int = 0
    replacements: int = 0
    history: list[dict[str, int]] = field(default_factory=list)

    @property
    def num_problems(self) -> int:
        return len(self.weights)

    def weight_matrix(self) -> np.ndarray:
        return as_matrix(self.weights)


def _objective_matrix(solutions: list[Any]) -> np.ndarray:
    if not solutions:
        return np.empty((0, 0), dtype=float)
    return np.vstack([np.asarray(s.get_objectives().values, dtype=float) for s in solutions])


def _genotype_matrix(solutions: list[Any]) -> np.ndarray | None:
    if not solutions or not all(hasattr(s, "x") for s in solutions):
        return None
    return np.vstack([np.asarray(s.x, dtype=float) for s in solutions])


def build_moead_result(state: MOEADState) -> dict[str, Any]:
    """
    Build the result dictionary from MOEA/D state.

    Returns
    -------
    dict[str, Any]
        Result dictionary with X, F, weights, neighborhoods, generations and
        archive contents. ``X`` entries are None for solutions without a
        genotype array.
    """
    members = state.archive.contents() if hasattr(state.archive, "contents") else list(state.archive)
    return {
        "X": _genotype_matrix(state.x),
        "F": _objective_matrix(state.x),
        "weights": state.weight_matrix(),
        "neighborhoods": state.neighborhoods,
        "generations": state.generation,
        "replacements": state.replacements,
        "archive": {"X": _genotype_matrix(members), "F": _objective_matrix(members)},
    }


__all__ = [
    "MOEADState",
    "build_moead_result",
]
