"""
Neighborhood construction for MOEA/D subproblems.

Every subproblem mates and replaces only inside its neighborhood: the
``size`` weight vectors closest to its own weight vector under a
``SimilarityMeasure``. The target itself takes part in the ranking, so a
subproblem normally appears first in its own neighborhood.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

import numpy as np

from moeadkit.foundation.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidParameterError,
    MissingInputError,
)

from .weight_vectors import WeightVector, as_matrix


class SimilarityMeasure(str, Enum):
    """Comparators between weight vectors."""

    EUCLIDEAN = "euclidean"
    COSINE = "cosine"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "str | SimilarityMeasure") -> "SimilarityMeasure":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ", ".join(m.value for m in cls)
            raise InvalidArgumentError(
                f"Unknown similarity measure '{value}'.",
                f"Available measures: {available}",
                {"similarity": value},
            ) from None


def euclidean_distance(a: WeightVector, b: WeightVector) -> float:
    if a.size() != b.size():
        raise DimensionMismatchError(a.size(), b.size())
    diff = a.entries - b.entries
    return float(np.sqrt(np.dot(diff, diff)))


def cosine_similarity(a: WeightVector, b: WeightVector) -> float:
    norm_a = a.l2_norm()
    norm_b = b.l2_norm()
    if norm_a == 0.0 or norm_b == 0.0:
        raise InvalidArgumentError("Cosine similarity is undefined for zero-norm weight vectors.")
    return a.dot(b) / (norm_a * norm_b)


def _euclidean_keys(target: np.ndarray, points: np.ndarray) -> np.ndarray:
    return np.linalg.norm(points - target, axis=1)


def _cosine_keys(target: np.ndarray, points: np.ndarray) -> np.ndarray:
    target_norm = np.linalg.norm(target)
    norms = np.linalg.norm(points, axis=1)
    if target_norm == 0.0 or np.any(norms == 0.0):
        raise InvalidArgumentError(
            "Cosine similarity is undefined for zero-norm weight vectors.",
            "Use the euclidean measure when weight vectors may be all zeros",
        )
    # larger similarity means closer, so negate to sort ascending
    return -(points @ target) / (norms * target_norm)


# Closeness keys: smaller is always closer.
_CLOSENESS: dict[SimilarityMeasure, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    SimilarityMeasure.EUCLIDEAN: _euclidean_keys,
    SimilarityMeasure.COSINE: _cosine_keys,
}


class NeighborhoodBuilder:
    """
    Ranks candidate weight vectors by closeness to a target vector.

    Equal closeness keys keep candidate order (stable sort).

    Parameters
    ----------
    similarity : SimilarityMeasure | str
        ``"euclidean"`` (default) or ``"cosine"``.
    """

    def __init__(self, similarity: SimilarityMeasure | str = SimilarityMeasure.EUCLIDEAN) -> None:
        self.similarity = SimilarityMeasure.parse(similarity)

    def set_similarity_measure(self, similarity: SimilarityMeasure | str) -> None:
        self.similarity = SimilarityMeasure.parse(similarity)

    def closeness(self, target: WeightVector, points: np.ndarray) -> np.ndarray:
        """Closeness key of each row of ``points`` relative to ``target``."""
        if points.shape[1] != target.size():
            raise DimensionMismatchError(target.size(), int(points.shape[1]))
        return _CLOSENESS[self.similarity](target.entries, points)

    def create(
        self,
        target: WeightVector,
        candidates: Sequence[WeightVector],
        size: int,
    ) -> np.ndarray:
        """
        Return the indices of the ``size`` candidates closest to ``target``.

        Parameters
        ----------
        target : WeightVector
            Vector owning the neighborhood.
        candidates : Sequence[WeightVector]
            Vectors to rank, possibly including ``target`` itself.
        size : int
            Number of indices to return.

        Returns
        -------
        np.ndarray
            Integer indices into ``candidates``, most similar first.

        Raises
        ------
        InvalidArgumentError
            If ``target`` or ``candidates`` is None (``MissingInputError``),
            or ``size`` is not in ``[1, len(candidates)]``.
        """
        if target is None:
            raise MissingInputError("weight vector")
        if candidates is None:
            raise MissingInputError("candidate list")
        if size <= 0:
            raise InvalidParameterError("neighborhood size", size, "a positive integer")
        if size > len(candidates):
            raise InvalidArgumentError(
                f"Neighborhood size {size} exceeds the number of candidates ({len(candidates)}).",
                "Use a neighborhood size no larger than the number of subproblems",
                {"size": size, "candidates": len(candidates)},
            )
        keys = self.closeness(target, as_matrix(candidates))
        order = np.argsort(keys, kind="stable")
        return order[:size].astype(int, copy=False)

    def create_all(self, weights: Sequence[WeightVector], size: int) -> np.ndarray:
        """Neighborhoods of every weight vector as an (N, size) index array."""
        if weights is None:
            raise MissingInputError("weight vector list")
        neighbors = np.empty((len(weights), max(size, 0)), dtype=int)
        for i, w in enumerate(weights):
            neighbors[i] = self.create(w, weights, size)
        return neighbors


__all__ = [
    "NeighborhoodBuilder",
    "SimilarityMeasure",
    "cosine_similarity",
    "euclidean_distance",
]
