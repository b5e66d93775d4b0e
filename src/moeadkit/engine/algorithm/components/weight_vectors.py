"""
Weight-vector generation for decomposition.

A run of MOEA/D needs one weight vector per subproblem. They are produced by
oversampling the unit simplex at random (``SimplexSampler``) and keeping a
maximally spread subset of the samples (``SparseSubsetSelector``); the
``Decomposer`` chains both steps.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np

from moeadkit.foundation.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidParameterError,
    MissingInputError,
)


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class WeightVector:
    """
    Immutable vector of non-negative weights, one entry per objective.

    Entries are stored as a read-only float array and are never re-normalized
    after construction.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries) -> None:
        if entries is None:
            raise MissingInputError("entries array")
        arr = np.array(entries, dtype=float)
        if arr.ndim != 1:
            raise InvalidArgumentError(f"Weight vector entries must be one-dimensional, got shape {arr.shape}.")
        if np.any(arr < 0.0) or not np.all(np.isfinite(arr)):
            raise InvalidArgumentError("Weight vector entries must be finite and non-negative.")
        arr.setflags(write=False)
        self._entries = arr

    @property
    def entries(self) -> np.ndarray:
        return self._entries

    def size(self) -> int:
        return int(self._entries.shape[0])

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> float:
        if not -self.size() <= index < self.size():
            raise IndexError("Provided index is not within bounds")
        return float(self._entries[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self._entries.tolist())

    def l2_norm(self) -> float:
        return float(np.sqrt(np.dot(self._entries, self._entries)))

    def dot(self, other: "WeightVector") -> float:
        if other is None:
            raise MissingInputError("weight vector")
        if other.size() != self.size():
            raise DimensionMismatchError(self.size(), other.size())
        return float(np.dot(self._entries, other._entries))

    def __repr__(self) -> str:
        return f"WeightVector({self._entries.tolist()})"


def as_matrix(weights: Sequence[WeightVector]) -> np.ndarray:
    """Stack weight vectors into an (N, n_obj) array."""
    if len(weights) == 0:
        return np.empty((0, 0), dtype=float)
    if any(w is None for w in weights):
        raise MissingInputError("weight vector")
    size = weights[0].size()
    for w in weights:
        if w.size() != size:
            raise DimensionMismatchError(size, w.size())
    return np.vstack([w.entries for w in weights])


class SimplexSampler:
    """
    Draws points uniformly at random on the unit simplex.

    Each point is a vector of independent exponential variates ``-ln(u)``,
    ``u ~ U(0, 1]``, divided by its sum.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def sample(self, count: int, num_objectives: int) -> np.ndarray:
        """Return the samples as a (count, num_objectives) array."""
        if count <= 0:
            raise InvalidParameterError("count", count, "a positive integer")
        if num_objectives <= 0:
            raise InvalidParameterError("num_objectives", num_objectives, "a positive integer")
        # 1 - U[0, 1) lies in (0, 1], keeping the logarithm finite
        u = 1.0 - self.rng.random((count, num_objectives))
        points = -np.log(u)
        sums = points.sum(axis=1, keepdims=True)
        degenerate = sums[:, 0] <= 0.0
        if np.any(degenerate):
            points[degenerate] = 1.0
            sums[degenerate] = float(num_objectives)
        return points / sums

    def fill(self, count: int, num_objectives: int) -> list[WeightVector]:
        return [WeightVector(row) for row in self.sample(count, num_objectives)]


class SparseSubsetSelector:
    """
    Greedy max-min (farthest point) selection of a well spread subset.

    The first candidate seeds the selection. Every further pick is the
    remaining candidate whose Euclidean distance to its closest selected
    point is largest; ties go to the lowest candidate index.
    """

    def select_indices(self, points: np.ndarray, target: int) -> np.ndarray:
        n = int(points.shape[0])
        if target <= 0:
            raise InvalidParameterError("target", target, "a positive integer")
        if target > n:
            raise InvalidArgumentError(
                f"Cannot select {target} weight vectors from {n} candidate(s).",
                "Increase overfill or request fewer subproblems",
                {"target": target, "candidates": n},
            )

        selected = np.empty(target, dtype=int)
        selected[0] = 0
        min_dist = np.linalg.norm(points - points[0], axis=1)
        taken = np.zeros(n, dtype=bool)
        taken[0] = True
        for k in range(1, target):
            # taken points must never win, even against duplicated candidates at distance 0
            scores = np.where(taken, -np.inf, min_dist)
            idx = int(np.argmax(scores))
            selected[k] = idx
            taken[idx] = True
            np.minimum(min_dist, np.linalg.norm(points - points[idx], axis=1), out=min_dist)
        return selected

    def select(self, candidates: Sequence[WeightVector], target: int) -> list[WeightVector]:
        if candidates is None:
            raise MissingInputError("candidate list")
        if target <= 0:
            raise InvalidParameterError("target", target, "a positive integer")
        if target > len(candidates):
            raise InvalidArgumentError(
                f"Cannot select {target} weight vectors from {len(candidates)} candidate(s).",
                "Increase overfill or request fewer subproblems",
                {"target": target, "candidates": len(candidates)},
            )
        idx = self.select_indices(as_matrix(candidates), target)
        return [candidates[i] for i in idx]


class Decomposer:
    """
    Produces exactly ``num_problems`` well spread weight vectors.

    ``overfill * num_problems`` random simplex points are sampled and the
    sparse selector keeps ``num_problems`` of them. Seeding the generator
    makes the result reproducible.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        *,
        sampler: SimplexSampler | None = None,
        selector: SparseSubsetSelector | None = None,
    ) -> None:
        self.sampler = sampler if sampler is not None else SimplexSampler(rng)
        self.selector = selector if selector is not None else SparseSubsetSelector()

    def decompose(self, num_problems: int, num_objectives: int, overfill: int) -> list[WeightVector]:
        if num_problems <= 0:
            raise InvalidParameterError("num_problems", num_problems, "a positive integer")
        if num_objectives <= 0:
            raise InvalidParameterError("num_objectives", num_objectives, "a positive integer")
        if overfill <= 0:
            raise InvalidParameterError("overfill", overfill, "a positive integer")

        candidates = self.sampler.fill(overfill * num_problems, num_objectives)
        weights = self.selector.select(candidates, num_problems)
        _logger().debug(
            "Selected %d weight vectors out of %d simplex samples (%d objectives).",
            len(weights),
            len(candidates),
            num_objectives,
        )
        return weights


__all__ = [
    "Decomposer",
    "SimplexSampler",
    "SparseSubsetSelector",
    "WeightVector",
    "as_matrix",
]
