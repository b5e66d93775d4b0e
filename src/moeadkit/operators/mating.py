"""
Mating collaborator: crossover followed by mutation.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from moeadkit.foundation.individual import Individual


class RealMating:
    """
    Produces offspring individuals from real-valued parents.

    Parents are paired at random (distinct partners whenever at least two
    parents are given), each pair is recombined by ``crossover`` and every
    child is then passed through ``mutation``. Offspring are returned
    unevaluated.

    Parameters
    ----------
    crossover : Callable
        ``crossover(parents, rng)`` with parents of shape (n_pairs, 2, n_var).
    mutation : Callable
        ``mutation(X, rng)`` with X of shape (n, n_var).
    rng : np.random.Generator
        Random number generator shared with the rest of the run.
    """

    def __init__(
        self,
        crossover: Callable[[np.ndarray, np.random.Generator], np.ndarray],
        mutation: Callable[[np.ndarray, np.random.Generator], np.ndarray],
        rng: np.random.Generator,
    ) -> None:
        self.crossover = crossover
        self.mutation = mutation
        self.rng = rng

    def get_offspring(self, count: int, parents: Sequence[Individual]) -> list[Individual]:
        if count <= 0:
            return []
        if not parents:
            raise ValueError("Mating requires at least one parent.")

        X_par = np.vstack([np.asarray(p.x, dtype=float) for p in parents])
        n_pairs = (count + 1) // 2
        pairs = np.empty((n_pairs, 2), dtype=int)
        for k in range(n_pairs):
            if X_par.shape[0] >= 2:
                pairs[k] = self.rng.choice(X_par.shape[0], size=2, replace=False)
            else:
                pairs[k] = (0, 0)

        offspring = self.crossover(X_par[pairs], self.rng)
        children = offspring.reshape(n_pairs * 2, -1)[:count]
        children = self.mutation(children, self.rng)
        return [Individual(x=row.copy()) for row in children]


__all__ = ["RealMating"]
