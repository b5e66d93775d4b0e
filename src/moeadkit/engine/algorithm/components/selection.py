"""
Parent selection inside a subproblem neighborhood.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from moeadkit.foundation.exceptions import InvalidArgumentError, MissingInputError


class RandomParentSelector:
    """
    Draws distinct parent indices uniformly at random from a neighborhood.

    When every entry of the neighborhood is requested, the neighborhood is
    returned as-is (original order, no random draw).
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def select_parents(self, neighborhood: Sequence[int] | np.ndarray, number_of_parents: int) -> list[int]:
        """
        Parameters
        ----------
        neighborhood : Sequence[int] | np.ndarray
            Subproblem indices forming the mating pool (at least two).
        number_of_parents : int
            How many distinct positions to draw, ``2 <= n <= len(neighborhood)``.

        Returns
        -------
        list[int]
            ``number_of_parents`` entries of ``neighborhood``.
        """
        if neighborhood is None:
            raise MissingInputError("neighborhood array")
        pool = np.asarray(neighborhood, dtype=int).reshape(-1)
        if pool.size < 2:
            raise InvalidArgumentError("Provided neighborhood array is smaller than 2!")
        if number_of_parents < 2:
            raise InvalidArgumentError(
                f"Provided number of parents must be greater or equal 2 (got {number_of_parents})."
            )
        if number_of_parents > pool.size:
            raise InvalidArgumentError(
                f"Can not pick {number_of_parents} from neighborhood which only contains {pool.size} item(s)!"
            )

        if number_of_parents == pool.size:
            return pool.tolist()
        positions = self.rng.permutation(pool.size)[:number_of_parents]
        return pool[positions].tolist()


__all__ = ["RandomParentSelector"]
