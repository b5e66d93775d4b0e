"""
Unbounded external archive of non-dominated solutions.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import numpy as np

Dominance = Callable[[Any, Any], bool]


def weakly_dominates(a: Any, b: Any) -> bool:
    """Default relation: ``a.weakly_dominates(b)`` on objective objects."""
    return bool(a.weakly_dominates(b))


class UnboundedArchive:
    """
    Keeps every non-dominated solution seen so far.

    ``update`` rejects a candidate that an existing member weakly dominates
    (this also drops objective-space duplicates) and otherwise evicts the
    members the candidate weakly dominates before inserting it. After each
    update no member is weakly dominated by another member.

    Parameters
    ----------
    dominance : Callable[[Objectives, Objectives], bool] | None
        Weak-dominance relation between objective objects.
    """

    def __init__(self, dominance: Dominance | None = None) -> None:
        self._dominance = dominance or weakly_dominates
        self._members: list[Any] = []

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._members))

    def size(self) -> int:
        return len(self._members)

    def update(self, solution: Any) -> bool:
        """Offer ``solution`` to the archive; return True if it was inserted."""
        if any(member is solution for member in self._members):
            return False
        candidate = solution.get_objectives()
        for member in self._members:
            if self._dominance(member.get_objectives(), candidate):
                return False
        self._members = [m for m in self._members if not self._dominance(candidate, m.get_objectives())]
        self._members.append(solution)
        return True

    def contents(self) -> list[Any]:
        return list(self._members)

    def objectives(self) -> np.ndarray:
        """Objective matrix of the archive members, shape (n, n_obj)."""
        if not self._members:
            return np.empty((0, 0), dtype=float)
        return np.vstack([np.asarray(m.get_objectives().values, dtype=float) for m in self._members])


__all__ = ["UnboundedArchive", "weakly_dominates"]
