"""
Working population of representative solutions.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Population:
    """
    Insertion-ordered set of solutions compared by identity.

    Two distinct solution objects with equal genotypes are both kept; adding
    the same object twice is a no-op.
    """

    def __init__(self, solutions: Iterable[Any] = ()) -> None:
        self._members: dict[int, Any] = {}
        for sol in solutions:
            self.add(sol)

    def size(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._members.values()))

    def __contains__(self, solution: object) -> bool:
        return id(solution) in self._members

    def add(self, solution: Any) -> bool:
        key = id(solution)
        if key in self._members:
            return False
        self._members[key] = solution
        return True

    def remove(self, solution: Any) -> bool:
        return self._members.pop(id(solution), None) is not None

    def to_list(self) -> list[Any]:
        return list(self._members.values())


__all__ = ["Population"]
