"""
Collaborator protocols of the decomposition loop.

MOEA/D itself never looks inside a solution: it asks collaborators to create,
evaluate, recombine and repair solutions, and compares them only through
their objectives. Any object satisfying these protocols can be plugged in.
"""

from __future__ import annotations

from typing import Any, Collection, Iterable, Iterator, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ObjectivesProtocol(Protocol):
    def weakly_dominates(self, other: Any) -> bool: ...


@runtime_checkable
class SolutionProtocol(Protocol):
    def get_objectives(self) -> ObjectivesProtocol: ...


@runtime_checkable
class SolutionFactory(Protocol):
    """Creates fresh (usually unevaluated) solutions for the initial population."""

    def create(self) -> SolutionProtocol: ...


@runtime_checkable
class Completer(Protocol):
    """Evaluates objectives of every given solution; a no-op for evaluated ones."""

    def complete(self, solutions: Iterable[SolutionProtocol]) -> None: ...


@runtime_checkable
class Mating(Protocol):
    """Produces exactly ``count`` offspring from the given parents."""

    def get_offspring(self, count: int, parents: Sequence[SolutionProtocol]) -> Collection[SolutionProtocol]: ...


@runtime_checkable
class Repair(Protocol):
    """Problem-specific improvement step; may return its input unchanged."""

    def repair_solution(self, solution: SolutionProtocol) -> SolutionProtocol: ...


@runtime_checkable
class ArchiveProtocol(Protocol):
    """Non-dominated archive maintained through single-candidate updates."""

    def update(self, solution: SolutionProtocol) -> bool: ...

    def __len__(self) -> int: ...


@runtime_checkable
class PopulationProtocol(Protocol):
    def size(self) -> int: ...

    def add(self, solution: SolutionProtocol) -> bool: ...

    def remove(self, solution: SolutionProtocol) -> bool: ...

    def __iter__(self) -> Iterator[SolutionProtocol]: ...


__all__ = [
    "ArchiveProtocol",
    "Completer",
    "Mating",
    "ObjectivesProtocol",
    "PopulationProtocol",
    "Repair",
    "SolutionFactory",
    "SolutionProtocol",
]
