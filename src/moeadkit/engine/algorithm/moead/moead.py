# algorithm/moead/moead.py
"""
MOEA/D decomposition loop.

This module contains the MOEAD class with the generational loop
(initialize/step/run).
- Collaborator wiring from a config: initialization.py
- Operator building: operators.py
- State and results: state.py
- Offspring selection and replacement: helpers.py

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Callable

import numpy as np

from moeadkit.engine.algorithm.components.archive import UnboundedArchive, weakly_dominates
from moeadkit.foundation.exceptions import InvalidArgumentError, InvalidParameterError, NotInitializedError

from .helpers import Dominance, select_best_offspring, update_neighbors
from .state import MOEADState, build_moead_result


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


GenerationCallback = Callable[[int, MOEADState], Any]


class MOEAD:
    """
    Multi-Objective Evolutionary Algorithm based on Decomposition.

    The problem is split into ``num_problems`` subproblems, one per weight
    vector. Each generation visits the subproblems in index order; for each
    one, parents are drawn from its neighborhood, the best offspring is
    repaired and then replaces every neighbor representative it weakly
    dominates, and is finally offered to the external archive.

    The loop is strictly sequential: a replacement made for subproblem ``i``
    is visible to subproblem ``i + 1`` in the same generation.

    Parameters
    ----------
    population : PopulationProtocol
        Working population (``size``/``add``/``remove``/iteration).
    individual_factory : SolutionFactory
        Creates solutions until the population holds ``num_problems`` of them.
    completer : Completer
        Evaluates objectives of unevaluated solutions.
    selector : RandomParentSelector
        Picks parent indices from a neighborhood.
    mating : Mating
        Produces ``new_individuals`` offspring from the parents.
    decomposition : Decomposer
        Generates the weight vectors.
    neighborhood_creation : NeighborhoodBuilder
        Builds one neighborhood per weight vector.
    repair : Repair
        Applied to the best offspring before replacement.
    num_objectives, num_problems, neighborhood_size, number_of_parents, new_individuals, overfill : int
        Algorithm sizes; all but ``overfill`` are validated here.
    archive_factory : Callable[[], ArchiveProtocol] | None
        Creates the external archive at initialization (unbounded by default);
        the archive needs ``update`` and ``len``.
    dominance : Callable[[Objectives, Objectives], bool] | None
        Weak-dominance relation (defaults to ``a.weakly_dominates(b)``).

    Raises
    ------
    InvalidArgumentError
        If ``num_objectives``, ``num_problems``, ``neighborhood_size`` or
        ``new_individuals`` is not positive, or ``number_of_parents < 1``.

    Examples
    --------
    >>> moead = build_moead(MOEADConfig.default(num_objectives=2), ZDT1Problem(10), seed=1)
    >>> moead.initialize()
    >>> for _ in range(100):
    ...     moead.step()
    >>> front = moead.archive.objectives()
    """

    def __init__(
        self,
        population: Any,
        individual_factory: Any,
        completer: Any,
        selector: Any,
        mating: Any,
        decomposition: Any,
        neighborhood_creation: Any,
        repair: Any,
        num_objectives: int,
        num_problems: int,
        neighborhood_size: int,
        number_of_parents: int,
        new_individuals: int,
        overfill: int,
        *,
        archive_factory: Callable[[], Any] | None = None,
        dominance: Dominance | None = None,
    ) -> None:
        if num_objectives <= 0:
            raise InvalidParameterError("num_objectives", num_objectives, "a positive integer")
        if num_problems <= 0:
            raise InvalidParameterError("num_problems", num_problems, "a positive integer")
        if neighborhood_size <= 0:
            raise InvalidParameterError("neighborhood_size", neighborhood_size, "a positive integer")
        if new_individuals <= 0:
            raise InvalidParameterError("new_individuals", new_individuals, "a positive integer")
        if number_of_parents < 1:
            raise InvalidParameterError("number_of_parents", number_of_parents, "at least 1")

        self.population = population
        self.individual_factory = individual_factory
        self.completer = completer
        self.selector = selector
        self.mating = mating
        self.decomposition = decomposition
        self.neighborhood_creation = neighborhood_creation
        self.repair = repair
        self.num_objectives = int(num_objectives)
        self.num_problems = int(num_problems)
        self.neighborhood_size = int(neighborhood_size)
        self.number_of_parents = int(number_of_parents)
        self.new_individuals = int(new_individuals)
        self.overfill = int(overfill)
        self.archive_factory = archive_factory or (lambda: UnboundedArchive(dominance))
        self.dominance = dominance or weakly_dominates
        self._st: MOEADState | None = None

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> MOEADState:
        if self._st is None:
            raise NotInitializedError("state")
        return self._st

    @property
    def weights(self) -> list:
        return self.state.weights

    @property
    def neighborhoods(self) -> np.ndarray:
        return self.state.neighborhoods

    @property
    def x(self) -> list:
        return self.state.x

    @property
    def archive(self) -> Any:
        return self.state.archive

    @property
    def is_initialized(self) -> bool:
        return self._st is not None

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def initialize(self) -> MOEADState:
        """
        Generate weight vectors and neighborhoods and fill the representative array.

        Returns
        -------
        MOEADState
            The freshly created run state (also kept on the instance).
        """
        weights = self.decomposition.decompose(self.num_problems, self.num_objectives, self.overfill)
        if len(weights) != self.num_problems:
            raise InvalidArgumentError(
                f"Decomposition returned {len(weights)} weight vectors, expected {self.num_problems}."
            )
        archive = self.archive_factory()

        neighborhoods = np.empty((self.num_problems, self.neighborhood_size), dtype=int)
        for i in range(self.num_problems):
            row = np.asarray(
                self.neighborhood_creation.create(weights[i], weights, self.neighborhood_size), dtype=int
            ).reshape(-1)
            if row.size != self.neighborhood_size:
                raise InvalidArgumentError(
                    f"Neighborhood {i} has {row.size} entries, expected {self.neighborhood_size}."
                )
            neighborhoods[i] = row
        neighborhoods.setflags(write=False)

        population = self.population
        while population.size() < self.num_problems:
            if not population.add(self.individual_factory.create()):
                raise InvalidArgumentError(
                    "Individual factory returned a solution that is already in the population.",
                    "The factory must create a new solution object on every call",
                )

        x = list(islice(iter(population), self.num_problems))
        surplus = [sol for sol in population if not any(sol is rep for rep in x)]
        for sol in surplus:
            population.remove(sol)
        if surplus:
            _logger().debug("Dropped %d surplus solutions from the initial population.", len(surplus))

        self._st = MOEADState(
            weights=weights,
            neighborhoods=neighborhoods,
            x=x,
            population=population,
            archive=archive,
        )
        _logger().info(
            "MOEA/D initialized: %d subproblems, %d objectives, neighborhood size %d.",
            self.num_problems,
            self.num_objectives,
            self.neighborhood_size,
        )
        return self._st

    def step(self) -> int:
        """
        Run one generation over all subproblems in index order.

        Collaborator exceptions propagate unchanged and leave the state as it
        was at the failure point.

        Returns
        -------
        int
            Number of neighbor replacements performed in this generation.

        Raises
        ------
        NotInitializedError
            If called before :meth:`initialize`.
        """
        st = self._st
        if st is None:
            raise NotInitializedError("step")

        replaced = 0
        for i in range(self.num_problems):
            # Representatives must carry objectives before any dominance check.
            self.completer.complete(st.population)

            parent_idx = self.selector.select_parents(st.neighborhoods[i], self.number_of_parents)
            parents = [st.x[j] for j in parent_idx]

            offspring = list(self.mating.get_offspring(self.new_individuals, parents))
            self.completer.complete(offspring)
            best = select_best_offspring(offspring, self.dominance)

            best = self.repair.repair_solution(best)
            self.completer.complete([best])

            replaced += update_neighbors(st, i, best, self.neighborhood_size, self.dominance)
            st.archive.update(best)

        st.generation += 1
        st.replacements += replaced
        archive_size = len(st.archive)
        st.history.append({"generation": st.generation, "replacements": replaced, "archive_size": archive_size})
        _logger().debug(
            "Generation %d: %d replacements, archive size %d.",
            st.generation,
            replaced,
            archive_size,
        )
        return replaced

    def run(self, generations: int, callback: GenerationCallback | None = None) -> dict[str, Any]:
        """
        Initialize if needed and run ``generations`` generations.

        Parameters
        ----------
        generations : int
            Number of calls to :meth:`step`.
        callback : Callable[[int, MOEADState], Any] | None
            Invoked after every generation; returning True stops the run early.

        Returns
        -------
        dict[str, Any]
            Result dictionary, see :func:`build_moead_result`.
        """
        if generations < 0:
            raise InvalidParameterError("generations", generations, "a non-negative integer")
        if self._st is None:
            self.initialize()
        st = self.state
        for _ in range(generations):
            self.step()
            if callback is not None and callback(st.generation, st):
                _logger().info("Run stopped by callback after generation %d.", st.generation)
                break
        # a run of zero generations still reports evaluated representatives
        self.completer.complete(st.population)
        return build_moead_result(st)


__all__ = ["MOEAD"]
