# algorithm/moead/initialization.py
"""
Wiring helpers for MOEA/D.

Builds a ready-to-run MOEAD instance for a problem in the ``evaluate(X, out)``
protocol from a MOEADConfigData: population, factory, completer, parent
selector, mating, decomposition, neighborhood builder, repair and archive.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from moeadkit.engine.algorithm.components.archive import UnboundedArchive
from moeadkit.engine.algorithm.components.neighborhoods import NeighborhoodBuilder
from moeadkit.engine.algorithm.components.population import Population
from moeadkit.engine.algorithm.components.selection import RandomParentSelector
from moeadkit.engine.algorithm.components.weight_vectors import Decomposer
from moeadkit.foundation.eval.completer import ProblemCompleter
from moeadkit.foundation.exceptions import InvalidArgumentError
from moeadkit.foundation.individual import IndividualFactory

from .moead import MOEAD
from .operators import build_mating, build_repair

if TYPE_CHECKING:
    from moeadkit.engine.algorithm.config import MOEADConfigData
    from moeadkit.foundation.problem.types import ProblemProtocol


def build_moead(
    cfg: "MOEADConfigData",
    problem: "ProblemProtocol",
    seed: int | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> MOEAD:
    """Wire all default collaborators for ``problem``.

    Parameters
    ----------
    cfg : MOEADConfigData
        Algorithm configuration.
    problem : ProblemProtocol
        Problem with ``n_var``, ``n_obj``, bounds and ``evaluate(X, out)``.
    seed : int | None
        Seed for a fresh generator; ignored when ``rng`` is given.
    rng : np.random.Generator | None
        Shared random generator for every stochastic component.

    Returns
    -------
    MOEAD
        Uninitialized algorithm instance.
    """
    if int(problem.n_obj) != cfg.num_objectives:
        raise InvalidArgumentError(
            f"Problem has {problem.n_obj} objectives but the configuration expects {cfg.num_objectives}.",
            "Set num_objectives to the problem's n_obj",
            {"n_obj": problem.n_obj, "num_objectives": cfg.num_objectives},
        )
    rng = rng if rng is not None else np.random.default_rng(seed)
    completer = ProblemCompleter(problem)

    return MOEAD(
        population=Population(),
        individual_factory=IndividualFactory(problem, rng),
        completer=completer,
        selector=RandomParentSelector(rng),
        mating=build_mating(cfg, problem, rng),
        decomposition=Decomposer(rng),
        neighborhood_creation=NeighborhoodBuilder(cfg.similarity),
        repair=build_repair(cfg, problem, completer),
        num_objectives=cfg.num_objectives,
        num_problems=cfg.num_problems,
        neighborhood_size=cfg.neighborhood_size,
        number_of_parents=cfg.number_of_parents,
        new_individuals=cfg.new_individuals,
        overfill=cfg.overfill,
        archive_factory=UnboundedArchive,
    )


__all__ = ["build_moead"]
