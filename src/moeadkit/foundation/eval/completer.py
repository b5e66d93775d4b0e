"""Batch evaluation of individuals that do not carry objectives yet."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from moeadkit.foundation.individual import Individual, Objectives
from moeadkit.foundation.problem.types import ProblemProtocol

from .population import evaluate_population


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class ProblemCompleter:
    """
    Evaluates individuals through a problem's ``evaluate(X, out)`` method.

    Already-evaluated individuals are skipped, so completing the same
    collection twice costs nothing the second time.

    Attributes
    ----------
    n_eval : int
        Number of objective evaluations performed so far.
    """

    def __init__(self, problem: ProblemProtocol) -> None:
        self.problem = problem
        self.n_eval = 0

    def complete(self, individuals: Iterable[Individual]) -> None:
        pending = [ind for ind in individuals if not ind.is_evaluated]
        if not pending:
            return
        X = np.vstack([np.asarray(ind.x, dtype=float) for ind in pending])
        F = evaluate_population(self.problem, X)
        for ind, f in zip(pending, F):
            ind.objectives = Objectives(f)
        self.n_eval += len(pending)
        _logger().debug("Evaluated %d individuals (total %d).", len(pending), self.n_eval)


__all__ = ["ProblemCompleter"]
