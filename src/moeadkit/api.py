"""
One-call entry point for running MOEA/D on a problem.
"""

from __future__ import annotations

from typing import Any, Callable

from moeadkit.engine.algorithm.config import MOEADConfig, MOEADConfigData
from moeadkit.engine.algorithm.moead import MOEADState, build_moead
from moeadkit.foundation.problem.types import ProblemProtocol


def optimize_moead(
    problem: ProblemProtocol,
    config: MOEADConfigData | None = None,
    *,
    seed: int = 0,
    generations: int | None = None,
    callback: Callable[[int, MOEADState], Any] | None = None,
) -> dict[str, Any]:
    """
    Run MOEA/D with the default real-valued collaborators.

    Parameters
    ----------
    problem : ProblemProtocol
        Problem to solve.
    config : MOEADConfigData | None
        Algorithm settings; defaults to ``MOEADConfig.default(problem.n_obj)``.
    seed : int
        Seed of the shared random generator.
    generations : int | None
        Overrides ``config.generations`` when given.
    callback : Callable | None
        Per-generation callback; returning True stops early.

    Returns
    -------
    dict[str, Any]
        Result dictionary with X, F, weights, neighborhoods, generations,
        replacements, archive and evaluations.

    Examples
    --------
    >>> from moeadkit import ZDT1Problem, optimize_moead
    >>> result = optimize_moead(ZDT1Problem(n_var=10), seed=1, generations=50)
    >>> result["archive"]["F"].shape[1]
    2
    """
    cfg = config if config is not None else MOEADConfig.default(num_objectives=problem.n_obj)
    moead = build_moead(cfg, problem, seed)
    n_gen = cfg.generations if generations is None else generations
    result = moead.run(n_gen, callback=callback)
    result["evaluations"] = moead.completer.n_eval
    return result


__all__ = ["optimize_moead"]
