# algorithm/moead/operators.py
"""
Operator building for MOEA/D.

Turns the (method, params) pairs of a MOEADConfigData into the mating and
repair collaborators used by the decomposition loop.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from moeadkit.foundation.exceptions import InvalidOperatorError
from moeadkit.foundation.problem.types import ProblemProtocol, resolve_bounds_array
from moeadkit.operators.mating import RealMating
from moeadkit.operators.real import PolynomialMutation, SBXCrossover, resolve_prob_expression
from moeadkit.operators.repair import ClampRepair, IdentityRepair

CROSSOVER_ALIASES = {"sbx", "simulated_binary"}
MUTATION_ALIASES = {"pm", "polynomial"}
REPAIR: dict[str, Callable[..., Any]] = {
    "none": lambda xl, xu, completer: IdentityRepair(),
    "identity": lambda xl, xu, completer: IdentityRepair(),
    "clamp": lambda xl, xu, completer: ClampRepair(xl, xu, completer),
    "clip": lambda xl, xu, completer: ClampRepair(xl, xu, completer),
}


def build_mating(cfg: Any, problem: ProblemProtocol, rng: np.random.Generator) -> RealMating:
    """Build the SBX + polynomial-mutation mating for a real-valued problem.

    Raises
    ------
    InvalidOperatorError
        If the configured crossover or mutation is not available.
    """
    cross_method, cross_params = cfg.crossover
    mut_method, mut_params = cfg.mutation
    if str(cross_method).lower() not in CROSSOVER_ALIASES:
        raise InvalidOperatorError("crossover", str(cross_method), sorted(CROSSOVER_ALIASES))
    if str(mut_method).lower() not in MUTATION_ALIASES:
        raise InvalidOperatorError("mutation", str(mut_method), sorted(MUTATION_ALIASES))

    xl, xu = resolve_bounds_array(problem)
    n_var = problem.n_var
    crossover = SBXCrossover(
        prob_crossover=float(cross_params.get("prob", 0.95)),
        eta=float(cross_params.get("eta", 20.0)),
        lower=xl,
        upper=xu,
    )
    mutation = PolynomialMutation(
        prob_mutation=resolve_prob_expression(mut_params.get("prob"), n_var, 1.0 / max(1, n_var)),
        eta=float(mut_params.get("eta", 20.0)),
        lower=xl,
        upper=xu,
    )
    return RealMating(crossover, mutation, rng)


def build_repair(cfg: Any, problem: ProblemProtocol, completer: Any = None) -> Any:
    """Build the repair collaborator; no repair configured means identity."""
    if cfg.repair is None:
        return IdentityRepair()
    method, _ = cfg.repair
    key = str(method).lower()
    if key not in REPAIR:
        raise InvalidOperatorError("repair", str(method), sorted(REPAIR))
    xl, xu = resolve_bounds_array(problem)
    return REPAIR[key](xl, xu, completer)


__all__ = ["build_mating", "build_repair"]
