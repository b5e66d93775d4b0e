"""Problem protocol consumed by the evaluation layer."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class ProblemProtocol(Protocol):
    """Box-constrained problem evaluated in batches: ``evaluate(X, out)`` fills ``out["F"]``."""

    n_var: int
    n_obj: int
    xl: float | np.ndarray
    xu: float | np.ndarray

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None: ...


def resolve_bounds_array(problem: ProblemProtocol) -> tuple[np.ndarray, np.ndarray]:
    """
    Bounds of ``problem`` as two float arrays of shape (n_var,).

    Scalar bounds are broadcast to every variable.

    Examples
    --------
    >>> xl, xu = resolve_bounds_array(ZDT1Problem(n_var=30))
    >>> xl.shape
    (30,)
    """
    shape = (int(problem.n_var),)
    try:
        xl = np.broadcast_to(np.asarray(problem.xl, dtype=float), shape).copy()
        xu = np.broadcast_to(np.asarray(problem.xu, dtype=float), shape).copy()
    except ValueError as exc:
        raise ValueError(f"Problem bounds do not match n_var={problem.n_var}.") from exc
    return xl, xu


__all__ = ["ProblemProtocol", "resolve_bounds_array"]
