"""ZDT1: two objectives, convex Pareto front ``f2 = 1 - sqrt(f1)``."""

from __future__ import annotations

import numpy as np


class ZDT1Problem:
    """
    Zitzler-Deb-Thiele problem 1 on ``[0, 1]^n_var``.

    The front is reached when every variable but the first is zero.
    """

    def __init__(self, n_var: int = 30) -> None:
        self.n_var = int(n_var)
        self.n_obj = 2
        self.xl = 0.0
        self.xu = 1.0

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        f1 = X[:, 0]
        tail = X[:, 1:]
        # a single variable leaves nothing for g to average
        g = 1.0 + 9.0 * tail.mean(axis=1) if tail.shape[1] else np.ones(X.shape[0])
        out["F"][:, 0] = f1
        out["F"][:, 1] = g * (1.0 - np.sqrt(f1 / g))


__all__ = ["ZDT1Problem"]
