"""DTLZ2: scalable number of objectives, spherical Pareto front."""

from __future__ import annotations

import numpy as np


class DTLZ2Problem:
    """
    DTLZ2 with ``n_obj`` objectives and ``n_var - n_obj + 1`` distance variables.

    Optimal solutions have every distance variable at 0.5 and lie on the
    unit hypersphere in objective space.
    """

    def __init__(self, n_var: int = 12, n_obj: int = 3) -> None:
        if n_var < n_obj:
            raise ValueError(f"DTLZ2 needs n_var >= n_obj (got n_var={n_var}, n_obj={n_obj}).")
        self.n_var = int(n_var)
        self.n_obj = int(n_obj)
        self.xl = 0.0
        self.xu = 1.0

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        m = self.n_obj
        n = X.shape[0]
        g = np.sum((X[:, m - 1 :] - 0.5) ** 2, axis=1)
        theta = X[:, : m - 1] * (np.pi / 2.0)

        # f_i = (1 + g) * cos(theta_0) ... cos(theta_{m-i-2}) * sin(theta_{m-i-1})
        cos_prod = np.hstack([np.ones((n, 1)), np.cumprod(np.cos(theta), axis=1)])
        sin_term = np.hstack([np.ones((n, 1)), np.sin(theta)[:, ::-1]])
        F = cos_prod[:, ::-1] * sin_term
        out["F"][:] = (1.0 + g)[:, None] * F


__all__ = ["DTLZ2Problem"]
