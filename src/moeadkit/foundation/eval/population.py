from __future__ import annotations

import numpy as np


def evaluate_population(problem, X: np.ndarray) -> np.ndarray:
    """
    Evaluate a batch of genotypes and return the objective matrix F.
    """
    out = {"F": np.empty((X.shape[0], problem.n_obj))}
    problem.evaluate(X, out)
    return out["F"]


__all__ = ["evaluate_population"]
