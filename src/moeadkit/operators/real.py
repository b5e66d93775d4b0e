"""
Real-valued variation: bounded SBX crossover and polynomial mutation.

Both operators work on whole batches: crossover takes parent pairs shaped
(n_pairs, 2, n_var), mutation takes a matrix shaped (n, n_var). Inputs are
never modified in place.

References:
    K. Deb and R. B. Agrawal, "Simulated Binary Crossover for Continuous
    Search Space," Complex Systems, vol. 9, 1995.
"""

from __future__ import annotations

import numpy as np

_EPS = 1.0e-14


def _ensure_bounds(lower, upper) -> tuple[np.ndarray, np.ndarray]:
    xl = np.asarray(lower, dtype=float)
    xu = np.asarray(upper, dtype=float)
    if xl.ndim != 1 or xl.shape != xu.shape:
        raise ValueError(f"Bounds must be 1-D arrays of equal length (got {xl.shape} and {xu.shape}).")
    if np.any(xl > xu):
        raise ValueError("Every lower bound must be <= its upper bound.")
    return xl, xu


def _spread_factor(u: np.ndarray, beta: np.ndarray, eta: float) -> np.ndarray:
    """Bounded SBX spread factor for uniform draws ``u`` and bound distances ``beta``."""
    alpha = 2.0 - np.power(np.maximum(beta, _EPS), -(eta + 1.0))
    alpha = np.maximum(alpha, _EPS)
    ua = u * alpha
    inside = u <= 1.0 / alpha
    base = np.where(inside, ua, 1.0 / np.maximum(2.0 - ua, _EPS))
    return np.power(base, 1.0 / (eta + 1.0))


class SBXCrossover:
    """
    Simulated binary crossover restricted to the variable bounds.

    Parameters
    ----------
    prob_crossover : float
        Probability that a pair is recombined at all.
    eta : float
        Distribution index; larger values keep children closer to parents.
    prob_var : float
        Per-variable recombination probability inside a recombined pair.
    lower, upper : array-like
        Variable bounds, shape (n_var,).
    """

    def __init__(self, prob_crossover: float = 0.9, eta: float = 20.0, prob_var: float = 0.5, *, lower, upper) -> None:
        self.prob = float(prob_crossover)
        self.eta = float(eta)
        self.prob_var = float(prob_var)
        self.lower, self.upper = _ensure_bounds(lower, upper)

    def __call__(self, parents, rng: np.random.Generator) -> np.ndarray:
        P = np.array(parents, dtype=float)
        if P.ndim != 3 or P.shape[1] != 2:
            raise ValueError(f"Parents must have shape (n_pairs, 2, n_var), got {P.shape}.")
        if P.shape[2] != self.lower.shape[0]:
            raise ValueError(f"Parents have {P.shape[2]} variables but bounds have {self.lower.shape[0]}.")
        if P.shape[0] == 0:
            return P

        rows = np.flatnonzero(rng.random(P.shape[0]) <= self.prob)
        if rows.size == 0:
            return P

        a = P[rows, 0, :]
        b = P[rows, 1, :]
        lo = np.minimum(a, b)
        hi = np.maximum(a, b)
        span = hi - lo
        mask = (span > _EPS) & (rng.random(a.shape) <= self.prob_var)
        if not mask.any():
            return P

        u = rng.random(a.shape)
        safe_span = np.maximum(span, _EPS)
        bq_lo = _spread_factor(u, 1.0 + 2.0 * (lo - self.lower) / safe_span, self.eta)
        bq_hi = _spread_factor(u, 1.0 + 2.0 * (self.upper - hi) / safe_span, self.eta)
        c_lo = np.clip(0.5 * (lo + hi - bq_lo * span), self.lower, self.upper)
        c_hi = np.clip(0.5 * (lo + hi + bq_hi * span), self.lower, self.upper)

        # children are handed out to the two slots in random order per variable
        flip = rng.random(a.shape) <= 0.5
        first = np.where(flip, c_hi, c_lo)
        second = np.where(flip, c_lo, c_hi)
        P[rows, 0, :] = np.where(mask, first, a)
        P[rows, 1, :] = np.where(mask, second, b)
        return P


class PolynomialMutation:
    """Polynomial mutation with per-variable probability ``prob_mutation``."""

    def __init__(self, prob_mutation: float, eta: float = 20.0, *, lower, upper) -> None:
        self.prob = float(prob_mutation)
        self.eta = float(eta)
        self.lower, self.upper = _ensure_bounds(lower, upper)

    def __call__(self, X, rng: np.random.Generator) -> np.ndarray:
        Y = np.array(X, dtype=float)
        if Y.ndim != 2:
            raise ValueError(f"Mutation input must have shape (n, n_var), got {Y.shape}.")
        if Y.shape[0] == 0:
            return Y
        if Y.shape[1] != self.lower.shape[0]:
            raise ValueError(f"Input has {Y.shape[1]} variables but bounds have {self.lower.shape[0]}.")

        width = self.upper - self.lower
        mask = (rng.random(Y.shape) <= self.prob) & (width > 0.0)
        u = rng.random(Y.shape)
        if not mask.any():
            return Y

        safe_width = np.where(width > 0.0, width, 1.0)
        d_lo = np.clip((Y - self.lower) / safe_width, 0.0, 1.0)
        d_hi = np.clip((self.upper - Y) / safe_width, 0.0, 1.0)
        p = self.eta + 1.0
        down = np.power(2.0 * u + (1.0 - 2.0 * u) * np.power(1.0 - d_lo, p), 1.0 / p) - 1.0
        up = 1.0 - np.power(2.0 * (1.0 - u) + 2.0 * (u - 0.5) * np.power(1.0 - d_hi, p), 1.0 / p)
        delta = np.where(u <= 0.5, down, up)

        mutated = np.clip(Y + delta * width, self.lower, self.upper)
        return np.where(mask, mutated, Y)


def resolve_prob_expression(value, n_var: int, default: float = 0.1) -> float:
    """
    Turn a probability setting into a float in [0, 1].

    Accepts numbers, numeric strings and ``"k/n"`` expressions (``k`` divided
    by the number of variables, ``"1/n"`` when ``k`` is omitted). Unparseable
    strings and None give ``default``.

    Examples
    --------
    >>> resolve_prob_expression("1/n", 20)
    0.05
    >>> resolve_prob_expression("2/n", 10)
    0.2
    """
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        try:
            if text.endswith("/n"):
                numerator = text[:-2].strip()
                prob = (float(numerator) if numerator else 1.0) / max(1, n_var)
            else:
                prob = float(text)
        except ValueError:
            return default
    else:
        prob = float(value)
    return min(1.0, max(0.0, prob))


__all__ = ["PolynomialMutation", "SBXCrossover", "resolve_prob_expression"]
