"""Variation, mating and repair operators."""

from .mating import RealMating
from .real import PolynomialMutation, SBXCrossover, resolve_prob_expression
from .repair import ClampRepair, IdentityRepair

__all__ = [
    "ClampRepair",
    "IdentityRepair",
    "PolynomialMutation",
    "RealMating",
    "SBXCrossover",
    "resolve_prob_expression",
]
