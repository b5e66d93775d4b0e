"""
moeadkit: decomposition-based multi-objective evolutionary optimization.
"""

from .api import optimize_moead
from .engine.algorithm.components import (
    Decomposer,
    NeighborhoodBuilder,
    Population,
    RandomParentSelector,
    SimilarityMeasure,
    SimplexSampler,
    SparseSubsetSelector,
    UnboundedArchive,
    WeightVector,
)
from .engine.algorithm.config import MOEADConfig, MOEADConfigData
from .engine.algorithm.moead import MOEAD, MOEADState, build_moead
from .foundation.eval import ProblemCompleter
from .foundation.individual import Individual, IndividualFactory, Objectives
from .foundation.logging import configure_moeadkit_logging
from .foundation.problem import DTLZ2Problem, ZDT1Problem, make_problem
from .foundation.version import __version__

__all__ = [
    "__version__",
    "optimize_moead",
    "MOEAD",
    "MOEADConfig",
    "MOEADConfigData",
    "MOEADState",
    "build_moead",
    "Decomposer",
    "NeighborhoodBuilder",
    "Population",
    "RandomParentSelector",
    "SimilarityMeasure",
    "SimplexSampler",
    "SparseSubsetSelector",
    "UnboundedArchive",
    "WeightVector",
    "Individual",
    "IndividualFactory",
    "Objectives",
    "ProblemCompleter",
    "DTLZ2Problem",
    "ZDT1Problem",
    "make_problem",
    "configure_moeadkit_logging",
]
