"""
Building blocks shared by the decomposition loop.

- `weight_vectors.py`: WeightVector, simplex sampling, sparse selection, Decomposer
- `neighborhoods.py`: similarity measures and NeighborhoodBuilder
- `selection.py`: parent selection inside a neighborhood
- `population.py` / `archive.py`: default population and external archive
- `protocol.py`: collaborator protocols
"""

from .archive import UnboundedArchive, weakly_dominates
from .neighborhoods import NeighborhoodBuilder, SimilarityMeasure, cosine_similarity, euclidean_distance
from .population import Population
from .protocol import (
    ArchiveProtocol,
    Completer,
    Mating,
    ObjectivesProtocol,
    PopulationProtocol,
    Repair,
    SolutionFactory,
    SolutionProtocol,
)
from .selection import RandomParentSelector
from .weight_vectors import Decomposer, SimplexSampler, SparseSubsetSelector, WeightVector, as_matrix

__all__ = [
    "ArchiveProtocol",
    "Completer",
    "Decomposer",
    "Mating",
    "NeighborhoodBuilder",
    "ObjectivesProtocol",
    "Population",
    "PopulationProtocol",
    "RandomParentSelector",
    "Repair",
    "SimilarityMeasure",
    "SimplexSampler",
    "SolutionFactory",
    "SolutionProtocol",
    "SparseSubsetSelector",
    "UnboundedArchive",
    "WeightVector",
    "as_matrix",
    "cosine_similarity",
    "euclidean_distance",
    "weakly_dominates",
]
