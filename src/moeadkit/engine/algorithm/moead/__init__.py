"""
MOEA/D algorithm module.

This package provides the decomposition loop with modular components:
- `moead.py`: main MOEAD class (initialize/step/run loop)
- `initialization.py`: wiring of default collaborators from a config
- `operators.py`: mating and repair building
- `state.py`: MOEADState + result building
- `helpers.py`: best-offspring scan + neighborhood replacement

References:
    Q. Zhang and H. Li, "MOEA/D: A Multiobjective Evolutionary Algorithm Based on
    Decomposition," IEEE Trans. Evolutionary Computation, vol. 11, no. 6, 2007.
"""

from .moead import MOEAD
from .helpers import select_best_offspring, update_neighbors
from .initialization import build_moead
from .operators import build_mating, build_repair
from .state import MOEADState, build_moead_result

__all__ = [
    "MOEAD",
    # Helpers
    "select_best_offspring",
    "update_neighbors",
    # Setup
    "build_moead",
    "build_mating",
    "build_repair",
    # State
    "MOEADState",
    "build_moead_result",
]
