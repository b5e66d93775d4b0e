# algorithm/moead/helpers.py
"""
Support functions for MOEA/D.

Offspring selection and neighborhood replacement, both driven by an injected
weak-dominance relation ``(objectives, objectives) -> bool``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from moeadkit.foundation.exceptions import OptimizationError

if TYPE_CHECKING:
    from .state import MOEADState

Dominance = Callable[[Any, Any], bool]


def select_best_offspring(offspring: Iterable[Any], dominance: Dominance) -> Any:
    """Scan offspring left to right, keeping the latest one that weakly dominates the current best.

    Weak dominance is not a total order, so the result depends on the order
    of ``offspring``: a later offspring equal in objectives to the current
    best replaces it.
    """
    it = iter(offspring)
    try:
        best = next(it)
    except StopIteration:
        raise OptimizationError("Mating returned no offspring.") from None
    for candidate in it:
        if dominance(candidate.get_objectives(), best.get_objectives()):
            best = candidate
    return best


def update_neighbors(st: "MOEADState", idx: int, best: Any, neighborhood_size: int, dominance: Dominance) -> int:
    """Replace every neighbor of subproblem ``idx`` that ``best`` weakly dominates.

    Replaced representatives leave the population once no other subproblem
    still refers to them; ``best`` joins it on its first replacement.

    Returns
    -------
    int
        Number of representative slots taken over by ``best``.
    """
    objectives = best.get_objectives()
    replaced = 0
    for j in st.neighborhoods[idx][:neighborhood_size]:
        j = int(j)
        current = st.x[j]
        if current is best:
            continue
        if dominance(objectives, current.get_objectives()):
            st.x[j] = best
            if not any(sol is current for sol in st.x):
                st.population.remove(current)
            st.population.add(best)
            replaced += 1
    return replaced


__all__ = ["select_best_offspring", "update_neighbors"]
