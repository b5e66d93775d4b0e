import numpy as np

from moeadkit.engine.algorithm.components import (
    ArchiveProtocol,
    Completer,
    Mating,
    ObjectivesProtocol,
    Population,
    PopulationProtocol,
    Repair,
    SolutionFactory,
    SolutionProtocol,
    UnboundedArchive,
)
from moeadkit.engine.algorithm.config import MOEADConfig
from moeadkit.engine.algorithm.moead import build_moead
from moeadkit.foundation.individual import Individual, Objectives
from moeadkit.foundation.problem import ZDT1Problem


def test_default_collaborators_satisfy_protocols():
    moead = build_moead(MOEADConfig.default(num_objectives=2, num_problems=5), ZDT1Problem(n_var=3), seed=0)
    assert isinstance(moead.individual_factory, SolutionFactory)
    assert isinstance(moead.completer, Completer)
    assert isinstance(moead.mating, Mating)
    assert isinstance(moead.repair, Repair)
    assert isinstance(moead.population, PopulationProtocol)
    assert isinstance(moead.archive_factory(), ArchiveProtocol)


def test_solution_model_satisfies_protocols():
    ind = Individual(x=np.zeros(2), objectives=Objectives([0.0, 1.0]))
    assert isinstance(ind, SolutionProtocol)
    assert isinstance(ind.get_objectives(), ObjectivesProtocol)
    assert isinstance(Population(), PopulationProtocol)
    assert isinstance(UnboundedArchive(), ArchiveProtocol)
