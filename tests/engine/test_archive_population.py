import numpy as np
import pytest

from moeadkit.engine.algorithm.components.archive import UnboundedArchive
from moeadkit.engine.algorithm.components.population import Population
from moeadkit.foundation.individual import Individual, Objectives


def _ind(*f):
    return Individual(x=np.zeros(1), objectives=Objectives(f))


class TestPopulation:
    def test_add_remove_by_identity(self):
        pop = Population()
        a, b = _ind(1, 2), _ind(1, 2)
        assert pop.add(a)
        assert pop.add(b)
        assert not pop.add(a)
        assert pop.size() == 2
        assert pop.remove(a)
        assert not pop.remove(a)
        assert a not in pop and b in pop

    def test_iteration_follows_insertion_order(self):
        items = [_ind(i, 0) for i in range(5)]
        pop = Population(items)
        assert list(pop) == items
        assert pop.to_list() == items

    def test_iteration_snapshot_allows_mutation(self):
        items = [_ind(i, 0) for i in range(3)]
        pop = Population(items)
        for sol in pop:
            pop.remove(sol)
        assert len(pop) == 0


class TestUnboundedArchive:
    def test_keeps_mutually_non_dominated(self):
        archive = UnboundedArchive()
        assert archive.update(_ind(1, 4))
        assert archive.update(_ind(4, 1))
        assert archive.update(_ind(2, 2))
        assert len(archive) == 3

    def test_dominated_candidate_rejected(self):
        archive = UnboundedArchive()
        archive.update(_ind(1, 1))
        assert not archive.update(_ind(2, 2))
        assert len(archive) == 1

    def test_equal_objectives_rejected(self):
        archive = UnboundedArchive()
        archive.update(_ind(1, 1))
        assert not archive.update(_ind(1, 1))
        assert len(archive) == 1

    def test_same_object_not_inserted_twice(self):
        archive = UnboundedArchive()
        a = _ind(1, 1)
        assert archive.update(a)
        assert not archive.update(a)

    def test_new_member_evicts_dominated(self):
        archive = UnboundedArchive()
        for sol in (_ind(1, 4), _ind(4, 1), _ind(3, 3)):
            assert archive.update(sol)
        assert archive.update(_ind(2, 2))
        F = archive.objectives()
        assert F.shape == (3, 2)
        assert not any(np.array_equal(row, [3.0, 3.0]) for row in F)

    def test_no_member_dominates_another_after_random_updates(self):
        rng = np.random.default_rng(0)
        archive = UnboundedArchive()
        for f in rng.random((300, 3)):
            archive.update(_ind(*f))
        members = archive.contents()
        for a in members:
            for b in members:
                if a is not b:
                    assert not a.get_objectives().weakly_dominates(b.get_objectives())

    def test_custom_dominance_relation(self):
        # compare only the first objective
        archive = UnboundedArchive(lambda a, b: a.values[0] <= b.values[0])
        archive.update(_ind(1, 9))
        assert not archive.update(_ind(2, 0))
        assert archive.update(_ind(0, 9))
        assert len(archive) == 1

    def test_empty_objectives_export(self):
        assert UnboundedArchive().objectives().shape == (0, 0)


def test_history_reports_archive_length():
    from moeadkit.engine.algorithm.config import MOEADConfig
    from moeadkit.engine.algorithm.moead import build_moead
    from moeadkit.foundation.problem import ZDT1Problem

    moead = build_moead(MOEADConfig.default(num_objectives=2, num_problems=8), ZDT1Problem(n_var=4), seed=2)
    moead.run(3)
    assert [entry["archive_size"] for entry in moead.state.history][-1] == len(moead.archive)
    assert all(entry["archive_size"] >= 1 for entry in moead.state.history)
