import numpy as np
import pytest

from moeadkit.engine.algorithm.config import MOEADConfig
from moeadkit.engine.algorithm.moead.operators import build_mating, build_repair
from moeadkit.foundation.eval import ProblemCompleter
from moeadkit.foundation.exceptions import InvalidOperatorError
from moeadkit.foundation.individual import Individual, Objectives
from moeadkit.foundation.problem import ZDT1Problem
from moeadkit.operators.mating import RealMating
from moeadkit.operators.real import PolynomialMutation, SBXCrossover, resolve_prob_expression
from moeadkit.operators.repair import ClampRepair, IdentityRepair


def _bounds(n):
    return np.zeros(n), np.ones(n)


class TestSBXCrossover:
    def test_children_within_bounds(self):
        xl, xu = _bounds(5)
        rng = np.random.default_rng(0)
        parents = rng.random((20, 2, 5))
        children = SBXCrossover(1.0, 15.0, lower=xl, upper=xu)(parents, rng)
        assert children.shape == parents.shape
        assert np.all((children >= 0.0) & (children <= 1.0))

    def test_zero_probability_copies_parents(self):
        xl, xu = _bounds(3)
        rng = np.random.default_rng(1)
        parents = rng.random((4, 2, 3))
        children = SBXCrossover(0.0, lower=xl, upper=xu)(parents, rng)
        assert np.array_equal(children, parents)

    def test_shape_checks(self):
        xl, xu = _bounds(3)
        op = SBXCrossover(lower=xl, upper=xu)
        with pytest.raises(ValueError):
            op(np.zeros((4, 3)), np.random.default_rng(0))
        with pytest.raises(ValueError):
            op(np.zeros((2, 2, 4)), np.random.default_rng(0))

    def test_bad_bounds(self):
        with pytest.raises(ValueError):
            SBXCrossover(lower=np.ones(2), upper=np.zeros(2))


class TestPolynomialMutation:
    def test_respects_bounds(self):
        xl, xu = _bounds(4)
        rng = np.random.default_rng(3)
        X = rng.random((50, 4))
        out = PolynomialMutation(1.0, 5.0, lower=xl, upper=xu)(X, rng)
        assert not np.array_equal(out, X)
        assert np.all((out >= 0.0) & (out <= 1.0))

    def test_does_not_modify_input(self):
        xl, xu = _bounds(4)
        X = np.full((3, 4), 0.5)
        PolynomialMutation(1.0, lower=xl, upper=xu)(X, np.random.default_rng(0))
        assert np.all(X == 0.5)


@pytest.mark.parametrize(
    "value, expected",
    [("1/n", 0.1), ("2/n", 0.2), (0.3, 0.3), ("0.4", 0.4), (None, 0.05), ("junk", 0.05), (7, 1.0)],
)
def test_resolve_prob_expression(value, expected):
    assert resolve_prob_expression(value, 10, default=0.05) == pytest.approx(expected)


class TestRealMating:
    def _mating(self, n_var=4, seed=0):
        xl, xu = _bounds(n_var)
        return RealMating(
            SBXCrossover(1.0, lower=xl, upper=xu),
            PolynomialMutation(0.25, lower=xl, upper=xu),
            np.random.default_rng(seed),
        )

    @pytest.mark.parametrize("count", [1, 2, 3])
    def test_offspring_count(self, count):
        parents = [Individual(x=np.full(4, v)) for v in (0.2, 0.8)]
        offspring = self._mating().get_offspring(count, parents)
        assert len(offspring) == count
        assert all(not child.is_evaluated for child in offspring)
        assert all(child not in parents for child in offspring)

    def test_parents_untouched(self):
        parents = [Individual(x=np.full(4, 0.2)), Individual(x=np.full(4, 0.8))]
        self._mating().get_offspring(2, parents)
        assert np.all(parents[0].x == 0.2) and np.all(parents[1].x == 0.8)

    def test_requires_parents(self):
        with pytest.raises(ValueError):
            self._mating().get_offspring(1, [])


class TestRepair:
    def test_identity(self):
        ind = Individual(x=np.zeros(2))
        assert IdentityRepair().repair_solution(ind) is ind

    def test_clamp_in_bounds_returns_same(self):
        ind = Individual(x=np.full(2, 0.5), objectives=Objectives([1.0, 1.0]))
        assert ClampRepair(*_bounds(2)).repair_solution(ind) is ind

    def test_clamp_out_of_bounds_repairs_in_place(self):
        problem = ZDT1Problem(n_var=2)
        completer = ProblemCompleter(problem)
        ind = Individual(x=np.array([1.5, -0.2]), objectives=Objectives([0.0, 0.0]))
        repaired = ClampRepair(*_bounds(2), completer).repair_solution(ind)
        assert repaired is ind
        assert np.array_equal(repaired.x, [1.0, 0.0])
        assert repaired.get_objectives().values[0] == pytest.approx(1.0)
        assert completer.n_eval == 1


class TestOperatorBuilding:
    def test_unknown_crossover(self):
        cfg = MOEADConfig.from_dict({"num_objectives": 2, "crossover": "blx"})
        with pytest.raises(InvalidOperatorError):
            build_mating(cfg, ZDT1Problem(n_var=3), np.random.default_rng(0))

    def test_mutation_probability_from_expression(self):
        cfg = MOEADConfig.default(num_objectives=2)
        mating = build_mating(cfg, ZDT1Problem(n_var=8), np.random.default_rng(0))
        assert mating.mutation.prob == pytest.approx(1.0 / 8)
        assert mating.crossover.prob == pytest.approx(0.95)

    def test_repair_selection(self):
        problem = ZDT1Problem(n_var=3)
        assert isinstance(build_repair(MOEADConfig.default(num_objectives=2), problem), IdentityRepair)
        cfg = MOEADConfig.from_dict({"num_objectives": 2, "repair": "clamp"})
        assert isinstance(build_repair(cfg, problem), ClampRepair)
        with pytest.raises(InvalidOperatorError):
            build_repair(MOEADConfig.from_dict({"num_objectives": 2, "repair": "reflect"}), problem)
