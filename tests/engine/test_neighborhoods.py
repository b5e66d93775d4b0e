import numpy as np
import pytest

from moeadkit.engine.algorithm.components.neighborhoods import (
    NeighborhoodBuilder,
    SimilarityMeasure,
    cosine_similarity,
    euclidean_distance,
)
from moeadkit.engine.algorithm.components.weight_vectors import Decomposer, WeightVector
from moeadkit.foundation.exceptions import InvalidArgumentError, MissingInputError


def _square(lo: int, hi: int) -> list[WeightVector]:
    """Grid points around the center in row-major order, center skipped.

    5 6 7
    3 v 4
    0 1 2
    """
    mid = (lo + hi) // 2
    return [
        WeightVector([i, j])
        for i in range(lo, hi + 1)
        for j in range(lo, hi + 1)
        if not (i == mid and j == mid)
    ]


class TestSimilarityMeasures:
    def test_euclidean_distance(self):
        assert euclidean_distance(WeightVector([0, 0]), WeightVector([3, 4])) == pytest.approx(5.0)

    def test_cosine_similarity(self):
        assert cosine_similarity(WeightVector([1, 0]), WeightVector([0, 1])) == pytest.approx(0.0)
        assert cosine_similarity(WeightVector([1, 1]), WeightVector([2, 2])) == pytest.approx(1.0)

    def test_cosine_zero_norm_rejected(self):
        with pytest.raises(InvalidArgumentError):
            cosine_similarity(WeightVector([0, 0]), WeightVector([1, 1]))

    def test_parse(self):
        assert SimilarityMeasure.parse("COSINE") is SimilarityMeasure.COSINE
        assert SimilarityMeasure.parse(SimilarityMeasure.EUCLIDEAN) is SimilarityMeasure.EUCLIDEAN
        with pytest.raises(InvalidArgumentError):
            SimilarityMeasure.parse("manhattan")


class TestNeighborhoodBuilder:
    def test_square_center_euclidean(self):
        builder = NeighborhoodBuilder(SimilarityMeasure.EUCLIDEAN)
        actual = builder.create(WeightVector([1, 1]), _square(0, 2), 4)
        assert actual.tolist() == [1, 3, 4, 6]

    def test_square_center_cosine(self):
        builder = NeighborhoodBuilder()
        builder.set_similarity_measure(SimilarityMeasure.COSINE)
        actual = builder.create(WeightVector([2, 2]), _square(1, 3), 4)
        assert set(actual.tolist()) == {7, 0, 4, 6}
        # exact direction matches come first
        assert set(actual[:2].tolist()) == {0, 7}

    def test_cosine_rejects_zero_candidate(self):
        builder = NeighborhoodBuilder("cosine")
        with pytest.raises(InvalidArgumentError):
            builder.create(WeightVector([1, 1]), _square(0, 2), 4)

    def test_size_greater_than_candidates(self):
        with pytest.raises(InvalidArgumentError):
            NeighborhoodBuilder().create(WeightVector([1, 1]), [WeightVector([2, 2])], 4)

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size(self, size):
        with pytest.raises(InvalidArgumentError):
            NeighborhoodBuilder().create(WeightVector([1, 1]), _square(0, 2), size)

    def test_missing_target(self):
        with pytest.raises(MissingInputError):
            NeighborhoodBuilder().create(None, _square(0, 2), 2)
        # missing input is still an invalid-argument failure
        with pytest.raises(InvalidArgumentError):
            NeighborhoodBuilder().create(None, _square(0, 2), 0)

    @pytest.mark.parametrize("position", [0, 1])
    def test_missing_candidate(self, position):
        candidates = [WeightVector([1, 0]), WeightVector([0, 1])]
        candidates[position] = None
        with pytest.raises(MissingInputError):
            NeighborhoodBuilder().create(WeightVector([1, 1]), candidates, 1)
        with pytest.raises(MissingInputError):
            NeighborhoodBuilder().create_all(candidates, 1)

    def test_target_ranks_itself_first(self):
        weights = Decomposer(np.random.default_rng(0)).decompose(20, 3, 5)
        builder = NeighborhoodBuilder()
        for i, w in enumerate(weights):
            nb = builder.create(w, weights, 5)
            assert nb[0] == i

    def test_ties_keep_candidate_order(self):
        candidates = [WeightVector([0.0, 1.0]), WeightVector([1.0, 0.0]), WeightVector([0.5, 0.5])]
        nb = NeighborhoodBuilder().create(WeightVector([0.5, 0.5]), candidates, 3)
        assert nb.tolist() == [2, 0, 1]

    @pytest.mark.parametrize("measure", list(SimilarityMeasure))
    def test_indices_are_valid(self, measure):
        weights = Decomposer(np.random.default_rng(4)).decompose(25, 2, 4)
        builder = NeighborhoodBuilder(measure)
        for w in weights:
            nb = builder.create(w, weights, 7)
            assert nb.shape == (7,)
            assert np.all((nb >= 0) & (nb < len(weights)))
            assert len(set(nb.tolist())) == 7

    def test_create_all_matches_create(self):
        weights = Decomposer(np.random.default_rng(9)).decompose(12, 3, 3)
        builder = NeighborhoodBuilder("cosine")
        table = builder.create_all(weights, 4)
        assert table.shape == (12, 4)
        for i, w in enumerate(weights):
            assert table[i].tolist() == builder.create(w, weights, 4).tolist()
