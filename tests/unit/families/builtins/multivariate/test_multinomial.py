"""
Tests for Multinomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings

import numpy as np
import pytest
from scipy.stats import multinomial

from pysatl_extradist.distributions.sampling import ArraySample
from pysatl_extradist.distributions.support import CountVectorSupport
from pysatl_extradist.engine.validation import InvalidParameterWarning
from pysatl_extradist.families.builtins.multivariate.multinomial import pmf, sample
from pysatl_extradist.families.configuration import configure_families_register
from pysatl_extradist.types import (
    CharacteristicName,
    EuclideanDistributionType,
    FamilyName,
    Kind,
)

from ..base import BaseDistributionTest

PROB = [0.25, 0.25, 0.5]


class TestMultinomialPmf(BaseDistributionTest):
    def test_matches_scipy(self):
        x = np.array([[2, 1, 0], [0, 0, 3], [1, 1, 1]])
        expected = multinomial.pmf(x, 3, PROB)
        self.assert_arrays_almost_equal(pmf(x, 3, PROB), expected)
        self.assert_arrays_almost_equal(pmf(x, 3, PROB, log_prob=True), np.log(expected))

    def test_single_outcome_vector(self):
        out = pmf([1, 1, 0], 2, PROB)
        assert out.shape == (1,)
        assert out[0] == pytest.approx(2 * 0.25 * 0.25)

    def test_zero_probability_category_with_zero_count(self):
        out = pmf([1, 2, 0], 3, [0.5, 0.5, 0.0])
        assert out[0] == pytest.approx(multinomial.pmf([1, 2, 0], 3, [0.5, 0.5, 0.0]))

    @pytest.mark.parametrize(
        "x, size",
        [
            ([1, 1, 0], 3),
            ([-1, 2, 1], 2),
            ([0.5, 0.5, 1], 2),
            ([1, 1, 0.5], 2.5),
        ],
        ids=["wrong_total", "negative_count", "fractional_count", "fractional_size"],
    )
    def test_impossible_outcomes(self, x, size):
        with warnings.catch_warnings():
            warnings.simplefilter("error", InvalidParameterWarning)
            assert pmf(x, size, PROB)[0] == 0.0
            assert np.isneginf(pmf(x, size, PROB, log_prob=True)[0])

    def test_invalid_row_is_nan(self):
        with pytest.warns(InvalidParameterWarning):
            out = pmf([1, 1], 2, [0.75, 0.75])
        assert np.isnan(out[0])

    def test_impossible_outcome_takes_precedence(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", InvalidParameterWarning)
            out = pmf([1, 0], 2, [0.75, 0.75], log_prob=True)
        assert np.isneginf(out[0])

    def test_column_mismatch_raises(self):
        with pytest.raises(ValueError, match="Number of columns"):
            pmf([1, 1], 2, PROB)

    def test_recycling(self):
        out = pmf([[1, 1]], [2, 3], [[0.5, 0.5], [0.25, 0.75]])
        self.assert_arrays_almost_equal(out, [0.5, 0.0])


class TestMultinomialSample(BaseDistributionTest):
    def test_rows_sum_to_size(self):
        x = sample(1000, 10, PROB, rng=np.random.default_rng(1))
        assert x.shape == (1000, 3)
        np.testing.assert_array_equal(x.sum(axis=1), np.full(1000, 10.0))
        assert np.all(x >= 0) and np.all(np.floor(x) == x)

    def test_category_means(self):
        p = np.array([0.2, 0.3, 0.5])
        x = sample(20_000, 10, p, rng=np.random.default_rng(17))
        np.testing.assert_allclose(x.mean(axis=0), 10 * p, atol=0.05)

    def test_marginal_variance(self):
        p = np.array([0.2, 0.3, 0.5])
        x = sample(20_000, 10, p, rng=np.random.default_rng(18))
        np.testing.assert_allclose(x.var(axis=0), 10 * p * (1 - p), rtol=0.05)

    def test_degenerate_row(self):
        x = sample(5, 4, [0.0, 1.0], rng=0)
        np.testing.assert_array_equal(x, np.tile([0.0, 4.0], (5, 1)))

    def test_zero_trials(self):
        x = sample(3, 0, PROB, rng=0)
        np.testing.assert_array_equal(x, np.zeros((3, 3)))

    @pytest.mark.parametrize(
        "size, prob",
        [(-1, PROB), (2.5, PROB), (3, [0.5, 0.75, -0.25])],
        ids=["negative_size", "fractional_size", "invalid_row"],
    )
    def test_invalid_rows_are_nan(self, size, prob):
        with pytest.warns(InvalidParameterWarning):
            x = sample(2, size, prob, rng=0)
        assert np.all(np.isnan(x))

    def test_rows_recycled_against_draws(self):
        x = sample(4, [2, 5], [[1.0, 0.0], [0.0, 1.0]], rng=0)
        np.testing.assert_array_equal(x, [[2, 0], [0, 5], [2, 0], [0, 5]])


class TestMultinomialFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.MULTINOMIAL)
        self.distr = self.family(size=4, p=PROB)

    def test_distribution(self):
        assert self.distr.distribution_type == EuclideanDistributionType(Kind.DISCRETE, 3)
        assert self.distr.support == CountVectorSupport(size=4, dimension=3)
        assert set(self.distr.analytical_computations) == {
            CharacteristicName.PMF,
            CharacteristicName.RVS,
        }

    def test_sample_and_log_likelihood(self):
        s = self.distr.sample(200, rng=2)
        assert s.shape == (200, 3)
        assert np.all(self.distr.support.contains(s.array))
        expected = multinomial.logpmf(s.array, 4, PROB).sum()
        assert self.distr.log_likelihood(s) == pytest.approx(expected)

    def test_constraints(self):
        with pytest.raises(ValueError, match="size is a non-negative integer"):
            self.family(size=-1, p=PROB)
        with pytest.raises(ValueError, match=r"sum\(p\) == 1"):
            self.family(size=2, p=[0.5, 0.25])

    def test_single_category_outcomes_are_rows(self):
        distr = self.family(size=3, p=[1.0])
        assert distr.distribution_type == EuclideanDistributionType(
            Kind.DISCRETE, 1, row_outcomes=True
        )

        s = distr.sample(5, rng=0)
        assert s.shape == (5, 1)
        np.testing.assert_array_equal(s.array, np.full((5, 1), 3.0))
        assert distr.log_likelihood(s) == pytest.approx(0.0)

    def test_single_category_log_likelihood_scores_each_row(self):
        distr = self.family(size=3, p=[1.0])
        assert np.isneginf(distr.log_likelihood(ArraySample(np.array([[3.0], [2.0]]))))
