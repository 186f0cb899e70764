from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_extradist.distributions.sampling import ArraySample
from pysatl_extradist.types import EuclideanDistributionType, Kind
from tests.unit.distributions.test_basic import DistributionTestBase


class TestLogLikelihood(DistributionTestBase):
    def test_uniform_all_in_support_is_zero(self) -> None:
        distr = self.make_uniform_pdf_distribution()
        sample = ArraySample(np.array([[0.1], [0.9], [0.3]], dtype=np.float64))
        # log L = sum log(1) = 0
        assert distr.log_likelihood(sample) == pytest.approx(0.0, abs=1e-12)

    def test_uniform_out_of_support_is_minus_inf(self) -> None:
        distr = self.make_uniform_pdf_distribution()
        sample = ArraySample(np.array([[0.1], [1.5], [0.3]], dtype=np.float64))
        assert np.isneginf(distr.log_likelihood(sample))

    def test_discrete_uses_pmf(self) -> None:
        distr = self.make_coin_distribution()
        sample = ArraySample(np.array([[0.0], [1.0], [1.0]]))
        assert distr.log_likelihood(sample) == pytest.approx(3 * np.log(0.5))

    def test_single_column_rows_stay_rows(self) -> None:
        distr = self.make_single_category_counts(size=4)
        sample = ArraySample(np.array([[4.0], [4.0], [4.0]]))
        assert distr.log_likelihood(sample) == pytest.approx(0.0)

    def test_single_column_rows_score_each_outcome(self) -> None:
        distr = self.make_single_category_counts(size=4)
        sample = ArraySample(np.array([[4.0], [3.0]]))
        assert np.isneginf(distr.log_likelihood(sample))


class TestOutcomeShape:
    def test_scalar_outcomes_are_flattened(self) -> None:
        dtype = EuclideanDistributionType(Kind.CONTINUOUS, 1)
        rows = np.array([[0.5], [1.5]])
        assert dtype.is_univariate
        np.testing.assert_array_equal(dtype.outcomes(rows), [0.5, 1.5])

    def test_row_outcomes_keep_single_column(self) -> None:
        dtype = EuclideanDistributionType(Kind.DISCRETE, 1, row_outcomes=True)
        rows = np.array([[2.0], [2.0]])
        assert not dtype.is_univariate
        assert dtype.outcomes(rows).shape == (2, 1)

    def test_multidimensional_outcomes_are_rows(self) -> None:
        dtype = EuclideanDistributionType(Kind.CONTINUOUS, 3)
        assert dtype.row_outcomes
        assert dtype == EuclideanDistributionType(Kind.CONTINUOUS, 3, row_outcomes=True)

    @pytest.mark.parametrize(
        "kind, density", [(Kind.DISCRETE, "pmf"), (Kind.CONTINUOUS, "pdf")]
    )
    def test_density_follows_kind(self, kind: Kind, density: str) -> None:
        assert EuclideanDistributionType(kind, 2).density == density
