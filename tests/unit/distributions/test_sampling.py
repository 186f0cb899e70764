from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_extradist.distributions.sampling import ArraySample
from tests.unit.distributions.test_basic import DistributionTestBase


class TestArraySample:
    def test_requires_two_dimensions(self) -> None:
        with pytest.raises(ValueError, match="must form a 2-D array"):
            ArraySample(np.zeros(3))

    def test_from_values_makes_column(self) -> None:
        sample = ArraySample.from_values([1, 2, 3])
        assert sample.shape == (3, 1)
        assert sample.dimension == 1
        assert sample.array.dtype == np.float64

    def test_matrix_is_kept(self) -> None:
        sample = ArraySample.from_values(np.ones((4, 3)))
        assert sample.shape == (4, 3)
        assert len(sample) == 4
        rows = list(sample)
        assert len(rows) == 4 and rows[0].shape == (3,)


class TestSampling(DistributionTestBase):
    def test_sample_uniform_ppf_only_shape_bounds_and_mean(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        n = 1000
        sample = distr.sample(n, rng=np.random.default_rng(0))

        assert sample.shape == (n, 1)
        arr = sample.array
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr <= 1.0)).all()
        assert float(arr.mean()) == pytest.approx(0.5, abs=0.1)

    def test_same_seed_same_sample(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        first = distr.sample(10, rng=11).array
        second = distr.sample(10, rng=11).array
        np.testing.assert_array_equal(first, second)
