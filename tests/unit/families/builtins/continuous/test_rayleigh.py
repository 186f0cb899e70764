"""
Tests for Rayleigh Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import kstest, rayleigh

from pysatl_extradist.distributions.support import ContinuousSupport
from pysatl_extradist.engine.validation import InvalidParameterWarning
from pysatl_extradist.families.builtins.continuous.rayleigh import cdf, pdf, ppf, sample
from pysatl_extradist.families.configuration import configure_families_register
from pysatl_extradist.types import FamilyName

from ..base import BaseDistributionTest


class TestRayleighFunctions(BaseDistributionTest):
    @pytest.mark.parametrize("sigma", [0.5, 1.0, 3.0])
    def test_matches_scipy(self, sigma):
        x = np.linspace(-1.0, 10.0, 23)
        law = rayleigh(scale=sigma)
        np.testing.assert_allclose(pdf(x, sigma), law.pdf(x), rtol=1e-12, atol=1e-300)
        np.testing.assert_allclose(cdf(x, sigma), law.cdf(x), rtol=1e-12)
        p = np.array([0.01, 0.5, 0.99])
        np.testing.assert_allclose(ppf(p, sigma), law.ppf(p), rtol=1e-12)

    def test_ppf_at_one_is_infinite(self):
        assert np.isposinf(ppf([1.0])[0])

    def test_upper_log_tail(self):
        x = np.array([2.0])
        np.testing.assert_allclose(
            cdf(x, 1.5, lower_tail=False, log_prob=True), rayleigh(scale=1.5).logsf(x), rtol=1e-12
        )

    def test_invalid_sigma(self):
        with pytest.warns(InvalidParameterWarning) as record:
            out = ppf([0.5, 0.5], [1.0, 0.0])
        assert len(record) == 1
        assert np.isnan(out[1]) and not np.isnan(out[0])

    def test_sample_distribution(self):
        x = sample(5000, 2.0, rng=np.random.default_rng(5))
        assert np.all(x >= 0.0)
        assert kstest(x, rayleigh(scale=2.0).cdf).pvalue > 1e-3


class TestRayleighFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.RAYLEIGH)

    def test_distribution(self):
        distr = self.family(sigma=2.0)
        assert distr.parametrization_name == "scale"
        assert distr.support == ContinuousSupport(left=0.0)
        assert distr.calculate_characteristic("cdf", 2.0) == pytest.approx(rayleigh(scale=2.0).cdf(2.0))

    def test_constraints(self):
        with pytest.raises(ValueError, match="sigma > 0"):
            self.family(sigma=0.0)
