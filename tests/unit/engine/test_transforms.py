from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_extradist.engine.transforms import (
    finalize_density,
    finalize_log_density,
    finalize_probability,
    resolve_probability,
)


class TestResolveProbability:
    @pytest.mark.parametrize(
        "lower_tail, log_prob, given, expected",
        [
            (True, False, 0.25, 0.25),
            (False, False, 0.25, 0.75),
            (True, True, np.log(0.25), 0.25),
            (False, True, np.log(0.25), 0.75),
        ],
    )
    def test_exp_then_complement(self, lower_tail, log_prob, given, expected):
        out = resolve_probability(np.array([given]), lower_tail, log_prob)
        np.testing.assert_allclose(out, [expected])


class TestFinalizeProbability:
    @pytest.mark.parametrize(
        "lower_tail, log_prob, expected",
        [
            (True, False, 0.25),
            (False, False, 0.75),
            (True, True, np.log(0.25)),
            (False, True, np.log(0.75)),
        ],
    )
    def test_complement_then_log(self, lower_tail, log_prob, expected):
        out = finalize_probability(np.array([0.25]), lower_tail, log_prob)
        np.testing.assert_allclose(out, [expected])

    def test_log_of_zero_is_minus_inf(self):
        out = finalize_probability(np.array([0.0, 1.0]), lower_tail=False, log_prob=True)
        assert out[0] == 0.0
        assert np.isneginf(out[1])

    def test_nan_propagates(self):
        out = finalize_probability(np.array([np.nan]), lower_tail=False, log_prob=True)
        assert np.isnan(out[0])


class TestFinalizeDensity:
    def test_density(self):
        p = np.array([0.5, 0.0])
        np.testing.assert_array_equal(finalize_density(p), p)
        out = finalize_density(p, log_prob=True)
        assert out[0] == pytest.approx(np.log(0.5))
        assert np.isneginf(out[1])

    def test_log_density(self):
        logp = np.array([np.log(0.5), -np.inf])
        np.testing.assert_allclose(finalize_log_density(logp), [0.5, 0.0])
        np.testing.assert_array_equal(finalize_log_density(logp, log_prob=True), logp)
