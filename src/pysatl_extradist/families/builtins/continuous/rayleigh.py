"""
Rayleigh distribution family implementation.

x >= 0, sigma > 0

f(x)    = x/sigma^2 * exp(-x^2 / (2*sigma^2))
F(x)    = 1 - exp(-x^2 / (2*sigma^2))
F^-1(p) = sqrt(-2*sigma^2 * log(1-p))
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradist.distributions.support import ContinuousSupport
from pysatl_extradist.engine.random import RandomSource, check_sample_size, resolve_rng
from pysatl_extradist.engine.recycling import as_vector, recycle, recycle_all
from pysatl_extradist.engine.transforms import (
    finalize_log_density,
    finalize_probability,
    resolve_probability,
)
from pysatl_extradist.engine.validation import missing, positive, warn_invalid
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_extradist.types import ArrayInput, FloatArray


def _quantile(p: FloatArray, sigma: FloatArray) -> FloatArray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return sigma * np.sqrt(-2.0 * np.log1p(-p))


def pdf(x: ArrayInput, sigma: ArrayInput = 1.0, log_prob: bool = False) -> FloatArray:
    """Probability density function of the Rayleigh distribution."""
    xv, sigma = recycle_all(as_vector(x), as_vector(sigma))
    nan = missing(xv, sigma)
    invalid = ~positive(sigma) & ~nan

    logp = np.full(xv.shape[0], -np.inf)
    with np.errstate(invalid="ignore"):
        inside = (xv >= 0.0) & ~invalid
    xs, s = xv[inside], sigma[inside]
    with np.errstate(divide="ignore"):
        logp[inside] = np.log(xs) - 2.0 * np.log(s) - xs**2 / (2.0 * s**2)

    logp[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_log_density(logp, log_prob)


def cdf(
    x: ArrayInput,
    sigma: ArrayInput = 1.0,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """Cumulative distribution function of the Rayleigh distribution."""
    xv, sigma = recycle_all(as_vector(x), as_vector(sigma))
    nan = missing(xv, sigma)
    invalid = ~positive(sigma) & ~nan

    p = np.zeros(xv.shape[0])
    with np.errstate(invalid="ignore"):
        inside = (xv > 0.0) & ~invalid
    p[inside] = -np.expm1(-(xv[inside] ** 2) / (2.0 * sigma[inside] ** 2))

    p[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_probability(p, lower_tail, log_prob)


def ppf(
    p: ArrayInput,
    sigma: ArrayInput = 1.0,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """Quantile function of the Rayleigh distribution; ``p == 1`` gives infinity."""
    pv, sigma = recycle_all(as_vector(p), as_vector(sigma))
    pv = resolve_probability(pv, lower_tail, log_prob)
    nan = missing(pv, sigma)
    with np.errstate(invalid="ignore"):
        invalid = (~positive(sigma) | (pv < 0.0) | (pv > 1.0)) & ~nan

    q = _quantile(pv, sigma)

    q[nan | invalid] = np.nan
    warn_invalid(invalid)
    return q


def sample(n: int, sigma: ArrayInput = 1.0, rng: RandomSource = None) -> FloatArray:
    """Draw ``n`` variates by inverse transform of one uniform each."""
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    sigma = recycle(as_vector(sigma), n)
    nan = missing(sigma)
    invalid = ~positive(sigma) & ~nan

    x = _quantile(generator.random(n), sigma)

    x[nan | invalid] = np.nan
    warn_invalid(invalid)
    return x


def configure_rayleigh_family() -> None:
    """
    Configure and register the Rayleigh distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.RAYLEIGH):
        return

    RAYLEIGH_DOC = """
    Rayleigh distribution.

    Distribution of the length of a two-dimensional vector with independent
    N(0, σ²) components.

    Probability density function:
        f(x) = x/σ² exp(-x²/(2σ²)),  x >= 0
    """

    Rayleigh = ParametricFamily(
        name=FamilyName.RAYLEIGH,
        distr_type=UnivariateContinuous,
        evaluators={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support=ContinuousSupport(left=0.0),
    )
    Rayleigh.__doc__ = RAYLEIGH_DOC

    @parametrization(family=Rayleigh, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of Rayleigh distribution.

        Parameters
        ----------
        sigma : float
            Scale parameter
        """

        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(Rayleigh)
