"""
Generalized extreme value distribution family implementation.

z = (x - mu) / sigma, support where 1 + xi*z > 0

f(x)    = { 1/sigma * (1+xi*z)^(-1-1/xi) * exp(-(1+xi*z)^(-1/xi))    if xi != 0
          { 1/sigma * exp(-z) * exp(-exp(-z))                         otherwise
F(x)    = { exp(-(1+xi*z)^(-1/xi))                                    if xi != 0
          { exp(-exp(-z))                                             otherwise
F^-1(p) = { mu - sigma/xi * (1 - (-log(p))^(-xi))                     if xi != 0
          { mu - sigma * log(-log(p))                                 otherwise
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


def _standardize(
    x: FloatArray, mu: FloatArray, sigma: FloatArray, xi: FloatArray
) -> tuple[FloatArray, FloatArray]:
    with np.errstate(divide="ignore", invalid="ignore"):
        z = (x - mu) / sigma
        t = 1.0 + xi * z
    return z, t


def _quantile(p: FloatArray, mu: FloatArray, sigma: FloatArray, xi: FloatArray) -> FloatArray:
    q = np.empty(p.shape[0])
    gumbel = xi == 0.0
    shaped = ~gumbel
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        y = -np.log(p)
        q[gumbel] = mu[gumbel] - sigma[gumbel] * np.log(y[gumbel])
        q[shaped] = mu[shaped] - sigma[shaped] / xi[shaped] * (
            1.0 - y[shaped] ** (-xi[shaped])
        )
    return q


def pdf(
    x: ArrayInput,
    mu: ArrayInput = 0.0,
    sigma: ArrayInput = 1.0,
    xi: ArrayInput = 0.0,
    log_prob: bool = False,
) -> FloatArray:
    """
    Probability density function of the GEV distribution.

    Evaluated in log space; 0 outside ``1 + xi*z > 0``. Positions with
    ``sigma <= 0`` are NaN.
    """
    xv, mu, sigma, xi = recycle_all(*(as_vector(a) for a in (x, mu, sigma, xi)))
    nan = missing(xv, mu, sigma, xi)
    invalid = ~positive(sigma) & ~nan

    z, t = _standardize(xv, mu, sigma, xi)
    logp = np.full(xv.shape[0], -np.inf)
    inside = (t > 0.0) & ~invalid
    gumbel = inside & (xi == 0.0)
    shaped = inside & (xi != 0.0)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        zg = z[gumbel]
        logp[gumbel] = -np.log(sigma[gumbel]) - zg - np.exp(-zg)
        ts, xis = t[shaped], xi[shaped]
        logp[shaped] = -np.log(sigma[shaped]) - (1.0 + 1.0 / xis) * np.log(ts) - ts ** (-1.0 / xis)

    logp[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_log_density(logp, log_prob)


def cdf(
    x: ArrayInput,
    mu: ArrayInput = 0.0,
    sigma: ArrayInput = 1.0,
    xi: ArrayInput = 0.0,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """
    Cumulative distribution function of the GEV distribution.

    Outside the support the value is 0 below the lower endpoint
    (``xi > 0``) and 1 above the upper endpoint (``xi < 0``).
    """
    xv, mu, sigma, xi = recycle_all(*(as_vector(a) for a in (x, mu, sigma, xi)))
    nan = missing(xv, mu, sigma, xi)
    invalid = ~positive(sigma) & ~nan

    z, t = _standardize(xv, mu, sigma, xi)
    p = np.where(xi < 0.0, 1.0, 0.0)
    inside = (t > 0.0) & ~invalid
    gumbel = inside & (xi == 0.0)
    shaped = inside & (xi != 0.0)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        p[gumbel] = np.exp(-np.exp(-z[gumbel]))
        p[shaped] = np.exp(-(t[shaped] ** (-1.0 / xi[shaped])))

    p[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_probability(p, lower_tail, log_prob)


def ppf(
    p: ArrayInput,
    mu: ArrayInput = 0.0,
    sigma: ArrayInput = 1.0,
    xi: ArrayInput = 0.0,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """
    Quantile function of the GEV distribution.

    ``p == 1`` gives positive infinity. Probabilities outside [0, 1] and
    ``sigma <= 0`` give NaN.
    """
    pv, mu, sigma, xi = recycle_all(*(as_vector(a) for a in (p, mu, sigma, xi)))
    pv = resolve_probability(pv, lower_tail, log_prob)
    nan = missing(pv, mu, sigma, xi)
    with np.errstate(invalid="ignore"):
        invalid = (~positive(sigma) | (pv < 0.0) | (pv > 1.0)) & ~nan

    q = _quantile(pv, mu, sigma, xi)
    q[pv == 1.0] = np.inf

    q[nan | invalid] = np.nan
    warn_invalid(invalid)
    return q


def sample(
    n: int,
    mu: ArrayInput = 0.0,
    sigma: ArrayInput = 1.0,
    xi: ArrayInput = 0.0,
    rng: RandomSource = None,
) -> FloatArray:
    """Draw ``n`` variates by inverse transform of one uniform each."""
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    mu, sigma, xi = (recycle(as_vector(a), n) for a in (mu, sigma, xi))
    nan = missing(mu, sigma, xi)
    invalid = ~positive(sigma) & ~nan

    x = _quantile(generator.random(n), mu, sigma, xi)

    x[nan | invalid] = np.nan
    warn_invalid(invalid)
    return x


def configure_gev_family() -> None:
    """
    Configure and register the generalized extreme value distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEV):
        return

    GEV_DOC = """
    Generalized extreme value (GEV) distribution.

    Limit distribution of normalized maxima with location μ, scale σ and
    shape ξ. ξ = 0 is the Gumbel distribution, ξ > 0 the Fréchet type and
    ξ < 0 the reversed Weibull type.

    Cumulative distribution function:
        F(x) = exp(-(1 + ξz)^(-1/ξ)),  z = (x - μ)/σ,  1 + ξz > 0
    """

    def _support(parameters: _LocationScaleShape) -> ContinuousSupport:
        if parameters.xi > 0:
            return ContinuousSupport(left=parameters.mu - parameters.sigma / parameters.xi)
        if parameters.xi < 0:
            return ContinuousSupport(right=parameters.mu - parameters.sigma / parameters.xi)
        return ContinuousSupport()

    GEV = ParametricFamily(
        name=FamilyName.GEV,
        distr_type=UnivariateContinuous,
        evaluators={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support=_support,
    )
    GEV.__doc__ = GEV_DOC

    @parametrization(family=GEV, name="location_scale_shape")
    class _LocationScaleShape(Parametrization):
        """
        Location-scale-shape parametrization of GEV distribution.

        Parameters
        ----------
        mu : float
            Location parameter
        sigma : float
            Scale parameter
        xi : float
            Shape parameter
        """

        mu: float
        sigma: float
        xi: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.sigma > 0

    ParametricFamilyRegister.register(GEV)
