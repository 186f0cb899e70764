"""
Discrete normal distribution family implementation.

Normal mass of [x, x+1) placed on the integer x.

f(x) = Phi((x+1-mu)/sigma) - Phi((x-mu)/sigma)     x integer, sigma > 0
F(x) = Phi((floor(x)+1-mu)/sigma)
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradist.distributions.support import IntegerSupport
from pysatl_extradist.engine.random import RandomSource, check_sample_size, resolve_rng
from pysatl_extradist.engine.recycling import as_vector, recycle, recycle_all
from pysatl_extradist.engine.special import is_integer, normal_cdf, normal_ppf
from pysatl_extradist.engine.transforms import finalize_density, finalize_probability
from pysatl_extradist.engine.validation import missing, positive, warn_invalid
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradist.types import ArrayInput, FloatArray


def pmf(
    x: ArrayInput, mu: ArrayInput = 0.0, sigma: ArrayInput = 1.0, log_prob: bool = False
) -> FloatArray:
    """
    Probability mass function of the discrete normal distribution.

    Parameters
    ----------
    x : ArrayInput
        Points of evaluation.
    mu : ArrayInput, default 0
        Location of the underlying normal distribution.
    sigma : ArrayInput, default 1
        Scale of the underlying normal distribution.
    log_prob : bool, default False
        Return log-probabilities.

    Returns
    -------
    FloatArray
        ``Phi((x+1-mu)/sigma) - Phi((x-mu)/sigma)`` at integers, 0 elsewhere,
        NaN where ``sigma <= 0``.
    """
    xv, mu, sigma = recycle_all(as_vector(x), as_vector(mu), as_vector(sigma))
    nan = missing(xv, mu, sigma)
    invalid = ~positive(sigma) & ~nan

    p = np.zeros(xv.shape[0])
    lattice = is_integer(xv) & ~invalid
    with np.errstate(divide="ignore", invalid="ignore"):
        lo = (xv[lattice] - mu[lattice]) / sigma[lattice]
        hi = lo + 1.0 / sigma[lattice]
    # upper-tail difference keeps precision right of the mean
    p[lattice] = np.where(
        lo > 0.0, normal_cdf(-lo) - normal_cdf(-hi), normal_cdf(hi) - normal_cdf(lo)
    )

    p[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_density(p, log_prob)


def cdf(
    x: ArrayInput,
    mu: ArrayInput = 0.0,
    sigma: ArrayInput = 1.0,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """
    Cumulative distribution function of the discrete normal distribution.

    ``P(X <= x) = Phi((floor(x) + 1 - mu) / sigma)``.
    """
    xv, mu, sigma = recycle_all(as_vector(x), as_vector(mu), as_vector(sigma))
    nan = missing(xv, mu, sigma)
    invalid = ~positive(sigma) & ~nan

    with np.errstate(divide="ignore", invalid="ignore"):
        p = normal_cdf((np.floor(xv) + 1.0 - mu) / sigma)

    p[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_probability(p, lower_tail, log_prob)


def sample(
    n: int, mu: ArrayInput = 0.0, sigma: ArrayInput = 1.0, rng: RandomSource = None
) -> FloatArray:
    """Draw ``n`` integers as ``floor(mu + sigma * Phi^-1(u))``."""
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    mu, sigma = recycle(as_vector(mu), n), recycle(as_vector(sigma), n)
    nan = missing(mu, sigma)
    invalid = ~positive(sigma) & ~nan

    x = np.floor(mu + sigma * normal_ppf(generator.random(n)))

    x[nan | invalid] = np.nan
    warn_invalid(invalid)
    return x


def configure_discrete_normal_family() -> None:
    """
    Configure and register the discrete normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_NORMAL):
        return

    DISCRETE_NORMAL_DOC = """
    Discrete normal distribution.

    Normal distribution N(μ, σ²) discretised onto the integers: the integer x
    receives the probability of [x, x + 1).

    Probability mass function:
        f(x) = Φ((x + 1 - μ)/σ) - Φ((x - μ)/σ)
    """

    DiscreteNormal = ParametricFamily(
        name=FamilyName.DISCRETE_NORMAL,
        distr_type=UnivariateDiscrete,
        evaluators={CharacteristicName.PMF: pmf, CharacteristicName.CDF: cdf},
        sampler=sample,
        support=IntegerSupport(),
    )
    DiscreteNormal.__doc__ = DISCRETE_NORMAL_DOC

    @parametrization(family=DiscreteNormal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Mean-standard deviation parametrization of the underlying normal.

        Parameters
        ----------
        mu : float
            Mean of the underlying normal distribution
        sigma : float
            Standard deviation of the underlying normal distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

    ParametricFamilyRegister.register(DiscreteNormal)
