"""
Power distribution family implementation.

0 < x < alpha, alpha > 0, beta > 0

f(x)    = beta*x^(beta-1) / alpha^beta
F(x)    = x^beta / alpha^beta
F^-1(p) = alpha * p^(1/beta)
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import xlogy

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


def _quantile(p: FloatArray, alpha: FloatArray, beta: FloatArray) -> FloatArray:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return alpha * p ** (1.0 / beta)


def pdf(
    x: ArrayInput, alpha: ArrayInput, beta: ArrayInput, log_prob: bool = False
) -> FloatArray:
    """
    Probability density function of the power distribution.

    0 outside the open interval ``(0, alpha)``; NaN where ``alpha <= 0`` or
    ``beta <= 0``.
    """
    xv, alpha, beta = recycle_all(as_vector(x), as_vector(alpha), as_vector(beta))
    nan = missing(xv, alpha, beta)
    invalid = ~positive(alpha, beta) & ~nan

    logp = np.full(xv.shape[0], -np.inf)
    with np.errstate(invalid="ignore"):
        inside = (xv > 0.0) & (xv < alpha) & ~invalid
    al, be = alpha[inside], beta[inside]
    with np.errstate(divide="ignore", invalid="ignore"):
        logp[inside] = np.log(be) + xlogy(be - 1.0, xv[inside]) - be * np.log(al)

    logp[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_log_density(logp, log_prob)


def cdf(
    x: ArrayInput,
    alpha: ArrayInput,
    beta: ArrayInput,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """
    Cumulative distribution function of the power distribution.

    0 at or below 0, 1 at or above ``alpha``.
    """
    xv, alpha, beta = recycle_all(as_vector(x), as_vector(alpha), as_vector(beta))
    nan = missing(xv, alpha, beta)
    invalid = ~positive(alpha, beta) & ~nan

    with np.errstate(invalid="ignore"):
        p = np.where(xv >= alpha, 1.0, 0.0)
        inside = (xv > 0.0) & (xv < alpha) & ~invalid
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        p[inside] = (xv[inside] / alpha[inside]) ** beta[inside]

    p[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_probability(p, lower_tail, log_prob)


def ppf(
    p: ArrayInput,
    alpha: ArrayInput,
    beta: ArrayInput,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """Quantile function of the power distribution."""
    pv, alpha, beta = recycle_all(as_vector(p), as_vector(alpha), as_vector(beta))
    pv = resolve_probability(pv, lower_tail, log_prob)
    nan = missing(pv, alpha, beta)
    with np.errstate(invalid="ignore"):
        invalid = (~positive(alpha, beta) | (pv < 0.0) | (pv > 1.0)) & ~nan

    q = _quantile(pv, alpha, beta)

    q[nan | invalid] = np.nan
    warn_invalid(invalid)
    return q


def sample(
    n: int, alpha: ArrayInput, beta: ArrayInput, rng: RandomSource = None
) -> FloatArray:
    """Draw ``n`` variates as ``alpha * u^(1/beta)``."""
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    alpha, beta = recycle(as_vector(alpha), n), recycle(as_vector(beta), n)
    nan = missing(alpha, beta)
    invalid = ~positive(alpha, beta) & ~nan

    x = _quantile(generator.random(n), alpha, beta)

    x[nan | invalid] = np.nan
    warn_invalid(invalid)
    return x


def configure_power_family() -> None:
    """
    Configure and register the Power distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POWER):
        return

    POWER_DOC = """
    Power distribution.

    Continuous distribution on (0, α) with shape β.

    Probability density function:
        f(x) = β x^(β-1) / α^β

    Cumulative distribution function:
        F(x) = (x / α)^β
    """

    def _support(parameters: _ScaleShape) -> ContinuousSupport:
        return ContinuousSupport(
            left=0.0, right=parameters.alpha, left_closed=False, right_closed=False
        )

    Power = ParametricFamily(
        name=FamilyName.POWER,
        distr_type=UnivariateContinuous,
        evaluators={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support=_support,
    )
    Power.__doc__ = POWER_DOC

    @parametrization(family=Power, name="scale_shape")
    class _ScaleShape(Parametrization):
        """
        Scale-shape parametrization of power distribution.

        Parameters
        ----------
        alpha : float
            Upper endpoint of the support
        beta : float
            Shape parameter
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            """Check that upper endpoint is positive."""
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.beta > 0

    ParametricFamilyRegister.register(Power)
