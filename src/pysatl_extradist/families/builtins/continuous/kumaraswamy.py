"""
Kumaraswamy distribution family implementation.

x in [0, 1], a > 0, b > 0

f(x)    = a*b*x^(a-1)*(1-x^a)^(b-1)
F(x)    = 1-(1-x^a)^b
F^-1(p) = (1-(1-p)^(1/b))^(1/a)
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import xlog1py, xlogy

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


def _quantile(p: FloatArray, a: FloatArray, b: FloatArray) -> FloatArray:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return (-np.expm1(np.log1p(-p) / b)) ** (1.0 / a)


def pdf(x: ArrayInput, a: ArrayInput, b: ArrayInput, log_prob: bool = False) -> FloatArray:
    """
    Probability density function of the Kumaraswamy distribution.

    Parameters
    ----------
    x : ArrayInput
        Points of evaluation.
    a, b : ArrayInput
        Positive shape parameters.
    log_prob : bool, default False
        Return log-densities.

    Returns
    -------
    FloatArray
        Densities; 0 outside [0, 1], NaN where ``a <= 0`` or ``b <= 0``.
    """
    xv, a, b = recycle_all(as_vector(x), as_vector(a), as_vector(b))
    nan = missing(xv, a, b)
    invalid = ~positive(a, b) & ~nan

    logp = np.full(xv.shape[0], -np.inf)
    with np.errstate(invalid="ignore"):
        inside = (xv >= 0.0) & (xv <= 1.0) & ~invalid
    ai, bi, xi = a[inside], b[inside], xv[inside]
    with np.errstate(divide="ignore", invalid="ignore"):
        logp[inside] = np.log(ai) + np.log(bi) + xlogy(ai - 1.0, xi) + xlog1py(bi - 1.0, -(xi**ai))

    logp[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_log_density(logp, log_prob)


def cdf(
    x: ArrayInput,
    a: ArrayInput,
    b: ArrayInput,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """
    Cumulative distribution function of the Kumaraswamy distribution.

    0 below 0 and 1 above 1.
    """
    xv, a, b = recycle_all(as_vector(x), as_vector(a), as_vector(b))
    nan = missing(xv, a, b)
    invalid = ~positive(a, b) & ~nan

    with np.errstate(invalid="ignore"):
        p = np.where(xv > 1.0, 1.0, 0.0)
        inside = (xv >= 0.0) & (xv <= 1.0) & ~invalid
    with np.errstate(divide="ignore", invalid="ignore"):
        p[inside] = -np.expm1(b[inside] * np.log1p(-(xv[inside] ** a[inside])))

    p[nan | invalid] = np.nan
    warn_invalid(invalid)
    return finalize_probability(p, lower_tail, log_prob)


def ppf(
    p: ArrayInput,
    a: ArrayInput,
    b: ArrayInput,
    lower_tail: bool = True,
    log_prob: bool = False,
) -> FloatArray:
    """Quantile function of the Kumaraswamy distribution."""
    pv, a, b = recycle_all(as_vector(p), as_vector(a), as_vector(b))
    pv = resolve_probability(pv, lower_tail, log_prob)
    nan = missing(pv, a, b)
    with np.errstate(invalid="ignore"):
        invalid = (~positive(a, b) | (pv < 0.0) | (pv > 1.0)) & ~nan

    q = _quantile(pv, a, b)

    q[nan | invalid] = np.nan
    warn_invalid(invalid)
    return q


def sample(n: int, a: ArrayInput, b: ArrayInput, rng: RandomSource = None) -> FloatArray:
    """Draw ``n`` variates by inverse transform of one uniform each."""
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    a, b = recycle(as_vector(a), n), recycle(as_vector(b), n)
    nan = missing(a, b)
    invalid = ~positive(a, b) & ~nan

    x = _quantile(generator.random(n), a, b)

    x[nan | invalid] = np.nan
    warn_invalid(invalid)
    return x


def configure_kumaraswamy_family() -> None:
    """
    Configure and register the Kumaraswamy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.KUMARASWAMY):
        return

    KUMARASWAMY_DOC = """
    Kumaraswamy distribution.

    Continuous distribution on [0, 1] with shape parameters a and b,
    similar to the beta distribution but with a closed-form CDF.

    Probability density function:
        f(x) = a b x^(a-1) (1 - x^a)^(b-1)

    Cumulative distribution function:
        F(x) = 1 - (1 - x^a)^b
    """

    Kumaraswamy = ParametricFamily(
        name=FamilyName.KUMARASWAMY,
        distr_type=UnivariateContinuous,
        evaluators={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        support=ContinuousSupport(left=0.0, right=1.0),
    )
    Kumaraswamy.__doc__ = KUMARASWAMY_DOC

    @parametrization(family=Kumaraswamy, name="shapes")
    class _Shapes(Parametrization):
        """
        Shape parametrization of Kumaraswamy distribution.

        Parameters
        ----------
        a : float
            First shape parameter
        b : float
            Second shape parameter
        """

        a: float
        b: float

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            return self.b > 0

    ParametricFamilyRegister.register(Kumaraswamy)
