"""
Dirichlet distribution family implementation.

Contains the density and the sampler of the Dirichlet distribution over the
probability simplex, and the Dirichlet family with its concentration
parametrization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import gammaln, xlogy

from pysatl_extradist.distributions.support import SimplexSupport
from pysatl_extradist.engine.random import RandomSource, check_sample_size, resolve_rng
from pysatl_extradist.engine.recycling import as_matrix, recycle_rows, recycled_length
from pysatl_extradist.engine.transforms import finalize_log_density
from pysatl_extradist.engine.validation import check_matching_columns, warn_invalid
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
    vector_field,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.types import (
    CharacteristicName,
    EuclideanDistributionType,
    FamilyName,
    Kind,
)

if TYPE_CHECKING:
    from pysatl_extradist.types import ArrayInput, BoolArray, FloatArray


def _invalid_concentration(alpha: FloatArray) -> BoolArray:
    with np.errstate(invalid="ignore"):
        return ~np.all(alpha > 0.0, axis=1)


def pdf(x: ArrayInput, alpha: ArrayInput, log_prob: bool = False) -> FloatArray:
    """
    Probability density function of the Dirichlet distribution.

    Parameters
    ----------
    x : ArrayInput
        Point or ``(m, k)`` matrix of points.
    alpha : ArrayInput
        Concentration vector or matrix of concentration rows.
    log_prob : bool, default False
        Return log-densities.

    Returns
    -------
    FloatArray
        Densities; 0 for points off the simplex, NaN for rows with a
        non-positive concentration.

    Raises
    ------
    ValueError
        If ``x`` and ``alpha`` have different numbers of columns.
    """
    points = as_matrix(x, "x")
    conc = as_matrix(alpha, "alpha")
    check_matching_columns(points, conc, "x", "alpha")

    n = recycled_length(points.shape[0], conc.shape[0])
    points = recycle_rows(points, n)
    conc = recycle_rows(conc, n)
    invalid = _invalid_concentration(conc)
    off_simplex = ~SimplexSupport(dimension=points.shape[1]).contains(points)

    with np.errstate(divide="ignore", invalid="ignore"):
        logp = (
            gammaln(conc.sum(axis=1))
            - gammaln(conc).sum(axis=1)
            + xlogy(conc - 1.0, points).sum(axis=1)
        )

    logp[off_simplex] = -np.inf
    logp[invalid] = np.nan
    warn_invalid(invalid)
    return finalize_log_density(logp, log_prob)


def sample(n: int, alpha: ArrayInput, rng: RandomSource = None) -> FloatArray:
    """
    Draw ``n`` points of the simplex.

    Each row is a vector of independent ``Gamma(alpha_j, 1)`` draws divided
    by its sum. Rows with a non-positive concentration are NaN.

    Returns
    -------
    FloatArray
        ``(n, k)`` matrix of points.
    """
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    conc = recycle_rows(as_matrix(alpha, "alpha"), n)
    invalid = _invalid_concentration(conc)

    draws = generator.gamma(np.where(invalid[:, np.newaxis], 1.0, conc))
    with np.errstate(invalid="ignore"):
        points = draws / draws.sum(axis=1, keepdims=True)

    points[invalid] = np.nan
    warn_invalid(invalid)
    return points


def configure_dirichlet_family() -> None:
    """
    Configure and register the Dirichlet distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DIRICHLET):
        return

    DIRICHLET_DOC = """
    Dirichlet distribution.

    Continuous distribution over the (k-1)-simplex with concentration
    parameters alpha_1..alpha_k.

    Probability density function:
        f(x) = Γ(Σ α_j) / Π Γ(α_j) * Π x_j^(α_j - 1)
    """

    def _distr_type(parameters: _Concentration) -> EuclideanDistributionType:
        return EuclideanDistributionType(
            kind=Kind.CONTINUOUS, dimension=len(parameters.alpha), row_outcomes=True
        )

    def _support(parameters: _Concentration) -> SimplexSupport:
        return SimplexSupport(dimension=len(parameters.alpha))

    Dirichlet = ParametricFamily(
        name=FamilyName.DIRICHLET,
        distr_type=_distr_type,
        evaluators={CharacteristicName.PDF: pdf},
        sampler=sample,
        support=_support,
    )
    Dirichlet.__doc__ = DIRICHLET_DOC

    @parametrization(family=Dirichlet, name="concentration")
    class _Concentration(Parametrization):
        """
        Concentration parametrization of Dirichlet distribution.

        Parameters
        ----------
        alpha : tuple[float, ...]
            Concentration parameters
        """

        alpha: tuple[float, ...] = vector_field()

        @constraint(description="len(alpha) >= 2")
        def check_dimension(self) -> bool:
            return len(self.alpha) >= 2

        @constraint(description="alpha_j > 0")
        def check_alpha_positive(self) -> bool:
            return all(v > 0 for v in self.alpha)

    ParametricFamilyRegister.register(Dirichlet)
