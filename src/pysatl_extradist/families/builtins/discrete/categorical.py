"""
Categorical distribution family implementation.

Vectorised evaluators over recycled inputs, and the Categorical family with
its probability-vector parametrization.

Each row of ``prob`` is one probability vector over categories ``1..k``;
rows are recycled against ``x``, ``p`` or the sample size. A row is valid
only if every entry lies in [0, 1] and the running sum of the whole row is
exactly 1.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradist.distributions.support import IntegerSupport
from pysatl_extradist.engine.random import RandomSource, check_sample_size, resolve_rng
from pysatl_extradist.engine.recycling import (
    as_matrix,
    as_vector,
    recycle,
    recycle_rows,
    recycled_length,
)
from pysatl_extradist.engine.special import is_integer
from pysatl_extradist.engine.transforms import (
    finalize_density,
    finalize_probability,
    resolve_probability,
)
from pysatl_extradist.engine.validation import SimplexScan, scan_simplex_rows, warn_invalid
from pysatl_extradist.families.parametric_family import ParametricFamily
from pysatl_extradist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
    vector_field,
)
from pysatl_extradist.families.registry import ParametricFamilyRegister
from pysatl_extradist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradist.types import ArrayInput, FloatArray


def _recycle_against_rows(
    values: ArrayInput, prob: ArrayInput
) -> tuple[FloatArray, FloatArray, SimplexScan]:
    vector = as_vector(values)
    rows = as_matrix(prob)
    n = recycled_length(vector.shape[0], rows.shape[0])
    rows = recycle_rows(rows, n)
    return recycle(vector, n), rows, scan_simplex_rows(rows)


def pmf(x: ArrayInput, prob: ArrayInput, log_prob: bool = False) -> FloatArray:
    """
    Probability mass function of the categorical distribution.

    Parameters
    ----------
    x : ArrayInput
        Category indices (1-based).
    prob : ArrayInput
        Probability vector or ``(m, k)`` matrix of probability rows.
    log_prob : bool, default False
        Return log-probabilities.

    Returns
    -------
    FloatArray
        ``prob[x - 1]`` for valid rows, 0 for ``x`` outside ``1..k`` or
        non-integer, NaN for invalid rows.
    """
    xv, rows, scan = _recycle_against_rows(x, prob)
    k = rows.shape[1]

    p = np.zeros(xv.shape[0])
    with np.errstate(invalid="ignore"):
        in_support = is_integer(xv) & (xv >= 1) & (xv <= k)
    idx = np.flatnonzero(in_support)
    p[idx] = rows[idx, xv[idx].astype(np.intp) - 1]

    p[np.isnan(xv)] = np.nan
    p[scan.invalid] = np.nan
    warn_invalid(scan.invalid)
    return finalize_density(p, log_prob)


def cdf(
    x: ArrayInput, prob: ArrayInput, lower_tail: bool = True, log_prob: bool = False
) -> FloatArray:
    """
    Cumulative distribution function of the categorical distribution.

    ``P(X <= x)`` is the running sum of the row through ``floor(x)``; it is 0
    below 1 and 1 from ``k`` on. The whole row is still validated.
    """
    xv, rows, scan = _recycle_against_rows(x, prob)
    k = rows.shape[1]

    # number of leading categories included in P(X <= x)
    upto = np.clip(np.floor(np.nan_to_num(xv, nan=0.0)), 0, k).astype(np.intp)
    p = np.zeros(xv.shape[0])
    inside = upto > 0
    p[inside] = scan.cumulative[inside, upto[inside] - 1]
    p[upto == k] = 1.0

    p[np.isnan(xv)] = np.nan
    p[scan.invalid] = np.nan
    warn_invalid(scan.invalid)
    return finalize_probability(p, lower_tail, log_prob)


def ppf(
    p: ArrayInput, prob: ArrayInput, lower_tail: bool = True, log_prob: bool = False
) -> FloatArray:
    """
    Quantile function of the categorical distribution.

    Returns the first category at which the running sum reaches ``p``
    (``>=``); ``p == 0`` maps to category 1. Probabilities outside [0, 1]
    and invalid rows give NaN.
    """
    pv, rows, scan = _recycle_against_rows(p, prob)
    pv = resolve_probability(pv, lower_tail, log_prob)
    k = rows.shape[1]

    # prefix sums still below p, i.e. the 0-based stopping position
    below = np.sum(scan.cumulative < pv[:, np.newaxis], axis=1)
    q = np.minimum(below + 1, k).astype(np.float64)

    with np.errstate(invalid="ignore"):
        out_of_range = (pv < 0.0) | (pv > 1.0)
    invalid = scan.invalid | out_of_range
    q[np.isnan(pv)] = np.nan
    q[invalid] = np.nan
    warn_invalid(invalid)
    return q


def sample(n: int, prob: ArrayInput, rng: RandomSource = None) -> FloatArray:
    """
    Draw ``n`` categories.

    Each draw takes one uniform ``u`` in [0, 1) and returns the first
    category whose running sum exceeds ``u``; rows are recycled against
    the draw index. Draws from invalid rows are NaN.
    """
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    rows = recycle_rows(as_matrix(prob), n)
    scan = scan_simplex_rows(rows)
    k = rows.shape[1]

    u = generator.random(n)
    x = np.minimum(np.sum(scan.cumulative <= u[:, np.newaxis], axis=1) + 1, k)
    x = x.astype(np.float64)

    x[scan.invalid] = np.nan
    warn_invalid(scan.invalid)
    return x


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return

    CATEGORICAL_DOC = """
    Categorical distribution.

    Discrete distribution over categories 1..k with probabilities p_1..p_k.

    Probability mass function:
        f(x) = p_x for x in {1, ..., k}

    Cumulative distribution function:
        F(x) = p_1 + ... + p_floor(x)
    """

    def _support(parameters: _Probabilities) -> IntegerSupport:
        return IntegerSupport(min_k=1, max_k=len(parameters.p))

    Categorical = ParametricFamily(
        name=FamilyName.CATEGORICAL,
        distr_type=UnivariateDiscrete,
        evaluators={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
        },
        sampler=sample,
        support=_support,
    )
    Categorical.__doc__ = CATEGORICAL_DOC

    @parametrization(family=Categorical, name="probabilities")
    class _Probabilities(Parametrization):
        """
        Probability-vector parametrization of categorical distribution.

        Parameters
        ----------
        p : tuple[float, ...]
            Probabilities of categories 1..k
        """

        p: tuple[float, ...] = vector_field(argument="prob")

        @constraint(description="len(p) >= 1")
        def check_not_empty(self) -> bool:
            return len(self.p) >= 1

        @constraint(description="0 <= p_j <= 1")
        def check_entries_in_unit_interval(self) -> bool:
            return all(0.0 <= v <= 1.0 for v in self.p)

        @constraint(description="sum(p) == 1")
        def check_sums_to_one(self) -> bool:
            return bool(scan_simplex_rows(as_matrix(self.p)).valid[0]) if self.p else False

    ParametricFamilyRegister.register(Categorical)
