"""
Multinomial distribution family implementation.

x[j]       number of draws of the j-th category
size       total number of draws, sum(x)
p[j]       probability of drawing the j-th category

f(x) = size! / prod(x[j]!) * prod(p[j]^x[j])
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import xlogy

from pysatl_extradist.distributions.support import CountVectorSupport
from pysatl_extradist.engine.random import RandomSource, check_sample_size, resolve_rng
from pysatl_extradist.engine.recycling import (
    as_matrix,
    as_vector,
    recycle,
    recycle_rows,
    recycled_length,
)
from pysatl_extradist.engine.special import is_integer, log_factorial
from pysatl_extradist.engine.transforms import finalize_log_density
from pysatl_extradist.engine.validation import (
    check_matching_columns,
    scan_simplex_rows,
    warn_invalid,
)
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
    from pysatl_extradist.types import ArrayInput, FloatArray


def pmf(
    x: ArrayInput, size: ArrayInput, prob: ArrayInput, log_prob: bool = False
) -> FloatArray:
    """
    Probability mass function of the multinomial distribution.

    Parameters
    ----------
    x : ArrayInput
        Count vector or ``(m, k)`` matrix of count vectors.
    size : ArrayInput
        Number of trials, recycled.
    prob : ArrayInput
        Probability vector or matrix of probability rows.
    log_prob : bool, default False
        Return log-probabilities.

    Returns
    -------
    FloatArray
        Probabilities of the outcomes. Outcomes that are impossible for any
        probability row (negative or fractional counts, invalid ``size``,
        counts not summing to ``size``) have probability 0; invalid
        probability rows give NaN.

    Raises
    ------
    ValueError
        If ``x`` and ``prob`` have different numbers of columns.
    """
    counts = as_matrix(x, "x")
    rows = as_matrix(prob, "prob")
    sizes = as_vector(size)
    check_matching_columns(counts, rows, "x", "prob")

    n = recycled_length(counts.shape[0], sizes.shape[0], rows.shape[0])
    counts = recycle_rows(counts, n)
    rows = recycle_rows(rows, n)
    sizes = recycle(sizes, n)
    scan = scan_simplex_rows(rows)

    with np.errstate(invalid="ignore"):
        counts_ok = np.all(is_integer(counts) & (counts >= 0.0), axis=1)
        impossible = (
            ~counts_ok | ~is_integer(sizes) | (sizes < 0.0) | (counts.sum(axis=1) != sizes)
        )

    with np.errstate(divide="ignore", invalid="ignore"):
        logp = (
            log_factorial(sizes)
            - log_factorial(counts).sum(axis=1)
            + xlogy(counts, rows).sum(axis=1)
        )

    logp[scan.invalid] = np.nan
    logp[impossible] = -np.inf
    warn_invalid(scan.invalid & ~impossible)
    return finalize_log_density(logp, log_prob)


def sample(n: int, size: ArrayInput, prob: ArrayInput, rng: RandomSource = None) -> FloatArray:
    """
    Draw ``n`` count vectors.

    Counts are generated by sequential conditional binomial draws: category
    ``j = 1, ..., k - 1`` receives ``Binomial(remaining, p_j / (p_j + ... + p_k))``
    and category ``k`` receives the remaining trials. The success
    probability of each draw is therefore the conditional probability
    ``p_j / (p_j + ... + p_k)`` of category ``j`` given that none of the
    earlier categories was drawn, not the raw category probability ``p_j``.
    Rows with an invalid probability vector or ``size`` are NaN.

    Returns
    -------
    FloatArray
        ``(n, k)`` matrix of counts.
    """
    n = check_sample_size(n)
    generator = resolve_rng(rng)
    rows = recycle_rows(as_matrix(prob, "prob"), n)
    sizes = recycle(as_vector(size), n)
    scan = scan_simplex_rows(rows)
    k = rows.shape[1]

    with np.errstate(invalid="ignore"):
        invalid = scan.invalid | ~is_integer(sizes) | (sizes < 0.0)

    safe_rows = np.where(invalid[:, np.newaxis], 0.0, rows)
    # probability mass of categories j..k-1
    tail_mass = np.cumsum(safe_rows[:, ::-1], axis=1)[:, ::-1]
    remaining = np.where(invalid, 0.0, sizes).astype(np.int64)

    counts = np.empty((n, k), dtype=np.float64)
    for j in range(k - 1):
        with np.errstate(divide="ignore", invalid="ignore"):
            conditional = np.where(
                tail_mass[:, j] > 0.0, safe_rows[:, j] / tail_mass[:, j], 0.0
            )
        drawn = generator.binomial(remaining, np.clip(conditional, 0.0, 1.0))
        counts[:, j] = drawn
        remaining -= drawn
    counts[:, k - 1] = remaining

    counts[invalid] = np.nan
    warn_invalid(invalid)
    return counts


def configure_multinomial_family() -> None:
    """
    Configure and register the Multinomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.MULTINOMIAL):
        return

    MULTINOMIAL_DOC = """
    Multinomial distribution.

    Counts of each of k categories in `size` independent categorical trials.

    Probability mass function:
        f(x) = size! / prod(x_j!) * prod(p_j^x_j),  sum(x) = size
    """

    def _distr_type(parameters: _SizeProbabilities) -> EuclideanDistributionType:
        return EuclideanDistributionType(
            kind=Kind.DISCRETE, dimension=len(parameters.p), row_outcomes=True
        )

    def _support(parameters: _SizeProbabilities) -> CountVectorSupport:
        return CountVectorSupport(size=parameters.size, dimension=len(parameters.p))

    Multinomial = ParametricFamily(
        name=FamilyName.MULTINOMIAL,
        distr_type=_distr_type,
        evaluators={CharacteristicName.PMF: pmf},
        sampler=sample,
        support=_support,
    )
    Multinomial.__doc__ = MULTINOMIAL_DOC

    @parametrization(family=Multinomial, name="size_probabilities")
    class _SizeProbabilities(Parametrization):
        """
        Trials-and-probabilities parametrization of multinomial distribution.

        Parameters
        ----------
        size : int
            Number of trials
        p : tuple[float, ...]
            Probabilities of the k categories
        """

        size: int
        p: tuple[float, ...] = vector_field(argument="prob")

        @constraint(description="size is a non-negative integer")
        def check_size(self) -> bool:
            return bool(is_integer(self.size)) and self.size >= 0

        @constraint(description="len(p) >= 1")
        def check_not_empty(self) -> bool:
            return len(self.p) >= 1

        @constraint(description="0 <= p_j <= 1")
        def check_entries_in_unit_interval(self) -> bool:
            return all(0.0 <= v <= 1.0 for v in self.p)

        @constraint(description="sum(p) == 1")
        def check_sums_to_one(self) -> bool:
            return bool(scan_simplex_rows(as_matrix(self.p)).valid[0]) if self.p else False

    ParametricFamilyRegister.register(Multinomial)
