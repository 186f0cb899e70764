"""
Core Type Definitions
=====================

Names of characteristics and families, the kind/dimension descriptor of a
distribution and the array aliases shared by the evaluators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

import numpy as np
from numpy.typing import ArrayLike, NDArray

GenericCharacteristicName: TypeAlias = str
"""Characteristic names as accepted by the strategies (plain strings)."""

FloatArray = NDArray[np.float64]
"""Arrays returned by the evaluators."""

BoolArray = NDArray[np.bool_]
"""Per-position flags (validity, support membership)."""

ArrayInput = ArrayLike
"""Anything accepted as a recycled input: scalar, list, vector or matrix."""


class Kind(StrEnum):
    """Whether outcomes carry probability mass or density."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class CharacteristicName(StrEnum):
    """
    Characteristics provided by the built-in families.

    ``RVS`` is the family's own vectorised sampler; families without one
    are sampled by inverse transform through ``PPF``.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    RVS = "rvs"


class FamilyName(StrEnum):
    CATEGORICAL = "Categorical"
    MULTINOMIAL = "Multinomial"
    DISCRETE_NORMAL = "DiscreteNormal"
    GEV = "GeneralizedExtremeValue"
    KUMARASWAMY = "Kumaraswamy"
    POWER = "Power"
    RAYLEIGH = "Rayleigh"
    DIRICHLET = "Dirichlet"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Kind and dimension of the outcomes of a distribution.

    Parameters
    ----------
    kind : Kind
        Mass or density.
    dimension : int
        Number of coordinates of one outcome.
    row_outcomes : bool, default False
        Outcomes are rows of length ``dimension`` (multinomial count vectors,
        points of the simplex) rather than scalars. Implied by
        ``dimension > 1``; a one-category multinomial sets it explicitly.
    """

    kind: Kind
    dimension: int
    row_outcomes: bool = False

    def __post_init__(self) -> None:
        if self.dimension != 1:
            object.__setattr__(self, "row_outcomes", True)

    @property
    def is_univariate(self) -> bool:
        return not self.row_outcomes

    @property
    def density(self) -> CharacteristicName:
        """Characteristic whose logarithm scores a single outcome."""
        return CharacteristicName.PMF if self.kind == Kind.DISCRETE else CharacteristicName.PDF

    def outcomes(self, rows: FloatArray) -> FloatArray:
        """
        Turn ``(n, d)`` sample rows into evaluator input.

        Univariate outcomes become a flat vector of ``n`` values. Row-valued
        outcomes stay an ``(n, d)`` matrix even when ``d == 1``, because a
        flat vector would be read as one outcome row.
        """
        return rows[:, 0] if self.is_univariate else rows


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)


__all__ = [
    "ArrayInput",
    "BoolArray",
    "CharacteristicName",
    "EuclideanDistributionType",
    "FamilyName",
    "FloatArray",
    "GenericCharacteristicName",
    "Kind",
    "UnivariateContinuous",
    "UnivariateDiscrete",
]
