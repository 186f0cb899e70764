"""
Support primitives for the built-in families.

- :class:`ContinuousSupport` — an interval of the real line.
- :class:`IntegerSupport` — consecutive integers, optionally bounded on
  either side (categories ``1..k``, the whole lattice for the discrete normal).
- :class:`SimplexSupport` — points of the probability simplex (Dirichlet).
- :class:`CountVectorSupport` — non-negative count vectors with a fixed
  total (multinomial).

Univariate supports accept a scalar or an array of any shape and answer
elementwise. Row supports accept one outcome row or an ``(n, d)`` matrix and
answer per row.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, Protocol, cast, runtime_checkable

import numpy as np

from pysatl_extradist.engine.special import is_integer, tol_equal

if TYPE_CHECKING:
    from pysatl_extradist.types import ArrayInput, BoolArray, FloatArray


@runtime_checkable
class Support(Protocol):
    def contains(self, x: ArrayInput) -> bool | BoolArray: ...


def _elementwise(mask: BoolArray) -> bool | BoolArray:
    return bool(mask) if np.ndim(mask) == 0 else mask


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Interval of the real line.

    Parameters
    ----------
    left, right : float
        Endpoints; infinite endpoints never belong to the support.
    left_closed, right_closed : bool, default True
        Whether a finite endpoint belongs to the support.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def contains(self, x: ArrayInput) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        return _elementwise(above & below & np.isfinite(arr))

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("ArrayInput", x)))


@dataclass(frozen=True, slots=True)
class IntegerSupport:
    """Integers ``min_k, ..., max_k``; a missing bound is unbounded."""

    min_k: int | None = None
    max_k: int | None = None

    def contains(self, x: ArrayInput) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        mask = is_integer(arr)
        if self.min_k is not None:
            mask &= arr >= self.min_k
        if self.max_k is not None:
            mask &= arr <= self.max_k
        return _elementwise(mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("ArrayInput", x)))

    @property
    def size(self) -> int | None:
        """Number of points, or None if unbounded."""
        if self.min_k is None or self.max_k is None:
            return None
        return max(self.max_k - self.min_k + 1, 0)


def _as_rows(x: ArrayInput, dimension: int) -> FloatArray:
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.shape[-1] != dimension:
        raise ValueError(f"Expected points of dimension {dimension}, got {arr.shape[-1]}.")
    return arr


@dataclass(frozen=True, slots=True)
class SimplexSupport:
    """Points of the ``dimension``-simplex: entries in [0, 1] summing to 1."""

    dimension: int

    def contains(self, x: ArrayInput) -> BoolArray:
        rows = _as_rows(x, self.dimension)
        with np.errstate(invalid="ignore"):
            in_range = np.all((rows >= 0.0) & (rows <= 1.0), axis=1)
        return cast("BoolArray", in_range & tol_equal(rows.sum(axis=1), 1.0))


@dataclass(frozen=True, slots=True)
class CountVectorSupport:
    """Non-negative integer vectors of length ``dimension`` summing to ``size``."""

    size: int
    dimension: int

    def contains(self, x: ArrayInput) -> BoolArray:
        rows = _as_rows(x, self.dimension)
        with np.errstate(invalid="ignore"):
            counts_ok = np.all(is_integer(rows) & (rows >= 0.0), axis=1)
        return cast("BoolArray", counts_ok & (rows.sum(axis=1) == self.size))


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
    "SimplexSupport",
    "CountVectorSupport",
]
