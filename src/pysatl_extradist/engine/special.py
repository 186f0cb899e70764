"""
Numeric helpers shared by the family evaluators.

All functions are pure and vectorised over NumPy arrays.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import gammaln, ndtr, ndtri

if TYPE_CHECKING:
    from pysatl_extradist.types import ArrayInput, BoolArray, FloatArray

MIN_DIFF_EPS = 1e-8
"""Absolute tolerance used by :func:`tol_equal`."""


def log_factorial(x: ArrayInput) -> FloatArray:
    """Natural logarithm of ``x!`` via ``lgamma(x + 1)``."""
    return np.asarray(gammaln(np.asarray(x, dtype=np.float64) + 1.0))


def normal_cdf(x: ArrayInput) -> FloatArray:
    """Standard normal cumulative distribution function."""
    return np.asarray(ndtr(np.asarray(x, dtype=np.float64)))


def normal_ppf(p: ArrayInput) -> FloatArray:
    """Standard normal quantile function."""
    return np.asarray(ndtri(np.asarray(p, dtype=np.float64)))


def is_integer(x: ArrayInput) -> BoolArray:
    """
    Exact integrality check ``floor(x) == x``.

    NaN and infinite values are not integers.
    """
    arr = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.isfinite(arr) & (np.floor(arr) == arr)


def tol_equal(x: ArrayInput, y: ArrayInput, tol: float = MIN_DIFF_EPS) -> BoolArray:
    """Absolute-tolerance equality ``|x - y| < tol``."""
    diff = np.abs(np.asarray(x, dtype=np.float64) - np.asarray(y, dtype=np.float64))
    return diff < tol


__all__ = [
    "MIN_DIFF_EPS",
    "log_factorial",
    "normal_cdf",
    "normal_ppf",
    "is_integer",
    "tol_equal",
]
