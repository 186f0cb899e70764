"""
Parameter Validator
===================

Per-position validity checks for family parameters.

- :func:`scan_simplex_rows` — full-row simplex validation of probability rows.
- :func:`positive` — open-domain ``> 0`` checks for shape/scale parameters.
- :func:`warn_invalid` — the single non-fatal warning emitted per call.
- :func:`check_matching_columns` — structural check that aborts a call.

Notes
-----
Simplex and integrality checks use exact floating-point equality. A row is
valid only if its left-to-right running sum is exactly ``1.0``, so a row of
ten ``0.1`` entries (running sum ``0.9999999999999999``) is rejected.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_extradist.types import BoolArray, FloatArray


class InvalidParameterWarning(RuntimeWarning):
    """Emitted once per call when some positions had invalid parameters."""


@dataclass(frozen=True, slots=True)
class SimplexScan:
    """
    Result of validating probability rows.

    Parameters
    ----------
    valid : BoolArray
        ``(n,)`` flags; True if every entry of the row is in [0, 1] and the
        running sum of the whole row equals 1.
    cumulative : FloatArray
        ``(n, k)`` left-to-right running sums of each row. Evaluators that
        only need a prefix of a row read it from here; validity still
        reflects the whole row.
    """

    valid: BoolArray
    cumulative: FloatArray

    @property
    def total(self) -> FloatArray:
        """Full-row sums, accumulated in the same order as ``cumulative``."""
        return self.cumulative[:, -1]

    @property
    def invalid(self) -> BoolArray:
        return ~self.valid


def scan_simplex_rows(rows: FloatArray) -> SimplexScan:
    """
    Validate every probability row in one pass.

    Parameters
    ----------
    rows : FloatArray
        ``(n, k)`` matrix, one probability row per output position.

    Returns
    -------
    SimplexScan
        Validity flags and running sums for every row.
    """
    with np.errstate(invalid="ignore"):
        in_range = np.all((rows >= 0.0) & (rows <= 1.0), axis=1)
    cumulative = np.cumsum(rows, axis=1)
    valid = in_range & (cumulative[:, -1] == 1.0)
    return SimplexScan(valid=valid, cumulative=cumulative)


def positive(*params: FloatArray) -> BoolArray:
    """
    True where every parameter is strictly positive.

    NaN parameters are reported as not positive; callers separate them
    with :func:`missing` so that NaN propagates without a warning.
    """
    ok = np.ones(params[0].shape, dtype=bool)
    with np.errstate(invalid="ignore"):
        for value in params:
            ok &= value > 0.0
    return ok


def missing(*values: FloatArray) -> BoolArray:
    """True where any of the values is NaN."""
    mask = np.zeros(values[0].shape, dtype=bool)
    for value in values:
        mask |= np.isnan(value)
    return mask


def warn_invalid(invalid: BoolArray, message: str = "NaNs produced") -> None:
    """
    Emit a single :class:`InvalidParameterWarning` if any position is invalid.
    """
    if np.any(invalid):
        warnings.warn(message, InvalidParameterWarning, stacklevel=3)


def check_matching_columns(
    x: FloatArray, params: FloatArray, x_name: str = "x", params_name: str = "prob"
) -> None:
    """
    Ensure an outcome matrix and a parameter matrix describe the same categories.

    Raises
    ------
    ValueError
        If the number of columns differs.
    """
    if x.shape[1] != params.shape[1]:
        raise ValueError(
            f"Number of columns in '{x_name}' ({x.shape[1]}) does not equal "
            f"number of columns in '{params_name}' ({params.shape[1]})."
        )


__all__ = [
    "InvalidParameterWarning",
    "SimplexScan",
    "scan_simplex_rows",
    "positive",
    "missing",
    "warn_invalid",
    "check_matching_columns",
]
