"""
Log/Tail Transform
==================

Order-sensitive conversion between raw probabilities and the values
requested by the ``lower_tail`` and ``log_prob`` flags.

- Inputs of quantile functions: exponentiate first (``log_prob``), then
  complement (``lower_tail=False``), then evaluate.
- Outputs of cumulative functions: complement first, then take the log.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_extradist.types import FloatArray


def resolve_probability(
    p: FloatArray, lower_tail: bool = True, log_prob: bool = False
) -> FloatArray:
    """
    Turn a user-supplied probability into a lower-tail raw probability.
    """
    if log_prob:
        p = np.exp(p)
    if not lower_tail:
        p = 1.0 - p
    return p


def finalize_probability(
    p: FloatArray, lower_tail: bool = True, log_prob: bool = False
) -> FloatArray:
    """
    Apply the tail and log flags to a raw cumulative probability.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        if log_prob:
            return np.log1p(-p) if not lower_tail else np.log(p)
        if not lower_tail:
            return 1.0 - p
    return p


def finalize_density(p: FloatArray, log_prob: bool = False) -> FloatArray:
    """Log-transform a raw density or mass on request."""
    if not log_prob:
        return p
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log(p)


def finalize_log_density(logp: FloatArray, log_prob: bool = False) -> FloatArray:
    """Exponentiate a density computed in log space unless logs were requested."""
    if log_prob:
        return logp
    return np.exp(logp)


__all__ = [
    "resolve_probability",
    "finalize_probability",
    "finalize_density",
    "finalize_log_density",
]
