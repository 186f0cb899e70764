"""
Vectorised evaluation engine

Building blocks shared by every family evaluator:

- recycling of unequal-length inputs (:mod:`.recycling`);
- parameter validation and the invalid-parameter warning (:mod:`.validation`);
- log/tail post-processing (:mod:`.transforms`);
- numeric helpers backed by :mod:`scipy.special` (:mod:`.special`);
- the explicit random source (:mod:`.random`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .random import RandomSource, check_sample_size, resolve_rng
from .recycling import (
    as_matrix,
    as_vector,
    recycle,
    recycle_all,
    recycle_index,
    recycle_rows,
    recycled_length,
    restore_shape,
)
from .special import MIN_DIFF_EPS, is_integer, log_factorial, normal_cdf, normal_ppf, tol_equal
from .transforms import (
    finalize_density,
    finalize_log_density,
    finalize_probability,
    resolve_probability,
)
from .validation import (
    InvalidParameterWarning,
    SimplexScan,
    check_matching_columns,
    missing,
    positive,
    scan_simplex_rows,
    warn_invalid,
)

__all__ = [
    # recycling
    "as_matrix",
    "as_vector",
    "recycle",
    "recycle_all",
    "recycle_index",
    "recycle_rows",
    "recycled_length",
    "restore_shape",
    # validation
    "InvalidParameterWarning",
    "SimplexScan",
    "check_matching_columns",
    "missing",
    "positive",
    "scan_simplex_rows",
    "warn_invalid",
    # transforms
    "finalize_density",
    "finalize_log_density",
    "finalize_probability",
    "resolve_probability",
    # special
    "MIN_DIFF_EPS",
    "is_integer",
    "log_factorial",
    "normal_cdf",
    "normal_ppf",
    "tol_equal",
    # random
    "RandomSource",
    "check_sample_size",
    "resolve_rng",
]
