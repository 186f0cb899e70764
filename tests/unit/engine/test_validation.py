from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings

import numpy as np
import pytest

from pysatl_extradist.engine.validation import (
    InvalidParameterWarning,
    check_matching_columns,
    missing,
    positive,
    scan_simplex_rows,
    warn_invalid,
)


class TestSimplexScan:
    def test_valid_and_invalid_rows(self):
        rows = np.array(
            [
                [0.25, 0.25, 0.5],
                [0.5, 0.5, 0.5],
                [-0.25, 0.75, 0.5],
                [0.25, 0.25, 0.25],
            ]
        )
        scan = scan_simplex_rows(rows)
        np.testing.assert_array_equal(scan.valid, [True, False, False, False])
        np.testing.assert_array_equal(scan.invalid, [False, True, True, True])

    def test_cumulative_and_total(self):
        scan = scan_simplex_rows(np.array([[0.25, 0.25, 0.5]]))
        np.testing.assert_array_equal(scan.cumulative, [[0.25, 0.5, 1.0]])
        np.testing.assert_array_equal(scan.total, [1.0])

    def test_ten_tenths_are_rejected(self):
        # running sum ends at 0.9999999999999999
        scan = scan_simplex_rows(np.full((1, 10), 0.1))
        assert scan.total[0] != 1.0
        assert not scan.valid[0]

    def test_row_invalid_after_valid_prefix(self):
        # the first two entries look fine, the third breaks the row
        scan = scan_simplex_rows(np.array([[0.25, 0.25, 1.5]]))
        assert not scan.valid[0]

    def test_nan_entry_makes_row_invalid(self):
        scan = scan_simplex_rows(np.array([[0.5, np.nan]]))
        assert not scan.valid[0]


class TestElementwiseChecks:
    def test_positive(self):
        a = np.array([1.0, 0.0, -1.0, np.nan, 2.0])
        b = np.array([1.0, 1.0, 1.0, 1.0, -3.0])
        np.testing.assert_array_equal(positive(a, b), [True, False, False, False, False])

    def test_missing(self):
        a = np.array([1.0, np.nan, 1.0])
        b = np.array([1.0, 1.0, np.nan])
        np.testing.assert_array_equal(missing(a, b), [False, True, True])


class TestWarnings:
    def test_single_warning_per_call(self):
        with pytest.warns(InvalidParameterWarning, match="NaNs produced") as record:
            warn_invalid(np.array([True, True, False]))
        assert len(record) == 1

    def test_no_warning_when_all_valid(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            warn_invalid(np.array([False, False]))

    def test_is_runtime_warning(self):
        assert issubclass(InvalidParameterWarning, RuntimeWarning)


class TestStructuralChecks:
    def test_matching_columns_pass(self):
        check_matching_columns(np.zeros((2, 3)), np.zeros((1, 3)))

    def test_column_mismatch_raises(self):
        with pytest.raises(ValueError, match="Number of columns in 'x' \\(2\\)"):
            check_matching_columns(np.zeros((1, 2)), np.zeros((1, 3)))
