"""
Recycling Engine
================

R-style recycling of array arguments. Inputs of different lengths are
consumed element by element; a shorter input is indexed modulo its own
length. No divisibility check is performed, so an input whose length does
not divide the output length is still wrapped silently.

- :func:`recycled_length` — output length of a call.
- :func:`recycle` — gather a 1-D input to the output length.
- :func:`recycle_rows` — gather rows of a 2-D input to the output length.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    from pysatl_extradist.types import ArrayInput, FloatArray


def as_vector(values: ArrayInput) -> FloatArray:
    """
    Convert a recycled argument to a 1-D float array.

    Scalars become length-1 arrays; multi-dimensional inputs are flattened
    in C order.
    """
    return np.asarray(values, dtype=np.float64).ravel()


def as_matrix(values: ArrayInput, name: str = "prob") -> FloatArray:
    """
    Convert a row-wise argument to a 2-D float array.

    A 1-D vector is a single row.

    Raises
    ------
    ValueError
        If the input has more than two dimensions or no columns.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim <= 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ValueError(f"'{name}' must be a vector or a matrix, got {arr.ndim} dimensions.")
    if arr.shape[1] == 0:
        raise ValueError(f"'{name}' must have at least one column.")
    return arr


def recycled_length(*lengths: int) -> int:
    """
    Output length for inputs of the given lengths.

    Returns ``max(lengths)``, or 0 if any input is empty.
    """
    if not lengths or min(lengths) == 0:
        return 0
    return max(lengths)


def recycle_index(length: int, size: int) -> npt.NDArray[np.intp]:
    """Input-local positions ``i mod size`` for ``i`` in ``[0, length)``."""
    return np.arange(length, dtype=np.intp) % size


def recycle(values: npt.NDArray[Any], length: int) -> npt.NDArray[Any]:
    """
    Recycle a 1-D array to ``length`` elements.

    Examples
    --------
    >>> recycle(np.array([1.0, 2.0]), 5)
    array([1., 2., 1., 2., 1.])
    """
    if length == 0:
        return values[:0]
    return values[recycle_index(length, values.shape[0])]


def recycle_rows(matrix: npt.NDArray[Any], length: int) -> npt.NDArray[Any]:
    """Recycle the rows of a 2-D array to ``length`` rows."""
    if length == 0:
        return matrix[:0]
    return matrix[recycle_index(length, matrix.shape[0])]


def recycle_all(*arrays: npt.NDArray[Any]) -> tuple[npt.NDArray[Any], ...]:
    """
    Recycle several 1-D arrays against each other.

    Returns
    -------
    tuple of numpy.ndarray
        The inputs, each recycled to the common output length.
    """
    length = recycled_length(*(a.shape[0] for a in arrays))
    return tuple(recycle(a, length) for a in arrays)


def restore_shape(values: npt.NDArray[Any], like: ArrayInput) -> npt.NDArray[Any]:
    """
    Reshape a recycled result to the shape of the primary input.

    Applies only when no other input made the output longer, e.g. when a
    distribution object with scalar parameters is evaluated at ``like``.
    """
    shape = np.shape(like)
    if values.size == int(np.prod(shape)):
        return values.reshape(shape)
    return values


__all__ = [
    "restore_shape",
    "as_vector",
    "as_matrix",
    "recycled_length",
    "recycle_index",
    "recycle",
    "recycle_rows",
    "recycle_all",
]
