"""
Sampling Interfaces
===================

Samples are always ``(n, d)`` row arrays: scalar draws form one column,
multinomial count vectors and Dirichlet points one row each.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt

    from pysatl_extradist.types import FloatArray


class Sample(Protocol):
    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, int]: ...


@dataclass(frozen=True, slots=True, eq=False)
class ArraySample:
    """
    Sample rows backed by a float array.

    Discrete draws keep integral values; draws made with invalid parameters
    are NaN rows.

    Parameters
    ----------
    array : numpy.ndarray
        Array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If ``array`` is not 2-D.
    """

    array: FloatArray

    def __post_init__(self) -> None:
        rows = np.asarray(self.array, dtype=np.float64)
        if rows.ndim != 2:
            raise ValueError(f"Sample rows must form a 2-D array, got {rows.ndim} dimension(s).")
        object.__setattr__(self, "array", rows)

    @classmethod
    def from_values(cls, values: npt.ArrayLike) -> ArraySample:
        """Wrap sampler output; a 1-D array of scalar draws becomes one column."""
        arr = np.asarray(values, dtype=np.float64)
        return cls(arr.reshape(-1, 1) if arr.ndim == 1 else arr)

    @property
    def shape(self) -> tuple[int, int]:
        n, d = self.array.shape
        return int(n), int(d)

    @property
    def dimension(self) -> int:
        return self.shape[1]

    def __len__(self) -> int:
        return self.shape[0]

    def __iter__(self) -> Iterator[FloatArray]:
        """Iterate over the rows."""
        return iter(self.array)
