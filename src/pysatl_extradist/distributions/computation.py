"""
Evaluators bound to a distribution.

An :class:`AnalyticalComputation` pairs a characteristic name with a
vectorised callable whose parameters are already fixed; the remaining
keyword options (``log_prob``, ``lower_tail``, ``rng``) pass through.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mypy_extensions import KwArg

from pysatl_extradist.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """
    Parameters
    ----------
    target : str
        Characteristic name, e.g. ``"pmf"`` or ``"rvs"``.
    func : Callable[[In, KwArg(Any)], Out]
        Evaluator of the outcome data (or of the sample size, for ``rvs``).
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
