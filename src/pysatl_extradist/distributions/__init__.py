"""
Distributions subpackage

The distribution protocol, bound evaluators, ``(n, d)`` sample rows, the
default computation and sampling strategies, and support descriptors for
scalar, count-vector and simplex outcomes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    CountVectorSupport,
    IntegerSupport,
    SimplexSupport,
    Support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingStrategy",
    # support
    "Support",
    "ContinuousSupport",
    "IntegerSupport",
    "SimplexSupport",
    "CountVectorSupport",
]
