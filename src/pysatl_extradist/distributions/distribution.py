"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
strategies and by the parametric families.

Notes
-----
- Characteristics are resolved by the distribution's computation strategy.
- Log-likelihood sums ``pdf`` (continuous) or ``pmf`` (discrete) in log
  space over the sample rows, shaped by the distribution type.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_extradist.distributions.computation import AnalyticalComputation
    from pysatl_extradist.distributions.sampling import Sample
    from pysatl_extradist.distributions.strategies import (
        ComputationStrategy,
        SamplingStrategy,
    )
    from pysatl_extradist.distributions.support import Support
    from pysatl_extradist.types import EuclideanDistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and families."""

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def log_likelihood(self, sample: Sample) -> float:
        """
        Sum of log-densities (or log-masses) of the sample rows.

        Scalar outcomes are scored from the single column; row outcomes
        (count vectors, simplex points) are scored row by row, whatever
        their length.
        """
        dtype = self.distribution_type
        density = self.query_method(dtype.density)
        logp = np.asarray(density(dtype.outcomes(sample.array), log_prob=True))
        return float(np.sum(logp))

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)
