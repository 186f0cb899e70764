"""
Distributions created from a parametric family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_extradist.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_extradist.distributions.computation import AnalyticalComputation
    from pysatl_extradist.distributions.sampling import Sample
    from pysatl_extradist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_extradist.distributions.support import Support
    from pysatl_extradist.families.parametric_family import ParametricFamily
    from pysatl_extradist.families.parametrizations import Parametrization
    from pysatl_extradist.types import EuclideanDistributionType, GenericCharacteristicName


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A member of a parametric family with fixed, validated parameters.

    Parameters
    ----------
    family : ParametricFamily
        Family the distribution was created from.
    parameters : Parametrization
        Validated parameter values.
    _distribution_type : EuclideanDistributionType
    _support : Support or None
    """

    family: ParametricFamily
    parameters: Parametrization
    _distribution_type: EuclideanDistributionType
    _support: Support | None
    _computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = None

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Evaluators bound to the parameters, built on first access."""
        if self._computations is None:
            self._computations = self.family.bind(self.parameters)
        return self._computations

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Draw ``n`` outcomes as ``(n, d)`` rows.

        Parameters
        ----------
        n : int
        **options : Any
            Sampling options, e.g. ``rng``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
