"""
Parametric families over vectorised evaluators.

A family owns the module-level evaluators of a distribution (``pdf``/``pmf``,
``cdf``, ``ppf`` and optionally a sampler) together with its single
parametrization. Creating a distribution validates the parameter values and
binds them to the evaluators as keyword arguments.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING

from pysatl_extradist.distributions.computation import AnalyticalComputation
from pysatl_extradist.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingStrategy,
)
from pysatl_extradist.engine.recycling import restore_shape
from pysatl_extradist.families.distribution import ParametricFamilyDistribution
from pysatl_extradist.types import CharacteristicName, EuclideanDistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, TypeAlias

    from pysatl_extradist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_extradist.distributions.support import Support
    from pysatl_extradist.families.parametrizations import Parametrization
    from pysatl_extradist.types import ArrayInput, FloatArray, GenericCharacteristicName

    Evaluator: TypeAlias = Callable[..., FloatArray]
    TypeArg: TypeAlias = EuclideanDistributionType | Callable[[Any], EuclideanDistributionType]
    SupportArg: TypeAlias = Support | Callable[[Any], Support | None] | None


def _bind(
    evaluator: Evaluator, arguments: Mapping[str, Any], univariate: bool
) -> Callable[..., FloatArray]:
    """Fix the parameter arguments of ``evaluator``; univariate results keep the input shape."""

    def bound(data: ArrayInput, **options: Any) -> FloatArray:
        result = evaluator(data, **arguments, **options)
        return restore_shape(result, data) if univariate else result

    return bound


class ParametricFamily:
    """
    A family of distributions sharing vectorised evaluators.

    Parameters
    ----------
    name : str
        Name of the family in the register.
    distr_type : EuclideanDistributionType or Callable
        Outcome kind and dimension, or a function of the parameters
        returning them (the multivariate families depend on ``len(p)``).
    evaluators : Mapping[str, Callable]
        Characteristic evaluators ``func(data, **parameters, **options)``.
    sampler : Callable, optional
        ``func(n, **parameters, rng=...)``, exposed as the ``rvs``
        characteristic. Families without one are sampled through ``ppf``.
    support : Support or Callable, optional
        Support, or a function of the parameters returning it.
    sampling_strategy : SamplingStrategy, optional
    computation_strategy : ComputationStrategy, optional
    """

    def __init__(
        self,
        name: str,
        distr_type: TypeArg,
        evaluators: Mapping[GenericCharacteristicName, Evaluator],
        sampler: Evaluator | None = None,
        support: SupportArg = None,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
    ):
        self._name = name
        self._distr_type = distr_type
        self._evaluators = dict(evaluators)
        self._sampler = sampler
        self._support = support
        self._parametrization: type[Parametrization] | None = None
        self.sampling_strategy = (
            DefaultSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def characteristics(self) -> list[GenericCharacteristicName]:
        """Characteristics provided analytically, the sampler included."""
        names = list(self._evaluators)
        if self._sampler is not None:
            names.append(CharacteristicName.RVS)
        return names

    @property
    def parametrization_class(self) -> type[Parametrization]:
        """
        Raises
        ------
        ValueError
            If no parametrization has been registered yet.
        """
        if self._parametrization is None:
            raise ValueError(f"Family '{self.name}' has no registered parametrization.")
        return self._parametrization

    @property
    def parametrization_name(self) -> str:
        return self.parametrization_class.__param_name__

    def register_parametrization(self, parametrization_class: type[Parametrization]) -> None:
        """
        Raises
        ------
        ValueError
            If the family already has a parametrization.
        """
        if self._parametrization is not None:
            raise ValueError(
                f"Family '{self.name}' already has parametrization "
                f"'{self._parametrization.__param_name__}'."
            )
        self._parametrization = parametrization_class

    def distribution_type(self, parameters: Parametrization) -> EuclideanDistributionType:
        if isinstance(self._distr_type, EuclideanDistributionType):
            return self._distr_type
        return self._distr_type(parameters)

    def support(self, parameters: Parametrization) -> Support | None:
        if self._support is None or not callable(self._support):
            return self._support
        return self._support(parameters)

    def bind(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Analytical computations of the distribution with the given parameters."""
        arguments = parameters.evaluator_arguments()
        univariate = self.distribution_type(parameters).is_univariate
        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {
            characteristic: AnalyticalComputation(
                target=characteristic, func=_bind(evaluator, arguments, univariate)
            )
            for characteristic, evaluator in self._evaluators.items()
        }
        if self._sampler is not None:
            computations[CharacteristicName.RVS] = AnalyticalComputation(
                target=CharacteristicName.RVS, func=partial(self._sampler, **arguments)
            )
        return computations

    def distribution(self, **parameters_values: Any) -> ParametricFamilyDistribution:
        """
        Create a distribution with the given parameter values.

        Raises
        ------
        TypeError
            If a parameter is missing or unknown.
        ValueError
            If the values violate a constraint of the parametrization.
        """
        parameters = self.parametrization_class(**parameters_values)
        parameters.validate()
        return ParametricFamilyDistribution(
            self,
            parameters,
            self.distribution_type(parameters),
            self.support(parameters),
        )

    __call__ = distribution
