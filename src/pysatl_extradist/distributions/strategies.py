"""
Computation and Sampling Strategies
===================================

- :class:`DefaultComputationStrategy` — hands out the analytical evaluators
  of a distribution. Every built-in family is closed-form, so no numerical
  conversion between characteristics is attempted.
- :class:`DefaultSamplingStrategy` — calls the family's own ``rvs`` when it
  has one, and applies ``ppf`` to uniforms otherwise.

Strategies hold no state; randomness comes from the ``rng`` option.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

from pysatl_extradist.distributions.computation import AnalyticalComputation
from pysatl_extradist.engine.random import check_sample_size, resolve_rng
from pysatl_extradist.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution


class ComputationStrategy(Protocol):
    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[Any, Any]: ...


class DefaultComputationStrategy:
    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        """
        Look up the evaluator of ``state``; ``options`` are not used.

        Raises
        ------
        RuntimeError
            If the distribution has no evaluator for ``state``.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]

        available = ", ".join(sorted(computations)) or "none"
        raise RuntimeError(
            f"Characteristic '{state}' is not provided analytically "
            f"(available: {available})."
        )


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingStrategy:
    """
    Draw ``n`` outcome rows.

    Options
    -------
    rng : numpy.random.Generator, int or None
        Random source; see :func:`pysatl_extradist.engine.random.resolve_rng`.
        The same seed reproduces the same rows.

    Returns
    -------
    ArraySample
        ``(n, 1)`` for scalar outcomes, ``(n, k)`` for rows of length ``k``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        n = check_sample_size(n)
        rng = resolve_rng(options.pop("rng", None))

        if CharacteristicName.RVS in distr.analytical_computations:
            rvs = distr.query_method(CharacteristicName.RVS, **options)
            return ArraySample.from_values(rvs(n, rng=rng))

        ppf = distr.query_method(CharacteristicName.PPF, **options)
        return ArraySample.from_values(ppf(rng.random(n)))
