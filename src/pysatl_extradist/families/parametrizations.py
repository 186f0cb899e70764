"""
Parametrizations of the built-in families.

A parametrization is a frozen dataclass whose fields are the parameter
arguments of the family's vectorised evaluators. Scalar fields are passed
through as given. Row-valued fields (probability rows, concentration
vectors) are declared with :func:`vector_field`; they are stored as tuples of
floats, so the parameter values stay hashable, and may be routed to an
evaluator keyword of a different name (``p`` is passed as ``prob``).

Admissible values are described by ``@constraint`` methods, checked when a
distribution is created from the family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ClassVar

    from pysatl_extradist.families.parametric_family import ParametricFamily

_VECTOR = "vector"
_ARGUMENT = "argument"
_CONSTRAINT = "__constraint_description__"


def vector_field(argument: str | None = None) -> Any:
    """
    Declare a row-valued parameter.

    Parameters
    ----------
    argument : str, optional
        Evaluator keyword receiving the row, when it differs from the field
        name.
    """
    return field(metadata={_VECTOR: True, _ARGUMENT: argument})


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """A predicate on parameter values and its human-readable description."""

    description: str
    check: Callable[[Any], bool]


class Parametrization:
    """
    Base class of the parametrization dataclasses.

    Attributes set by :func:`parametrization`: the owning family, the
    parametrization name and the collected constraints.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[str]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    def __post_init__(self) -> None:
        for spec in fields(self):  # type: ignore[arg-type]
            if spec.metadata.get(_VECTOR):
                row = tuple(float(v) for v in np.ravel(getattr(self, spec.name)))
                object.__setattr__(self, spec.name, row)

    @property
    def name(self) -> str:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values by field name."""
        return {spec.name: getattr(self, spec.name) for spec in fields(self)}  # type: ignore[arg-type]

    def evaluator_arguments(self) -> dict[str, Any]:
        """Parameter values by the keyword the family's evaluators expect."""
        return {
            spec.metadata.get(_ARGUMENT) or spec.name: getattr(self, spec.name)
            for spec in fields(self)  # type: ignore[arg-type]
        }

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def violated_constraints(self) -> list[str]:
        """Descriptions of the constraints that do not hold, in declaration order."""
        return [c.description for c in self._constraints if not c.check(self)]

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If a constraint does not hold; the message names the first one.
        """
        violated = self.violated_constraints()
        if violated:
            raise ValueError(f'Constraint "{violated[0]}" does not hold')


def constraint(description: str) -> Callable[[Callable[[Any], Any]], Callable[[Any], bool]]:
    """
    Mark an instance method as a constraint of its parametrization.

    The method is a predicate on the parameter values; its result is
    coerced to ``bool`` so NumPy booleans may be returned.
    """

    def decorator(check: Callable[[Any], Any]) -> Callable[[Any], bool]:
        @wraps(check)
        def predicate(self: Any) -> bool:
            return bool(check(self))

        setattr(predicate, _CONSTRAINT, description)
        return predicate

    return decorator


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    collected = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
        elif isfunction(attr) and hasattr(attr, _CONSTRAINT):
            collected.append(ParametrizationConstraint(getattr(attr, _CONSTRAINT), attr))
    return tuple(collected)


def parametrization(
    *, family: ParametricFamily, name: str
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator making ``cls`` the parametrization of ``family``.

    The class becomes a frozen slotted dataclass unless it already is a
    dataclass, and its ``@constraint`` methods are collected in declaration
    order.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    ValueError
        If the family already has a parametrization.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        family.register_parametrization(cls)
        return cls

    return decorator
