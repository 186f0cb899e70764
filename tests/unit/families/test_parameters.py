from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError, is_dataclass
from typing import Any

import numpy as np
import pytest

from pysatl_extradist.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
    vector_field,
)
from pysatl_extradist.types import EuclideanDistributionType, Kind, UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


def _bare_family(name: str = "Bare") -> ParametricFamily:
    return ParametricFamily(name=name, distr_type=UnivariateContinuous, evaluators={})


class TestConstraints:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_result_is_plain_bool(self) -> None:
        @constraint("entries positive")
        def check_entries(self: Any) -> Any:
            return np.all(np.asarray(self.alpha) > 0)

        holder = type("Holder", (), {"alpha": (1.0, 2.0)})()
        result = check_entries(holder)
        assert result is True
        assert check_entries.__name__ == "check_entries"

    def test_constraints_are_collected_in_declaration_order(self) -> None:
        family = _bare_family()

        @parametrization(family=family, name="shapes")
        class Shapes(Parametrization):
            a: float
            b: float

            @constraint(description="a > 0")
            def check_a(self) -> bool:
                return self.a > 0

            @constraint(description="b > a")
            def check_b(self) -> bool:
                return self.b > self.a

        params = Shapes(a=-1.0, b=-2.0)  # type: ignore[call-arg]
        assert [c.description for c in params.constraints] == ["a > 0", "b > a"]
        assert params.violated_constraints() == ["a > 0", "b > a"]
        with pytest.raises(ValueError, match='Constraint "a > 0" does not hold'):
            params.validate()

        Shapes(a=1.0, b=2.0).validate()  # type: ignore[call-arg]

    def test_static_constraint_is_rejected(self) -> None:
        family = _bare_family()

        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint(description="never")
                def check() -> bool:
                    return False


class TestParametrizationDecorator(TestBaseFamily):
    def test_class_becomes_frozen_dataclass(self) -> None:
        family = self.make_uniform_family()
        cls = family.parametrization_class

        assert is_dataclass(cls)
        assert cls.__family__ is family
        assert cls.__param_name__ == "width"

        params = cls(width=2.0)  # type: ignore[call-arg]
        assert params.name == "width"
        assert params.parameters == {"width": 2.0}
        with pytest.raises(FrozenInstanceError):
            params.width = 3.0  # type: ignore[misc]

    def test_second_parametrization_is_rejected(self) -> None:
        family = self.make_uniform_family()

        with pytest.raises(ValueError, match="already has parametrization 'width'"):

            @parametrization(family=family, name="other")
            class Other(Parametrization):
                width: float


class TestVectorFields:
    def make_weighted_family(self) -> ParametricFamily:
        family = ParametricFamily(
            name="Weighted",
            distr_type=lambda params: EuclideanDistributionType(Kind.DISCRETE, len(params.w)),
            evaluators={},
        )

        @parametrization(family=family, name="weights")
        class Weights(Parametrization):
            size: int
            w: tuple[float, ...] = vector_field(argument="prob")

        return family

    @pytest.mark.parametrize(
        "raw", [[1, 2, 3], np.array([1.0, 2.0, 3.0]), np.array([[1.0, 2.0, 3.0]]), (1, 2.0, 3)]
    )
    def test_rows_are_stored_as_float_tuples(self, raw: Any) -> None:
        params = self.make_weighted_family().parametrization_class(size=2, w=raw)  # type: ignore[call-arg]
        assert params.w == (1.0, 2.0, 3.0)  # type: ignore[attr-defined]
        assert all(type(v) is float for v in params.w)  # type: ignore[attr-defined]
        hash(params)

    def test_evaluator_arguments_use_declared_keyword(self) -> None:
        params = self.make_weighted_family().parametrization_class(size=2, w=[0.5, 0.5])  # type: ignore[call-arg]
        assert params.parameters == {"size": 2, "w": (0.5, 0.5)}
        assert params.evaluator_arguments() == {"size": 2, "prob": (0.5, 0.5)}

    def test_scalar_fields_are_passed_through(self) -> None:
        family = _bare_family()

        @parametrization(family=family, name="scale")
        class Scale(Parametrization):
            sigma: float
            alpha: tuple[float, ...] = vector_field()

        params = Scale(sigma=2, alpha=[1])  # type: ignore[call-arg]
        assert params.evaluator_arguments() == {"sigma": 2, "alpha": (1.0,)}
