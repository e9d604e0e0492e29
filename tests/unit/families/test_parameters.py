from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import pytest

from distfamilies.errors import ParameterError
from distfamilies.families import (
    ParametricFamily,
    ParametricFamilyRegister,
    Parametrization,
    ParametrizationConstraint,
    constraint,
)
from distfamilies.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import MockSamplingStrategy


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:  # noqa: ANN001 (test signature)
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == (
            "Value must be positive"
        )

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
            sampling_strategy=MockSamplingStrategy(),
        )

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

        obj = Base(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "base"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Base, "__family__", None) is family
        assert getattr(Base, "__param_name__", None) == "base"
        assert hasattr(Base, "__dataclass_fields__")

    def test_undeclared_parametrization_is_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="not declared"):

            @family.parametrization(name="other")
            class Other(Parametrization):
                value: float

    def test_duplicate_parametrization_is_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="base")
            class Again(Parametrization):
                value: float

    # ---------- Family-level conversion to base ----------

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = AltCls(value=3.0)  # type: ignore[call-arg]
        base_from_alt = family.to_base(alt_params)
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 3.0  # type: ignore[attr-defined]


class TestValidation(TestBaseFamily):
    def setup_method(self) -> None:
        self.family = self.make_default_family()
        ParametricFamilyRegister.register(self.family)

    def test_valid_parameters(self) -> None:
        distr = self.family.distribution(value=1.0)
        assert distr.parameters.value == 1.0  # type: ignore[attr-defined]

    def test_failing_constraint_names_condition_and_value(self) -> None:
        with pytest.raises(ParameterError, match=r'constraint "value >= 0".*value = -1') as info:
            self.family.distribution(value=-1)
        assert info.value.family == "Default"
        assert info.value.constraint == "value >= 0"

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "1.0", None, True])
    def test_non_real_or_non_finite_parameters(self, bad: Any) -> None:
        with pytest.raises(ParameterError, match="value"):
            self.family.distribution(value=bad)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_parameter_names_the_condition(self, bad: float) -> None:
        with pytest.raises(ParameterError, match="must be finite") as info:
            self.family.distribution(value=bad)
        assert info.value.family == "Default"
        assert info.value.constraint == "value is finite"

    def test_parameter_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            self.family.distribution(value=-1)

    def test_unknown_parameter_lists_expected_names(self) -> None:
        with pytest.raises(ParameterError, match="expected value"):
            self.family.distribution(valeu=1.0)

    def test_missing_parameter(self) -> None:
        with pytest.raises(ParameterError, match="expected value"):
            self.family.distribution()

    def test_unknown_parametrization_name(self) -> None:
        with pytest.raises(KeyError):
            self.family.distribution("invalid_name", value=1.0)
