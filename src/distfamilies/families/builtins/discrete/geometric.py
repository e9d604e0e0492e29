"""
Geometric distribution family implementation.

Counts failures before the first success: Geometric(p) = NegativeBinomial(1, p).
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distfamilies.families.canonical import CanonicalForm, geometric_to_negative_binomial
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, UnivariateDiscrete


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    def _to_negative_binomial(parameters: Parametrization) -> dict[str, float]:
        parameters = cast(_Standard, parameters)
        return geometric_to_negative_binomial(parameters.p)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={},
        canonical=CanonicalForm(FamilyName.NEGATIVE_BINOMIAL, _to_negative_binomial),
    )
    Geometric.__doc__ = "Geometric distribution on {0, 1, ...}: failures before the first success."

    @parametrization(family=Geometric, name="standard")
    class _Standard(Parametrization):
        p: float = 0.5

        @constraint(description="0 < p <= 1")
        def check_p(self) -> bool:
            return 0 < self.p <= 1

    ParametricFamilyRegister.register(Geometric)
