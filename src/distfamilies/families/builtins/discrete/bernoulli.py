"""
Bernoulli distribution family implementation.

Bernoulli(p) = Binomial(1, p); every characteristic, sampling included, comes
from the Binomial family.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distfamilies.families.canonical import CanonicalForm, bernoulli_to_binomial
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, UnivariateDiscrete


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    def _to_binomial(parameters: Parametrization) -> dict[str, float]:
        parameters = cast(_Standard, parameters)
        return bernoulli_to_binomial(parameters.p)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={},
        canonical=CanonicalForm(FamilyName.BINOMIAL, _to_binomial),
    )
    Bernoulli.__doc__ = "Bernoulli distribution: 1 with probability p, 0 otherwise."

    @parametrization(family=Bernoulli, name="standard")
    class _Standard(Parametrization):
        p: float = 0.5

        @constraint(description="0 <= p <= 1")
        def check_p(self) -> bool:
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Bernoulli)
