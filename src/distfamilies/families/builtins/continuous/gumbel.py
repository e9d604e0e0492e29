"""
Gumbel distribution family implementation.

The Gumbel distribution is the ``ξ = 0`` member of the GEV family and is
evaluated by it.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distfamilies.families.canonical import CanonicalForm, gumbel_to_gev
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, UnivariateContinuous


def configure_gumbel_family() -> None:
    """
    Configure and register the Gumbel distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GUMBEL):
        return

    def _to_gev(parameters: Parametrization) -> dict[str, float]:
        parameters = cast(_Standard, parameters)
        return gumbel_to_gev(parameters.location, parameters.scale)

    # Support comes from the GEV family (the whole real line).
    Gumbel = ParametricFamily(
        name=FamilyName.GUMBEL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={},
        canonical=CanonicalForm(FamilyName.GEV, _to_gev),
    )
    Gumbel.__doc__ = "Gumbel (type I extreme value) distribution, F(x) = exp(-exp(-(x - μ)/σ))."

    @parametrization(family=Gumbel, name="standard")
    class _Standard(Parametrization):
        location: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Gumbel)
