"""
Fréchet distribution family implementation.

Fréchet(m, s, α) = GEV(m + s, s/α, 1/α); the lower endpoint is ``m``.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distfamilies.distributions.support import ContinuousSupport
from distfamilies.families.canonical import CanonicalForm, frechet_to_gev
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, UnivariateContinuous


def configure_frechet_family() -> None:
    """
    Configure and register the Fréchet distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.FRECHET):
        return

    FRECHET_DOC = """
    Fréchet (inverse Weibull) distribution.

    Cumulative distribution function:
        F(x) = exp(-((x - m)/s)^(-α))   for x > m
    """

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(left=parameters.location, left_closed=False)

    def _to_gev(parameters: Parametrization) -> dict[str, float]:
        parameters = cast(_Standard, parameters)
        return frechet_to_gev(parameters.location, parameters.scale, parameters.shape)

    Frechet = ParametricFamily(
        name=FamilyName.FRECHET,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={},
        support_by_parametrization=_support,
        canonical=CanonicalForm(FamilyName.GEV, _to_gev),
    )
    Frechet.__doc__ = FRECHET_DOC

    @parametrization(family=Frechet, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Fréchet distribution.

        Parameters
        ----------
        location : float
            Lower endpoint m of the support
        scale : float
            Scale parameter s
        shape : float
            Shape parameter α
        """

        location: float = 0.0
        scale: float = 1.0
        shape: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(Frechet)
