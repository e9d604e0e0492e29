"""
Reversed Weibull distribution family implementation.

The reversed (negated) Weibull distribution has a finite upper endpoint at its
location ``m``. It is an exact reparameterization of the GEV family:

    RevWeibull(m, s, α) = GEV(m - s, s/α, -1/α)

so density, log-density, CDF, quantile and moments are all evaluated by the
GEV family at the transformed parameters.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distfamilies.distributions.support import ContinuousSupport
from distfamilies.families.canonical import CanonicalForm, rev_weibull_to_gev
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, UnivariateContinuous


def configure_rev_weibull_family() -> None:
    """
    Configure and register the reversed Weibull distribution family.

    Requires the GEV family at evaluation time, not at registration time.
    """
    if ParametricFamilyRegister.contains(FamilyName.REV_WEIBULL):
        return

    REV_WEIBULL_DOC = """
    Reversed Weibull distribution.

    Cumulative distribution function:
        F(x) = exp(-((m - x)/s)^α)   for x < m
        F(x) = 1                     for x ≥ m
    """

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support ``(-inf, m)``; the endpoint itself has zero density."""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(right=parameters.location, right_closed=False)

    def _to_gev(parameters: Parametrization) -> dict[str, float]:
        parameters = cast(_Standard, parameters)
        return rev_weibull_to_gev(parameters.location, parameters.scale, parameters.shape)

    RevWeibull = ParametricFamily(
        name=FamilyName.REV_WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={},
        support_by_parametrization=_support,
        canonical=CanonicalForm(FamilyName.GEV, _to_gev),
    )
    RevWeibull.__doc__ = REV_WEIBULL_DOC

    @parametrization(family=RevWeibull, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of reversed Weibull distribution.

        Parameters
        ----------
        location : float
            Upper endpoint m of the support
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
            """Check that scale parameter is positive."""
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

    ParametricFamilyRegister.register(RevWeibull)
