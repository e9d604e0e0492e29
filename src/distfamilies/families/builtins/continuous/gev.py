"""
Generalized extreme value (GEV) distribution family implementation.

The GEV family is the canonical evaluator for the reversed Weibull, Fréchet
and Gumbel families. Shape ``ξ > 0`` gives a Fréchet-type tail, ``ξ < 0`` a
bounded upper tail (reversed Weibull), and ``ξ = 0`` the Gumbel limit.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln

from distfamilies.distributions.support import ContinuousSupport
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

# Below this |ξ| the variance uses the Gumbel limit.
_GUMBEL_LIMIT_SHAPE = 1e-5


def configure_gev_family() -> None:
    """
    Configure and register the GEV distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GEV):
        return

    GEV_DOC = """
    Generalized extreme value distribution.

    With z = (x - μ)/σ and t = 1 + ξz:

    Cumulative distribution function:
        F(x) = exp(-t^(-1/ξ))       for t > 0, ξ ≠ 0
        F(x) = exp(-exp(-z))        for ξ = 0

    Probability density function:
        f(x) = (1/σ) t^(-1/ξ - 1) exp(-t^(-1/ξ))
    """

    def _reduced(parameters: _Standard, x: NumericArray) -> tuple[NumericArray, NumericArray]:
        """
        Return ``(t, y)`` where ``t = 1 + ξz`` and ``y = -log(-log F(x))``.

        ``y`` is only meaningful where ``t > 0``.
        """
        z = (np.asarray(x, dtype=np.float64) - parameters.location) / parameters.scale
        xi = parameters.shape
        if xi == 0.0:
            return np.ones_like(z), z
        xi_z = xi * z
        t = 1.0 + xi_z
        with np.errstate(divide="ignore", invalid="ignore"):
            y = np.log1p(np.where(t > 0, xi_z, 0.0)) / xi
        return t, y

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the GEV distribution.

        ``-log σ - (ξ + 1) y - exp(-y)`` inside the support, ``-inf`` outside.
        """
        parameters = cast(_Standard, parameters)

        t, y = _reduced(parameters, x)
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            value = -np.log(parameters.scale) - (parameters.shape + 1.0) * y - np.exp(-y)
        return cast(NumericArray, np.where(t > 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for GEV distribution."""
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for GEV distribution.

        Outside the support the value is 0 below a lower endpoint (ξ > 0) and
        1 above an upper endpoint (ξ < 0).
        """
        parameters = cast(_Standard, parameters)

        t, y = _reduced(parameters, x)
        with np.errstate(over="ignore"):
            inside = np.exp(-np.exp(-y))
        outside = 0.0 if parameters.shape > 0 else 1.0
        return cast(NumericArray, np.where(t > 0, inside, outside))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for GEV distribution.

        ``μ + σ expm1(-ξL)/ξ`` with ``L = log(-log p)``; ``μ - σL`` for ξ = 0.
        """
        parameters = cast(_Standard, parameters)

        loc, scale, xi = parameters.location, parameters.scale, parameters.shape
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            big_l = np.log(-np.log(np.asarray(p, dtype=np.float64)))
            if xi == 0.0:
                return cast(NumericArray, loc - scale * big_l)
            return cast(NumericArray, loc + scale * np.expm1(-xi * big_l) / xi)

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        """``μ + σ expm1(-ξ log E)/ξ`` with ``E`` a standard exponential variate."""
        parameters = cast(_Standard, parameters)

        loc, scale, xi = parameters.location, parameters.scale, parameters.shape
        with np.errstate(divide="ignore", over="ignore"):
            log_e = np.log(rng.standard_exponential(size=n))
            if xi == 0.0:
                return cast(NumericArray, loc - scale * log_e)
            return cast(NumericArray, loc + scale * np.expm1(-xi * log_e) / xi)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """
        Mean of GEV distribution.

        Finite only for ξ < 1; ``μ + σγ`` in the Gumbel case.
        """
        parameters = cast(_Standard, parameters)

        loc, scale, xi = parameters.location, parameters.scale, parameters.shape
        if xi == 0.0:
            return loc + scale * np.euler_gamma
        if xi >= 1.0:
            return math.inf
        # Γ(1 - ξ) - 1 computed as expm1(lnΓ(1 - ξ)) to keep precision near ξ = 0
        return loc + scale * math.expm1(float(gammaln(1.0 - xi))) / xi

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of GEV distribution; finite only for ξ < 1/2."""
        parameters = cast(_Standard, parameters)

        scale, xi = parameters.scale, parameters.shape
        if abs(xi) < _GUMBEL_LIMIT_SHAPE:
            return scale**2 * math.pi**2 / 6.0
        if xi >= 0.5:
            return math.inf
        g1 = math.exp(float(gammaln(1.0 - xi)))
        g2 = math.exp(float(gammaln(1.0 - 2.0 * xi)))
        return scale**2 * (g2 - g1**2) / xi**2

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of GEV distribution"""
        parameters = cast(_Standard, parameters)

        xi = parameters.shape
        if xi == 0.0:
            return ContinuousSupport()
        endpoint = parameters.location - parameters.scale / xi
        if xi > 0:
            return ContinuousSupport(left=endpoint, left_closed=False)
        return ContinuousSupport(right=endpoint, right_closed=False)

    GEV = ParametricFamily(
        name=FamilyName.GEV,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: log_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.RVS: rvs,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    GEV.__doc__ = GEV_DOC

    @parametrization(family=GEV, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of GEV distribution.

        Parameters
        ----------
        location : float
            Location parameter μ
        scale : float
            Scale parameter σ
        shape : float
            Shape parameter ξ
        """

        location: float = 0.0
        scale: float = 1.0
        shape: float = 0.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(GEV)
