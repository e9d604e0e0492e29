"""
Weibull distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, xlogy

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


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution.

    Cumulative distribution function:
        F(x) = 1 - exp(-(x/λ)^k) for x ≥ 0
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        k, lam = parameters.shape, parameters.scale
        u = np.where(x >= 0, x, 0.0) / lam
        value = math.log(k) - math.log(lam) + xlogy(k - 1.0, u) - u**k
        return cast(NumericArray, np.where(x >= 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        u = np.where(x >= 0, x, 0.0) / parameters.scale
        return cast(NumericArray, -np.expm1(-(u**parameters.shape)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        with np.errstate(divide="ignore"):
            return cast(
                NumericArray,
                parameters.scale * (-np.log1p(-p)) ** (1.0 / parameters.shape),
            )

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return parameters.scale * rng.weibull(parameters.shape, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.scale * math.exp(float(gammaln(1.0 + 1.0 / parameters.shape)))

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        k = parameters.shape
        g1 = math.exp(float(gammaln(1.0 + 1.0 / k)))
        g2 = math.exp(float(gammaln(1.0 + 2.0 / k)))
        return parameters.scale**2 * (g2 - g1**2)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
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
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter λ
        """

        shape: float = 1.0
        scale: float = 1.0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Weibull)
