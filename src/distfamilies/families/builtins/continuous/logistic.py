"""
Logistic distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit, logit

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


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Symmetric form ``-|z| - log s - 2 log1p(exp(-|z|))``; no overflow in either tail."""
        parameters = cast(_Standard, parameters)

        az = np.abs((x - parameters.location) / parameters.scale)
        return cast(NumericArray, -az - math.log(parameters.scale) - 2.0 * np.log1p(np.exp(-az)))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, expit((x - parameters.location) / parameters.scale))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, parameters.location + parameters.scale * logit(p))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.logistic(parameters.location, parameters.scale, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return float(parameters.location)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.scale**2 * math.pi**2 / 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
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
    Logistic.__doc__ = "Logistic distribution, F(x) = 1 / (1 + exp(-(x - m)/s))."

    @parametrization(family=Logistic, name="standard")
    class _Standard(Parametrization):
        location: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Logistic)
