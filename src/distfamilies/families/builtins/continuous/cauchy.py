"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution.

    Probability density function:
        f(x) = 1 / (πs (1 + ((x - m)/s)²))

    Mean and variance are undefined.
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        z = (x - parameters.location) / parameters.scale
        return cast(NumericArray, -math.log(math.pi * parameters.scale) - np.log1p(z**2))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function.

        ``arctan2(1, -z)/π`` equals ``1/2 + arctan(z)/π`` and keeps relative
        precision in the lower tail.
        """
        parameters = cast(_Standard, parameters)

        z = (x - parameters.location) / parameters.scale
        return cast(NumericArray, np.arctan2(1.0, -z) / math.pi)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(
            NumericArray,
            parameters.location + parameters.scale * np.tan(math.pi * (p - 0.5)),
        )

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return parameters.location + parameters.scale * rng.standard_cauchy(size=n)

    def mean_func(_: Parametrization, __: Any = None) -> float:
        return math.nan

    def var_func(_: Parametrization, __: Any = None) -> float:
        return math.nan

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
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
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="standard")
    class _Standard(Parametrization):
        location: float = 0.0
        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Cauchy)
