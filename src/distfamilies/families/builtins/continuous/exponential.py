"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
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


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution describes the time between events in a
    Poisson process. It has a single parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - rate: float (rate parameter)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            ``log(λ) - λx`` for x ≥ 0, ``-inf`` otherwise
        """
        parameters = cast(_Rate, parameters)

        rate = parameters.rate
        return cast(NumericArray, np.where(x >= 0, math.log(rate) - rate * x, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for exponential distribution."""
        parameters = cast(_Rate, parameters)

        rate = parameters.rate
        return cast(NumericArray, np.where(x >= 0, rate * np.exp(-rate * x), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for exponential distribution.

        Returns
        -------
        NumericArray
            ``1 - exp(-λx)`` (via ``expm1``) for x ≥ 0, 0 otherwise
        """
        parameters = cast(_Rate, parameters)

        rate = parameters.rate
        return cast(NumericArray, np.where(x >= 0, -np.expm1(-rate * x), 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for exponential distribution.

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p:
            - For p = 0: returns 0.0
            - For p = 1: returns np.inf
            - For p in (0, 1): returns -ln(1-p)/λ
        """
        parameters = cast(_Rate, parameters)
        rate = parameters.rate

        with np.errstate(divide="ignore", invalid="ignore"):
            return cast(NumericArray, np.where(p < 1.0, -np.log1p(-p) / rate, np.inf))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Rate, parameters)
        return rng.exponential(1.0 / parameters.rate, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / parameters.rate

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / (parameters.rate**2)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of exponential distribution"""
        return ContinuousSupport(left=0.0)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
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
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        rate : float
            Rate parameter (λ) of the distribution
        """

        rate: float = 1.0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        scale : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        scale: float = 1.0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return _Rate(rate=1.0 / self.scale)

    ParametricFamilyRegister.register(Exponential)
