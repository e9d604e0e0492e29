"""
Log-normal distribution family implementation.

Parameters are the mean and standard deviation of ``log X``.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

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

_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


def configure_log_normal_family() -> None:
    """
    Configure and register the log-normal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution: log X ~ Normal(log_mu, log_sigma).

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(log x - μ)²/(2σ²)) for x > 0
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        mu, sigma = parameters.log_mu, parameters.log_sigma
        positive = x > 0
        log_x = np.log(np.where(positive, x, 1.0))
        z = (log_x - mu) / sigma
        value = -0.5 * z**2 - log_x - math.log(sigma) - _LOG_SQRT_2PI
        return cast(NumericArray, np.where(positive, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        positive = x > 0
        z = (np.log(np.where(positive, x, 1.0)) - parameters.log_mu) / parameters.log_sigma
        return cast(NumericArray, np.where(positive, ndtr(z), 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, np.exp(parameters.log_mu + parameters.log_sigma * ndtri(p)))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.lognormal(parameters.log_mu, parameters.log_sigma, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return math.exp(parameters.log_mu + 0.5 * parameters.log_sigma**2)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        s2 = parameters.log_sigma**2
        return math.expm1(s2) * math.exp(2.0 * parameters.log_mu + s2)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
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
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        log_mu : float
            Mean of log X
        log_sigma : float
            Standard deviation of log X
        """

        log_mu: float = 0.0
        log_sigma: float = 1.0

        @constraint(description="log_sigma > 0")
        def check_log_sigma_positive(self) -> bool:
            return self.log_sigma > 0

    ParametricFamilyRegister.register(LogNormal)
