"""
Gamma distribution family implementation.

Contains the Gamma family with shape-rate and shape-scale parameterizations.
Gamma is also the canonical evaluator of the chi-square family.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln, xlogy

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


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Probability density function (shape-rate parametrization):
        f(x) = β^k x^(k-1) exp(-βx) / Γ(k) for x ≥ 0
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (k)
            - rate: float (β)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values; ``-inf`` for x < 0
        """
        parameters = cast(_ShapeRate, parameters)

        k, rate = parameters.shape, parameters.rate
        xs = np.where(x >= 0, x, 0.0)
        value = k * math.log(rate) + xlogy(k - 1.0, xs) - rate * xs - gammaln(k)
        return cast(NumericArray, np.where(x >= 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for gamma distribution."""
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Regularized lower incomplete gamma function ``P(k, βx)``."""
        parameters = cast(_ShapeRate, parameters)

        xs = np.where(x >= 0, x, 0.0)
        return cast(NumericArray, gammainc(parameters.shape, parameters.rate * xs))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """Quantile function via ``gammaincinv``."""
        parameters = cast(_ShapeRate, parameters)

        return cast(NumericArray, gammaincinv(parameters.shape, p) / parameters.rate)

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_ShapeRate, parameters)
        return rng.gamma(parameters.shape, 1.0 / parameters.rate, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate**2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
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
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        rate : float
            Rate parameter β
        """

        shape: float = 1.0
        rate: float = 1.0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter θ = 1/β
        """

        shape: float = 1.0
        scale: float = 1.0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(shape=self.shape, rate=1.0 / self.scale)

    ParametricFamilyRegister.register(Gamma)
