"""
Uniform distribution family implementation.

Contains the continuous Uniform family on a closed interval [a, b].
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


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside [a, b] are equally probable.

    Probability density function:
        f(x) = 1/(b - a) for x in [a, b], 0 otherwise
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - For x < a or x > b: returns 0
            - Otherwise: returns 1 / (b - a)
        """
        parameters = cast(_Standard, parameters)

        a, b = parameters.a, parameters.b
        return cast(NumericArray, np.where((x >= a) & (x <= b), 1.0 / (b - a), 0.0))

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density: -log(b - a) on [a, b], -inf elsewhere."""
        parameters = cast(_Standard, parameters)

        a, b = parameters.a, parameters.b
        return cast(NumericArray, np.where((x >= a) & (x <= b), -math.log(b - a), -np.inf))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for uniform distribution.
        Uses np.clip for vectorized computation:
            - For x < a: returns 0
            - For x > b: returns 1
        """
        parameters = cast(_Standard, parameters)

        a, b = parameters.a, parameters.b
        return cast(NumericArray, np.clip((x - a) / (b - a), 0.0, 1.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        For uniform distribution on [a, b]:
            - For p = 0: returns a
            - For p = 1: returns b
            - For p in (0, 1): returns a + p × (b - a)
        """
        parameters = cast(_Standard, parameters)

        a, b = parameters.a, parameters.b
        return cast(NumericArray, a + p * (b - a))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.uniform(parameters.a, parameters.b, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.a + parameters.b) / 2.0

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.b - parameters.a) ** 2 / 12.0

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(left=parameters.a, right=parameters.b)

    Uniform = ParametricFamily(
        name=FamilyName.UNIFORM,
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
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        a : float
            Lower bound of the distribution
        b : float
            Upper bound of the distribution
        """

        a: float = 0.0
        b: float = 1.0

        @constraint(description="a < b")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.a < self.b

    ParametricFamilyRegister.register(Uniform)
