"""
Fisher (Snedecor) F distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betaln, fdtr, fdtri, xlogy

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


def configure_fisher_f_family() -> None:
    """
    Configure and register the Fisher F distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.FISHER_F):
        return

    FISHER_F_DOC = """
    Fisher F distribution with (df1, df2) degrees of freedom.

    Ratio of two independent chi-square variables, each divided by its
    degrees of freedom.
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the F distribution.

        ``(d1/2) log(d1) + (d2/2) log(d2) + (d1/2 - 1) log x
        - ((d1 + d2)/2) log(d2 + d1 x) - log B(d1/2, d2/2)``
        """
        parameters = cast(_Standard, parameters)

        d1, d2 = parameters.df1, parameters.df2
        xs = np.where(x >= 0, x, 0.0)
        value = (
            0.5 * d1 * math.log(d1)
            + 0.5 * d2 * math.log(d2)
            + xlogy(0.5 * d1 - 1.0, xs)
            - 0.5 * (d1 + d2) * np.log(d2 + d1 * xs)
            - betaln(0.5 * d1, 0.5 * d2)
        )
        return cast(NumericArray, np.where(x >= 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, fdtr(parameters.df1, parameters.df2, np.where(x >= 0, x, 0.0)))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, fdtri(parameters.df1, parameters.df2, p))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.f(parameters.df1, parameters.df2, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """``d2 / (d2 - 2)`` for d2 > 2, infinite otherwise."""
        parameters = cast(_Standard, parameters)
        d2 = parameters.df2
        return d2 / (d2 - 2.0) if d2 > 2 else math.inf

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Finite for d2 > 4, infinite otherwise."""
        parameters = cast(_Standard, parameters)
        d1, d2 = parameters.df1, parameters.df2
        if d2 <= 4:
            return math.inf
        return 2.0 * d2**2 * (d1 + d2 - 2.0) / (d1 * (d2 - 2.0) ** 2 * (d2 - 4.0))

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    FisherF = ParametricFamily(
        name=FamilyName.FISHER_F,
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
    FisherF.__doc__ = FISHER_F_DOC

    @parametrization(family=FisherF, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        df1 : float
            Numerator degrees of freedom
        df2 : float
            Denominator degrees of freedom
        """

        df1: float = 1.0
        df2: float = 1.0

        @constraint(description="df1 > 0")
        def check_df1_positive(self) -> bool:
            return self.df1 > 0

        @constraint(description="df2 > 0")
        def check_df2_positive(self) -> bool:
            return self.df2 > 0

    ParametricFamilyRegister.register(FisherF)
