"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, stdtr, stdtrit

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


def configure_students_t_family() -> None:
    """
    Configure and register the Student's t distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.STUDENTS_T):
        return

    STUDENTS_T_DOC = """
    Student's t distribution with df (ν) degrees of freedom.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + x²/ν)^(-(ν+1)/2)
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        nu = parameters.df
        norm = gammaln(0.5 * (nu + 1.0)) - gammaln(0.5 * nu) - 0.5 * math.log(nu * math.pi)
        return cast(NumericArray, norm - 0.5 * (nu + 1.0) * np.log1p(x**2 / nu))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stdtr(parameters.df, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stdtrit(parameters.df, p))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.standard_t(parameters.df, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """0 for ν > 1, undefined (NaN) otherwise."""
        parameters = cast(_Standard, parameters)
        return 0.0 if parameters.df > 1 else math.nan

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """ν/(ν - 2) for ν > 2, infinite for 1 < ν ≤ 2, undefined otherwise."""
        parameters = cast(_Standard, parameters)
        nu = parameters.df
        if nu > 2:
            return nu / (nu - 2.0)
        if nu > 1:
            return math.inf
        return math.nan

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    StudentsT = ParametricFamily(
        name=FamilyName.STUDENTS_T,
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
    StudentsT.__doc__ = STUDENTS_T_DOC

    @parametrization(family=StudentsT, name="standard")
    class _Standard(Parametrization):
        df: float = 1.0

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    ParametricFamilyRegister.register(StudentsT)
