"""
Tukey studentized range distribution family implementation.

The studentized range of ``nmeans`` independent standard normals divided by an
independent ``sqrt(χ²(df)/df)``. Closed forms do not exist; density, CDF and
quantile are delegated to :data:`scipy.stats.studentized_range`.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats

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


def configure_tukey_family() -> None:
    """
    Configure and register the Tukey (studentized range) distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.TUKEY):
        return

    def _frozen(parameters: Parametrization) -> Any:
        parameters = cast(_Standard, parameters)
        return stats.studentized_range(parameters.nmeans, parameters.df)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, _frozen(parameters).pdf(x))

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, _frozen(parameters).logpdf(x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, _frozen(parameters).cdf(x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        return cast(NumericArray, _frozen(parameters).ppf(p))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        """Range of ``nmeans`` standard normals over ``sqrt(χ²(df)/df)``."""
        parameters = cast(_Standard, parameters)

        k = int(round(parameters.nmeans))
        normals = rng.standard_normal(size=(n, k))
        spread = normals.max(axis=1) - normals.min(axis=1)
        return spread / np.sqrt(rng.chisquare(parameters.df, size=n) / parameters.df)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        return float(_frozen(parameters).mean())

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        return float(_frozen(parameters).var())

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Tukey = ParametricFamily(
        name=FamilyName.TUKEY,
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
    Tukey.__doc__ = "Tukey studentized range distribution."

    @parametrization(family=Tukey, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        nmeans : float
            Number of means (groups), an integer ≥ 2
        df : float
            Degrees of freedom of the variance estimate
        """

        nmeans: float = 2.0
        df: float = 1.0

        @constraint(description="nmeans is an integer >= 2")
        def check_nmeans(self) -> bool:
            return self.nmeans >= 2 and float(self.nmeans).is_integer()

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    ParametricFamilyRegister.register(Tukey)
