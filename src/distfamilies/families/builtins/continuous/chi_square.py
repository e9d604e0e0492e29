"""
Chi-square distribution family implementation.

ChiSquare(df) = Gamma(shape = df/2, rate = 1/2); every characteristic, sampling
included, is evaluated by the Gamma family.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

from distfamilies.families.canonical import CanonicalForm, chi_square_to_gamma
from distfamilies.families.parametric_family import ParametricFamily
from distfamilies.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from distfamilies.families.registry import ParametricFamilyRegister
from distfamilies.types import FamilyName, UnivariateContinuous


def configure_chi_square_family() -> None:
    """
    Configure and register the chi-square distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARE):
        return

    def _to_gamma(parameters: Parametrization) -> dict[str, float]:
        parameters = cast(_Standard, parameters)
        return chi_square_to_gamma(parameters.df)

    ChiSquare = ParametricFamily(
        name=FamilyName.CHI_SQUARE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={},
        canonical=CanonicalForm(FamilyName.GAMMA, _to_gamma),
    )
    ChiSquare.__doc__ = "Chi-square distribution with df degrees of freedom."

    @parametrization(family=ChiSquare, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        df : float
            Degrees of freedom
        """

        df: float = 1.0

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    ParametricFamilyRegister.register(ChiSquare)
