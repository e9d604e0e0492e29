"""
Beta distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, betaln, xlog1py, xlogy

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


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution on [0, 1].

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β)
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the beta distribution.

        Uses ``xlogy``/``xlog1py`` so the endpoints are handled for α = 1 or
        β = 1 without ``0 * inf``.
        """
        parameters = cast(_Standard, parameters)

        a, b = parameters.alpha, parameters.beta
        inside = (x >= 0) & (x <= 1)
        xs = np.where(inside, x, 0.5)
        value = xlogy(a - 1.0, xs) + xlog1py(b - 1.0, -xs) - betaln(a, b)
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for beta distribution."""
        return cast(NumericArray, np.exp(log_pdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Regularized incomplete beta function ``I_x(α, β)``."""
        parameters = cast(_Standard, parameters)
        return cast(
            NumericArray,
            betainc(parameters.alpha, parameters.beta, np.clip(x, 0.0, 1.0)),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, betaincinv(parameters.alpha, parameters.beta, p))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.beta(parameters.alpha, parameters.beta, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.alpha / (parameters.alpha + parameters.beta)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        return a * b / ((a + b) ** 2 * (a + b + 1.0))

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
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
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter α
        beta : float
            Second shape parameter β
        """

        alpha: float = 1.0
        beta: float = 1.0

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    ParametricFamilyRegister.register(Beta)
