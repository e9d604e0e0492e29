"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats
from scipy.special import gammaln, pdtr, xlogy

from distfamilies.distributions.support import IntegerLatticeDiscreteSupport
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
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution with mean λ.

    Probability mass function:
        P(X = k) = λ^k exp(-λ) / k!, k = 0, 1, ...
    """

    def log_pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        lam = parameters.lambda_
        on_lattice = (x >= 0) & (np.floor(x) == x)
        k = np.where(on_lattice, x, 0.0)
        value = xlogy(k, lam) - lam - gammaln(k + 1.0)
        return cast(NumericArray, np.where(on_lattice, value, -np.inf))

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pmf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        k = np.floor(np.where(x >= 0, x, 0.0))
        return cast(NumericArray, np.where(x >= 0, pdtr(k, parameters.lambda_), 0.0))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stats.poisson(parameters.lambda_).ppf(q))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.poisson(parameters.lambda_, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return float(parameters.lambda_)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return float(parameters.lambda_)

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LOG_PMF: log_pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.RVS: rvs,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        lambda_ : float
            Mean number of events λ (``lambda`` is reserved in Python)
        """

        lambda_: float = 1.0

        @constraint(description="lambda >= 0")
        def check_lambda_non_negative(self) -> bool:
            return self.lambda_ >= 0

    ParametricFamilyRegister.register(Poisson)
