"""
Negative binomial distribution family implementation.

Counts failures before the ``size``-th success. NegativeBinomial is the
canonical evaluator of the Geometric family.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats
from scipy.special import betainc, gammaln, xlog1py

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


def configure_negative_binomial_family() -> None:
    """
    Configure and register the negative binomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    NEGATIVE_BINOMIAL_DOC = """
    Negative binomial distribution.

    Probability mass function:
        P(X = k) = Γ(k + r) / (Γ(r) k!) p^r (1 - p)^k, k = 0, 1, ...
    """

    def log_pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        r, p = parameters.size, parameters.p
        on_lattice = (x >= 0) & (np.floor(x) == x)
        k = np.where(on_lattice, x, 0.0)
        value = (
            gammaln(k + r) - gammaln(r) - gammaln(k + 1.0) + r * math.log(p) + xlog1py(k, -p)
        )
        return cast(NumericArray, np.where(on_lattice, value, -np.inf))

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pmf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``I_p(r, floor(x) + 1)``, the regularized incomplete beta function."""
        parameters = cast(_Standard, parameters)

        k = np.floor(np.where(x >= 0, x, 0.0))
        value = betainc(parameters.size, k + 1.0, parameters.p)
        return cast(NumericArray, np.where(x >= 0, value, 0.0))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stats.nbinom(parameters.size, parameters.p).ppf(q))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.negative_binomial(parameters.size, parameters.p, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.size * (1.0 - parameters.p) / parameters.p

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.size * (1.0 - parameters.p) / parameters.p**2

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
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
    NegativeBinomial.__doc__ = NEGATIVE_BINOMIAL_DOC

    @parametrization(family=NegativeBinomial, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        size : float
            Target number of successes r (need not be an integer)
        p : float
            Success probability
        """

        size: float = 1.0
        p: float = 0.5

        @constraint(description="size > 0")
        def check_size_positive(self) -> bool:
            return self.size > 0

        @constraint(description="0 < p <= 1")
        def check_p(self) -> bool:
            return 0 < self.p <= 1

    ParametricFamilyRegister.register(NegativeBinomial)
