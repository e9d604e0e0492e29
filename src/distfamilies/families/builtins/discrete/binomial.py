"""
Binomial distribution family implementation.

Binomial is the canonical evaluator of the Bernoulli family.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats
from scipy.special import bdtr, gammaln, xlog1py, xlogy

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


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution: number of successes in ``size`` independent trials
    with success probability ``p``.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1 - p)^(n - k), k = 0, ..., n
    """

    def log_pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - size: int (number of trials n)
            - p: float (success probability)
        x : NumericArray
            Points at which to evaluate; non-lattice points get ``-inf``

        Returns
        -------
        NumericArray
            ``log C(n, k) + k log p + (n - k) log(1 - p)``
        """
        parameters = cast(_Standard, parameters)

        n, p = float(parameters.size), parameters.p
        on_lattice = (x >= 0) & (x <= n) & (np.floor(x) == x)
        k = np.where(on_lattice, x, 0.0)
        value = (
            gammaln(n + 1.0)
            - gammaln(k + 1.0)
            - gammaln(n - k + 1.0)
            + xlogy(k, p)
            + xlog1py(n - k, -p)
        )
        return cast(NumericArray, np.where(on_lattice, value, -np.inf))

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pmf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``bdtr(floor(x), n, p)``, clamped to 0 below 0 and 1 from n on."""
        parameters = cast(_Standard, parameters)

        n = float(parameters.size)
        k = np.clip(np.floor(x), 0.0, n)
        value = bdtr(k, n, parameters.p)
        return cast(NumericArray, np.where(x < 0, 0.0, np.where(x >= n, 1.0, value)))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, stats.binom(parameters.size, parameters.p).ppf(q))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        return rng.binomial(int(parameters.size), parameters.p, size=n)

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return float(parameters.size * parameters.p)

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        return float(parameters.size * parameters.p * (1.0 - parameters.p))

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        parameters = cast(_Standard, parameters)
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=int(parameters.size))

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
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
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        size : int
            Number of trials
        p : float
            Success probability
        """

        size: int = 1
        p: float = 0.5

        @constraint(description="size is a non-negative integer")
        def check_size(self) -> bool:
            return self.size >= 0 and float(self.size).is_integer()

        @constraint(description="0 <= p <= 1")
        def check_p(self) -> bool:
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Binomial)
