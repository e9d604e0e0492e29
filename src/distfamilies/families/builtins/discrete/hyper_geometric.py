"""
Hypergeometric distribution family implementation.

Draw ``k`` balls without replacement from an urn with ``m`` white and ``n``
black balls; X is the number of white balls drawn.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats
from scipy.special import gammaln

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


def _log_binom(a: Any, b: Any) -> Any:
    return gammaln(a + 1.0) - gammaln(b + 1.0) - gammaln(a - b + 1.0)


def configure_hyper_geometric_family() -> None:
    """
    Configure and register the hypergeometric distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.HYPER_GEOMETRIC):
        return

    HYPER_GEOMETRIC_DOC = """
    Hypergeometric distribution.

    Probability mass function:
        P(X = x) = C(m, x) C(n, k - x) / C(m + n, k),
        max(0, k - n) ≤ x ≤ min(k, m)
    """

    def _bounds(parameters: _Standard) -> tuple[int, int]:
        m, n, k = int(parameters.m), int(parameters.n), int(parameters.k)
        return max(0, k - n), min(k, m)

    def _scipy(parameters: _Standard) -> Any:
        # scipy names: M = population, n = successes, N = draws
        m, n, k = int(parameters.m), int(parameters.n), int(parameters.k)
        return stats.hypergeom(m + n, m, k)

    def log_pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)

        m, n, k = float(parameters.m), float(parameters.n), float(parameters.k)
        low, high = _bounds(parameters)
        on_lattice = (x >= low) & (x <= high) & (np.floor(x) == x)
        xs = np.where(on_lattice, x, float(low))
        value = _log_binom(m, xs) + _log_binom(n, k - xs) - _log_binom(m + n, k)
        return cast(NumericArray, np.where(on_lattice, value, -np.inf))

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(log_pmf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        low, high = _bounds(parameters)
        if low == high:
            return cast(NumericArray, np.where(x >= low, 1.0, 0.0))
        return cast(NumericArray, _scipy(parameters).cdf(np.floor(x)))

    def ppf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        parameters = cast(_Standard, parameters)
        low, high = _bounds(parameters)
        # Point mass; scipy has no valid distribution for an empty urn
        if low == high:
            return cast(NumericArray, np.full(np.shape(q), float(low)))
        return cast(NumericArray, _scipy(parameters).ppf(q))

    def rvs(parameters: Parametrization, n: int, *, rng: np.random.Generator) -> NumericArray:
        parameters = cast(_Standard, parameters)
        low, high = _bounds(parameters)
        if low == high:
            return np.full(n, float(low))
        return rng.hypergeometric(
            int(parameters.m), int(parameters.n), int(parameters.k), size=n
        )

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        total = parameters.m + parameters.n
        return float(parameters.k * parameters.m / total) if total > 0 else 0.0

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        parameters = cast(_Standard, parameters)
        m, n, k = parameters.m, parameters.n, parameters.k
        total = m + n
        if total <= 1:
            return 0.0
        return float(k * (m / total) * (n / total) * (total - k) / (total - 1))

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        parameters = cast(_Standard, parameters)
        low, high = _bounds(parameters)
        return IntegerLatticeDiscreteSupport(min_k=low, max_k=high)

    HyperGeometric = ParametricFamily(
        name=FamilyName.HYPER_GEOMETRIC,
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
    HyperGeometric.__doc__ = HYPER_GEOMETRIC_DOC

    @parametrization(family=HyperGeometric, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        m : int
            Number of white balls
        n : int
            Number of black balls
        k : int
            Number of balls drawn
        """

        m: int = 1
        n: int = 1
        k: int = 1

        @constraint(description="m is a non-negative integer")
        def check_m(self) -> bool:
            return self.m >= 0 and float(self.m).is_integer()

        @constraint(description="n is a non-negative integer")
        def check_n(self) -> bool:
            return self.n >= 0 and float(self.n).is_integer()

        @constraint(description="k is an integer with 0 <= k <= m + n")
        def check_k(self) -> bool:
            return float(self.k).is_integer() and 0 <= self.k <= self.m + self.n

    ParametricFamilyRegister.register(HyperGeometric)
