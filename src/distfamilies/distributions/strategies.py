"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves the analytical computation
  planned by the distribution's family (native or canonical).
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: uses the family's own ``rvs``
  when there is one, otherwise inverse transform sampling through ``ppf``.

Notes
-----
- Strategies are stateless. The random source is passed per call (``rng``)
  and never shared between calls implicitly.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeAlias, TypeVar

import numpy as np

from distfamilies.distributions.computation import AnalyticalComputation
from distfamilies.types import CharacteristicName, GenericCharacteristicName, NumericArray

if TYPE_CHECKING:
    from .distribution import Distribution

In = TypeVar("In")
Out = TypeVar("Out")

Method: TypeAlias = AnalyticalComputation[In, Out]

RandomSource: TypeAlias = np.random.Generator | np.random.SeedSequence | int | None


class ComputationStrategy(Protocol[In, Out]):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy(Generic[In, Out]):
    """
    Default characteristic resolver.

    The family's dispatch plan already decided which formula serves each
    characteristic; this strategy only looks it up. There is no numerical
    fallback: a characteristic absent from the plan is a programming error.

    Raises
    ------
    RuntimeError
        If the distribution provides no computation for the characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for protocol compatibility.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]

        raise RuntimeError(
            f"Distribution provides no analytical computation for '{state}' "
            f"(available: {', '.join(sorted(computations)) or 'none'})."
        )


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a 1D array of draws)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> NumericArray: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler.

    If the distribution exposes an ``rvs`` characteristic it is called with the
    generator. Otherwise ``ppf`` is applied to i.i.d. uniforms on the open
    interval ``(0, 1)``, so draws never land on an infinite support boundary.

    Parameters
    ----------
    rng : Generator, SeedSequence, int or None
        Random source, normalised through :func:`numpy.random.default_rng`.
        ``None`` draws fresh OS entropy for this call only.

    Returns
    -------
    numpy.ndarray
        A 1D array of ``n`` draws in draw order.
    """

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource = None, **options: Any
    ) -> NumericArray:
        generator = np.random.default_rng(rng)

        computations = distr.analytical_computations
        if CharacteristicName.RVS in computations:
            draws = computations[CharacteristicName.RVS](n, rng=generator)
        else:
            ppf = distr.query_method(CharacteristicName.PPF)
            u = generator.uniform(np.finfo(np.float64).tiny, 1.0, size=n)
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                draws = ppf(u)

        return np.asarray(draws, dtype=np.float64).reshape(n)


__all__ = [
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "Method",
    "RandomSource",
]
