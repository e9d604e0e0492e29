"""
Computation Primitives
======================

This module defines the building block used to evaluate distribution
characteristics:

- :class:`Computation`: protocol for a callable bound to one characteristic.
- :class:`AnalyticalComputation`: an analytical callable provided by a
  family, already bound to concrete parameter values.

Notes
-----
- Callables are **vectorised**: they accept NumPy arrays and return arrays of
  the same shape.
- ``**options`` are forwarded untouched (e.g. ``rng`` for ``rvs``).
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from mypy_extensions import KwArg

from distfamilies.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@runtime_checkable
class Computation(Protocol[In, Out]):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.

    Methods
    -------
    __call__(data, **options)
        Evaluate the characteristic at ``data``.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by a family.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable with parameters already bound.
    provider : str
        Name of the family whose formula is evaluated. Differs from the
        distribution's own family when the call is routed through a
        canonical reparameterization.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]
    provider: str = ""

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = [
    "Computation",
    "AnalyticalComputation",
]
