"""
Support sets of univariate distributions.

Continuous supports are intervals (:class:`ContinuousSupport`); discrete
supports are integer lattices with optional bounds
(:class:`IntegerLatticeDiscreteSupport`). Both expose ``contains`` and
``bounds``, which the dispatcher uses to enforce exact boundary values.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from distfamilies.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def bounds(self) -> tuple[float, float]: ...


class ContinuousSupport(Interval1D, Support):
    @property
    def bounds(self) -> tuple[float, float]:
        """Infimum and supremum of the interval."""
        return float(self.left), float(self.right)


@dataclass(slots=True, frozen=True)
class IntegerLatticeDiscreteSupport(Support):
    """
    Integer lattice ``{residue + j * modulus}`` optionally bounded by
    ``min_k`` and ``max_k`` (both inclusive).
    """

    residue: int = 0
    modulus: int = 1
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0))
        mask = finite & (xf == v)

        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        mask &= np.mod(v - self.residue, self.modulus) == 0

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        if self.min_k is None:
            return None
        first = self.min_k
        offset = (first - self.residue) % self.modulus
        if offset != 0:
            first = first + (self.modulus - offset)
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def last(self) -> int | None:
        if self.max_k is None:
            return None
        last = self.max_k - (self.max_k - self.residue) % self.modulus
        if self.min_k is not None and last < self.min_k:
            return None
        return last

    @property
    def bounds(self) -> tuple[float, float]:
        """Smallest and largest lattice points (``∓inf`` when unbounded)."""
        first = self.first()
        last = self.last()
        return (-inf if first is None else float(first), inf if last is None else float(last))


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerLatticeDiscreteSupport",
]
