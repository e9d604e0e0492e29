"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout distfamilies.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution (density is a probability mass).
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    A distribution type is the per-family trait that tells the dispatcher
    which characteristics apply (e.g. ``pmf`` for discrete families).
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (1 for every built-in family).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


class ContinuousSupportShape1D(Enum):
    """
    Enumeration of 1D continuous support shapes.

    Attributes
    ----------
    REAL_LINE
        Entire real line (-∞, ∞).
    RAY_LEFT
        Ray unbounded on the left: (-∞, b] or (-∞, b).
    RAY_RIGHT
        Ray unbounded on the right: [a, ∞) or (a, ∞).
    BOUNDED_INTERVAL
        Bounded interval [a, b], (a, b], [a, b), or (a, b).
    EMPTY
        Empty support.
    SINGLE_POINT
        Single point {a}.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval on the real line; each finite endpoint is open or closed.

    Infinite endpoints are always open, whatever flag is passed.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "left_closed", bool(self.left_closed and self.left != -inf))
        object.__setattr__(self, "right_closed", bool(self.right_closed and self.right != inf))

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Elementwise membership test; NaN is never a member.

        Returns a ``bool`` for scalar input and a boolean array otherwise.
        """
        arr = np.asarray(x)
        above = np.greater_equal if self.left_closed else np.greater
        below = np.less_equal if self.right_closed else np.less
        result = above(arr, self.left) & below(arr, self.right)
        return bool(result) if result.ndim == 0 else cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        if self.left == self.right:
            return not (self.left_closed and self.right_closed)
        return self.left > self.right

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Topological classification of the interval."""
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        if self.left == -inf:
            if self.right == inf:
                return ContinuousSupportShape1D.REAL_LINE
            return ContinuousSupportShape1D.RAY_LEFT
        if self.right == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL


GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of the characteristics a family may provide.

    Note
    ----------
    ``LOG_PDF`` and ``LOG_PMF`` are separate characteristics: log-densities are
    always evaluated in log-space by the family itself.
    """

    PDF = "pdf"
    LOG_PDF = "log_pdf"
    PMF = "pmf"
    LOG_PMF = "log_pmf"
    CDF = "cdf"
    PPF = "ppf"
    RVS = "rvs"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    # continuous
    BETA = "Beta"
    CAUCHY = "Cauchy"
    CHI_SQUARE = "ChiSquare"
    EXPONENTIAL = "Exponential"
    FISHER_F = "FisherF"
    GAMMA = "Gamma"
    LOGISTIC = "Logistic"
    LOG_NORMAL = "LogNormal"
    NORMAL = "Normal"
    STUDENTS_T = "StudentsT"
    TUKEY = "Tukey"
    UNIFORM = "Uniform"
    WEIBULL = "Weibull"
    GEV = "GEV"
    REV_WEIBULL = "RevWeibull"
    FRECHET = "Frechet"
    GUMBEL = "Gumbel"
    # discrete
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    GEOMETRIC = "Geometric"
    HYPER_GEOMETRIC = "HyperGeometric"
    NEGATIVE_BINOMIAL = "NegativeBinomial"
    POISSON = "Poisson"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "Interval1D",
    "ContinuousSupportShape1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
