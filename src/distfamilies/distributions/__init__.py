"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
distfamilies:

- distribution protocol (:mod:`.distribution`);
- analytical computations (:mod:`.computation`);
- support sets (:mod:`.support`);
- operation options boundary (:mod:`.options`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .options import Operation, OperationOptions, resolve_options
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, IntegerLatticeDiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # options
    "Operation",
    "OperationOptions",
    "resolve_options",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerLatticeDiscreteSupport",
]
