"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
strategies and by the public operations.

Notes
-----
- Characteristics are resolved by name through the distribution's
  computation strategy (``query_method``).
- Sampling is delegated to the distribution's sampling strategy.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distfamilies.distributions.computation import AnalyticalComputation
    from distfamilies.distributions.strategies import ComputationStrategy, SamplingStrategy
    from distfamilies.distributions.support import Support
    from distfamilies.types import (
        DistributionType,
        GenericCharacteristicName,
        NumericArray,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and operations."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> NumericArray:
        return self.sampling_strategy.sample(n, distr=self, **options)
