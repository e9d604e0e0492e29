"""
Concrete distribution instances with specific parameter values.

This module provides the immutable value created by a parametric family: a
family name plus validated parameters. Everything else (computations,
support, canonical parameters) is derived from those two.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from distfamilies.distributions.distribution import Distribution
from distfamilies.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distfamilies.distributions.computation import AnalyticalComputation
    from distfamilies.distributions.strategies import ComputationStrategy, SamplingStrategy
    from distfamilies.distributions.support import Support
    from distfamilies.families.parametric_family import ParametricFamily
    from distfamilies.families.parametrizations import Parametrization
    from distfamilies.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        Kind,
    )


def _format_value(value: Any) -> str:
    """Render a parameter with at most 7 significant digits (``5`` not ``5.0``)."""
    return f"{float(value):.7g}"


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Instances are immutable: parameters are validated once by the family and
    never re-checked.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : EuclideanDistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support
        Support of this distribution.
    """

    family_name: str
    _distribution_type: EuclideanDistributionType
    parameters: Parametrization
    _support: Support

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def kind(self) -> Kind:
        return self._distribution_type.kind

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Rebuilt on every access; canonical parameters are therefore derived
        per call and never stored on the instance.
        """
        return self.family._build_analytical_computations(self.parameters)

    @property
    def canonical_parameters(self) -> Parametrization | None:
        """Parameters of the canonical family, computed on demand."""
        return self.family.to_canonical(self.parameters)

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self.family.computation_strategy

    @property
    def support(self) -> Support:
        """Get the support of this distribution."""
        return self._support

    def describe(self) -> str:
        """
        One-line human-readable form, parameters in declared order.

        Examples
        --------
        >>> RevWeibull(location=5, scale=2, shape=3).describe()  # doctest: +SKIP
        'RevWeibull distribution (location = 5, scale = 2, shape = 3)'
        """
        rendered = ", ".join(
            f"{name.rstrip('_')} = {_format_value(value)}"
            for name, value in self.parameters.parameters.items()
        )
        return f"{self.family_name} distribution ({rendered})"

    def __str__(self) -> str:
        return self.describe()
