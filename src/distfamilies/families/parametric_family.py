"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: parameterizations, analytical characteristics, support, the
optional canonical form, and the per-characteristic dispatch plan that ties
them together.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import fields
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from distfamilies.distributions.computation import AnalyticalComputation
from distfamilies.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from distfamilies.distributions.support import ContinuousSupport, IntegerLatticeDiscreteSupport
from distfamilies.errors import ParameterError
from distfamilies.families.distribution import ParametricFamilyDistribution
from distfamilies.types import Kind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from distfamilies.distributions.strategies import ComputationStrategy, SamplingStrategy
    from distfamilies.distributions.support import Support
    from distfamilies.families.canonical import CanonicalForm
    from distfamilies.families.parametrizations import Parametrization
    from distfamilies.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    ParametrizedFunction: TypeAlias = Callable[..., Any]
    SupportResolver: TypeAlias = Callable[[Parametrization], Support]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., normal, reversed
    Weibull) that can be parameterized in different ways. Manages
    parametrizations, distribution characteristics, and provides factory
    methods for creating distribution instances.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : EuclideanDistributionType
        Distribution type; its ``kind`` decides whether density means PDF or PMF.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to computation functions.
        Single functions are treated as defined for the base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling from distributions.
    computation_strategy : ComputationStrategy, optional
        Strategy for resolving distribution characteristics.
    support_by_parametrization : Callable or None, optional
        Function that returns support for given parameters. When omitted the
        canonical family's support is used, or the whole line/lattice.
    canonical : CanonicalForm or None, optional
        Canonical family that evaluates every characteristic missing from
        ``distr_characteristics``.
    """

    def __init__(
        self,
        name: str,
        distr_type: EuclideanDistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
        canonical: CanonicalForm | None = None,
    ):
        self._name = name
        self._distr_type = distr_type
        self.canonical = canonical

        self.computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self.sampling_strategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )
        self._native_support = support_by_parametrization

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.parametrization_names[0]: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # Precompute analytical plan
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type shared by every member of the family."""
        return self._distr_type

    @property
    def kind(self) -> Kind:
        """Continuous or discrete; the single source of that classification."""
        return self._distr_type.kind

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered or not declared by the family.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def to_canonical(self, parameters: Parametrization) -> Parametrization | None:
        """
        Map ``parameters`` to the canonical family, if the family has one.

        Returns
        -------
        Parametrization or None
            Freshly computed canonical parameters, or ``None`` for families
            that are evaluated natively.
        """
        if self.canonical is None:
            return None
        return self.canonical.canonical_parameters(self.to_base(parameters))

    def support_resolver(self, parameters: Parametrization) -> Support:
        """
        Resolve the support of the distribution with ``parameters``.

        The family's own resolver wins; otherwise the canonical family is
        asked; otherwise the whole real line (or integer lattice).
        """
        if self._native_support is not None:
            return self._native_support(self.to_base(parameters))
        canonical_parameters = self.to_canonical(parameters)
        if canonical_parameters is not None:
            assert self.canonical is not None
            return self.canonical.resolve().support_resolver(canonical_parameters)
        if self.kind is Kind.DISCRETE:
            return IntegerLatticeDiscreteSupport()
        return ContinuousSupport()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Build analytical computations for given parameters.

        Native characteristics follow the precomputed plan (own
        parametrization first, then base). Every characteristic still missing
        is taken from the canonical family, evaluated at parameters
        transformed on the spot.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func_factory = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = AnalyticalComputation(
                target=characteristic,
                func=partial(func_factory, params_obj),
                provider=self.name,
            )

        canonical_parameters = self.to_canonical(parameters)
        if canonical_parameters is not None:
            assert self.canonical is not None
            target = self.canonical.resolve()
            for characteristic, computation in target._build_analytical_computations(
                canonical_parameters
            ).items():
                result.setdefault(characteristic, computation)

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        ParameterError
            If parameter names are wrong or values violate constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        try:
            parameters = parametrization_class(**parameters_values)
        except TypeError as exc:
            expected = ", ".join(f.name for f in fields(parametrization_class))  # type: ignore[arg-type]
            raise ParameterError(
                f"{self.name}: cannot build parameters from "
                f"{sorted(parameters_values)}; expected {expected}",
                family=self.name,
            ) from exc
        parameters.validate()

        return ParametricFamilyDistribution(
            self.name, self._distr_type, parameters, self.support_resolver(parameters)
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        If you want to use this syntax and so that Mypy doesn't swear,
        you should mark your class as a dataclass.
        At the moment, Mypy cannot identify dataclass_transform if the decorator is a class method.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from distfamilies.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
