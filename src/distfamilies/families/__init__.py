"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining parametric families of
distributions, their parameterizations and constraints, the canonical
reparameterizations between families, and the built-in families themselves.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


from .canonical import (
    CanonicalForm,
    bernoulli_to_binomial,
    chi_square_to_gamma,
    frechet_to_gev,
    geometric_to_negative_binomial,
    gev_to_rev_weibull,
    gumbel_to_gev,
    rev_weibull_to_gev,
)
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    "CanonicalForm",
    "rev_weibull_to_gev",
    "gev_to_rev_weibull",
    "frechet_to_gev",
    "gumbel_to_gev",
    "chi_square_to_gamma",
    "bernoulli_to_binomial",
    "geometric_to_negative_binomial",
]
