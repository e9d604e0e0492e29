"""
Distribution Families Configuration
====================================

This module registers every built-in parametric family in the global
:class:`ParametricFamilyRegister`:

- continuous: Beta, Cauchy, ChiSquare, Exponential, FisherF, Gamma, Logistic,
  LogNormal, Normal, StudentsT, Tukey, Uniform, Weibull, GEV, RevWeibull,
  Frechet, Gumbel;
- discrete: Bernoulli, Binomial, Geometric, HyperGeometric, NegativeBinomial,
  Poisson.

Notes
-----
- Canonical families are looked up lazily at evaluation time, so the order of
  registration does not matter; it is kept canonical-first for readability.
- Each family supports one or more parameterizations with conversions to its
  base parameterization.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from distfamilies.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_chi_square_family,
    configure_exponential_family,
    configure_fisher_f_family,
    configure_frechet_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_gev_family,
    configure_gumbel_family,
    configure_hyper_geometric_family,
    configure_log_normal_family,
    configure_logistic_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_poisson_family,
    configure_rev_weibull_family,
    configure_students_t_family,
    configure_tukey_family,
    configure_uniform_family,
    configure_weibull_family,
)
from distfamilies.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and canonical forms. It is called
    lazily by the public operations; calling it again is a no-op.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    # canonical families
    configure_gev_family()
    configure_gamma_family()
    configure_binomial_family()
    configure_negative_binomial_family()

    # families evaluated through a canonical form
    configure_rev_weibull_family()
    configure_frechet_family()
    configure_gumbel_family()
    configure_chi_square_family()
    configure_bernoulli_family()
    configure_geometric_family()

    configure_beta_family()
    configure_cauchy_family()
    configure_exponential_family()
    configure_fisher_f_family()
    configure_logistic_family()
    configure_log_normal_family()
    configure_normal_family()
    configure_students_t_family()
    configure_tukey_family()
    configure_uniform_family()
    configure_weibull_family()
    configure_hyper_geometric_family()
    configure_poisson_family()

    register = ParametricFamilyRegister()
    logger.debug("Configured %d families", len(register.names()))
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
