"""
Built-in distribution families for distfamilies.

This package contains implementations of standard statistical distribution families
that are available by default in distfamilies.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


from distfamilies.families.builtins.continuous import (
    configure_beta_family,
    configure_cauchy_family,
    configure_chi_square_family,
    configure_exponential_family,
    configure_fisher_f_family,
    configure_frechet_family,
    configure_gamma_family,
    configure_gev_family,
    configure_gumbel_family,
    configure_log_normal_family,
    configure_logistic_family,
    configure_normal_family,
    configure_rev_weibull_family,
    configure_students_t_family,
    configure_tukey_family,
    configure_uniform_family,
    configure_weibull_family,
)
from distfamilies.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_hyper_geometric_family,
    configure_negative_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "configure_beta_family",
    "configure_cauchy_family",
    "configure_chi_square_family",
    "configure_exponential_family",
    "configure_fisher_f_family",
    "configure_frechet_family",
    "configure_gamma_family",
    "configure_gev_family",
    "configure_gumbel_family",
    "configure_log_normal_family",
    "configure_logistic_family",
    "configure_normal_family",
    "configure_rev_weibull_family",
    "configure_students_t_family",
    "configure_tukey_family",
    "configure_uniform_family",
    "configure_weibull_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_hyper_geometric_family",
    "configure_negative_binomial_family",
    "configure_poisson_family",
]
