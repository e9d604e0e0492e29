"""
Continuous distribution families.

The extreme-value families (reversed Weibull, Fréchet, Gumbel) and the
chi-square family carry no formulas of their own beyond sampling; they are
evaluated by the GEV and Gamma families through their canonical forms.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from distfamilies.families.builtins.continuous.beta import configure_beta_family
from distfamilies.families.builtins.continuous.cauchy import configure_cauchy_family
from distfamilies.families.builtins.continuous.chi_square import configure_chi_square_family
from distfamilies.families.builtins.continuous.exponential import configure_exponential_family
from distfamilies.families.builtins.continuous.fisher_f import configure_fisher_f_family
from distfamilies.families.builtins.continuous.frechet import configure_frechet_family
from distfamilies.families.builtins.continuous.gamma import configure_gamma_family
from distfamilies.families.builtins.continuous.gev import configure_gev_family
from distfamilies.families.builtins.continuous.gumbel import configure_gumbel_family
from distfamilies.families.builtins.continuous.log_normal import configure_log_normal_family
from distfamilies.families.builtins.continuous.logistic import configure_logistic_family
from distfamilies.families.builtins.continuous.normal import configure_normal_family
from distfamilies.families.builtins.continuous.rev_weibull import configure_rev_weibull_family
from distfamilies.families.builtins.continuous.students_t import configure_students_t_family
from distfamilies.families.builtins.continuous.tukey import configure_tukey_family
from distfamilies.families.builtins.continuous.uniform import configure_uniform_family
from distfamilies.families.builtins.continuous.weibull import configure_weibull_family

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
]
