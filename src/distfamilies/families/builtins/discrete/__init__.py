"""
Discrete distribution families on integer lattices.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from distfamilies.families.builtins.discrete.bernoulli import configure_bernoulli_family
from distfamilies.families.builtins.discrete.binomial import configure_binomial_family
from distfamilies.families.builtins.discrete.geometric import configure_geometric_family
from distfamilies.families.builtins.discrete.hyper_geometric import configure_hyper_geometric_family
from distfamilies.families.builtins.discrete.negative_binomial import (
    configure_negative_binomial_family,
)
from distfamilies.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_hyper_geometric_family",
    "configure_negative_binomial_family",
    "configure_poisson_family",
]
