"""
distfamilies
============

Parametric probability distributions behind one operation contract: density,
log-density, cumulative probability, quantile and sampling. Families that are
exact reparameterizations of another family (reversed Weibull of the GEV,
chi-square of the Gamma, ...) are evaluated through their canonical family.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .operations import *
from .operations import __all__ as _operations_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("distfamilies")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_operations_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _operations_all
del _types_all
