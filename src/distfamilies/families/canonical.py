"""
Canonical reparameterizations between families.

Several families are exact reparameterizations of a smaller set of canonical
families. The transforms live here as plain functions of the native parameter
values, so they can be tested on their own and reused with any evaluator of
the canonical family.

A family opts in by passing a :class:`CanonicalForm` to
:class:`~distfamilies.families.parametric_family.ParametricFamily`; every
characteristic the family does not implement natively is then evaluated by the
canonical family at the transformed parameters.

Transforms
----------
============  ==================  =========================================
source        canonical family    canonical parameters
============  ==================  =========================================
RevWeibull    GEV                 (m - s, s / α, -1 / α)
Frechet       GEV                 (m + s, s / α, 1 / α)
Gumbel        GEV                 (m, s, 0)
ChiSquare     Gamma               (df / 2, 1 / 2)
Bernoulli     Binomial            (1, p)
Geometric     NegativeBinomial    (1, p)
============  ==================  =========================================
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from distfamilies.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Callable

    from distfamilies.families.parametric_family import ParametricFamily
    from distfamilies.families.parametrizations import Parametrization
    from distfamilies.types import ParametrizationName


def rev_weibull_to_gev(location: float, scale: float, shape: float) -> dict[str, float]:
    """
    Map reversed Weibull parameters onto the GEV family.

    Parameters
    ----------
    location : float
        Upper endpoint ``m`` of the reversed Weibull support.
    scale : float
        Scale ``s > 0``.
    shape : float
        Shape ``α > 0``.

    Returns
    -------
    dict[str, float]
        GEV ``location``, ``scale`` and ``shape`` (the latter always negative).
    """
    return {
        "location": location - scale,
        "scale": scale / shape,
        "shape": -1.0 / shape,
    }


def gev_to_rev_weibull(location: float, scale: float, shape: float) -> dict[str, float]:
    """
    Inverse of :func:`rev_weibull_to_gev`; defined for GEV ``shape < 0``.

    Raises
    ------
    ValueError
        If ``shape`` is not negative.
    """
    if not shape < 0:
        raise ValueError("Only GEV distributions with shape < 0 are reversed Weibull")
    alpha = -1.0 / shape
    rev_scale = scale * alpha
    return {
        "location": location + rev_scale,
        "scale": rev_scale,
        "shape": alpha,
    }


def frechet_to_gev(location: float, scale: float, shape: float) -> dict[str, float]:
    """Map Fréchet parameters (lower endpoint ``m``) onto the GEV family."""
    return {
        "location": location + scale,
        "scale": scale / shape,
        "shape": 1.0 / shape,
    }


def gumbel_to_gev(location: float, scale: float) -> dict[str, float]:
    """Gumbel is the GEV with zero shape."""
    return {"location": location, "scale": scale, "shape": 0.0}


def chi_square_to_gamma(df: float) -> dict[str, float]:
    """Chi-square with ``df`` degrees of freedom is Gamma(df / 2, rate = 1 / 2)."""
    return {"shape": df / 2.0, "rate": 0.5}


def bernoulli_to_binomial(p: float) -> dict[str, float]:
    """A Bernoulli trial is a binomial with a single trial."""
    return {"size": 1, "p": p}


def geometric_to_negative_binomial(p: float) -> dict[str, float]:
    """Failures before the first success: negative binomial with one success."""
    return {"size": 1, "p": p}


@dataclass(frozen=True, slots=True)
class CanonicalForm:
    """
    Link from a family to the canonical family that evaluates it.

    Parameters
    ----------
    family : str
        Name of the canonical family in the register.
    transform : Callable[[Parametrization], dict[str, float]]
        Maps the source family's base parameters to keyword arguments of the
        canonical parametrization.
    parametrization_name : str or None
        Canonical parametrization to build; the canonical base when ``None``.
    """

    family: str
    transform: Callable[[Parametrization], dict[str, float]]
    parametrization_name: ParametrizationName | None = None

    def resolve(self) -> ParametricFamily:
        """Look up the canonical family in the register."""
        return ParametricFamilyRegister.get(self.family)

    def canonical_parameters(self, parameters: Parametrization) -> Parametrization:
        """
        Build the canonical parameter set for ``parameters``.

        The result is not validated again: the transforms are exact algebra on
        parameters that already passed the source family's constraints.
        """
        target = self.resolve()
        if self.parametrization_name is None:
            parametrization_class = target.base
        else:
            parametrization_class = target.get_parametrization(self.parametrization_name)
        return parametrization_class(**self.transform(parameters))


__all__ = [
    "CanonicalForm",
    "rev_weibull_to_gev",
    "gev_to_rev_weibull",
    "frechet_to_gev",
    "gumbel_to_gev",
    "chi_square_to_gamma",
    "bernoulli_to_binomial",
    "geometric_to_negative_binomial",
]
