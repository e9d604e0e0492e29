"""
Operation options
=================

Every public operation accepts ``**options``. This module holds the single
table of recognised options and their effect. Unrecognised keys are reported
once, here, with :class:`~distfamilies.errors.UnusedArgumentWarning` and then
dropped, so a misspelt option can never change a computed result.

Recognised options
------------------
``rng`` (``sample`` only)
    Random source for this call: a :class:`numpy.random.Generator`, a
    :class:`numpy.random.SeedSequence`, an integer seed, or ``None``.
"""

from __future__ import annotations

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from dataclasses import dataclass, fields
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

from distfamilies.errors import UnusedArgumentWarning

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from distfamilies.distributions.strategies import RandomSource

logger = logging.getLogger(__name__)


class Operation(StrEnum):
    DENSITY = "density"
    LOG_DENSITY = "log_density"
    CUMULATIVE = "cumulative"
    QUANTILE = "quantile"
    SAMPLE = "sample"


@dataclass(frozen=True, slots=True)
class OperationOptions:
    """
    Options understood by the public operations.

    Parameters
    ----------
    rng : RandomSource
        Random source used by ``sample``. Ignored elsewhere.
    """

    rng: RandomSource = None

    def as_kwargs(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


RECOGNIZED_OPTIONS: Mapping[Operation, frozenset[str]] = MappingProxyType(
    {
        Operation.DENSITY: frozenset(),
        Operation.LOG_DENSITY: frozenset(),
        Operation.CUMULATIVE: frozenset(),
        Operation.QUANTILE: frozenset(),
        Operation.SAMPLE: frozenset({"rng"}),
    }
)


def resolve_options(operation: Operation, options: Mapping[str, Any]) -> OperationOptions:
    """
    Split ``options`` into recognised values and ignored extras.

    Parameters
    ----------
    operation : Operation
        Operation the options were passed to.
    options : Mapping[str, Any]
        Raw keyword arguments.

    Returns
    -------
    OperationOptions
        Recognised options; everything else is discarded.

    Warns
    -----
    UnusedArgumentWarning
        If any key is not recognised by ``operation``.
    """
    recognized = RECOGNIZED_OPTIONS[operation]
    unused = sorted(key for key in options if key not in recognized)
    if unused:
        logger.debug("%s() ignoring options %s", operation, unused)
        warnings.warn(
            f"{operation}() ignored unused argument(s): {', '.join(unused)}",
            UnusedArgumentWarning,
            stacklevel=3,
        )
    return OperationOptions(**{key: options[key] for key in options if key in recognized})


__all__ = [
    "Operation",
    "OperationOptions",
    "RECOGNIZED_OPTIONS",
    "resolve_options",
]
