"""
Exceptions and warnings raised by distfamilies.

- :class:`ParameterError`: a family constraint failed at construction time.
- :class:`ArgumentError`: an operation received structurally invalid input.
- :class:`UnusedArgumentWarning`: an operation ignored an unrecognised option.
"""

__author__ = "distfamilies developers"
__copyright__ = "Copyright (c) 2025 distfamilies project"
__license__ = "SPDX-License-Identifier: MIT"


class DistFamiliesError(Exception):
    """Base class for all distfamilies errors."""


class ParameterError(DistFamiliesError, ValueError):
    """
    Invalid parameters passed to a family constructor.

    Parameters
    ----------
    message : str
        Human-readable explanation.
    family : str or None
        Name of the family being constructed.
    constraint : str or None
        Description of the violated condition (e.g. ``"scale > 0"``).
    """

    def __init__(
        self, message: str, *, family: str | None = None, constraint: str | None = None
    ) -> None:
        super().__init__(message)
        self.family = family
        self.constraint = constraint


class ArgumentError(DistFamiliesError, ValueError):
    """Invalid input passed to a distribution operation."""


class UnusedArgumentWarning(UserWarning):
    """An operation received an option it does not use; the result is unaffected."""


__all__ = [
    "DistFamiliesError",
    "ParameterError",
    "ArgumentError",
    "UnusedArgumentWarning",
]
