"""Enumerations for resxtext type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading one resource file into a locale table.

    StrEnum provides automatic string conversion: str(LoadStatus.LOADED) == "loaded"
    """

    LOADED = "loaded"
    """File parsed and registered as the mapping for its locale."""

    DISCARDED = "discarded"
    """File parsed but dropped: an earlier file already claimed its locale."""


__all__ = [
    "LoadStatus",
]
