"""Resolver configuration.

Provides a single frozen dataclass holding the per-resolver settings that
used to be process-wide state: the culture delimiter and the policy for
two files resolving to the same locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from resxtext.constants import DEFAULT_CULTURE_DELIMITER
from resxtext.localization.locator import validate_culture_delimiter

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for ResourceResolver.

    All fields have defaults; ``ResolverConfig()`` matches the classic
    ResGen text layout.

    Attributes:
        culture_delimiter: Separator between base name and locale tag in
            file names (default: "_"). Must be non-empty and free of ".".
        strict_locales: If True, a second file resolving to an already
            loaded locale raises DuplicateLocaleError. If False (default),
            the later file is discarded and a warning is logged.

    Example:
        >>> config = ResolverConfig(culture_delimiter="-", strict_locales=True)
        >>> resolver = ResourceResolver("App.Strings", source, config=config)
    """

    culture_delimiter: str = DEFAULT_CULTURE_DELIMITER
    strict_locales: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If culture_delimiter is empty or contains '.'
        """
        validate_culture_delimiter(self.culture_delimiter)
