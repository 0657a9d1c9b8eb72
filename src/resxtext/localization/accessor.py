"""Integration point for generated resource accessor classes.

Hosts often have a generated ``Resources`` class whose properties call a
shared resource manager. A resolver publishes itself into such a class
through the ``GeneratedAccessor`` protocol and forwards active-locale
changes to it, so existing call sites keep working unchanged.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from resxtext.core import INVARIANT_LOCALE, LocaleKey

if TYPE_CHECKING:
    from resxtext.localization.resolver import ResourceResolver
    from resxtext.localization.types import ResourceKey

__all__ = ["AccessorSlot", "GeneratedAccessor"]


class GeneratedAccessor(Protocol):
    """Host-side receiver for a resolver and its active locale.

    Example:
        >>> class Strings:
        ...     resolver = None
        ...     culture = None
        ...     @classmethod
        ...     def publish(cls, resolver): cls.resolver = resolver
        ...     @classmethod
        ...     def set_active_locale(cls, locale): cls.culture = locale
        >>> ResourceResolver.inject("Shared.Strings", source, Strings)
    """

    def publish(self, resolver: ResourceResolver) -> None:
        """Store the resolver that serves this accessor's lookups."""

    def set_active_locale(self, locale: LocaleKey) -> None:
        """Mirror the resolver's active locale."""


class AccessorSlot:
    """Ready-made accessor holding the published resolver and locale.

    Example:
        >>> slot = AccessorSlot()
        >>> resolver = ResourceResolver("Shared.Resources.Greeting", source, accessor=slot)
        >>> slot.resolver is resolver
        True
        >>> resolver.set_active_locale("de")
        >>> slot.get_string("Hello")
        'Hallo'
    """

    __slots__ = ("locale", "resolver")

    def __init__(self) -> None:
        self.resolver: ResourceResolver | None = None
        self.locale: LocaleKey = INVARIANT_LOCALE

    def publish(self, resolver: ResourceResolver) -> None:
        self.resolver = resolver

    def set_active_locale(self, locale: LocaleKey) -> None:
        self.locale = locale

    def get_string(self, key: ResourceKey) -> str:
        """Look up key in the mirrored locale.

        Raises:
            RuntimeError: If no resolver has been published yet
        """
        if self.resolver is None:
            msg = "No resolver has been published into this accessor"
            raise RuntimeError(msg)
        return self.resolver.get_string(key, self.locale)
