"""Resource resolver: the public lookup surface.

Answers ``(key, locale) -> value`` with a fixed fallback chain:

    1. exact locale            (de-AT)
    2. language-only locale    (de)
    3. empty string

Lookups never raise for an unknown key or locale; absent translations are
a normal condition and resolve to "". Problems with the resource data
itself (missing files, duplicate keys, malformed names) raise during
construction instead, so a constructed resolver is always fully usable.

Initialization Behavior:
    All files of the group are located, read and parsed eagerly in the
    constructor. ``rebind()`` repeats this for another group and swaps the
    result in with a single assignment; readers see the old or the new
    state, never a mix. If the rebuild fails, the old state stays.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resxtext.core import LocaleKey, LocaleLike
from resxtext.localization.config import ResolverConfig
from resxtext.localization.locator import ResourceFileLocator
from resxtext.localization.table import LoadSummary, LocaleResourceTable

if TYPE_CHECKING:
    from resxtext.localization.accessor import GeneratedAccessor
    from resxtext.localization.loading import ResourceSource
    from resxtext.localization.types import ResourceGroupId, ResourceKey

__all__ = ["ResourceResolver"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ResolverState:
    """Everything derived from one group binding, swapped as a unit."""

    group_id: ResourceGroupId
    table: LocaleResourceTable
    summary: LoadSummary


class ResourceResolver:
    """Localized string lookup for one resource group.

    Example - Files on disk:
        >>> source = TraversableResourceSource.from_path("Shared")
        >>> resolver = ResourceResolver("Shared.Resources.Greeting", source)
        >>> resolver.get_string("Hello")
        'Hi'
        >>> resolver.get_string("Hello", "de-DE")  # falls back to 'de'
        'Hallo'
        >>> resolver.get_string("Hello", "fr")
        ''

    Example - Generated accessor integration:
        >>> slot = AccessorSlot()
        >>> resolver = ResourceResolver.inject("Shared.Resources.Greeting", source, slot)
        >>> slot.resolver is resolver
        True

    Attributes:
        config: Immutable resolver configuration
    """

    __slots__ = (
        "_accessor",
        "_active_locale",
        "_config",
        "_locator",
        "_rebind_lock",
        "_source",
        "_state",
    )

    def __init__(
        self,
        group_id: ResourceGroupId,
        source: ResourceSource,
        *,
        config: ResolverConfig | None = None,
        accessor: GeneratedAccessor | None = None,
        active_locale: LocaleLike = None,
    ) -> None:
        """Load a resource group and publish the resolver.

        Args:
            group_id: Dotted group identifier ('Shared.Resources.Greeting')
            source: Listing and read capability for resource files
            config: Delimiter and locale-collision policy (default: ResolverConfig())
            accessor: Generated accessor to publish into (optional)
            active_locale: Locale used when get_string() gets none
                (default: invariant)

        Raises:
            InvalidResourceGroupError: If group_id is malformed
            InvalidLocaleTagError: If active_locale or a file suffix is malformed
            MissingResourceFileError: If a located file cannot be read
            DuplicateKeyError: If a file defines a key twice
            DuplicateLocaleError: If strict_locales and two files share a locale
        """
        self._config = config if config is not None else ResolverConfig()
        self._source = source
        self._accessor = accessor
        self._locator = ResourceFileLocator(self._config.culture_delimiter)
        self._active_locale = LocaleKey.coerce(active_locale)
        self._rebind_lock = threading.Lock()
        self._state = self._load(group_id)

        logger.info(
            "Loaded resource group %s: %d locales from %d files",
            group_id,
            len(self._state.table),
            self._state.summary.total_attempted,
        )
        self._publish()

    @classmethod
    def inject(
        cls,
        group_id: ResourceGroupId,
        source: ResourceSource,
        accessor: GeneratedAccessor,
        *,
        config: ResolverConfig | None = None,
    ) -> ResourceResolver:
        """Create a resolver for group_id and publish it into accessor.

        Returns:
            The published resolver
        """
        return cls(group_id, source, config=config, accessor=accessor)

    def _load(self, group_id: ResourceGroupId) -> _ResolverState:
        descriptors = self._locator.locate(group_id, self._source.list_files)
        table, summary = LocaleResourceTable.build(
            descriptors,
            self._source.read_text,
            strict_locales=self._config.strict_locales,
        )
        return _ResolverState(group_id=group_id, table=table, summary=summary)

    def _publish(self) -> None:
        if self._accessor is not None:
            self._accessor.publish(self)
            self._accessor.set_active_locale(self._active_locale)

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    @property
    def group_id(self) -> ResourceGroupId:
        """Identifier of the currently bound resource group."""
        return self._state.group_id

    @group_id.setter
    def group_id(self, value: ResourceGroupId) -> None:
        self.rebind(value)

    def rebind(self, group_id: ResourceGroupId) -> None:
        """Load another resource group and switch to it atomically.

        The new table is built completely before it replaces the old one.
        Concurrent rebind() calls are serialized.

        Raises:
            Same errors as the constructor; the previous binding stays
            active when any of them is raised.
        """
        with self._rebind_lock:
            previous = self._state.group_id
            state = self._load(group_id)
            self._state = state
            logger.info(
                "Rebound resolver from %s to %s: %d locales",
                previous,
                group_id,
                len(state.table),
            )
            self._publish()

    # ------------------------------------------------------------------
    # Active locale
    # ------------------------------------------------------------------

    @property
    def active_locale(self) -> LocaleKey:
        """Locale used by get_string() when no locale is passed."""
        return self._active_locale

    @active_locale.setter
    def active_locale(self, value: LocaleLike) -> None:
        self.set_active_locale(value)

    def set_active_locale(self, locale: LocaleLike) -> None:
        """Change the default lookup locale and mirror it to the accessor.

        Raises:
            InvalidLocaleTagError: If locale is a malformed tag string
        """
        key = LocaleKey.coerce(locale)
        self._active_locale = key
        logger.debug("Active locale for %s set to %r", self.group_id, key.tag)
        if self._accessor is not None:
            self._accessor.set_active_locale(key)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _find(self, key: ResourceKey, locale: LocaleLike) -> str | None:
        requested = self._active_locale if locale is None else LocaleKey.coerce(locale)
        table = self._state.table

        value = table.lookup(key, requested)
        if value is not None:
            return value

        language = requested.language_only()
        if language != requested:
            value = table.lookup(key, language)
            if value is not None:
                return value

        logger.debug("No value for %r in %r or %r", key, requested.tag, language.tag)
        return None

    def get_string(self, key: ResourceKey, locale: LocaleLike = None) -> str:
        """Resolve key for locale with exact -> language-only fallback.

        Args:
            key: Resource key
            locale: LocaleKey or tag; None uses the active locale

        Returns:
            The localized value, or "" when no applicable mapping has key

        Raises:
            InvalidLocaleTagError: If locale is a malformed tag string
        """
        value = self._find(key, locale)
        return "" if value is None else value

    def has_string(self, key: ResourceKey, locale: LocaleLike = None) -> bool:
        """Check whether get_string() would find key (the value may be "")."""
        return self._find(key, locale) is not None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> ResolverConfig:
        """Resolver configuration (read-only)."""
        return self._config

    @property
    def table(self) -> LocaleResourceTable:
        """Locale table of the current binding."""
        return self._state.table

    @property
    def locales(self) -> tuple[LocaleKey, ...]:
        """Locales with loaded resources, in load order."""
        return self._state.table.locales

    def get_load_summary(self) -> LoadSummary:
        """Get the load results of the current binding.

        Example:
            >>> summary = resolver.get_load_summary()
            >>> print(f"Loaded: {summary.loaded}/{summary.total_attempted}")
            Loaded: 2/2
        """
        return self._state.summary

    def __repr__(self) -> str:
        tags = [locale.tag for locale in self.locales]
        return f"ResourceResolver(group_id={self.group_id!r}, locales={tags!r})"
