"""Locale resource table: one parsed mapping per locale.

Built once from the descriptors returned by the locator and never mutated
afterwards, so it can be read from any number of threads without locks.

Components:
    LocaleResourceTable - Read-only LocaleKey -> ResourceMapping mapping
    ResourceLoadResult - Immutable record of what happened to one file
    LoadSummary - Immutable aggregate of all load results of one build

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from resxtext.core import LocaleKey
from resxtext.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DuplicateLocaleError,
    MissingResourceFileError,
)
from resxtext.enums import LoadStatus
from resxtext.localization.loading import missing_file_error
from resxtext.localization.locator import ResourceFileDescriptor
from resxtext.localization.types import ResourceFileName, ResourceKey, ResourceText, TextReader
from resxtext.syntax import ResourceMapping, parse_properties

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "LocaleResourceTable",
    "ResourceLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single resource file.

    Attributes:
        file_name: Dotted logical file name
        locale: Locale the file name resolved to
        status: LOADED, or DISCARDED when the locale was already taken
        entry_count: Number of keys parsed from the file
        shadowed_by: For DISCARDED files, the file that owns the locale
    """

    file_name: ResourceFileName
    locale: LocaleKey
    status: LoadStatus
    entry_count: int = 0
    shadowed_by: ResourceFileName | None = None

    @property
    def is_loaded(self) -> bool:
        """Check if the file's mapping is served by the table."""
        return self.status == LoadStatus.LOADED

    @property
    def is_discarded(self) -> bool:
        """Check if the file was dropped in favour of an earlier one."""
        return self.status == LoadStatus.DISCARDED


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of resource load results from one table build.

    Example:
        >>> summary = resolver.get_load_summary()
        >>> for result in summary.get_discarded():
        ...     print(f"{result.file_name} ignored, {result.shadowed_by} wins")

    Attributes:
        results: All individual load results, in load order
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"loaded={self.loaded}, "
            f"discarded={self.discarded})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of files read."""
        return len(self.results)

    @property
    def loaded(self) -> int:
        """Number of files whose mapping is in the table."""
        return sum(1 for r in self.results if r.is_loaded)

    @property
    def discarded(self) -> int:
        """Number of files dropped because their locale was taken."""
        return sum(1 for r in self.results if r.is_discarded)

    @property
    def has_discarded(self) -> bool:
        """Check if any file was discarded."""
        return self.discarded > 0

    def get_loaded(self) -> tuple[ResourceLoadResult, ...]:
        """Get all loaded results."""
        return tuple(r for r in self.results if r.is_loaded)

    def get_discarded(self) -> tuple[ResourceLoadResult, ...]:
        """Get all discarded results."""
        return tuple(r for r in self.results if r.is_discarded)

    def get_by_locale(self, locale: LocaleKey) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)


def _read(read_text: TextReader, file_name: ResourceFileName) -> ResourceText:
    """Read through a host callable, normalizing not-found errors."""
    try:
        return read_text(file_name)
    except MissingResourceFileError:
        raise
    except (FileNotFoundError, KeyError) as e:
        raise missing_file_error(file_name) from e


class LocaleResourceTable(Mapping[LocaleKey, ResourceMapping]):
    """Read-only mapping from locale to the key/value pairs of that locale.

    At most one mapping per locale. Lookups here are exact; the fallback
    chain lives in ResourceResolver.

    Example:
        >>> table = LocaleResourceTable({LocaleKey("de"): {"Hello": "Hallo"}})
        >>> table.lookup("Hello", LocaleKey("de"))
        'Hallo'
        >>> table.lookup("Hello", LocaleKey("de-AT")) is None
        True
    """

    __slots__ = ("_mappings",)

    def __init__(self, mappings: Mapping[LocaleKey, ResourceMapping] | None = None) -> None:
        """Initialize table from already parsed mappings.

        Args:
            mappings: Locale -> key/value mapping. Copied; each inner
                mapping is wrapped read-only.
        """
        frozen = {
            locale: MappingProxyType(dict(mapping))
            for locale, mapping in (mappings or {}).items()
        }
        self._mappings: Mapping[LocaleKey, ResourceMapping] = MappingProxyType(frozen)

    def __getitem__(self, locale: LocaleKey) -> ResourceMapping:
        return self._mappings[locale]

    def __iter__(self) -> Iterator[LocaleKey]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        tags = ", ".join(repr(locale.tag) for locale in self._mappings)
        return f"LocaleResourceTable(locales=[{tags}])"

    @property
    def locales(self) -> tuple[LocaleKey, ...]:
        """Locales with a mapping, in load order."""
        return tuple(self._mappings)

    def get_mapping(self, locale: LocaleKey) -> ResourceMapping | None:
        """Return the mapping of exactly this locale, or None."""
        return self._mappings.get(locale)

    def lookup(self, key: ResourceKey, locale: LocaleKey) -> str | None:
        """Return the value of key in exactly this locale, or None."""
        mapping = self._mappings.get(locale)
        if mapping is None:
            return None
        return mapping.get(key)

    @classmethod
    def build(
        cls,
        descriptors: Iterable[ResourceFileDescriptor],
        read_text: TextReader,
        *,
        strict_locales: bool = False,
    ) -> tuple[LocaleResourceTable, LoadSummary]:
        """Read and parse every descriptor into a new table.

        The first file for a locale wins. Later files for the same locale
        are parsed (so their syntax is still checked) and then discarded,
        or rejected when strict_locales is set.

        Args:
            descriptors: Located files, in priority order
            read_text: File read capability of the resource source
            strict_locales: Raise instead of discarding locale collisions

        Returns:
            (table, summary) tuple

        Raises:
            MissingResourceFileError: If a file cannot be read
            DuplicateKeyError: If a file defines a key twice
            DuplicateLocaleError: If strict_locales and two files share a locale
        """
        mappings: dict[LocaleKey, ResourceMapping] = {}
        owners: dict[LocaleKey, ResourceFileName] = {}
        results: list[ResourceLoadResult] = []

        for descriptor in descriptors:
            text = _read(read_text, descriptor.file_name)
            mapping = parse_properties(text, source_name=descriptor.file_name)
            locale = descriptor.locale

            if locale in mappings:
                owner = owners[locale]
                if strict_locales:
                    diagnostic = Diagnostic(
                        code=DiagnosticCode.DUPLICATE_LOCALE,
                        message=(
                            f"Locale {locale.tag!r} is provided by both "
                            f"{owner!r} and {descriptor.file_name!r}"
                        ),
                        file_name=descriptor.file_name,
                        hint="Remove one file or disable strict_locales",
                    )
                    raise DuplicateLocaleError(
                        diagnostic,
                        locale_tag=locale.tag,
                        file_name=descriptor.file_name,
                        existing_file_name=owner,
                    )
                logger.warning(
                    "Discarding %s: locale %r already loaded from %s",
                    descriptor.file_name,
                    locale.tag,
                    owner,
                )
                results.append(
                    ResourceLoadResult(
                        file_name=descriptor.file_name,
                        locale=locale,
                        status=LoadStatus.DISCARDED,
                        entry_count=len(mapping),
                        shadowed_by=owner,
                    )
                )
                continue

            mappings[locale] = mapping
            owners[locale] = descriptor.file_name
            results.append(
                ResourceLoadResult(
                    file_name=descriptor.file_name,
                    locale=locale,
                    status=LoadStatus.LOADED,
                    entry_count=len(mapping),
                )
            )

        return cls(mappings), LoadSummary(results=tuple(results))
