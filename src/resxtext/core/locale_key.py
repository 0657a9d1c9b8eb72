"""Normalized locale keys for resource tables.

A LocaleKey wraps a BCP-47-style tag in canonical form so it can be used
as a dictionary key: "en_us", "EN-US" and "en-US" all produce the same key.
The empty tag is the invariant locale, used for files without a locale
suffix.

Tag syntax is checked with Babel's ``parse_locale``; whether CLDR actually
knows the locale is only checked by ``to_babel()``. Resource files for
private or uncommon tags therefore still load.

Python 3.13+. External dependency: Babel.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from babel.core import UnknownLocaleError, parse_locale

from resxtext.diagnostics import Diagnostic, DiagnosticCode, InvalidLocaleTagError
from resxtext.locale_utils import get_babel_locale, get_system_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "INVARIANT_LOCALE",
    "LocaleKey",
    "LocaleLike",
]

_TAG_CHARS = frozenset(string.ascii_letters + string.digits + "-_")

# BCP-47 primary language subtags are 2-3 letters, or 5-8 for registered ones.
_MIN_LANGUAGE_LENGTH = 2
_MAX_LANGUAGE_LENGTH = 8


def _invalid_tag(tag: str, reason: str) -> InvalidLocaleTagError:
    diagnostic = Diagnostic(
        code=DiagnosticCode.INVALID_LOCALE_TAG,
        message=f"Invalid locale tag {tag!r}: {reason}",
        hint="Use a BCP-47 tag such as 'en', 'de-DE' or 'zh-Hans-CN'",
    )
    return InvalidLocaleTagError(diagnostic, tag=tag)


def _canonical_tag(tag: str) -> str:
    """Validate tag syntax and return its canonical BCP-47 spelling.

    Raises:
        InvalidLocaleTagError: If the tag is not well-formed
    """
    stripped = tag.strip()
    if not stripped:
        return ""
    if not _TAG_CHARS.issuperset(stripped):
        raise _invalid_tag(tag, "only ASCII letters, digits, '-' and '_' are allowed")

    try:
        parts = parse_locale(normalize_locale(stripped))
    except ValueError as e:
        raise _invalid_tag(tag, str(e)) from e

    # parse_locale returns (language, territory, script, variant[, modifier])
    language, territory, script, variant = parts[:4]
    if not _MIN_LANGUAGE_LENGTH <= len(language) <= _MAX_LANGUAGE_LENGTH:
        raise _invalid_tag(tag, f"language subtag {language!r} has invalid length")

    return "-".join(part for part in (language, script, territory, variant) if part)


@dataclass(frozen=True, slots=True)
class LocaleKey:
    """Normalized locale tag used to key resource mappings.

    Construction normalizes the tag: separators become hyphens, the language
    is lower-cased, the script title-cased, region and variant upper-cased.
    Equality and hashing use the normalized tag only.

    Example:
        >>> LocaleKey("en_us") == LocaleKey("EN-US")
        True
        >>> LocaleKey("de-DE").language_only()
        LocaleKey(tag='de')
        >>> LocaleKey("").is_invariant
        True

    Attributes:
        tag: Canonical BCP-47 tag, empty for the invariant locale
    """

    tag: str

    def __post_init__(self) -> None:
        """Normalize the tag in place.

        Raises:
            InvalidLocaleTagError: If the tag is not well-formed
        """
        object.__setattr__(self, "tag", _canonical_tag(self.tag))

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def parse(cls, tag: str) -> LocaleKey:
        """Parse a locale tag, mapping the empty tag to INVARIANT_LOCALE.

        Raises:
            InvalidLocaleTagError: If the tag is not well-formed
        """
        if not tag.strip():
            return INVARIANT_LOCALE
        return cls(tag)

    @classmethod
    def coerce(cls, value: LocaleLike) -> LocaleKey:
        """Accept a LocaleKey, a tag string, or None (invariant)."""
        match value:
            case LocaleKey():
                return value
            case None:
                return INVARIANT_LOCALE
            case str():
                return cls.parse(value)
            case _:
                msg = f"Expected LocaleKey, str or None, got {type(value).__name__}"
                raise TypeError(msg)

    @classmethod
    def from_system(cls) -> LocaleKey:
        """Build a key from the process locale (LC_ALL, LC_MESSAGES, LANG)."""
        return cls.parse(get_system_locale())

    @property
    def is_invariant(self) -> bool:
        """True for the locale of files without a culture suffix."""
        return not self.tag

    @property
    def language(self) -> str:
        """Primary language subtag ("" for the invariant locale)."""
        return self.tag.split("-", 1)[0]

    def language_only(self) -> LocaleKey:
        """Project onto the first subtag: "en-US" -> "en". Idempotent."""
        if "-" not in self.tag:
            return self
        return LocaleKey(self.language)

    def to_babel(self) -> Locale:
        """Return the CLDR-backed Babel Locale for this key.

        Raises:
            InvalidLocaleTagError: For the invariant locale, or when CLDR
                has no data for the tag
        """
        if self.is_invariant:
            diagnostic = Diagnostic(
                code=DiagnosticCode.UNKNOWN_LOCALE,
                message="The invariant locale has no CLDR counterpart",
            )
            raise InvalidLocaleTagError(diagnostic, tag=self.tag)
        try:
            return get_babel_locale(self.tag)
        except (UnknownLocaleError, ValueError) as e:
            diagnostic = Diagnostic(
                code=DiagnosticCode.UNKNOWN_LOCALE,
                message=f"Locale {self.tag!r} is not known to CLDR: {e}",
            )
            raise InvalidLocaleTagError(diagnostic, tag=self.tag) from e


INVARIANT_LOCALE: LocaleKey = LocaleKey("")
"""Locale of resource files without a culture suffix."""

LocaleLike: TypeAlias = LocaleKey | str | None
"""Anything accepted where a locale is expected at a public boundary."""
