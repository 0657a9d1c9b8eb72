"""Core value types shared by the syntax and localization layers.

Exports:
    LocaleKey: Normalized locale tag with language-only projection
    INVARIANT_LOCALE: Key for resource files without a culture suffix
    LocaleLike: Type alias for values accepted as a locale

Python 3.13+.
"""

from .locale_key import INVARIANT_LOCALE, LocaleKey, LocaleLike

__all__ = ["INVARIANT_LOCALE", "LocaleKey", "LocaleLike"]
