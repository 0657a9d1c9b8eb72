"""Shared constants for resxtext.

Centralizes the file-format and naming constants used by the parser,
the locator and the resource sources. Placing them here avoids circular
imports between the syntax and localization packages.

Constants are grouped by domain:
- File naming: extension, namespace separator, culture delimiter
- Text format: comment prefixes, quote characters, legacy escapes
- Caching: Babel locale cache bound

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # File naming
    "RESOURCE_FILE_EXTENSION",
    "NAMESPACE_SEPARATOR",
    "DEFAULT_CULTURE_DELIMITER",
    # Text format
    "COMMENT_PREFIXES",
    "QUOTE_CHARS",
    "KEY_VALUE_SEPARATOR",
    "LEGACY_LINE_BREAK_ESCAPE",
    "LINE_BREAK",
    "BYTE_ORDER_MARK",
    "DEFAULT_ENCODING",
    # Caching
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# FILE NAMING
# ============================================================================

# Text resources are always plain .txt files next to their .resx definitions.
RESOURCE_FILE_EXTENSION: str = ".txt"

# Logical resource paths use periods instead of directory separators:
# Resources/Greeting_de.txt is addressed as "Resources.Greeting_de.txt".
NAMESPACE_SEPARATOR: str = "."

# Separates the base file name from the locale tag ("Greeting_de.txt").
# Independent of the "." used by locale-suffixed .resx definition files.
DEFAULT_CULTURE_DELIMITER: str = "_"

# ============================================================================
# TEXT FORMAT
# ============================================================================

COMMENT_PREFIXES: tuple[str, ...] = (";", "#", "'")

QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})

KEY_VALUE_SEPARATOR: str = "="

# Literal backslash-r-backslash-n inside a value, written by ResGen for
# multi-line strings. Expanded to LINE_BREAK at parse time.
LEGACY_LINE_BREAK_ESCAPE: str = "\\r\\n"

LINE_BREAK: str = "\n"

BYTE_ORDER_MARK: str = "\ufeff"

DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# CACHING
# ============================================================================

# Upper bound for the Babel Locale lru_cache in locale_utils.
MAX_LOCALE_CACHE_SIZE: int = 128
