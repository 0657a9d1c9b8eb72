"""resxtext - localized text resources from ResGen-style .txt files.

Resolves localized strings for applications that share one set of text
resources across several runtime targets. A resource group such as
``Shared.Resources.Greeting`` maps to ``Resources.Greeting.txt`` (invariant
locale) plus ``Resources.Greeting_<locale>.txt`` files; lookups fall back
from the exact locale to its language and then to "".

Public API:
    ResourceResolver - Lookup with exact -> language-only -> "" fallback
    ResolverConfig - Culture delimiter and locale-collision policy
    LocaleKey - Normalized locale tag
    INVARIANT_LOCALE - Locale of files without a culture suffix
    MemoryResourceSource / TraversableResourceSource - Resource sources
    AccessorSlot - Ready-made generated-accessor integration
    parse_properties - Parse one file's text into a mapping

Exceptions:
    ResourceError - Base exception class
    InvalidLocaleTagError - Malformed locale tag
    InvalidResourceGroupError - Malformed group identifier
    MissingResourceFileError - Located file cannot be read
    DuplicateKeyError - Key defined twice in one file
    DuplicateLocaleError - Two files for one locale (strict mode)

Submodules:
    resxtext.core - LocaleKey
    resxtext.syntax - Property-text parser
    resxtext.localization - Locator, sources, tables, resolver
    resxtext.diagnostics - Error types and diagnostic codes
"""

from .core import INVARIANT_LOCALE, LocaleKey
from .diagnostics import (
    DuplicateKeyError,
    DuplicateLocaleError,
    InvalidLocaleTagError,
    InvalidResourceGroupError,
    MissingResourceFileError,
    ResourceError,
)
from .localization import (
    AccessorSlot,
    MemoryResourceSource,
    ResolverConfig,
    ResourceResolver,
    TraversableResourceSource,
)
from .syntax import parse_properties

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("resxtext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "INVARIANT_LOCALE",
    "AccessorSlot",
    "DuplicateKeyError",
    "DuplicateLocaleError",
    "InvalidLocaleTagError",
    "InvalidResourceGroupError",
    "LocaleKey",
    "MemoryResourceSource",
    "MissingResourceFileError",
    "ResolverConfig",
    "ResourceError",
    "ResourceResolver",
    "TraversableResourceSource",
    "__version__",
    "parse_properties",
]
