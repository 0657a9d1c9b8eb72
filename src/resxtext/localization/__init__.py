"""Resource group loading and lookup.

Provides the full resolution stack: file discovery, resource sources,
per-locale tables and the resolver with its fallback chain.

Submodules:
    types     - PEP 695 type aliases (ResourceGroupId, ResourceFileName, ...)
    locator   - ResourceFileLocator, ResourceFileDescriptor, split_resource_group
    loading   - ResourceSource protocol, MemoryResourceSource,
                TraversableResourceSource
    table     - LocaleResourceTable, ResourceLoadResult, LoadSummary
    config    - ResolverConfig
    accessor  - GeneratedAccessor protocol, AccessorSlot
    resolver  - ResourceResolver

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from resxtext.enums import LoadStatus
from resxtext.localization.accessor import AccessorSlot, GeneratedAccessor
from resxtext.localization.config import ResolverConfig
from resxtext.localization.loading import (
    MemoryResourceSource,
    ResourceSource,
    TraversableResourceSource,
)
from resxtext.localization.locator import (
    ResourceFileDescriptor,
    ResourceFileLocator,
    ResourcePath,
    split_resource_group,
)
from resxtext.localization.resolver import ResourceResolver
from resxtext.localization.table import LoadSummary, LocaleResourceTable, ResourceLoadResult
from resxtext.localization.types import (
    DirectoryLister,
    ResourceFileName,
    ResourceGroupId,
    ResourceKey,
    ResourceText,
    TextReader,
)

__all__ = [
    # Main resolver
    "ResourceResolver",
    "ResolverConfig",
    # Accessor integration
    "GeneratedAccessor",
    "AccessorSlot",
    # Sources
    "ResourceSource",
    "MemoryResourceSource",
    "TraversableResourceSource",
    # Discovery
    "ResourceFileLocator",
    "ResourceFileDescriptor",
    "ResourcePath",
    "split_resource_group",
    # Tables and load tracking
    "LocaleResourceTable",
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Type aliases for user code type annotations
    "DirectoryLister",
    "ResourceFileName",
    "ResourceGroupId",
    "ResourceKey",
    "ResourceText",
    "TextReader",
]
