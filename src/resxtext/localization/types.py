"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Iterable
from typing import TypeAlias

__all__ = [
    "DirectoryLister",
    "ResourceFileName",
    "ResourceGroupId",
    "ResourceKey",
    "ResourceText",
    "TextReader",
]

ResourceGroupId: TypeAlias = str
"""Dotted logical group path (e.g., 'Shared.Resources.LocalizationResources')."""

ResourceFileName: TypeAlias = str
"""Dotted logical file name (e.g., 'Resources.LocalizationResources_de.txt')."""

ResourceKey: TypeAlias = str
"""Key of one entry inside a resource file (e.g., 'Hello')."""

ResourceText: TypeAlias = str
"""Raw content of one resource file."""

DirectoryLister: TypeAlias = Callable[[str], Iterable[ResourceFileName]]
"""list_files(path_prefix): every file under the prefix, or all files for ''."""

TextReader: TypeAlias = Callable[[ResourceFileName], ResourceText]
"""read_text(file_name): raw content, MissingResourceFileError if absent."""
