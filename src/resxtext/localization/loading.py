"""Resource sources: where resource file names and contents come from.

The resolver never touches the filesystem itself. It asks a
``ResourceSource`` for file names under a dotted directory prefix and for
the raw text of one file. Two implementations ship with the package:

Components:
    ResourceSource - Protocol for listing and reading resource files
    MemoryResourceSource - Files held in a dict (tests, generated content)
    TraversableResourceSource - Files on disk or inside a Python package

File names are dotted logical paths: ``Resources/Greeting_de.txt`` is
listed and read as ``Resources.Greeting_de.txt``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import importlib.resources
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType, ModuleType
from typing import TYPE_CHECKING, Protocol

from resxtext.constants import BYTE_ORDER_MARK, DEFAULT_ENCODING, NAMESPACE_SEPARATOR
from resxtext.diagnostics import Diagnostic, DiagnosticCode, MissingResourceFileError
from resxtext.localization.types import ResourceFileName, ResourceText

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceSource",
    # Concrete sources
    "MemoryResourceSource",
    "TraversableResourceSource",
    # Helpers
    "missing_file_error",
]

_SKIPPED_DIRECTORIES = frozenset({"__pycache__"})


def missing_file_error(file_name: ResourceFileName) -> MissingResourceFileError:
    """Build the error sources raise for a file they do not have."""
    diagnostic = Diagnostic(
        code=DiagnosticCode.MISSING_RESOURCE_FILE,
        message=f"Resource file {file_name!r} not found",
        file_name=file_name,
        hint="Check that the file is packaged and that periods are used instead of slashes",
    )
    return MissingResourceFileError(diagnostic, file_name=file_name)


class ResourceSource(Protocol):
    """Protocol for enumerating and reading resource files.

    This is a Protocol (structural typing) rather than ABC so hosts can
    adapt whatever packaging mechanism they already have.

    Example:
        >>> class ZipSource:
        ...     def __init__(self, archive):
        ...         self._archive = archive
        ...     def list_files(self, path_prefix):
        ...         names = (n.replace("/", ".") for n in self._archive.namelist())
        ...         return [n for n in names if n.startswith(path_prefix)]
        ...     def read_text(self, file_name):
        ...         ...
    """

    def list_files(self, path_prefix: str) -> Iterable[ResourceFileName]:
        """List file names starting with path_prefix (all files for '')."""

    def read_text(self, file_name: ResourceFileName) -> ResourceText:
        """Return raw file content.

        Raises:
            MissingResourceFileError: If the file does not exist
        """


def _filter_prefix(names: Iterable[ResourceFileName], path_prefix: str) -> tuple[str, ...]:
    if not path_prefix:
        return tuple(names)
    return tuple(name for name in names if name.startswith(path_prefix))


@dataclass(frozen=True, slots=True)
class MemoryResourceSource:
    """In-memory resource source backed by a name -> text mapping.

    The mapping is copied at construction; later changes to the caller's
    dict are not seen. Listing preserves insertion order.

    Example:
        >>> source = MemoryResourceSource({
        ...     "Resources.Greeting.txt": "Hello=Hi",
        ...     "Resources.Greeting_de.txt": "Hello=Hallo",
        ... })
        >>> source.read_text("Resources.Greeting_de.txt")
        'Hello=Hallo'

    Attributes:
        files: Read-only mapping from dotted file name to content
    """

    files: Mapping[ResourceFileName, ResourceText]

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))

    def list_files(self, path_prefix: str) -> tuple[ResourceFileName, ...]:
        return _filter_prefix(self.files, path_prefix)

    def read_text(self, file_name: ResourceFileName) -> ResourceText:
        try:
            return self.files[file_name]
        except KeyError:
            raise missing_file_error(file_name) from None


@dataclass(frozen=True, slots=True)
class TraversableResourceSource:
    """Resource source over a directory tree.

    Works on any ``importlib.resources`` Traversable, so the same class
    reads loose files on disk (``from_path``) and files shipped as package
    data (``from_package``). The tree is indexed once at construction.

    Security:
        Only files found while indexing can be read. Names containing '..'
        or path separators are rejected before the index lookup.

    Attributes:
        root: Directory the dotted names are relative to
        encoding: Text encoding of the files (default: utf-8). A leading
            byte order mark is dropped.
    """

    root: Traversable
    encoding: str = DEFAULT_ENCODING
    _index: Mapping[ResourceFileName, Traversable] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Index the tree.

        Raises:
            NotADirectoryError: If root is not a directory
        """
        if not self.root.is_dir():
            msg = f"Resource root is not a directory: {self.root}"
            raise NotADirectoryError(msg)
        index = dict(self._walk(self.root, ()))
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_path(cls, path: str | Path, *, encoding: str = DEFAULT_ENCODING) -> TraversableResourceSource:
        """Source over a directory on disk."""
        return cls(Path(path), encoding=encoding)

    @classmethod
    def from_package(
        cls, package: str | ModuleType, *, encoding: str = DEFAULT_ENCODING
    ) -> TraversableResourceSource:
        """Source over the data files of an importable package.

        Example:
            >>> source = TraversableResourceSource.from_package("myapp.shared")
            >>> source.list_files("Resources")
            ('Resources.Greeting.txt', 'Resources.Greeting_de.txt')
        """
        return cls(importlib.resources.files(package), encoding=encoding)

    @classmethod
    def _walk(
        cls, directory: Traversable, parents: tuple[str, ...]
    ) -> Iterator[tuple[ResourceFileName, Traversable]]:
        for entry in sorted(directory.iterdir(), key=lambda item: item.name):
            if entry.is_dir():
                if entry.name not in _SKIPPED_DIRECTORIES:
                    yield from cls._walk(entry, (*parents, entry.name))
            elif entry.is_file():
                yield NAMESPACE_SEPARATOR.join((*parents, entry.name)), entry

    @staticmethod
    def _validate_file_name(file_name: ResourceFileName) -> None:
        """Reject names that try to escape the indexed tree.

        Raises:
            ValueError: If file_name contains '..' or path separators
        """
        if ".." in file_name:
            msg = f"Path traversal sequences not allowed in file name: '{file_name}'"
            raise ValueError(msg)
        if "/" in file_name or "\\" in file_name:
            msg = f"Path separators not allowed in file name (use periods): '{file_name}'"
            raise ValueError(msg)

    def list_files(self, path_prefix: str) -> tuple[ResourceFileName, ...]:
        return _filter_prefix(self._index, path_prefix)

    def read_text(self, file_name: ResourceFileName) -> ResourceText:
        """Read one indexed file.

        Raises:
            ValueError: If file_name contains '..' or path separators
            MissingResourceFileError: If file_name was not indexed or
                disappeared since
        """
        self._validate_file_name(file_name)
        entry = self._index.get(file_name)
        if entry is None:
            raise missing_file_error(file_name)
        try:
            text = entry.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise missing_file_error(file_name) from e
        return text.removeprefix(BYTE_ORDER_MARK)
