"""Resource file discovery for a resource group.

Maps a dotted group identifier onto the text files that belong to it and
derives the locale each file represents. Everything here is a pure function
of strings plus the supplied directory lister; no filesystem access.

Layout for group ``Shared.Resources.Greeting`` with delimiter ``_``::

    Resources.Greeting.txt       -> invariant locale (default file)
    Resources.Greeting_de.txt    -> de
    Resources.Greeting_en-US.txt -> en-US

Known limitation: files are associated with a group when their name
contains the group's base name, so ``Resources.GreetingExtra_de.txt`` is
also picked up for ``Greeting``. Keep base names distinct within one
directory.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resxtext.constants import (
    DEFAULT_CULTURE_DELIMITER,
    NAMESPACE_SEPARATOR,
    RESOURCE_FILE_EXTENSION,
)
from resxtext.core import INVARIANT_LOCALE, LocaleKey
from resxtext.diagnostics import Diagnostic, DiagnosticCode, InvalidResourceGroupError
from resxtext.localization.types import DirectoryLister, ResourceFileName, ResourceGroupId

__all__ = [
    "ResourceFileDescriptor",
    "ResourceFileLocator",
    "ResourcePath",
    "split_resource_group",
    "validate_culture_delimiter",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResourcePath:
    """File layout derived from a resource group identifier.

    Attributes:
        resource_identifier: Group id without its outer namespace
            ('Resources.Greeting')
        resource_directory: Dotted directory of the files ('Resources'),
            empty when the files sit at the container root
        base_name: Last component, shared by all files of the group
            ('Greeting')
    """

    resource_identifier: str
    resource_directory: str
    base_name: str

    @property
    def default_file_name(self) -> ResourceFileName:
        """Name of the invariant-locale file ('Resources.Greeting.txt')."""
        return f"{self.resource_identifier}{RESOURCE_FILE_EXTENSION}"


@dataclass(frozen=True, slots=True)
class ResourceFileDescriptor:
    """A located resource file and the locale it provides.

    Attributes:
        file_name: Dotted logical file name, as understood by the source
        locale: Locale derived from the file name suffix
    """

    file_name: ResourceFileName
    locale: LocaleKey


def split_resource_group(group_id: ResourceGroupId) -> ResourcePath:
    """Derive the file layout of a resource group.

    Drops the outer namespace segment, then splits the remainder into
    directory and base name.

    Args:
        group_id: Dotted group identifier ('Shared.Resources.Greeting')

    Returns:
        ResourcePath for the group

    Raises:
        InvalidResourceGroupError: If the id has no namespace segment or
            contains empty segments

    Example:
        >>> split_resource_group("Shared.Resources.Greeting")
        ResourcePath(resource_identifier='Resources.Greeting', resource_directory='Resources', base_name='Greeting')
    """  # noqa: E501
    segments = group_id.split(NAMESPACE_SEPARATOR)
    if len(segments) < 2 or not all(segment.strip() for segment in segments):
        diagnostic = Diagnostic(
            code=DiagnosticCode.INVALID_RESOURCE_GROUP,
            message=f"Invalid resource group identifier {group_id!r}",
            hint="Use '<Namespace>.<Directory>.<BaseName>', e.g. 'Shared.Resources.Greeting'",
        )
        raise InvalidResourceGroupError(diagnostic, group_id=group_id)

    identifier_segments = segments[1:]
    return ResourcePath(
        resource_identifier=NAMESPACE_SEPARATOR.join(identifier_segments),
        resource_directory=NAMESPACE_SEPARATOR.join(identifier_segments[:-1]),
        base_name=identifier_segments[-1],
    )


def validate_culture_delimiter(culture_delimiter: str) -> None:
    """Reject delimiters that cannot be told apart from the file layout.

    Raises:
        ValueError: If the delimiter is empty or contains '.'
    """
    if not culture_delimiter:
        msg = "culture_delimiter cannot be empty"
        raise ValueError(msg)
    if NAMESPACE_SEPARATOR in culture_delimiter:
        msg = (
            f"culture_delimiter cannot contain {NAMESPACE_SEPARATOR!r}, "
            f"got: {culture_delimiter!r}"
        )
        raise ValueError(msg)


class ResourceFileLocator:
    """Finds the resource files of a group and the locale of each.

    The culture delimiter is fixed per locator, so groups using different
    delimiters can be loaded side by side.

    Example:
        >>> files = ["Resources.Greeting.txt", "Resources.Greeting_de.txt"]
        >>> locator = ResourceFileLocator()
        >>> [d.locale.tag for d in locator.locate("Shared.Resources.Greeting",
        ...                                        lambda prefix: files)]
        ['', 'de']
    """

    __slots__ = ("_culture_delimiter",)

    def __init__(self, culture_delimiter: str = DEFAULT_CULTURE_DELIMITER) -> None:
        """Initialize locator.

        Args:
            culture_delimiter: Separator between base name and locale tag

        Raises:
            ValueError: If the delimiter is empty or contains '.'
        """
        validate_culture_delimiter(culture_delimiter)
        self._culture_delimiter = culture_delimiter

    @property
    def culture_delimiter(self) -> str:
        """Separator between base name and locale tag in file names."""
        return self._culture_delimiter

    def candidate_names(
        self, path: ResourcePath, list_files: DirectoryLister
    ) -> tuple[ResourceFileName, ...]:
        """Return the default file name followed by matching listed files.

        The default file is always the first candidate, whether or not the
        lister knows it; a missing default surfaces when it is read.
        """
        default_name = path.default_file_name
        names: dict[ResourceFileName, None] = {default_name: None}
        for file_name in list_files(path.resource_directory):
            if (
                file_name != default_name
                and file_name.endswith(RESOURCE_FILE_EXTENSION)
                and path.base_name in file_name
            ):
                names[file_name] = None
        return tuple(names)

    def describe(self, file_name: ResourceFileName, path: ResourcePath) -> ResourceFileDescriptor:
        """Derive the locale a file provides from its name.

        The locale token is the text after "<base_name><delimiter>", so base
        names may themselves contain the delimiter ("Error_Messages_de").
        Files matched only by the permissive substring rule fall back to
        the text after the last delimiter.

        Raises:
            InvalidLocaleTagError: If the suffix after the delimiter is not
                a well-formed locale tag
        """
        if file_name == path.default_file_name:
            return ResourceFileDescriptor(file_name, INVARIANT_LOCALE)

        relative = file_name
        if path.resource_directory:
            relative = relative.removeprefix(path.resource_directory + NAMESPACE_SEPARATOR)
        stem = relative.removesuffix(RESOURCE_FILE_EXTENSION)

        _, marker, locale_token = stem.rpartition(path.base_name + self._culture_delimiter)
        if not marker:
            if self._culture_delimiter not in stem:
                return ResourceFileDescriptor(file_name, INVARIANT_LOCALE)
            _, _, locale_token = stem.rpartition(self._culture_delimiter)
        return ResourceFileDescriptor(file_name, LocaleKey.parse(locale_token))

    def locate(
        self, group_id: ResourceGroupId, list_files: DirectoryLister
    ) -> tuple[ResourceFileDescriptor, ...]:
        """Locate all files of a group, default file first.

        Args:
            group_id: Dotted group identifier
            list_files: Directory lister of the resource source

        Returns:
            Descriptors in discovery order

        Raises:
            InvalidResourceGroupError: If group_id is malformed
            InvalidLocaleTagError: If a matching file has a malformed suffix
        """
        path = split_resource_group(group_id)
        descriptors = tuple(
            self.describe(file_name, path) for file_name in self.candidate_names(path, list_files)
        )
        for descriptor in descriptors:
            logger.debug(
                "Located %s for %s (locale %r)",
                descriptor.file_name,
                group_id,
                descriptor.locale.tag,
            )
        return descriptors
