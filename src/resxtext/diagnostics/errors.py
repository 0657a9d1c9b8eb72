"""resxtext exception hierarchy with structured diagnostics.

Initialization-time problems (bad locale tags, bad group identifiers,
missing files, duplicate keys) raise one of these errors. Lookup misses
never raise: they resolve to the empty string.

Hierarchy:
    ResourceError
    ├─ InvalidLocaleTagError      (also ValueError)
    ├─ InvalidResourceGroupError  (also ValueError)
    ├─ MissingResourceFileError   (also FileNotFoundError)
    ├─ DuplicateKeyError          (also ValueError)
    └─ DuplicateLocaleError       (also ValueError)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DuplicateKeyError",
    "DuplicateLocaleError",
    "InvalidLocaleTagError",
    "InvalidResourceGroupError",
    "MissingResourceFileError",
    "ResourceError",
]


class ResourceError(Exception):
    """Base exception for all resxtext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ResourceError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLocaleTagError(ResourceError, ValueError):
    """Locale tag is not a well-formed BCP-47-style identifier.

    Attributes:
        tag: The rejected tag exactly as supplied
    """

    def __init__(self, message: str | Diagnostic, *, tag: str = "") -> None:
        super().__init__(message)
        self.tag = tag


class InvalidResourceGroupError(ResourceError, ValueError):
    """Resource group identifier cannot be mapped to a file layout.

    A group identifier needs an outer namespace segment followed by at
    least one resource segment (``Shared.Greeting``), with no empty
    segments.
    """

    def __init__(self, message: str | Diagnostic, *, group_id: str = "") -> None:
        super().__init__(message)
        self.group_id = group_id


class MissingResourceFileError(ResourceError, FileNotFoundError):
    """A located resource file cannot be read.

    Usually signals a packaging problem: the default ``<group>.txt`` file
    was not shipped, or a listed file disappeared before it was read.

    Attributes:
        file_name: Logical name of the missing file
    """

    def __init__(self, message: str | Diagnostic, *, file_name: str = "") -> None:
        super().__init__(message)
        self.file_name = file_name


class DuplicateKeyError(ResourceError, ValueError):
    """The same key appears twice in one resource file.

    Attributes:
        key: The duplicated key
        first_line: Line of the first definition (1-indexed)
        line: Line of the offending redefinition (1-indexed)
        source_name: File the text came from, if known
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str,
        first_line: int,
        line: int,
        source_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.first_line = first_line
        self.line = line
        self.source_name = source_name


class DuplicateLocaleError(ResourceError, ValueError):
    """Two files of one group resolve to the same locale (strict mode only).

    Attributes:
        locale_tag: Normalized tag both files resolve to
        file_name: The later file that collided
        existing_file_name: The file that already claimed the locale
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_tag: str,
        file_name: str,
        existing_file_name: str,
    ) -> None:
        super().__init__(message)
        self.locale_tag = locale_tag
        self.file_name = file_name
        self.existing_file_name = existing_file_name
