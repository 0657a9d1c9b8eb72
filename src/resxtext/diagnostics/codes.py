"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages carried by the
resxtext exception hierarchy.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (tag syntax, CLDR lookup)
        2000-2999: Loading errors (group identifiers, files, locale collisions)
        3000-3999: Syntax errors (property-text parsing)
    """

    # Locale errors (1000-1999)
    INVALID_LOCALE_TAG = 1001
    UNKNOWN_LOCALE = 1002

    # Loading errors (2000-2999)
    INVALID_RESOURCE_GROUP = 2001
    MISSING_RESOURCE_FILE = 2002
    DUPLICATE_LOCALE = 2003

    # Syntax errors (3000-3999)
    DUPLICATE_KEY = 3001


def _escape_control_chars(text: str) -> str:
    """Escape line breaks and tabs so one diagnostic stays on one log line."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        file_name: Logical resource file name (None if not file-related)
        line: 1-indexed line number inside file_name (None if not applicable)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    file_name: str | None = None
    line: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[DUPLICATE_KEY]: Duplicate key 'Hello' (first defined on line 2)
              --> Resources.Greeting.txt:5
              = help: Remove or rename one of the entries

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape_control_chars(self.message)}"]
        if self.file_name is not None:
            location = _escape_control_chars(self.file_name)
            if self.line is not None:
                location = f"{location}:{self.line}"
            lines.append(f"  --> {location}")
        if self.hint:
            lines.append(f"  = help: {_escape_control_chars(self.hint)}")
        return "\n".join(lines)
