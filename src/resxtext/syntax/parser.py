"""Property-text parser for ResGen-style ``key=value`` resource files.

Line rules, applied in order:
    1. Empty lines are skipped.
    2. Lines starting with ``;``, ``#`` or ``'`` are comments.
    3. Lines without ``=`` are skipped.
    4. The line splits on the first ``=``; key and value are stripped.
    5. A value wrapped in one matching pair of ``"`` or ``'`` is unwrapped.
    6. The literal text ``\\r\\n`` inside a value becomes a line break.

Lines are separated by ``\\n`` or ``\\r\\n``. A lone ``\\r`` is content.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from resxtext.constants import (
    BYTE_ORDER_MARK,
    COMMENT_PREFIXES,
    KEY_VALUE_SEPARATOR,
    LEGACY_LINE_BREAK_ESCAPE,
    LINE_BREAK,
    QUOTE_CHARS,
)
from resxtext.diagnostics import Diagnostic, DiagnosticCode, DuplicateKeyError

__all__ = [
    "PropertyEntry",
    "ResourceMapping",
    "iter_entries",
    "parse_properties",
]

logger = logging.getLogger(__name__)

ResourceMapping: TypeAlias = Mapping[str, str]
"""Read-only key -> localized string mapping parsed from one file."""

_LINE_SEPARATOR = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class PropertyEntry:
    """One ``key=value`` line after trimming and unquoting.

    Attributes:
        key: Trimmed text left of the first ``=``
        value: Trimmed, unquoted, escape-expanded text right of it
        line: 1-indexed line number in the source text
    """

    key: str
    value: str
    line: int


def _unwrap_value(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        value = value[1:-1]
    return value.replace(LEGACY_LINE_BREAK_ESCAPE, LINE_BREAK)


def iter_entries(text: str) -> Iterator[PropertyEntry]:
    """Yield the key/value entries of ``text`` in file order.

    Comments, empty lines and lines without ``=`` produce nothing.
    Duplicate keys are yielded as-is; ``parse_properties`` rejects them.
    """
    text = text.removeprefix(BYTE_ORDER_MARK)
    for line_number, line in enumerate(_LINE_SEPARATOR.split(text), start=1):
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if KEY_VALUE_SEPARATOR not in line:
            continue
        raw_key, _, raw_value = line.partition(KEY_VALUE_SEPARATOR)
        yield PropertyEntry(
            key=raw_key.strip(),
            value=_unwrap_value(raw_value.strip()),
            line=line_number,
        )


def parse_properties(text: str, *, source_name: str | None = None) -> ResourceMapping:
    """Parse property text into a read-only key/value mapping.

    Args:
        text: Raw file content
        source_name: File the text came from, used in diagnostics

    Returns:
        Read-only mapping from key to value

    Raises:
        DuplicateKeyError: If a key is defined twice

    Example:
        >>> mapping = parse_properties('Hello=Hi\\nMsg="a\\\\r\\\\nb"')
        >>> mapping["Hello"], mapping["Msg"]
        ('Hi', 'a\\nb')
    """
    values: dict[str, str] = {}
    first_lines: dict[str, int] = {}

    for entry in iter_entries(text):
        if entry.key in values:
            first_line = first_lines[entry.key]
            diagnostic = Diagnostic(
                code=DiagnosticCode.DUPLICATE_KEY,
                message=f"Duplicate key {entry.key!r} (first defined on line {first_line})",
                file_name=source_name,
                line=entry.line,
                hint="Remove or rename one of the entries",
            )
            raise DuplicateKeyError(
                diagnostic,
                key=entry.key,
                first_line=first_line,
                line=entry.line,
                source_name=source_name,
            )
        values[entry.key] = entry.value
        first_lines[entry.key] = entry.line

    logger.debug("Parsed %s: %d entries", source_name or "<string>", len(values))
    return MappingProxyType(values)
