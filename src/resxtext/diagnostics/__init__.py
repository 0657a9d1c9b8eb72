"""Diagnostic system for resxtext errors.

Provides structured error diagnostics with codes, file locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DuplicateKeyError,
    DuplicateLocaleError,
    InvalidLocaleTagError,
    InvalidResourceGroupError,
    MissingResourceFileError,
    ResourceError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DuplicateKeyError",
    "DuplicateLocaleError",
    "InvalidLocaleTagError",
    "InvalidResourceGroupError",
    "MissingResourceFileError",
    "ResourceError",
]
