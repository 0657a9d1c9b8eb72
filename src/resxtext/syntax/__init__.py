"""Property-text syntax layer.

Exports:
    parse_properties: Raw text -> read-only key/value mapping
    iter_entries: Raw text -> PropertyEntry records in file order
    PropertyEntry: One parsed key/value line
    ResourceMapping: Type alias for parsed mappings

Python 3.13+.
"""

from .parser import PropertyEntry, ResourceMapping, iter_entries, parse_properties

__all__ = ["PropertyEntry", "ResourceMapping", "iter_entries", "parse_properties"]
