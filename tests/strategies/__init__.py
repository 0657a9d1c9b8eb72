"""Hypothesis strategies for resxtext property-based testing.

Strategies are organized by domain:

- properties: keys, values and whole property-text documents
- locales: locale tags in assorted spellings

Usage:
    from tests.strategies import property_documents, locale_tags
    from tests.strategies.properties import property_keys, property_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    - property_documents: emits doc_line_ending=lf|crlf|mixed
    - locale_tags: emits locale_tag_shape=language|region|script
"""

from .locales import LOCALE_POOL, locale_tags
from .properties import (
    COMMENT_LINES,
    property_documents,
    property_keys,
    property_values,
)

__all__ = [
    "COMMENT_LINES",
    "LOCALE_POOL",
    "locale_tags",
    "property_documents",
    "property_keys",
    "property_values",
]
