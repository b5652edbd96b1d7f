"""Hypothesis strategies for schemalocale property-based testing.

Strategies are organized by domain:

- issues: issue codes, property bags, issues and locale identifiers

Usage:
    from tests.strategies import issues, locale_ids
    from tests.strategies.issues import property_bags, unknown_format_tags
"""

from .issues import (
    PROPERTY_KEYS,
    any_values,
    issue_codes,
    issues,
    locale_ids,
    numbers,
    primitives,
    property_bags,
    unknown_format_tags,
)

__all__ = [
    "PROPERTY_KEYS",
    "any_values",
    "issue_codes",
    "issues",
    "locale_ids",
    "numbers",
    "primitives",
    "property_bags",
    "unknown_format_tags",
]
