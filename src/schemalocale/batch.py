"""Batch helpers over the locale registry.

Each helper that needs locale resolution accepts an optional ``registry``;
the process-wide default registry is used when it is omitted.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.registry import get_default_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from schemalocale.issues import Issue
    from schemalocale.registry import LocaleRegistry
    from schemalocale.types import LocaleCode

__all__ = [
    "dedupe_locales",
    "format_many",
    "join_messages",
    "partition_locales",
]


def format_many(
    issues: Iterable[Issue],
    locale: LocaleCode,
    *,
    registry: LocaleRegistry | None = None,
) -> list[str]:
    """Render every issue in ``locale``, preserving order.

    The locale is resolved once for the whole batch.

    Example:
        >>> from schemalocale.issues import Issue
        >>> format_many([Issue("invalid_union"), Issue("nil_pointer")], "en")
        ['Invalid input: no union member matched', 'Nil pointer encountered']
    """
    formatter = (registry or get_default_registry()).resolve(locale)
    return [formatter(issue) for issue in issues]


def join_messages(
    issues: Iterable[Issue],
    locale: LocaleCode,
    separator: str = "; ",
    *,
    registry: LocaleRegistry | None = None,
) -> str:
    """Render issues in ``locale`` and join them with ``separator``.

    Returns an empty string when there are no issues.
    """
    return separator.join(format_many(issues, locale, registry=registry))


def partition_locales(
    locales: Iterable[object],
    *,
    registry: LocaleRegistry | None = None,
) -> tuple[list[LocaleCode], list[object]]:
    """Split candidate identifiers into registered and unknown lists.

    Membership is exact: "de-AT" is unknown even though it resolves to "de".
    Input order is kept within each list.

    Returns:
        Tuple of (known, unknown).
    """
    registry = registry or get_default_registry()
    known: list[LocaleCode] = []
    unknown: list[object] = []
    for locale in locales:
        if isinstance(locale, str) and registry.is_registered(locale):
            known.append(locale)
        else:
            unknown.append(locale)
    return known, unknown


def dedupe_locales(locales: Iterable[LocaleCode]) -> list[LocaleCode]:
    """Remove duplicate identifiers, keeping the first occurrence.

    Example:
        >>> dedupe_locales(["de", "en", "de", "fr", "en"])
        ['de', 'en', 'fr']
    """
    return list(dict.fromkeys(locales))
