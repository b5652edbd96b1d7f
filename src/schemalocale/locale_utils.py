"""Locale identifier helpers.

Registry identifiers are BCP-47 style ("en", "zh-CN") and case-sensitive.
Babel expects POSIX style ("zh_CN"); conversion happens only at the Babel
boundary.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from schemalocale.constants import LOCALE_PREFIX_LENGTH

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "language_prefix",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("zh-CN")
        'zh_CN'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def language_prefix(locale_code: str) -> str | None:
    """Return the two-letter language prefix of a "xx-YY" identifier.

    Only identifiers whose third character is a hyphen have a prefix.
    Three-letter languages and underscore separators do not.

    Example:
        >>> language_prefix("de-AT")
        'de'
        >>> language_prefix("de") is None
        True
        >>> language_prefix("de_AT") is None
        True
    """
    if (
        len(locale_code) > LOCALE_PREFIX_LENGTH
        and locale_code[LOCALE_PREFIX_LENGTH] == "-"
    ):
        return locale_code[:LOCALE_PREFIX_LENGTH]
    return None


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Return the cached Babel Locale for a registry identifier.

    Only locales with count-inflected units reach Babel, so CLDR data is
    loaded on first use.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale.
        ValueError: If the identifier cannot be parsed.
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
