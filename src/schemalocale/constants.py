"""Centralized constants for schemalocale.

Locale defaults, canonical format tags and sizing origins shared by the
formatter skeleton, the registry and the tests.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "BUILTIN_LOCALES",
    "DEFAULT_LOCALE",
    "FORMAT_TAGS",
    "INT64_MAX",
    "INT64_MIN",
    "LOCALE_PREFIX_LENGTH",
    "SIZED_ORIGINS",
]

# ============================================================================
# LOCALE RESOLUTION
# ============================================================================

# Locale that is always registered and used as the final fallback.
DEFAULT_LOCALE: Final[str] = "en"

# Length of the language prefix tried for "xx-YY" identifiers.
LOCALE_PREFIX_LENGTH: Final[int] = 2

# Identifiers pre-registered in the default registry, in registration order.
BUILTIN_LOCALES: Final[tuple[str, ...]] = (
    "en",
    "zh-CN",
    "zh-TW",
    "zh",
    "de",
    "fr",
    "es",
    "it",
    "pt",
    "nl",
    "pl",
    "ru",
    "uk",
    "cs",
    "da",
    "sv",
    "tr",
    "hu",
    "fi",
    "no",
    "bg",
    "ja",
    "ko",
    "vi",
    "th",
    "id",
    "ms",
    "ta",
    "ar",
    "fa",
    "he",
    "ur",
)

# ============================================================================
# ISSUE VOCABULARY
# ============================================================================

# Format tags recognized by per-locale noun dictionaries.
FORMAT_TAGS: Final[frozenset[str]] = frozenset({
    "regex",
    "email",
    "url",
    "emoji",
    "uuid",
    "uuidv4",
    "uuidv6",
    "nanoid",
    "guid",
    "cuid",
    "cuid2",
    "ulid",
    "xid",
    "ksuid",
    "datetime",
    "date",
    "time",
    "duration",
    "ipv4",
    "ipv6",
    "mac",
    "cidrv4",
    "cidrv6",
    "base64",
    "base64url",
    "json_string",
    "e164",
    "jwt",
    "template_literal",
})

# Origins that carry a countable unit in at least one locale.
SIZED_ORIGINS: Final[frozenset[str]] = frozenset({
    "string", "file", "array", "slice", "set", "map", "object",
})

# Signed 64-bit bounds; integers outside them are labelled "bigint".
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
