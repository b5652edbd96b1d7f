"""Quickstart Example - Rendering validation issues in several languages.

Demonstrates:
1. Rendering one issue in several locales
2. Locale fallback ("de-AT" -> "de", unknown -> "en")
3. Nested element issues and batch helpers
4. Registering a custom locale on an isolated registry

Python 3.13+.
"""

from __future__ import annotations

from schemalocale import (
    Issue,
    IssueCode,
    LocaleRegistry,
    get_localized_error,
    join_messages,
    partition_locales,
)
from schemalocale.locales import config_ru


def example_1_many_languages() -> None:
    """Example 1: The same issue in several locales."""
    print("=" * 60)
    print("Example 1: One Issue, Many Languages")
    print("=" * 60)

    issue = Issue(
        IssueCode.TOO_SMALL,
        "hi",
        {"origin": "string", "minimum": 5, "inclusive": True},
    )
    for locale in ("en", "de", "fr", "ja", "zh-CN", "he"):
        print(f"  {locale:6} {get_localized_error(issue, locale)}")


def example_2_fallback() -> None:
    """Example 2: Regional and unknown identifiers."""
    print("\n" + "=" * 60)
    print("Example 2: Locale Fallback")
    print("=" * 60)

    issue = Issue(IssueCode.INVALID_FORMAT, properties={"format": "email"})
    for locale in ("de-AT", "pt-BR", "xx-YY"):
        print(f"  {locale:6} {get_localized_error(issue, locale)}")

    known, unknown = partition_locales(["de", "de-AT", "xx"])
    print(f"\n  registered: {known}, not registered: {unknown}")


def example_3_batches() -> None:
    """Example 3: Element issues and joined batches."""
    print("\n" + "=" * 60)
    print("Example 3: Batches")
    print("=" * 60)

    element = Issue(
        IssueCode.INVALID_ELEMENT,
        properties={
            "origin": "array",
            "index": 2,
            "element_error": Issue(IssueCode.INVALID_TYPE, None, {"expected": "string"}),
        },
    )
    issues = [
        element,
        Issue(IssueCode.UNRECOGNIZED_KEYS, properties={"keys": ["debug", "trace"]}),
        Issue(IssueCode.CUSTOM, message="Password must contain a digit"),
    ]
    print(join_messages(issues, "en", "\n"))

    print("\nRussian count agreement:")
    config = config_ru()
    for minimum in (1, 3, 5):
        issue = Issue(IssueCode.TOO_SMALL, properties={"origin": "array", "minimum": minimum})
        print(f"  {config.format(issue)}")


def example_4_custom_locale() -> None:
    """Example 4: Add a locale without touching the process-wide registry."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Locale")
    print("=" * 60)

    def pirate(issue: Issue) -> str:
        return f"Arr, that be wrong ({issue.code})"

    registry = LocaleRegistry()
    registry.register("en-PIRATE", pirate)
    print(f"  {registry.format(Issue(IssueCode.NIL_POINTER), 'en-PIRATE')}")
    print(f"  {registry.format(Issue(IssueCode.NIL_POINTER), 'en-GB')}")


if __name__ == "__main__":
    example_1_many_languages()
    example_2_fallback()
    example_3_batches()
    example_4_custom_locale()
