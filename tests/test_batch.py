"""Tests for the batch helpers.

Tests verify:
- format_many preserves order and length and resolves the locale once
- join_messages separators and the empty case
- partition_locales uses exact membership
- dedupe_locales keeps first occurrences
- Helpers honor an injected registry
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from schemalocale import (
    Issue,
    LocaleRegistry,
    dedupe_locales,
    format_many,
    join_messages,
    partition_locales,
)
from schemalocale.locales import format_message_en
from tests.strategies import issues


def _upper(issue: Issue) -> str:
    return str(issue.code).upper()


class TestFormatMany:
    """Test format_many."""

    def test_english(self) -> None:
        """Messages come back in input order."""
        batch = [Issue("invalid_union"), Issue("nil_pointer")]
        assert format_many(batch, "en") == [
            "Invalid input: no union member matched",
            "Nil pointer encountered",
        ]

    def test_empty(self) -> None:
        """No issues, no messages."""
        assert format_many([], "de") == []

    def test_generator_input(self) -> None:
        """Any iterable of issues is accepted."""
        messages = format_many((Issue("nil_pointer") for _ in range(3)), "fr-CA")
        assert messages == ["Pointeur nul rencontré"] * 3

    def test_injected_registry(self) -> None:
        """The given registry is used instead of the default one."""
        registry = LocaleRegistry({"en": format_message_en, "up": _upper})
        assert format_many([Issue("custom")], "up", registry=registry) == ["CUSTOM"]

    @given(st.lists(issues(), max_size=6))
    @settings(deadline=None)
    def test_order_and_length(self, batch: list[Issue]) -> None:
        """PROPERTY: One message per issue, in order."""
        messages = format_many(batch, "en")
        assert messages == [format_message_en(issue) for issue in batch]


class TestJoinMessages:
    """Test join_messages."""

    def test_default_separator(self) -> None:
        """Messages are joined with '; '."""
        batch = [Issue("invalid_union"), Issue("nil_pointer")]
        assert join_messages(batch, "en") == (
            "Invalid input: no union member matched; Nil pointer encountered"
        )

    def test_custom_separator(self) -> None:
        """Separator is configurable."""
        batch = [Issue("nil_pointer"), Issue("nil_pointer")]
        assert join_messages(batch, "de", "\n") == "Null-Zeiger erkannt\nNull-Zeiger erkannt"

    def test_empty(self) -> None:
        """No issues join to an empty string."""
        assert join_messages([], "en") == ""


class TestPartitionLocales:
    """Test partition_locales."""

    def test_exact_membership(self) -> None:
        """Prefix-resolvable ids are still unknown."""
        known, unknown = partition_locales(["de", "de-AT", "zh-CN", "xx", "en"])
        assert known == ["de", "zh-CN", "en"]
        assert unknown == ["de-AT", "xx"]

    def test_non_strings_unknown(self) -> None:
        """Non-string entries land in unknown."""
        known, unknown = partition_locales(["en", None, 3])
        assert known == ["en"]
        assert unknown == [None, 3]

    def test_injected_registry(self) -> None:
        """Membership is checked against the given registry."""
        registry = LocaleRegistry({"en": format_message_en})
        known, unknown = partition_locales(["en", "de"], registry=registry)
        assert known == ["en"]
        assert unknown == ["de"]


class TestDedupeLocales:
    """Test dedupe_locales."""

    def test_first_occurrence_kept(self) -> None:
        """Later duplicates are dropped."""
        assert dedupe_locales(["de", "en", "de", "fr", "en"]) == ["de", "en", "fr"]

    def test_case_sensitive(self) -> None:
        """Identifiers differing in case are distinct."""
        assert dedupe_locales(["de", "DE"]) == ["de", "DE"]

    @given(st.lists(st.sampled_from(["en", "de", "fr", "zh-CN", "xx"]), max_size=12))
    def test_idempotent(self, locales: list[str]) -> None:
        """PROPERTY: Deduplicating twice changes nothing."""
        once = dedupe_locales(locales)
        assert dedupe_locales(once) == once
        assert len(once) <= len(locales)
        assert set(once) == set(locales)
