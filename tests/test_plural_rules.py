"""Tests for plural_rules.py - CLDR plural category selection using Babel.

The Russian formatter picks unit word forms through these categories, so the
Slavic rules are covered in depth. The CLDR rule for integers in ``ru``:

    one:  n % 10 == 1 and n % 100 != 11
    few:  n % 10 in 2..4 and n % 100 not in 12..14
    many: everything else

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from schemalocale.runtime.plural_rules import select_plural_category

# ============================================================================
# Reference rule
# ============================================================================


def _russian_reference(n: int) -> str:
    """Last-two-digits rule for Russian integers."""
    last, last_two = n % 10, n % 100
    if last == 1 and last_two != 11:
        return "one"
    if 2 <= last <= 4 and not 12 <= last_two <= 14:
        return "few"
    return "many"


# ============================================================================
# Russian
# ============================================================================


class TestRussianPluralRules:
    """Test Russian categories used for unit agreement."""

    def test_one(self) -> None:
        """1, 21 and 101 take the singular form."""
        for n in (1, 21, 101):
            assert select_plural_category(n, "ru") == "one"

    def test_few(self) -> None:
        """2..4 and 22..24 take the paucal form."""
        for n in (2, 3, 4, 22, 24):
            assert select_plural_category(n, "ru") == "few"

    def test_many(self) -> None:
        """0, 5..20 and 11..14 take the genitive plural form."""
        for n in (0, 5, 11, 12, 14, 20, 111):
            assert select_plural_category(n, "ru") == "many"

    @given(st.integers(min_value=0, max_value=10**9))
    def test_matches_last_two_digits_rule(self, n: int) -> None:
        """PROPERTY: Babel's CLDR data agrees with the last-two-digits rule."""
        category = select_plural_category(n, "ru")
        event(f"ru_category={category}")
        assert category == _russian_reference(n)


# ============================================================================
# Fallback
# ============================================================================


class TestPluralRuleFallback:
    """Test behavior for identifiers Babel does not know."""

    def test_unknown_locale_one(self) -> None:
        """Unknown locale falls back to a one/other rule."""
        assert select_plural_category(1, "xx") == "one"

    def test_unknown_locale_other(self) -> None:
        """Unknown locale falls back to a one/other rule."""
        assert select_plural_category(7, "xx") == "other"

    def test_bcp47_identifier_accepted(self) -> None:
        """Hyphenated identifiers are normalized before lookup."""
        assert select_plural_category(1, "en-US") == "one"
        assert select_plural_category(2, "en-US") == "other"
