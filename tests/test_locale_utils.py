"""Tests for locale_utils.py: identifier normalization and prefix extraction.

Python 3.13+.
"""

import string

from babel import Locale
from hypothesis import event, given
from hypothesis import strategies as st

from schemalocale.locale_utils import get_babel_locale, language_prefix, normalize_locale


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphen separator converted to Babel's underscore."""
        assert normalize_locale("zh-CN") == "zh_CN"

    def test_case_preserved(self) -> None:
        """Identifiers are case-sensitive and keep their case."""
        assert normalize_locale("zh-TW") == "zh_TW"

    def test_simple_locale(self) -> None:
        """Simple locale without region unchanged."""
        assert normalize_locale("en") == "en"

    @given(st.text(alphabet=string.ascii_letters + "-_", max_size=12))
    def test_no_hyphens_remain(self, locale: str) -> None:
        """PROPERTY: Output never contains a hyphen."""
        event(f"has_hyphen={'-' in locale}")
        assert "-" not in normalize_locale(locale)


class TestLanguagePrefix:
    """Test language_prefix function."""

    def test_region_subtag(self) -> None:
        """Two-letter language with region yields the language."""
        assert language_prefix("de-AT") == "de"

    def test_bare_language_has_no_prefix(self) -> None:
        """Identifier without separator has no prefix."""
        assert language_prefix("de") is None

    def test_underscore_separator_not_recognized(self) -> None:
        """Only a hyphen at position two counts."""
        assert language_prefix("de_AT") is None

    def test_three_letter_language_not_recognized(self) -> None:
        """Three-letter languages have no two-letter prefix."""
        assert language_prefix("haw-US") is None

    def test_trailing_hyphen(self) -> None:
        """A hyphen at position two is enough."""
        assert language_prefix("xx-") == "xx"

    def test_empty(self) -> None:
        """Empty identifier has no prefix."""
        assert language_prefix("") is None

    @given(st.text(max_size=10))
    def test_prefix_is_first_two_characters(self, locale: str) -> None:
        """PROPERTY: A prefix, when present, is the first two characters."""
        prefix = language_prefix(locale)
        event(f"has_prefix={prefix is not None}")
        if prefix is not None:
            assert locale.startswith(prefix + "-")
            assert len(prefix) == 2


class TestGetBabelLocale:
    """Test get_babel_locale caching wrapper."""

    def test_bcp47_accepted(self) -> None:
        """BCP-47 identifiers are parsed after normalization."""
        locale = get_babel_locale("zh-CN")
        assert isinstance(locale, Locale)
        assert locale.language == "zh"
        assert locale.territory == "CN"

    def test_cached(self) -> None:
        """Repeated lookups return the same object."""
        assert get_babel_locale("ru") is get_babel_locale("ru")
