"""Tests for the non-English locale formatters.

Tests verify:
- Reference scenarios for Chinese, Japanese and Russian
- Count agreement of Russian unit words
- Gender and definiteness in Hebrew and Bulgarian
- Dutch size adjectives and Finnish genitive subjects
- Per-locale origin translation (Spanish) and comparison words (Korean)
- Every locale module exposes a working config factory and format function
"""

from decimal import Decimal

import pytest

from schemalocale import Issue, LocaleConfig
from schemalocale import locales as locale_modules
from schemalocale.constants import BUILTIN_LOCALES
from schemalocale.formatting import IssueFormatter
from schemalocale.locales import (
    BUILTIN_FORMATTERS,
    format_message_bg,
    format_message_de,
    format_message_es,
    format_message_fi,
    format_message_he,
    format_message_ja,
    format_message_ko,
    format_message_nl,
    format_message_ru,
    format_message_zh_cn,
    format_message_zh_tw,
)

# ============================================================================
# Chinese / Japanese
# ============================================================================


class TestChinese:
    """Test Simplified and Traditional Chinese."""

    def test_invalid_type_translates_received_only(self) -> None:
        """Expected stays as given; received is translated."""
        issue = Issue("invalid_type", 123, {"expected": "string"})
        assert format_message_zh_cn(issue) == "无效输入：期望 string，实际接收 数字"

    def test_too_small_string(self) -> None:
        """Sized origin with character unit."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 5, "inclusive": True})
        assert format_message_zh_cn(issue) == "数值过小：期望 string >=5 字符"

    def test_nil_received(self) -> None:
        """nil has a descriptive translation."""
        issue = Issue("invalid_type", None, {"expected": "number"})
        assert format_message_zh_cn(issue) == "无效输入：期望 number，实际接收 空值(nil)"

    def test_full_taxonomy(self) -> None:
        """Codes beyond the legacy table are rendered in Chinese."""
        assert format_message_zh_cn(Issue("nil_pointer")) == "检测到空指针"
        assert format_message_zh_cn(Issue("invalid_schema")) == "无效的模式定义"

    def test_traditional(self) -> None:
        """zh-TW has its own catalog."""
        assert format_message_zh_tw(Issue("nil_pointer")) == "偵測到空指標"

    def test_bare_zh_is_simplified(self) -> None:
        """The bare language id maps to Simplified Chinese."""
        issue = Issue("nil_pointer")
        assert BUILTIN_FORMATTERS["zh"](issue) == format_message_zh_cn(issue)


class TestJapanese:
    """Test Japanese comparison words."""

    def test_too_small_string(self) -> None:
        """Bound precedes the unit and the comparison word."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 5, "inclusive": True})
        assert format_message_ja(issue) == "小さすぎる値: stringは5文字以上である必要があります"

    def test_exclusive_upper_bound(self) -> None:
        """Strict bounds use their own wording."""
        issue = Issue("too_big", properties={"origin": "array", "maximum": 3, "inclusive": False})
        assert format_message_ja(issue) == "大きすぎる値: arrayは3要素より小さい必要があります"


# ============================================================================
# Russian
# ============================================================================


def _russian_too_small(minimum: object, origin: str = "array") -> str:
    issue = Issue("too_small", properties={"origin": origin, "minimum": minimum, "inclusive": True})
    return format_message_ru(issue)


class TestRussian:
    """Test count agreement of unit words."""

    def test_full_sentence(self) -> None:
        """Complete sentence for the singular form."""
        assert _russian_too_small(1) == (
            "Слишком маленькое значение: ожидалось, что array будет иметь >=1 элемент"
        )

    @pytest.mark.parametrize(
        ("minimum", "unit"),
        [
            (1, "элемент"),
            (3, "элемента"),
            (5, "элементов"),
            (11, "элементов"),
            (21, "элемент"),
            (22, "элемента"),
            (112, "элементов"),
        ],
    )
    def test_plural_forms(self, minimum: int, unit: str) -> None:
        """one / few / many forms follow the CLDR category."""
        assert _russian_too_small(minimum).endswith(f">={minimum} {unit}")

    def test_string_units(self) -> None:
        """Character unit agrees with the bound too."""
        assert _russian_too_small(2, "string").endswith(">=2 символа")

    def test_integer_part_of_float(self) -> None:
        """Non-integral bounds use the integer part."""
        assert _russian_too_small(2.5).endswith(">=2.5 элемента")

    def test_decimal_bound(self) -> None:
        """Decimal bounds are counted like ints."""
        assert _russian_too_small(Decimal("1")).endswith(">=1 элемент")

    def test_unsized_origin(self) -> None:
        """Numbers have no unit."""
        issue = Issue("too_big", properties={"origin": "number", "maximum": 10})
        assert format_message_ru(issue) == (
            "Слишком большое значение: ожидалось, что number будет <=10"
        )


# ============================================================================
# Hebrew
# ============================================================================


class TestHebrew:
    """Test definiteness, gender and origin-specific sentences."""

    def test_string_too_small(self) -> None:
        """Feminine string subject with inclusive bound."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 3})
        assert format_message_he(issue) == "קצר מדי: המחרוזת צריכה להכיל 3 תווים או יותר"

    def test_string_too_big_exclusive(self) -> None:
        """Exclusive upper bound on strings."""
        issue = Issue("too_big", properties={"origin": "string", "maximum": 8, "inclusive": False})
        assert format_message_he(issue) == "ארוך מדי: המחרוזת צריכה להכיל לכל היותר 8 תווים"

    def test_number_exclusive(self) -> None:
        """Numbers compare with words, not units."""
        issue = Issue("too_big", properties={"origin": "number", "maximum": 10, "inclusive": False})
        assert format_message_he(issue) == "גדול מדי: המספר צריך להיות קטן מ-10"

    def test_array_too_small(self) -> None:
        """Masculine collection subject."""
        issue = Issue("too_small", properties={"origin": "array", "minimum": 2})
        assert format_message_he(issue) == "קטן מדי: המערך צריך להכיל 2 פריטים או יותר"

    def test_set_uses_feminine_verb(self) -> None:
        """Sets are feminine."""
        issue = Issue("too_big", properties={"origin": "set", "maximum": 4})
        assert format_message_he(issue) == "גדול מדי: הקבוצה (Set) צריכה להכיל 4 פריטים או פחות"

    def test_file_generic_shape(self) -> None:
        """Other sized origins use the catalog template."""
        issue = Issue("too_small", properties={"origin": "file", "minimum": 10})
        assert format_message_he(issue) == "קטן מדי: הקובץ צריך להיות >=10 בייטים"

    def test_invalid_format_gender(self) -> None:
        """Adjective agrees with the format noun."""
        assert format_message_he(Issue("invalid_format", properties={"format": "email"})) == (
            "כתובת אימייל לא תקינה"
        )
        assert format_message_he(Issue("invalid_format", properties={"format": "uuid"})) == (
            "UUID לא תקין"
        )

    def test_unknown_format_tag(self) -> None:
        """Unknown tags are named literally."""
        assert format_message_he(Issue("invalid_format", properties={"format": "zip"})) == (
            "zip לא תקין"
        )

    def test_two_options(self) -> None:
        """Exactly two options use the pair template."""
        issue = Issue("invalid_value", properties={"values": ["a", "b"]})
        assert format_message_he(issue) == 'ערך לא תקין: האפשרויות המתאימות הן "a" או "b"'

    def test_element_definite_origin(self) -> None:
        """Element issues name the collection with the article."""
        issue = Issue("invalid_element", properties={"origin": "array"})
        assert format_message_he(issue) == "ערך לא תקין בהמערך"


# ============================================================================
# Bulgarian / Dutch / Finnish
# ============================================================================


class TestBulgarian:
    """Test the gendered 'invalid' adjective."""

    @pytest.mark.parametrize(
        ("format_tag", "expected"),
        [
            ("email", "Невалиден имейл адрес"),
            ("date", "Невалидна ISO дата"),
            ("emoji", "Невалидно емоджи"),
            ("custom_tag", "Невалиден custom_tag"),
        ],
    )
    def test_adjective_agreement(self, format_tag: str, expected: str) -> None:
        """Masculine default, neuter and feminine exceptions."""
        assert format_message_bg(Issue("invalid_format", properties={"format": format_tag})) == (
            expected
        )


class TestDutch:
    """Test size adjectives chosen by origin."""

    def test_string_short(self) -> None:
        """Strings are 'kort' or 'lang'."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 3})
        assert format_message_nl(issue) == "Te kort: verwacht dat string >=3 tekens heeft"

    def test_date_late(self) -> None:
        """Dates are 'vroeg' or 'laat'."""
        issue = Issue("too_big", properties={"origin": "date", "maximum": "2024-01-01"})
        assert format_message_nl(issue) == "Te laat: verwacht dat date <=2024-01-01 is"

    def test_default_big(self) -> None:
        """Everything else is 'klein' or 'groot'."""
        issue = Issue("too_big", properties={"origin": "number", "maximum": 5})
        assert format_message_nl(issue) == "Te groot: verwacht dat number <=5 is"

    def test_headline_only(self) -> None:
        """Without a bound the adjective still agrees."""
        assert format_message_nl(Issue("too_small", properties={"origin": "string"})) == "Te kort"


class TestFinnish:
    """Test genitive subjects."""

    def test_string_subject(self) -> None:
        """Sized origins use their genitive subject and unit."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 3})
        assert format_message_fi(issue) == "Liian pieni: merkkijonon täytyy olla >=3 merkkiä"

    def test_number_subject(self) -> None:
        """Numbers have a subject but no unit."""
        issue = Issue("too_big", properties={"origin": "number", "maximum": 9})
        assert format_message_fi(issue) == "Liian suuri: luvun täytyy olla <=9"

    def test_unknown_origin_subject(self) -> None:
        """Origins without an entry read as 'arvon'."""
        issue = Issue("too_small", properties={"origin": "weird", "minimum": 1})
        assert format_message_fi(issue) == "Liian pieni: arvon täytyy olla >=1"


# ============================================================================
# Spanish / Korean / German
# ============================================================================


class TestOriginTranslation:
    """Test per-locale origin and comparison handling."""

    def test_spanish_translates_origin(self) -> None:
        """Spanish interpolates the translated origin."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 5})
        assert format_message_es(issue) == (
            "Demasiado pequeño: se esperaba que texto tuviera >=5 caracteres"
        )

    def test_spanish_translates_types(self) -> None:
        """Expected and received labels are translated."""
        issue = Issue("invalid_type", 1, {"expected": "string"})
        assert format_message_es(issue) == "Entrada inválida: se esperaba texto, recibido número"

    def test_korean_comparison_words(self) -> None:
        """Korean places a comparison phrase after the bound."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 5})
        assert format_message_ko(issue) == "string이(가) 너무 작습니다: 5문자 이상이어야 합니다"

    def test_german_keeps_origin(self) -> None:
        """German interpolates the origin as given."""
        issue = Issue("too_small", properties={"origin": "string", "minimum": 5})
        assert format_message_de(issue) == "Zu klein: erwartet, dass string >=5 Zeichen hat"


# ============================================================================
# Module surface
# ============================================================================


class TestLocaleModules:
    """Test the per-locale config factories and format functions."""

    def test_builtin_ids(self) -> None:
        """Every built-in id has a formatter."""
        assert set(BUILTIN_FORMATTERS) == set(BUILTIN_LOCALES)

    @pytest.mark.parametrize("locale", sorted(set(BUILTIN_LOCALES) - {"zh"}))
    def test_config_factory(self, locale: str) -> None:
        """config_<lang>() carries the built-in formatter for its id."""
        factory = getattr(locale_modules, "config_" + locale.lower().replace("-", "_"))
        config = factory()
        assert isinstance(config, LocaleConfig)
        assert config.locale == locale
        assert config.locale_error is BUILTIN_FORMATTERS[locale]

    @pytest.mark.parametrize("locale", sorted(set(BUILTIN_LOCALES) - {"zh"}))
    def test_format_function(self, locale: str) -> None:
        """format_message_<lang> agrees with the registered formatter."""
        func = getattr(locale_modules, "format_message_" + locale.lower().replace("-", "_"))
        issue = Issue("nil_pointer")
        assert func(issue) == BUILTIN_FORMATTERS[locale](issue)

    @pytest.mark.parametrize("locale", sorted(set(BUILTIN_LOCALES)))
    def test_formatter_repr(self, locale: str) -> None:
        """Formatters are IssueFormatter instances that name their locale."""
        formatter = BUILTIN_FORMATTERS[locale]
        assert isinstance(formatter, IssueFormatter)
        assert formatter.locale in repr(formatter)
