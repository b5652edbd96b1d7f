"""CLDR plural categories for unit agreement.

Locales whose unit words inflect by count (Russian "элемент / элемента /
элементов") ask Babel for the CLDR category of the bound and pick the word
form stored under that category.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from schemalocale.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(count: int | float | Decimal, locale: str) -> str:
    """Return the CLDR plural category of ``count`` in ``locale``.

    Identifiers Babel does not know use a plain one/other rule.

    Returns:
        One of "zero", "one", "two", "few", "many", "other".

    Examples:
        >>> select_plural_category(1, "ru")
        'one'
        >>> select_plural_category(3, "ru")
        'few'
        >>> select_plural_category(11, "ru")
        'many'
    """
    try:
        babel_locale = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return "one" if abs(count) == 1 else "other"
    return babel_locale.plural_form(count)
