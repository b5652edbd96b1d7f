"""Russian messages.

Unit words agree with the bound: "1 символ", "3 символа", "5 символов".
The CLDR plural category of the integer part of the bound selects the form,
so 21 takes the "one" form and 11..14 take "many".

Python 3.13+. Depends on Babel for CLDR plural rules.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo
from schemalocale.runtime.plural_rules import select_plural_category

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = [
    "CATALOG",
    "FORMATTER",
    "RussianFormatter",
    "config_ru",
    "format_message_ru",
]


def _counted(one: str, few: str, many: str) -> SizingInfo:
    return SizingInfo(many, "иметь", plural_units={"one": one, "few": few, "many": many})


SIZABLE = {
    "string": _counted("символ", "символа", "символов"),
    "file": _counted("байт", "байта", "байт"),
    "array": _counted("элемент", "элемента", "элементов"),
    "slice": _counted("элемент", "элемента", "элементов"),
    "set": _counted("элемент", "элемента", "элементов"),
    "map": _counted("запись", "записи", "записей"),
}

FORMAT_NOUNS = {
    "regex": "ввод",
    "email": "email адрес",
    "url": "URL",
    "emoji": "эмодзи",
    "uuid": "UUID",
    "uuidv4": "UUIDv4",
    "uuidv6": "UUIDv6",
    "nanoid": "nanoid",
    "guid": "GUID",
    "cuid": "cuid",
    "cuid2": "cuid2",
    "ulid": "ULID",
    "xid": "XID",
    "ksuid": "KSUID",
    "datetime": "ISO дата и время",
    "date": "ISO дата",
    "time": "ISO время",
    "duration": "ISO длительность",
    "ipv4": "IPv4 адрес",
    "ipv6": "IPv6 адрес",
    "mac": "MAC адрес",
    "cidrv4": "IPv4 диапазон",
    "cidrv6": "IPv6 диапазон",
    "base64": "строка в формате base64",
    "base64url": "строка в формате base64url",
    "json_string": "JSON строка",
    "e164": "номер E.164",
    "jwt": "JWT",
    "template_literal": "ввод",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "число",
    "array": "массив",
    "slice": "массив",
    "string": "строка",
    "bool": "логическое значение",
    "object": "объект",
    "map": "карта",
    "nil": "null",
    "undefined": "undefined",
    "function": "функция",
    "date": "дата",
    "file": "файл",
    "set": "множество",
}

CATALOG = MessageCatalog(
    invalid_type="Неверный ввод: ожидалось {expected}, получено {received}",
    invalid_value_empty="Неверное значение",
    invalid_value_single="Неверный ввод: ожидалось {value}",
    invalid_value_multiple="Неверный вариант: ожидалось одно из {values}",
    value_separator="|",
    invalid_format_empty="Неверный формат",
    not_multiple_of_empty="Неверное число: должно быть кратным",
    not_multiple_of="Неверное число: должно быть кратным {divisor}",
    unrecognized_keys_empty="Нераспознанный ключ",
    key_separator=", ",
    unrecognized_key="Нераспознанный ключ: {keys}",
    unrecognized_keys="Нераспознанные ключи: {keys}",
    invalid_key_empty="Неверный ключ",
    invalid_key="Неверный ключ в {origin}",
    invalid_union="Неверные входные данные",
    invalid_element_empty="Неверный элемент",
    invalid_element="Неверное значение в {origin}",
    default_field_type="поле",
    missing_required="Отсутствует обязательное {field_type}",
    missing_required_named="Отсутствует обязательное {field_type}: {field_name}",
    unknown_type="неизвестный",
    type_conversion="Ошибка преобразования типа: невозможно преобразовать {from_type} в {to_type}",
    invalid_schema="Неверная схема: {reason}",
    invalid_schema_empty="Неверное определение схемы",
    default_discriminator="дискриминатор",
    invalid_discriminator="Неверное или отсутствующее поле дискриминатора: {field}",
    default_conflict_type="значения",
    incompatible_types="Невозможно объединить {conflict_type}: несовместимые типы",
    nil_pointer="Обнаружен нулевой указатель",
    default_origin="значение",
    too_small="Слишком маленькое значение",
    too_big="Слишком большое значение",
    too_small_sized="Слишком маленькое значение: ожидалось, что {origin} будет иметь {adj}{threshold} {unit}",
    too_big_sized="Слишком большое значение: ожидалось, что {origin} будет иметь {adj}{threshold} {unit}",
    too_small_unsized="Слишком маленькое значение: ожидалось, что {origin} будет {adj}{threshold}",
    too_big_unsized="Слишком большое значение: ожидалось, что {origin} будет {adj}{threshold}",
    starts_with_empty="Неверная строка: должна начинаться с указанного префикса",
    starts_with='Неверная строка: должна начинаться с "{operand}"',
    ends_with_empty="Неверная строка: должна заканчиваться указанным суффиксом",
    ends_with='Неверная строка: должна заканчиваться на "{operand}"',
    includes_empty="Неверная строка: должна содержать указанную подстроку",
    includes='Неверная строка: должна содержать "{operand}"',
    regex_empty="Неверная строка: должна соответствовать шаблону",
    regex="Неверная строка: должна соответствовать шаблону {operand}",
    invalid_format_noun="Неверный {noun}",
    invalid_input="Неверные входные данные",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)


def _plural_count(threshold: Any) -> int:
    """Integer used for plural agreement. Non-numeric bounds count as 0."""
    match threshold:
        case bool():
            return 0
        case int():
            return threshold
        case float() if math.isfinite(threshold):
            return int(threshold)
        case Decimal() if threshold.is_finite():
            if threshold.as_tuple().exponent > 0:
                # Trailing zeros: same category as 0
                return 0
            return int(threshold)
        case _:
            return 0


class RussianFormatter(IssueFormatter):
    """Russian formatter with count-agreeing unit words."""

    __slots__ = ()

    def unit_for(self, sizing: SizingInfo, threshold: Any) -> str:
        if sizing.plural_units is None:
            return sizing.unit
        category = select_plural_category(abs(_plural_count(threshold)), "ru")
        return sizing.plural_units.get(category, sizing.unit)


FORMATTER = RussianFormatter(CATALOG, "ru")


def format_message_ru(issue: Issue) -> str:
    """Render an issue in Russian."""
    return FORMATTER(issue)


def config_ru() -> LocaleConfig:
    """Configuration installing the Russian formatter."""
    return LocaleConfig(FORMATTER, "ru")
