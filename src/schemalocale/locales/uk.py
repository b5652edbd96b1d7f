"""Ukrainian messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_uk", "format_message_uk"]

SIZABLE = {
    "string": SizingInfo("символів", "матиме"),
    "file": SizingInfo("байтів", "матиме"),
    "array": SizingInfo("елементів", "матиме"),
    "slice": SizingInfo("елементів", "матиме"),
    "set": SizingInfo("елементів", "матиме"),
    "map": SizingInfo("записів", "матиме"),
}

FORMAT_NOUNS = {
    "regex": "вхідні дані",
    "email": "адреса електронної пошти",
    "url": "URL",
    "emoji": "емодзі",
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
    "datetime": "дата та час ISO",
    "date": "дата ISO",
    "time": "час ISO",
    "duration": "тривалість ISO",
    "ipv4": "адреса IPv4",
    "ipv6": "адреса IPv6",
    "mac": "адреса MAC",
    "cidrv4": "діапазон IPv4",
    "cidrv6": "діапазон IPv6",
    "base64": "рядок у кодуванні base64",
    "base64url": "рядок у кодуванні base64url",
    "json_string": "рядок JSON",
    "e164": "номер E.164",
    "jwt": "JWT",
    "template_literal": "вхідні дані",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "число",
    "array": "масив",
    "slice": "масив",
    "string": "рядок",
    "bool": "булеве значення",
    "object": "об'єкт",
    "map": "карта",
    "nil": "null",
    "undefined": "undefined",
    "function": "функція",
    "date": "дата",
    "file": "файл",
    "set": "множина",
}

CATALOG = MessageCatalog(
    invalid_type="Неправильні вхідні дані: очікується {expected}, отримано {received}",
    invalid_value_empty="Неправильне значення",
    invalid_value_single="Неправильні вхідні дані: очікується {value}",
    invalid_value_multiple="Неправильна опція: очікується одне з {values}",
    value_separator="|",
    invalid_format_empty="Неправильний формат",
    not_multiple_of_empty="Неправильне число: повинно бути кратним",
    not_multiple_of="Неправильне число: повинно бути кратним {divisor}",
    unrecognized_keys_empty="Нерозпізнаний ключ",
    key_separator=", ",
    unrecognized_key="Нерозпізнаний ключ: {keys}",
    unrecognized_keys="Нерозпізнані ключі: {keys}",
    invalid_key_empty="Неправильний ключ",
    invalid_key="Неправильний ключ у {origin}",
    invalid_union="Неправильні вхідні дані",
    invalid_element_empty="Неправильний елемент",
    invalid_element="Неправильне значення у {origin}",
    default_field_type="поле",
    missing_required="Відсутнє обов'язкове {field_type}",
    missing_required_named="Відсутнє обов'язкове {field_type}: {field_name}",
    unknown_type="невідомий",
    type_conversion="Помилка перетворення типу: неможливо перетворити {from_type} на {to_type}",
    invalid_schema="Неправильна схема: {reason}",
    invalid_schema_empty="Неправильне визначення схеми",
    default_discriminator="дискримінатор",
    invalid_discriminator="Неправильне або відсутнє поле дискримінатора: {field}",
    default_conflict_type="значення",
    incompatible_types="Неможливо об'єднати {conflict_type}: несумісні типи",
    nil_pointer="Виявлено нульовий вказівник",
    default_origin="значення",
    too_small="Занадто мале",
    too_big="Занадто велике",
    too_small_sized="Занадто мале: очікується, що {origin} {verb} {adj}{threshold} {unit}",
    too_big_sized="Занадто велике: очікується, що {origin} {verb} {adj}{threshold} {unit}",
    too_small_unsized="Занадто мале: очікується, що {origin} буде {adj}{threshold}",
    too_big_unsized="Занадто велике: очікується, що {origin} буде {adj}{threshold}",
    starts_with_empty="Неправильний рядок: повинен починатися з вказаного префікса",
    starts_with='Неправильний рядок: повинен починатися з "{operand}"',
    ends_with_empty="Неправильний рядок: повинен закінчуватися вказаним суфіксом",
    ends_with='Неправильний рядок: повинен закінчуватися на "{operand}"',
    includes_empty="Неправильний рядок: повинен містити вказаний підрядок",
    includes='Неправильний рядок: повинен містити "{operand}"',
    regex_empty="Неправильний рядок: повинен відповідати шаблону",
    regex="Неправильний рядок: повинен відповідати шаблону {operand}",
    invalid_format_noun="Неправильний {noun}",
    invalid_input="Неправильні вхідні дані",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "uk")


def format_message_uk(issue: Issue) -> str:
    """Render an issue in Ukrainian."""
    return FORMATTER(issue)


def config_uk() -> LocaleConfig:
    """Configuration installing the Ukrainian formatter."""
    return LocaleConfig(FORMATTER, "uk")
