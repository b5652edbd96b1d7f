"""Bulgarian messages.

Format nouns take a gendered adjective: "Невалиден имейл адрес",
"Невалидна ISO дата".

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["BulgarianFormatter", "CATALOG", "FORMATTER", "config_bg", "format_message_bg"]

SIZABLE = {
    "string": SizingInfo("символа", "да съдържа"),
    "file": SizingInfo("байта", "да съдържа"),
    "array": SizingInfo("елемента", "да съдържа"),
    "slice": SizingInfo("елемента", "да съдържа"),
    "set": SizingInfo("елемента", "да съдържа"),
    "map": SizingInfo("записа", "да съдържа"),
}

FORMAT_NOUNS = {
    "regex": "вход",
    "email": "имейл адрес",
    "url": "URL",
    "emoji": "емоджи",
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
    "datetime": "ISO време",
    "date": "ISO дата",
    "time": "ISO време",
    "duration": "ISO продължителност",
    "ipv4": "IPv4 адрес",
    "ipv6": "IPv6 адрес",
    "mac": "MAC адрес",
    "cidrv4": "IPv4 диапазон",
    "cidrv6": "IPv6 диапазон",
    "base64": "base64-кодиран низ",
    "base64url": "base64url-кодиран низ",
    "json_string": "JSON низ",
    "e164": "E.164 номер",
    "jwt": "JWT",
    "template_literal": "вход",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "число",
    "array": "масив",
    "slice": "масив",
    "string": "низ",
    "bool": "булево",
    "object": "обект",
    "map": "карта",
    "nil": "null",
    "undefined": "неопределено",
    "function": "функция",
    "date": "дата",
    "file": "файл",
    "set": "множество",
}

INVALID_ADJECTIVES = {
    "emoji": "Невалидно",
    "datetime": "Невалидно",
    "date": "Невалидна",
    "time": "Невалидно",
    "duration": "Невалидна",
}

CATALOG = MessageCatalog(
    invalid_type="Невалиден вход: очакван {expected}, получен {received}",
    invalid_value_empty="Невалидна стойност",
    invalid_value_single="Невалиден вход: очакван {value}",
    invalid_value_multiple="Невалидна опция: очаквано едно от {values}",
    value_separator="|",
    invalid_format_empty="Невалиден формат",
    not_multiple_of_empty="Невалидно число: трябва да бъде кратно",
    not_multiple_of="Невалидно число: трябва да бъде кратно на {divisor}",
    unrecognized_keys_empty="Неразпознат ключ",
    key_separator=", ",
    unrecognized_key="Неразпознат ключ: {keys}",
    unrecognized_keys="Неразпознати ключове: {keys}",
    invalid_key_empty="Невалиден ключ",
    invalid_key="Невалиден ключ в {origin}",
    invalid_union="Невалиден вход",
    invalid_element_empty="Невалиден елемент",
    invalid_element="Невалидна стойност в {origin}",
    default_field_type="поле",
    missing_required="Липсва задължително {field_type}",
    missing_required_named="Липсва задължително {field_type}: {field_name}",
    unknown_type="неизвестен",
    type_conversion="Неуспешно преобразуване на тип: не може да се преобразува {from_type} в {to_type}",
    invalid_schema="Невалидна схема: {reason}",
    invalid_schema_empty="Невалидна дефиниция на схема",
    default_discriminator="дискриминатор",
    invalid_discriminator="Невалидно или липсващо дискриминаторно поле: {field}",
    default_conflict_type="стойности",
    incompatible_types="Не може да се обедини {conflict_type}: несъвместими типове",
    nil_pointer="Открит нулев указател",
    default_origin="стойност",
    too_small="Твърде малко",
    too_big="Твърде голямо",
    too_small_sized="Твърде малко: очаква се {origin} да съдържа {adj}{threshold} {unit}",
    too_big_sized="Твърде голямо: очаква се {origin} да съдържа {adj}{threshold} {unit}",
    too_small_unsized="Твърде малко: очаква се {origin} да бъде {adj}{threshold}",
    too_big_unsized="Твърде голямо: очаква се {origin} да бъде {adj}{threshold}",
    starts_with_empty="Невалиден низ: трябва да започва с определен префикс",
    starts_with='Невалиден низ: трябва да започва с "{operand}"',
    ends_with_empty="Невалиден низ: трябва да завършва с определен суфикс",
    ends_with='Невалиден низ: трябва да завършва с "{operand}"',
    includes_empty="Невалиден низ: трябва да включва определен подниз",
    includes='Невалиден низ: трябва да включва "{operand}"',
    regex_empty="Невалиден низ: трябва да съвпада с шаблона",
    regex="Невалиден низ: трябва да съвпада с {operand}",
    invalid_format_noun="{adjective} {noun}",
    invalid_input="Невалиден вход",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

_DEFAULT_ADJECTIVE = "Невалиден"


class BulgarianFormatter(IssueFormatter):
    """Bulgarian formatter whose "invalid" adjective agrees with the noun."""

    __slots__ = ()

    def format_invalid_noun(self, format_tag: str) -> str:
        return self.catalog.invalid_format_noun.format(
            adjective=INVALID_ADJECTIVES.get(format_tag, _DEFAULT_ADJECTIVE),
            noun=self.format_noun(format_tag),
        )


FORMATTER = BulgarianFormatter(CATALOG, "bg")


def format_message_bg(issue: Issue) -> str:
    """Render an issue in Bulgarian."""
    return FORMATTER(issue)


def config_bg() -> LocaleConfig:
    """Configuration installing the Bulgarian formatter."""
    return LocaleConfig(FORMATTER, "bg")
