"""Polish messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_pl", "format_message_pl"]

SIZABLE = {
    "string": SizingInfo("znaków", "mieć"),
    "file": SizingInfo("bajtów", "mieć"),
    "array": SizingInfo("elementów", "mieć"),
    "slice": SizingInfo("elementów", "mieć"),
    "set": SizingInfo("elementów", "mieć"),
    "map": SizingInfo("wpisów", "mieć"),
}

FORMAT_NOUNS = {
    "regex": "wyrażenie",
    "email": "adres email",
    "url": "URL",
    "emoji": "emoji",
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
    "datetime": "data i godzina w formacie ISO",
    "date": "data w formacie ISO",
    "time": "godzina w formacie ISO",
    "duration": "czas trwania ISO",
    "ipv4": "adres IPv4",
    "ipv6": "adres IPv6",
    "mac": "adres MAC",
    "cidrv4": "zakres IPv4",
    "cidrv6": "zakres IPv6",
    "base64": "ciąg znaków zakodowany w formacie base64",
    "base64url": "ciąg znaków zakodowany w formacie base64url",
    "json_string": "ciąg znaków w formacie JSON",
    "e164": "liczba E.164",
    "jwt": "JWT",
    "template_literal": "wejście",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "liczba",
    "array": "tablica",
    "slice": "tablica",
    "string": "ciąg znaków",
    "bool": "wartość logiczna",
    "object": "obiekt",
    "map": "mapa",
    "nil": "null",
    "undefined": "undefined",
    "function": "funkcja",
    "date": "data",
    "file": "plik",
    "set": "zbiór",
}

CATALOG = MessageCatalog(
    invalid_type="Nieprawidłowe dane wejściowe: oczekiwano {expected}, otrzymano {received}",
    invalid_value_empty="Nieprawidłowa wartość",
    invalid_value_single="Nieprawidłowe dane wejściowe: oczekiwano {value}",
    invalid_value_multiple="Nieprawidłowa opcja: oczekiwano jednej z wartości {values}",
    value_separator="|",
    invalid_format_empty="Nieprawidłowy format",
    not_multiple_of_empty="Nieprawidłowa liczba: musi być wielokrotnością",
    not_multiple_of="Nieprawidłowa liczba: musi być wielokrotnością {divisor}",
    unrecognized_keys_empty="Nierozpoznany klucz",
    key_separator=", ",
    unrecognized_key="Nierozpoznany klucz: {keys}",
    unrecognized_keys="Nierozpoznane klucze: {keys}",
    invalid_key_empty="Nieprawidłowy klucz",
    invalid_key="Nieprawidłowy klucz w {origin}",
    invalid_union="Nieprawidłowe dane wejściowe",
    invalid_element_empty="Nieprawidłowy element",
    invalid_element="Nieprawidłowa wartość w {origin}",
    default_field_type="pole",
    missing_required="Brakuje wymaganego {field_type}",
    missing_required_named="Brakuje wymaganego {field_type}: {field_name}",
    unknown_type="nieznany",
    type_conversion="Konwersja typu nie powiodła się: nie można przekonwertować {from_type} na {to_type}",
    invalid_schema="Nieprawidłowy schemat: {reason}",
    invalid_schema_empty="Nieprawidłowa definicja schematu",
    default_discriminator="dyskryminator",
    invalid_discriminator="Nieprawidłowe lub brakujące pole dyskryminatora: {field}",
    default_conflict_type="wartości",
    incompatible_types="Nie można scalić {conflict_type}: niezgodne typy",
    nil_pointer="Napotkano pusty wskaźnik",
    default_origin="wartość",
    too_small="Za mała wartość",
    too_big="Za duża wartość",
    too_small_sized="Za mała wartość: oczekiwano, że {origin} będzie mieć {adj}{threshold} {unit}",
    too_big_sized="Za duża wartość: oczekiwano, że {origin} będzie mieć {adj}{threshold} {unit}",
    too_small_unsized="Za mała wartość: oczekiwano, że {origin} będzie wynosić {adj}{threshold}",
    too_big_unsized="Za duża wartość: oczekiwano, że {origin} będzie wynosić {adj}{threshold}",
    starts_with_empty="Nieprawidłowy ciąg znaków: musi zaczynać się od określonego prefiksu",
    starts_with='Nieprawidłowy ciąg znaków: musi zaczynać się od "{operand}"',
    ends_with_empty="Nieprawidłowy ciąg znaków: musi kończyć się określonym sufiksem",
    ends_with='Nieprawidłowy ciąg znaków: musi kończyć się na "{operand}"',
    includes_empty="Nieprawidłowy ciąg znaków: musi zawierać określony podciąg",
    includes='Nieprawidłowy ciąg znaków: musi zawierać "{operand}"',
    regex_empty="Nieprawidłowy ciąg znaków: musi odpowiadać wzorcowi",
    regex="Nieprawidłowy ciąg znaków: musi odpowiadać wzorcowi {operand}",
    invalid_format_noun="Nieprawidłowy {noun}",
    invalid_input="Nieprawidłowe dane wejściowe",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "pl")


def format_message_pl(issue: Issue) -> str:
    """Render an issue in Polish."""
    return FORMATTER(issue)


def config_pl() -> LocaleConfig:
    """Configuration installing the Polish formatter."""
    return LocaleConfig(FORMATTER, "pl")
