"""Czech messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_cs", "format_message_cs"]

SIZABLE = {
    "string": SizingInfo("znaků", "mít"),
    "file": SizingInfo("bajtů", "mít"),
    "array": SizingInfo("prvků", "mít"),
    "slice": SizingInfo("prvků", "mít"),
    "set": SizingInfo("prvků", "mít"),
    "map": SizingInfo("záznamů", "mít"),
}

FORMAT_NOUNS = {
    "regex": "regulární výraz",
    "email": "e-mailová adresa",
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
    "datetime": "datum a čas ve formátu ISO",
    "date": "datum ve formátu ISO",
    "time": "čas ve formátu ISO",
    "duration": "doba trvání ISO",
    "ipv4": "IPv4 adresa",
    "ipv6": "IPv6 adresa",
    "mac": "MAC adresa",
    "cidrv4": "rozsah IPv4",
    "cidrv6": "rozsah IPv6",
    "base64": "řetězec zakódovaný ve formátu base64",
    "base64url": "řetězec zakódovaný ve formátu base64url",
    "json_string": "řetězec ve formátu JSON",
    "e164": "číslo E.164",
    "jwt": "JWT",
    "template_literal": "vstup",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "číslo",
    "array": "pole",
    "slice": "pole",
    "string": "řetězec",
    "bool": "boolean",
    "object": "objekt",
    "map": "mapa",
    "nil": "null",
    "undefined": "nedefinováno",
    "function": "funkce",
    "date": "datum",
    "file": "soubor",
    "set": "množina",
}

CATALOG = MessageCatalog(
    invalid_type="Neplatný vstup: očekáváno {expected}, obdrženo {received}",
    invalid_value_empty="Neplatná hodnota",
    invalid_value_single="Neplatný vstup: očekáváno {value}",
    invalid_value_multiple="Neplatná možnost: očekávána jedna z hodnot {values}",
    value_separator="|",
    invalid_format_empty="Neplatný formát",
    not_multiple_of_empty="Neplatné číslo: musí být násobkem",
    not_multiple_of="Neplatné číslo: musí být násobkem {divisor}",
    unrecognized_keys_empty="Neznámý klíč",
    key_separator=", ",
    unrecognized_key="Neznámý klíč: {keys}",
    unrecognized_keys="Neznámé klíče: {keys}",
    invalid_key_empty="Neplatný klíč",
    invalid_key="Neplatný klíč v {origin}",
    invalid_union="Neplatný vstup",
    invalid_element_empty="Neplatný prvek",
    invalid_element="Neplatná hodnota v {origin}",
    default_field_type="pole",
    missing_required="Chybí povinné {field_type}",
    missing_required_named="Chybí povinné {field_type}: {field_name}",
    unknown_type="neznámý",
    type_conversion="Převod typu selhal: nelze převést {from_type} na {to_type}",
    invalid_schema="Neplatné schéma: {reason}",
    invalid_schema_empty="Neplatná definice schématu",
    default_discriminator="diskriminátor",
    invalid_discriminator="Neplatné nebo chybějící pole diskriminátoru: {field}",
    default_conflict_type="hodnoty",
    incompatible_types="Nelze sloučit {conflict_type}: nekompatibilní typy",
    nil_pointer="Zjištěn nulový ukazatel",
    default_origin="hodnota",
    too_small="Hodnota je příliš malá",
    too_big="Hodnota je příliš velká",
    too_small_sized="Hodnota je příliš malá: {origin} musí {verb} {adj}{threshold} {unit}",
    too_big_sized="Hodnota je příliš velká: {origin} musí {verb} {adj}{threshold} {unit}",
    too_small_unsized="Hodnota je příliš malá: {origin} musí být {adj}{threshold}",
    too_big_unsized="Hodnota je příliš velká: {origin} musí být {adj}{threshold}",
    starts_with_empty="Neplatný řetězec: musí začínat zadaným prefixem",
    starts_with='Neplatný řetězec: musí začínat na "{operand}"',
    ends_with_empty="Neplatný řetězec: musí končit zadaným sufixem",
    ends_with='Neplatný řetězec: musí končit na "{operand}"',
    includes_empty="Neplatný řetězec: musí obsahovat zadaný podřetězec",
    includes='Neplatný řetězec: musí obsahovat "{operand}"',
    regex_empty="Neplatný řetězec: musí odpovídat vzoru",
    regex="Neplatný řetězec: musí odpovídat vzoru {operand}",
    invalid_format_noun="Neplatný formát {noun}",
    invalid_input="Neplatný vstup",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "cs")


def format_message_cs(issue: Issue) -> str:
    """Render an issue in Czech."""
    return FORMATTER(issue)


def config_cs() -> LocaleConfig:
    """Configuration installing the Czech formatter."""
    return LocaleConfig(FORMATTER, "cs")
