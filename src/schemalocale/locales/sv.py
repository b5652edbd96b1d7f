"""Swedish messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_sv", "format_message_sv"]

SIZABLE = {
    "string": SizingInfo("tecken", "att ha"),
    "file": SizingInfo("bytes", "att ha"),
    "array": SizingInfo("objekt", "att innehålla"),
    "slice": SizingInfo("objekt", "att innehålla"),
    "set": SizingInfo("objekt", "att innehålla"),
    "map": SizingInfo("poster", "att innehålla"),
}

FORMAT_NOUNS = {
    "regex": "reguljärt uttryck",
    "email": "e-postadress",
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
    "datetime": "ISO-datum och tid",
    "date": "ISO-datum",
    "time": "ISO-tid",
    "duration": "ISO-varaktighet",
    "ipv4": "IPv4-adress",
    "ipv6": "IPv6-adress",
    "mac": "MAC-adress",
    "cidrv4": "IPv4-spektrum",
    "cidrv6": "IPv6-spektrum",
    "base64": "base64-kodad sträng",
    "base64url": "base64url-kodad sträng",
    "json_string": "JSON-sträng",
    "e164": "E.164-nummer",
    "jwt": "JWT",
    "template_literal": "mall-literal",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "antal",
    "array": "lista",
    "slice": "lista",
    "string": "sträng",
    "bool": "boolean",
    "object": "objekt",
    "map": "karta",
    "nil": "null",
    "undefined": "odefinierad",
    "function": "funktion",
    "date": "datum",
    "file": "fil",
    "set": "mängd",
}

CATALOG = MessageCatalog(
    invalid_type="Ogiltig inmatning: förväntat {expected}, fick {received}",
    invalid_value_empty="Ogiltigt värde",
    invalid_value_single="Ogiltig inmatning: förväntat {value}",
    invalid_value_multiple="Ogiltigt val: förväntade en av {values}",
    value_separator="|",
    invalid_format_empty="Ogiltigt format",
    not_multiple_of_empty="Ogiltigt tal: måste vara en multipel",
    not_multiple_of="Ogiltigt tal: måste vara en multipel av {divisor}",
    unrecognized_keys_empty="Okänd nyckel",
    key_separator=", ",
    unrecognized_key="Okänd nyckel: {keys}",
    unrecognized_keys="Okända nycklar: {keys}",
    invalid_key_empty="Ogiltig nyckel",
    invalid_key="Ogiltig nyckel i {origin}",
    invalid_union="Ogiltig input",
    invalid_element_empty="Ogiltigt element",
    invalid_element="Ogiltigt värde i {origin}",
    default_field_type="fält",
    missing_required="Obligatoriskt {field_type} saknas",
    missing_required_named="Obligatoriskt {field_type} saknas: {field_name}",
    unknown_type="okänd",
    type_conversion="Typkonvertering misslyckades: kan inte konvertera {from_type} till {to_type}",
    invalid_schema="Ogiltigt schema: {reason}",
    invalid_schema_empty="Ogiltig schemadefinition",
    default_discriminator="diskriminator",
    invalid_discriminator="Ogiltigt eller saknat diskriminatorfält: {field}",
    default_conflict_type="värden",
    incompatible_types="Kan inte slå samman {conflict_type}: inkompatibla typer",
    nil_pointer="Null-pekare upptäckt",
    default_origin="värdet",
    too_small="För lite(t)",
    too_big="För stor(t)",
    too_small_sized="För lite(t): förväntade {origin} {verb} {adj}{threshold} {unit}",
    too_big_sized="För stor(t): förväntade {origin} {verb} {adj}{threshold} {unit}",
    too_small_unsized="För lite(t): förväntade {origin} att ha {adj}{threshold}",
    too_big_unsized="För stor(t): förväntade {origin} att ha {adj}{threshold}",
    starts_with_empty="Ogiltig sträng: måste börja med angivet prefix",
    starts_with='Ogiltig sträng: måste börja med "{operand}"',
    ends_with_empty="Ogiltig sträng: måste sluta med angivet suffix",
    ends_with='Ogiltig sträng: måste sluta med "{operand}"',
    includes_empty="Ogiltig sträng: måste innehålla angiven delsträng",
    includes='Ogiltig sträng: måste innehålla "{operand}"',
    regex_empty="Ogiltig sträng: måste matcha mönstret",
    regex='Ogiltig sträng: måste matcha mönstret "{operand}"',
    invalid_format_noun="Ogiltig(t) {noun}",
    invalid_input="Ogiltig input",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "sv")


def format_message_sv(issue: Issue) -> str:
    """Render an issue in Swedish."""
    return FORMATTER(issue)


def config_sv() -> LocaleConfig:
    """Configuration installing the Swedish formatter."""
    return LocaleConfig(FORMATTER, "sv")
