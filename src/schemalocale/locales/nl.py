"""Dutch messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "DutchFormatter", "config_nl", "format_message_nl"]

SIZABLE = {
    "string": SizingInfo("tekens", "heeft"),
    "file": SizingInfo("bytes", "heeft"),
    "array": SizingInfo("elementen", "heeft"),
    "slice": SizingInfo("elementen", "heeft"),
    "set": SizingInfo("elementen", "heeft"),
    "map": SizingInfo("items", "heeft"),
}

FORMAT_NOUNS = {
    "regex": "invoer",
    "email": "emailadres",
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
    "datetime": "ISO datum en tijd",
    "date": "ISO datum",
    "time": "ISO tijd",
    "duration": "ISO duur",
    "ipv4": "IPv4-adres",
    "ipv6": "IPv6-adres",
    "mac": "MAC-adres",
    "cidrv4": "IPv4-bereik",
    "cidrv6": "IPv6-bereik",
    "base64": "base64-gecodeerde tekst",
    "base64url": "base64 URL-gecodeerde tekst",
    "json_string": "JSON string",
    "e164": "E.164-nummer",
    "jwt": "JWT",
    "template_literal": "invoer",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "getal",
    "array": "array",
    "slice": "array",
    "string": "tekst",
    "bool": "boolean",
    "object": "object",
    "map": "map",
    "nil": "null",
    "undefined": "ongedefinieerd",
    "function": "functie",
    "date": "datum",
    "file": "bestand",
    "set": "set",
}

CATALOG = MessageCatalog(
    invalid_type="Ongeldige invoer: verwacht {expected}, ontving {received}",
    invalid_value_empty="Ongeldige waarde",
    invalid_value_single="Ongeldige invoer: verwacht {value}",
    invalid_value_multiple="Ongeldige optie: verwacht één van {values}",
    value_separator="|",
    invalid_format_empty="Ongeldig formaat",
    not_multiple_of_empty="Ongeldig getal: moet een veelvoud zijn",
    not_multiple_of="Ongeldig getal: moet een veelvoud van {divisor} zijn",
    unrecognized_keys_empty="Onbekende key",
    key_separator=", ",
    unrecognized_key="Onbekende key: {keys}",
    unrecognized_keys="Onbekende keys: {keys}",
    invalid_key_empty="Ongeldige key",
    invalid_key="Ongeldige key in {origin}",
    invalid_union="Ongeldige invoer",
    invalid_element_empty="Ongeldig element",
    invalid_element="Ongeldige waarde in {origin}",
    default_field_type="veld",
    missing_required="Verplicht {field_type} ontbreekt",
    missing_required_named="Verplicht {field_type} ontbreekt: {field_name}",
    unknown_type="onbekend",
    type_conversion="Typeconversie mislukt: kan {from_type} niet naar {to_type} converteren",
    invalid_schema="Ongeldig schema: {reason}",
    invalid_schema_empty="Ongeldige schemadefinitie",
    default_discriminator="discriminator",
    invalid_discriminator="Ongeldig of ontbrekend discriminatorveld: {field}",
    default_conflict_type="waarden",
    incompatible_types="Kan {conflict_type} niet samenvoegen: incompatibele types",
    nil_pointer="Null pointer aangetroffen",
    default_origin="waarde",
    starts_with_empty="Ongeldige tekst: moet met het opgegeven voorvoegsel beginnen",
    starts_with='Ongeldige tekst: moet met "{operand}" beginnen',
    ends_with_empty="Ongeldige tekst: moet op het opgegeven achtervoegsel eindigen",
    ends_with='Ongeldige tekst: moet op "{operand}" eindigen',
    includes_empty="Ongeldige tekst: moet de opgegeven substring bevatten",
    includes='Ongeldige tekst: moet "{operand}" bevatten',
    regex_empty="Ongeldige tekst: moet overeenkomen met patroon",
    regex="Ongeldige tekst: moet overeenkomen met patroon {operand}",
    invalid_format_noun="Ongeldig: {noun}",
    invalid_input="Ongeldige invoer",
    too_small="Te {size_adj}",
    too_big="Te {size_adj}",
    too_small_sized="Te {size_adj}: verwacht dat {origin} {adj}{threshold} {unit} {verb}",
    too_big_sized="Te {size_adj}: verwacht dat {origin} {adj}{threshold} {unit} {verb}",
    too_small_unsized="Te {size_adj}: verwacht dat {origin} {adj}{threshold} is",
    too_big_unsized="Te {size_adj}: verwacht dat {origin} {adj}{threshold} is",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

# Size adjectives by origin for (too small, too big).
_SIZE_ADJECTIVES = {
    "date": ("vroeg", "laat"),
    "string": ("kort", "lang"),
}
_DEFAULT_SIZE_ADJECTIVES = ("klein", "groot")


class DutchFormatter(IssueFormatter):
    """Dutch formatter choosing "kort/lang", "vroeg/laat" or "klein/groot"."""

    __slots__ = ()

    def size_fields(self, origin: str, is_too_small: bool) -> dict[str, str]:
        small, big = _SIZE_ADJECTIVES.get(origin, _DEFAULT_SIZE_ADJECTIVES)
        return {"size_adj": small if is_too_small else big}


FORMATTER = DutchFormatter(CATALOG, "nl")


def format_message_nl(issue: Issue) -> str:
    """Render an issue in Dutch."""
    return FORMATTER(issue)


def config_nl() -> LocaleConfig:
    """Configuration installing the Dutch formatter."""
    return LocaleConfig(FORMATTER, "nl")
