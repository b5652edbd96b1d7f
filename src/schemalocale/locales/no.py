"""Norwegian messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_no", "format_message_no"]

SIZABLE = {
    "string": SizingInfo("tegn", "å ha"),
    "file": SizingInfo("bytes", "å ha"),
    "array": SizingInfo("elementer", "å inneholde"),
    "slice": SizingInfo("elementer", "å inneholde"),
    "set": SizingInfo("elementer", "å inneholde"),
    "map": SizingInfo("oppføringer", "å inneholde"),
}

FORMAT_NOUNS = {
    "regex": "input",
    "email": "e-postadresse",
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
    "datetime": "ISO dato- og klokkeslett",
    "date": "ISO-dato",
    "time": "ISO-klokkeslett",
    "duration": "ISO-varighet",
    "ipv4": "IPv4-adresse",
    "ipv6": "IPv6-adresse",
    "mac": "MAC-adresse",
    "cidrv4": "IPv4-spekter",
    "cidrv6": "IPv6-spekter",
    "base64": "base64-enkodet streng",
    "base64url": "base64url-enkodet streng",
    "json_string": "JSON-streng",
    "e164": "E.164-nummer",
    "jwt": "JWT",
    "template_literal": "input",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "tall",
    "array": "liste",
    "slice": "liste",
    "string": "streng",
    "bool": "boolsk verdi",
    "object": "objekt",
    "map": "kart",
    "nil": "null",
    "undefined": "udefinert",
    "function": "funksjon",
    "date": "dato",
    "file": "fil",
    "set": "sett",
}

CATALOG = MessageCatalog(
    invalid_type="Ugyldig input: forventet {expected}, fikk {received}",
    invalid_value_empty="Ugyldig verdi",
    invalid_value_single="Ugyldig verdi: forventet {value}",
    invalid_value_multiple="Ugyldig valg: forventet en av {values}",
    value_separator="|",
    invalid_format_empty="Ugyldig format",
    not_multiple_of_empty="Ugyldig tall: må være et multiplum",
    not_multiple_of="Ugyldig tall: må være et multiplum av {divisor}",
    unrecognized_keys_empty="Ukjent nøkkel",
    key_separator=", ",
    unrecognized_key="Ukjent nøkkel: {keys}",
    unrecognized_keys="Ukjente nøkler: {keys}",
    invalid_key_empty="Ugyldig nøkkel",
    invalid_key="Ugyldig nøkkel i {origin}",
    invalid_union="Ugyldig input",
    invalid_element_empty="Ugyldig element",
    invalid_element="Ugyldig verdi i {origin}",
    default_field_type="felt",
    missing_required="Påkrevd {field_type} mangler",
    missing_required_named="Påkrevd {field_type} mangler: {field_name}",
    unknown_type="ukjent",
    type_conversion="Typekonvertering mislyktes: kan ikke konvertere {from_type} til {to_type}",
    invalid_schema="Ugyldig skjema: {reason}",
    invalid_schema_empty="Ugyldig skjemadefinisjon",
    default_discriminator="diskriminator",
    invalid_discriminator="Ugyldig eller manglende diskriminatorfelt: {field}",
    default_conflict_type="verdier",
    incompatible_types="Kan ikke slå sammen {conflict_type}: inkompatible typer",
    nil_pointer="Null-peker oppdaget",
    default_origin="value",
    too_small="For lite(n)",
    too_big="For stor(t)",
    too_small_sized="For lite(n): forventet {origin} til å ha {adj}{threshold} {unit}",
    too_big_sized="For stor(t): forventet {origin} til å ha {adj}{threshold} {unit}",
    too_small_unsized="For lite(n): forventet {origin} til å ha {adj}{threshold}",
    too_big_unsized="For stor(t): forventet {origin} til å ha {adj}{threshold}",
    starts_with_empty="Ugyldig streng: må starte med angitt prefiks",
    starts_with='Ugyldig streng: må starte med "{operand}"',
    ends_with_empty="Ugyldig streng: må ende med angitt suffiks",
    ends_with='Ugyldig streng: må ende med "{operand}"',
    includes_empty="Ugyldig streng: må inneholde angitt delstreng",
    includes='Ugyldig streng: må inneholde "{operand}"',
    regex_empty="Ugyldig streng: må matche mønsteret",
    regex="Ugyldig streng: må matche mønsteret {operand}",
    invalid_format_noun="Ugyldig {noun}",
    invalid_input="Ugyldig input",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "no")


def format_message_no(issue: Issue) -> str:
    """Render an issue in Norwegian."""
    return FORMATTER(issue)


def config_no() -> LocaleConfig:
    """Configuration installing the Norwegian formatter."""
    return LocaleConfig(FORMATTER, "no")
