"""Danish messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_da", "format_message_da"]

SIZABLE = {
    "string": SizingInfo("tegn", "havde"),
    "file": SizingInfo("bytes", "havde"),
    "array": SizingInfo("elementer", "indeholdt"),
    "slice": SizingInfo("elementer", "indeholdt"),
    "set": SizingInfo("elementer", "indeholdt"),
    "map": SizingInfo("poster", "indeholdt"),
}

FORMAT_NOUNS = {
    "regex": "input",
    "email": "e-mailadresse",
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
    "datetime": "ISO dato- og klokkeslæt",
    "date": "ISO-dato",
    "time": "ISO-klokkeslæt",
    "duration": "ISO-varighed",
    "ipv4": "IPv4-adresse",
    "ipv6": "IPv6-adresse",
    "mac": "MAC-adresse",
    "cidrv4": "IPv4-spektrum",
    "cidrv6": "IPv6-spektrum",
    "base64": "base64-kodet streng",
    "base64url": "base64url-kodet streng",
    "json_string": "JSON-streng",
    "e164": "E.164-nummer",
    "jwt": "JWT",
    "template_literal": "input",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "tal",
    "array": "liste",
    "slice": "liste",
    "string": "streng",
    "bool": "boolean",
    "object": "objekt",
    "map": "kort",
    "nil": "null",
    "undefined": "udefineret",
    "function": "funktion",
    "date": "dato",
    "file": "fil",
    "set": "sæt",
}

CATALOG = MessageCatalog(
    invalid_type="Ugyldigt input: forventede {expected}, fik {received}",
    invalid_value_empty="Ugyldig værdi",
    invalid_value_single="Ugyldig værdi: forventede {value}",
    invalid_value_multiple="Ugyldigt valg: forventede en af følgende {values}",
    value_separator="|",
    invalid_format_empty="Ugyldigt format",
    not_multiple_of_empty="Ugyldigt tal: skal være deleligt",
    not_multiple_of="Ugyldigt tal: skal være deleligt med {divisor}",
    unrecognized_keys_empty="Ukendt nøgle",
    key_separator=", ",
    unrecognized_key="Ukendt nøgle: {keys}",
    unrecognized_keys="Ukendte nøgler: {keys}",
    invalid_key_empty="Ugyldig nøgle",
    invalid_key="Ugyldig nøgle i {origin}",
    invalid_union="Ugyldigt input: matcher ingen af de tilladte typer",
    invalid_element_empty="Ugyldigt element",
    invalid_element="Ugyldig værdi i {origin}",
    default_field_type="felt",
    missing_required="Påkrævet {field_type} mangler",
    missing_required_named="Påkrævet {field_type} mangler: {field_name}",
    unknown_type="ukendt",
    type_conversion="Typekonvertering mislykkedes: kan ikke konvertere {from_type} til {to_type}",
    invalid_schema="Ugyldigt skema: {reason}",
    invalid_schema_empty="Ugyldig skemadefinition",
    default_discriminator="diskriminator",
    invalid_discriminator="Ugyldigt eller manglende diskriminatorfelt: {field}",
    default_conflict_type="værdier",
    incompatible_types="Kan ikke flette {conflict_type}: inkompatible typer",
    nil_pointer="Null-pointer opdaget",
    default_origin="værdi",
    too_small="For lille",
    too_big="For stor",
    too_small_sized="For lille: forventede {origin} {verb} {adj}{threshold} {unit}",
    too_big_sized="For stor: forventede {origin} {verb} {adj}{threshold} {unit}",
    too_small_unsized="For lille: forventede {origin} havde {adj}{threshold}",
    too_big_unsized="For stor: forventede {origin} havde {adj}{threshold}",
    starts_with_empty="Ugyldig streng: skal starte med angivet præfiks",
    starts_with='Ugyldig streng: skal starte med "{operand}"',
    ends_with_empty="Ugyldig streng: skal ende med angivet suffiks",
    ends_with='Ugyldig streng: skal ende med "{operand}"',
    includes_empty="Ugyldig streng: skal indeholde angivet delstreng",
    includes='Ugyldig streng: skal indeholde "{operand}"',
    regex_empty="Ugyldig streng: skal matche mønsteret",
    regex="Ugyldig streng: skal matche mønsteret {operand}",
    invalid_format_noun="Ugyldig {noun}",
    invalid_input="Ugyldigt input",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "da")


def format_message_da(issue: Issue) -> str:
    """Render an issue in Danish."""
    return FORMATTER(issue)


def config_da() -> LocaleConfig:
    """Configuration installing the Danish formatter."""
    return LocaleConfig(FORMATTER, "da")
