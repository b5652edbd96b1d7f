"""German messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_de", "format_message_de"]

SIZABLE = {
    "string": SizingInfo("Zeichen", "haben"),
    "file": SizingInfo("Bytes", "haben"),
    "array": SizingInfo("Elemente", "haben"),
    "slice": SizingInfo("Elemente", "haben"),
    "set": SizingInfo("Elemente", "haben"),
    "map": SizingInfo("Einträge", "haben"),
}

FORMAT_NOUNS = {
    "regex": "Eingabe",
    "email": "E-Mail-Adresse",
    "url": "URL",
    "emoji": "Emoji",
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
    "datetime": "ISO-Datum und -Uhrzeit",
    "date": "ISO-Datum",
    "time": "ISO-Uhrzeit",
    "duration": "ISO-Dauer",
    "ipv4": "IPv4-Adresse",
    "ipv6": "IPv6-Adresse",
    "mac": "MAC-Adresse",
    "cidrv4": "IPv4-Bereich",
    "cidrv6": "IPv6-Bereich",
    "base64": "Base64-codierter String",
    "base64url": "Base64-URL-codierter String",
    "json_string": "JSON-String",
    "e164": "E.164-Nummer",
    "jwt": "JWT",
    "template_literal": "Eingabe",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "Zahl",
    "array": "Array",
    "slice": "Array",
    "string": "String",
    "bool": "Boolean",
    "object": "Objekt",
    "map": "Map",
    "nil": "null",
    "undefined": "undefined",
    "function": "Funktion",
    "date": "Datum",
    "file": "Datei",
    "set": "Set",
}

CATALOG = MessageCatalog(
    invalid_type="Ungültige Eingabe: erwartet {expected}, erhalten {received}",
    invalid_value_empty="Ungültiger Wert",
    invalid_value_single="Ungültige Eingabe: erwartet {value}",
    invalid_value_multiple="Ungültige Option: erwartet eine von {values}",
    value_separator="|",
    invalid_format_empty="Ungültiges Format",
    not_multiple_of_empty="Ungültige Zahl: muss ein Vielfaches sein",
    not_multiple_of="Ungültige Zahl: muss ein Vielfaches von {divisor} sein",
    unrecognized_keys_empty="Unbekannter Schlüssel",
    key_separator=", ",
    unrecognized_key="Unbekannter Schlüssel: {keys}",
    unrecognized_keys="Unbekannte Schlüssel: {keys}",
    invalid_key_empty="Ungültiger Schlüssel",
    invalid_key="Ungültiger Schlüssel in {origin}",
    invalid_union="Ungültige Eingabe",
    invalid_element_empty="Ungültiges Element",
    invalid_element="Ungültiger Wert in {origin}",
    default_field_type="Feld",
    missing_required="Erforderliches {field_type} fehlt",
    missing_required_named="Erforderliches {field_type} fehlt: {field_name}",
    unknown_type="unbekannt",
    type_conversion="Typkonvertierung fehlgeschlagen: kann {from_type} nicht in {to_type} konvertieren",
    invalid_schema="Ungültiges Schema: {reason}",
    invalid_schema_empty="Ungültige Schemadefinition",
    default_discriminator="Diskriminator",
    invalid_discriminator="Ungültiges oder fehlendes Diskriminatorfeld: {field}",
    default_conflict_type="Werte",
    incompatible_types="Kann {conflict_type} nicht zusammenführen: inkompatible Typen",
    nil_pointer="Null-Zeiger erkannt",
    default_origin="Wert",
    too_small="Zu klein",
    too_big="Zu groß",
    too_small_sized="Zu klein: erwartet, dass {origin} {adj}{threshold} {unit} hat",
    too_big_sized="Zu groß: erwartet, dass {origin} {adj}{threshold} {unit} hat",
    too_small_unsized="Zu klein: erwartet, dass {origin} {adj}{threshold} ist",
    too_big_unsized="Zu groß: erwartet, dass {origin} {adj}{threshold} ist",
    starts_with_empty="Ungültiger String: muss mit dem angegebenen Präfix beginnen",
    starts_with='Ungültiger String: muss mit "{operand}" beginnen',
    ends_with_empty="Ungültiger String: muss mit dem angegebenen Suffix enden",
    ends_with='Ungültiger String: muss mit "{operand}" enden',
    includes_empty="Ungültiger String: muss den angegebenen Teilstring enthalten",
    includes='Ungültiger String: muss "{operand}" enthalten',
    regex_empty="Ungültiger String: muss dem Muster entsprechen",
    regex="Ungültiger String: muss dem Muster {operand} entsprechen",
    invalid_format_noun="Ungültig: {noun}",
    invalid_input="Ungültige Eingabe",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "de")


def format_message_de(issue: Issue) -> str:
    """Render an issue in German."""
    return FORMATTER(issue)


def config_de() -> LocaleConfig:
    """Configuration installing the German formatter."""
    return LocaleConfig(FORMATTER, "de")
