"""Hungarian messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_hu", "format_message_hu"]

SIZABLE = {
    "string": SizingInfo("karakter", "legyen"),
    "file": SizingInfo("byte", "legyen"),
    "array": SizingInfo("elem", "legyen"),
    "slice": SizingInfo("elem", "legyen"),
    "set": SizingInfo("elem", "legyen"),
    "map": SizingInfo("bejegyzés", "legyen"),
}

FORMAT_NOUNS = {
    "regex": "bemenet",
    "email": "email cím",
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
    "datetime": "ISO időbélyeg",
    "date": "ISO dátum",
    "time": "ISO idő",
    "duration": "ISO időintervallum",
    "ipv4": "IPv4 cím",
    "ipv6": "IPv6 cím",
    "mac": "MAC cím",
    "cidrv4": "IPv4 tartomány",
    "cidrv6": "IPv6 tartomány",
    "base64": "base64-kódolt string",
    "base64url": "base64url-kódolt string",
    "json_string": "JSON string",
    "e164": "E.164 szám",
    "jwt": "JWT",
    "template_literal": "bemenet",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "szám",
    "array": "tömb",
    "slice": "tömb",
    "string": "szöveg",
    "bool": "logikai érték",
    "object": "objektum",
    "map": "térkép",
    "nil": "null",
    "undefined": "meghatározatlan",
    "function": "függvény",
    "date": "dátum",
    "file": "fájl",
    "set": "halmaz",
}

CATALOG = MessageCatalog(
    invalid_type="Érvénytelen bemenet: a várt érték {expected}, a kapott érték {received}",
    invalid_value_empty="Érvénytelen érték",
    invalid_value_single="Érvénytelen bemenet: a várt érték {value}",
    invalid_value_multiple="Érvénytelen opció: valamelyik érték várt {values}",
    value_separator="|",
    invalid_format_empty="Érvénytelen formátum",
    not_multiple_of_empty="Érvénytelen szám: többszörösének kell lennie",
    not_multiple_of="Érvénytelen szám: {divisor} többszörösének kell lennie",
    unrecognized_keys_empty="Ismeretlen kulcs",
    key_separator=", ",
    unrecognized_key="Ismeretlen kulcs: {keys}",
    unrecognized_keys="Ismeretlen kulcsok: {keys}",
    invalid_key_empty="Érvénytelen kulcs",
    invalid_key="Érvénytelen kulcs {origin}",
    invalid_union="Érvénytelen bemenet",
    invalid_element_empty="Érvénytelen elem",
    invalid_element="Érvénytelen érték: {origin}",
    default_field_type="mező",
    missing_required="Kötelező {field_type} hiányzik",
    missing_required_named="Kötelező {field_type} hiányzik: {field_name}",
    unknown_type="ismeretlen",
    type_conversion="Típuskonverzió sikertelen: {from_type} nem konvertálható {to_type} típusra",
    invalid_schema="Érvénytelen séma: {reason}",
    invalid_schema_empty="Érvénytelen sémadefiníció",
    default_discriminator="diszkriminátor",
    invalid_discriminator="Érvénytelen vagy hiányzó diszkriminátor mező: {field}",
    default_conflict_type="értékek",
    incompatible_types="Nem lehet egyesíteni {conflict_type}: inkompatibilis típusok",
    nil_pointer="Null mutató észlelve",
    default_origin="érték",
    too_small="Túl kicsi",
    too_big="Túl nagy",
    too_small_sized="Túl kicsi: a bemeneti érték {origin} mérete túl kicsi {adj}{threshold} {unit}",
    too_big_sized="Túl nagy: {origin} mérete túl nagy {adj}{threshold} {unit}",
    too_small_unsized="Túl kicsi: a bemeneti érték {origin} túl kicsi {adj}{threshold}",
    too_big_unsized="Túl nagy: a bemeneti érték {origin} túl nagy: {adj}{threshold}",
    starts_with_empty="Érvénytelen string: megadott értékkel kell kezdődnie",
    starts_with='Érvénytelen string: "{operand}" értékkel kell kezdődnie',
    ends_with_empty="Érvénytelen string: megadott értékkel kell végződnie",
    ends_with='Érvénytelen string: "{operand}" értékkel kell végződnie',
    includes_empty="Érvénytelen string: megadott értéket kell tartalmaznia",
    includes='Érvénytelen string: "{operand}" értéket kell tartalmaznia',
    regex_empty="Érvénytelen string: mintának kell megfelelnie",
    regex="Érvénytelen string: {operand} mintának kell megfelelnie",
    invalid_format_noun="Érvénytelen {noun}",
    invalid_input="Érvénytelen bemenet",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "hu")


def format_message_hu(issue: Issue) -> str:
    """Render an issue in Hungarian."""
    return FORMATTER(issue)


def config_hu() -> LocaleConfig:
    """Configuration installing the Hungarian formatter."""
    return LocaleConfig(FORMATTER, "hu")
