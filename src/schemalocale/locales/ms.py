"""Malay messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_ms", "format_message_ms"]

SIZABLE = {
    "string": SizingInfo("aksara", "mempunyai"),
    "file": SizingInfo("bait", "mempunyai"),
    "array": SizingInfo("elemen", "mempunyai"),
    "slice": SizingInfo("elemen", "mempunyai"),
    "set": SizingInfo("elemen", "mempunyai"),
    "map": SizingInfo("entri", "mempunyai"),
}

FORMAT_NOUNS = {
    "regex": "input",
    "email": "alamat e-mel",
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
    "datetime": "tarikh masa ISO",
    "date": "tarikh ISO",
    "time": "masa ISO",
    "duration": "tempoh ISO",
    "ipv4": "alamat IPv4",
    "ipv6": "alamat IPv6",
    "mac": "alamat MAC",
    "cidrv4": "julat IPv4",
    "cidrv6": "julat IPv6",
    "base64": "string dikodkan base64",
    "base64url": "string dikodkan base64url",
    "json_string": "string JSON",
    "e164": "nombor E.164",
    "jwt": "JWT",
    "template_literal": "input",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "nombor",
    "array": "senarai",
    "slice": "senarai",
    "string": "rentetan",
    "bool": "boolean",
    "object": "objek",
    "map": "peta",
    "nil": "null",
    "undefined": "tidak ditakrifkan",
    "function": "fungsi",
    "date": "tarikh",
    "file": "fail",
    "set": "set",
}

CATALOG = MessageCatalog(
    invalid_type="Input tidak sah: dijangka {expected}, diterima {received}",
    invalid_value_empty="Nilai tidak sah",
    invalid_value_single="Input tidak sah: dijangka {value}",
    invalid_value_multiple="Pilihan tidak sah: dijangka salah satu daripada {values}",
    value_separator="|",
    invalid_format_empty="Format tidak sah",
    not_multiple_of_empty="Nombor tidak sah: perlu gandaan",
    not_multiple_of="Nombor tidak sah: perlu gandaan {divisor}",
    unrecognized_keys_empty="Kunci tidak dikenali",
    key_separator=", ",
    unrecognized_key="Kunci tidak dikenali: {keys}",
    unrecognized_keys="Kunci tidak dikenali: {keys}",
    invalid_key_empty="Kunci tidak sah",
    invalid_key="Kunci tidak sah dalam {origin}",
    invalid_union="Input tidak sah",
    invalid_element_empty="Elemen tidak sah",
    invalid_element="Nilai tidak sah dalam {origin}",
    default_field_type="medan",
    missing_required="{field_type} yang diperlukan tiada",
    missing_required_named="{field_type} yang diperlukan tiada: {field_name}",
    unknown_type="tidak diketahui",
    type_conversion="Penukaran jenis gagal: tidak dapat menukar {from_type} kepada {to_type}",
    invalid_schema="Skema tidak sah: {reason}",
    invalid_schema_empty="Definisi skema tidak sah",
    default_discriminator="diskriminator",
    invalid_discriminator="Medan diskriminator tidak sah atau tiada: {field}",
    default_conflict_type="nilai",
    incompatible_types="Tidak dapat menggabungkan {conflict_type}: jenis tidak serasi",
    nil_pointer="Penunjuk null dikesan",
    default_origin="nilai",
    too_small="Terlalu kecil",
    too_big="Terlalu besar",
    too_small_sized="Terlalu kecil: dijangka {origin} {verb} {adj}{threshold} {unit}",
    too_big_sized="Terlalu besar: dijangka {origin} {verb} {adj}{threshold} {unit}",
    too_small_unsized="Terlalu kecil: dijangka {origin} adalah {adj}{threshold}",
    too_big_unsized="Terlalu besar: dijangka {origin} adalah {adj}{threshold}",
    starts_with_empty="String tidak sah: mesti bermula dengan awalan tertentu",
    starts_with='String tidak sah: mesti bermula dengan "{operand}"',
    ends_with_empty="String tidak sah: mesti berakhir dengan akhiran tertentu",
    ends_with='String tidak sah: mesti berakhir dengan "{operand}"',
    includes_empty="String tidak sah: mesti mengandungi substring tertentu",
    includes='String tidak sah: mesti mengandungi "{operand}"',
    regex_empty="String tidak sah: mesti sepadan dengan corak",
    regex="String tidak sah: mesti sepadan dengan corak {operand}",
    invalid_format_noun="{noun} tidak sah",
    invalid_input="Input tidak sah",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "ms")


def format_message_ms(issue: Issue) -> str:
    """Render an issue in Malay."""
    return FORMATTER(issue)


def config_ms() -> LocaleConfig:
    """Configuration installing the Malay formatter."""
    return LocaleConfig(FORMATTER, "ms")
