"""Indonesian messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_id", "format_message_id"]

SIZABLE = {
    "string": SizingInfo("karakter", "memiliki"),
    "file": SizingInfo("byte", "memiliki"),
    "array": SizingInfo("item", "memiliki"),
    "slice": SizingInfo("item", "memiliki"),
    "set": SizingInfo("item", "memiliki"),
    "map": SizingInfo("entri", "memiliki"),
}

FORMAT_NOUNS = {
    "regex": "input",
    "email": "alamat email",
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
    "datetime": "tanggal dan waktu format ISO",
    "date": "tanggal format ISO",
    "time": "jam format ISO",
    "duration": "durasi format ISO",
    "ipv4": "alamat IPv4",
    "ipv6": "alamat IPv6",
    "mac": "alamat MAC",
    "cidrv4": "rentang alamat IPv4",
    "cidrv6": "rentang alamat IPv6",
    "base64": "string dengan enkode base64",
    "base64url": "string dengan enkode base64url",
    "json_string": "string JSON",
    "e164": "angka E.164",
    "jwt": "JWT",
    "template_literal": "input",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "angka",
    "array": "array",
    "slice": "array",
    "string": "string",
    "bool": "boolean",
    "object": "objek",
    "map": "peta",
    "nil": "null",
    "undefined": "tidak terdefinisi",
    "function": "fungsi",
    "date": "tanggal",
    "file": "file",
    "set": "set",
}

CATALOG = MessageCatalog(
    invalid_type="Input tidak valid: diharapkan {expected}, diterima {received}",
    invalid_value_empty="Nilai tidak valid",
    invalid_value_single="Input tidak valid: diharapkan {value}",
    invalid_value_multiple="Pilihan tidak valid: diharapkan salah satu dari {values}",
    value_separator="|",
    invalid_format_empty="Format tidak valid",
    not_multiple_of_empty="Angka tidak valid: harus kelipatan",
    not_multiple_of="Angka tidak valid: harus kelipatan dari {divisor}",
    unrecognized_keys_empty="Kunci tidak dikenali",
    key_separator=", ",
    unrecognized_key="Kunci tidak dikenali: {keys}",
    unrecognized_keys="Kunci tidak dikenali: {keys}",
    invalid_key_empty="Kunci tidak valid",
    invalid_key="Kunci tidak valid di {origin}",
    invalid_union="Input tidak valid",
    invalid_element_empty="Elemen tidak valid",
    invalid_element="Nilai tidak valid di {origin}",
    default_field_type="field",
    missing_required="{field_type} wajib tidak ada",
    missing_required_named="{field_type} wajib tidak ada: {field_name}",
    unknown_type="tidak diketahui",
    type_conversion="Konversi tipe gagal: tidak dapat mengkonversi {from_type} ke {to_type}",
    invalid_schema="Skema tidak valid: {reason}",
    invalid_schema_empty="Definisi skema tidak valid",
    default_discriminator="diskriminator",
    invalid_discriminator="Field diskriminator tidak valid atau tidak ada: {field}",
    default_conflict_type="nilai",
    incompatible_types="Tidak dapat menggabungkan {conflict_type}: tipe tidak kompatibel",
    nil_pointer="Pointer null terdeteksi",
    default_origin="value",
    too_small="Terlalu kecil",
    too_big="Terlalu besar",
    too_small_sized="Terlalu kecil: diharapkan {origin} memiliki {adj}{threshold} {unit}",
    too_big_sized="Terlalu besar: diharapkan {origin} memiliki {adj}{threshold} {unit}",
    too_small_unsized="Terlalu kecil: diharapkan {origin} menjadi {adj}{threshold}",
    too_big_unsized="Terlalu besar: diharapkan {origin} menjadi {adj}{threshold}",
    starts_with_empty="String tidak valid: harus dimulai dengan prefix yang ditentukan",
    starts_with='String tidak valid: harus dimulai dengan "{operand}"',
    ends_with_empty="String tidak valid: harus berakhir dengan suffix yang ditentukan",
    ends_with='String tidak valid: harus berakhir dengan "{operand}"',
    includes_empty="String tidak valid: harus menyertakan substring yang ditentukan",
    includes='String tidak valid: harus menyertakan "{operand}"',
    regex_empty="String tidak valid: harus sesuai pola",
    regex="String tidak valid: harus sesuai pola {operand}",
    invalid_format_noun="{noun} tidak valid",
    invalid_input="Input tidak valid",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "id")


def format_message_id(issue: Issue) -> str:
    """Render an issue in Indonesian."""
    return FORMATTER(issue)


def config_id() -> LocaleConfig:
    """Configuration installing the Indonesian formatter."""
    return LocaleConfig(FORMATTER, "id")
