"""Turkish messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_tr", "format_message_tr"]

SIZABLE = {
    "string": SizingInfo("karakter", "olmalı"),
    "file": SizingInfo("bayt", "olmalı"),
    "array": SizingInfo("öğe", "olmalı"),
    "slice": SizingInfo("öğe", "olmalı"),
    "set": SizingInfo("öğe", "olmalı"),
    "map": SizingInfo("girdi", "olmalı"),
}

FORMAT_NOUNS = {
    "regex": "girdi",
    "email": "e-posta adresi",
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
    "datetime": "ISO tarih ve saat",
    "date": "ISO tarih",
    "time": "ISO saat",
    "duration": "ISO süre",
    "ipv4": "IPv4 adresi",
    "ipv6": "IPv6 adresi",
    "mac": "MAC adresi",
    "cidrv4": "IPv4 aralığı",
    "cidrv6": "IPv6 aralığı",
    "base64": "base64 ile şifrelenmiş metin",
    "base64url": "base64url ile şifrelenmiş metin",
    "json_string": "JSON dizesi",
    "e164": "E.164 sayısı",
    "jwt": "JWT",
    "template_literal": "şablon dizesi",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "sayı",
    "array": "dizi",
    "slice": "dizi",
    "string": "metin",
    "bool": "mantıksal",
    "object": "nesne",
    "map": "harita",
    "nil": "boş",
    "undefined": "tanımsız",
    "function": "fonksiyon",
    "date": "tarih",
    "file": "dosya",
    "set": "küme",
}

CATALOG = MessageCatalog(
    invalid_type="Geçersiz değer: beklenen {expected}, alınan {received}",
    invalid_value_empty="Geçersiz değer",
    invalid_value_single="Geçersiz değer: beklenen {value}",
    invalid_value_multiple="Geçersiz seçenek: aşağıdakilerden biri olmalı: {values}",
    value_separator="|",
    invalid_format_empty="Geçersiz format",
    not_multiple_of_empty="Geçersiz sayı: tam bölünebilmeli",
    not_multiple_of="Geçersiz sayı: {divisor} ile tam bölünebilmeli",
    unrecognized_keys_empty="Tanınmayan anahtar",
    key_separator=", ",
    unrecognized_key="Tanınmayan anahtar: {keys}",
    unrecognized_keys="Tanınmayan anahtarlar: {keys}",
    invalid_key_empty="Geçersiz anahtar",
    invalid_key="{origin} içinde geçersiz anahtar",
    invalid_union="Geçersiz değer",
    invalid_element_empty="Geçersiz öğe",
    invalid_element="{origin} içinde geçersiz değer",
    default_field_type="alan",
    missing_required="Zorunlu {field_type} eksik",
    missing_required_named="Zorunlu {field_type} eksik: {field_name}",
    unknown_type="bilinmeyen",
    type_conversion="Tür dönüştürme başarısız: {from_type} türü {to_type} türüne dönüştürülemiyor",
    invalid_schema="Geçersiz şema: {reason}",
    invalid_schema_empty="Geçersiz şema tanımı",
    default_discriminator="ayrımcı",
    invalid_discriminator="Geçersiz veya eksik ayrımcı alan: {field}",
    default_conflict_type="değerler",
    incompatible_types="{conflict_type} birleştirilemiyor: uyumsuz türler",
    nil_pointer="Boş işaretçi algılandı",
    default_origin="değer",
    too_small="Çok küçük",
    too_big="Çok büyük",
    too_small_sized="Çok küçük: beklenen {origin} {adj}{threshold} {unit}",
    too_big_sized="Çok büyük: beklenen {origin} {adj}{threshold} {unit}",
    too_small_unsized="Çok küçük: beklenen {origin} {adj}{threshold}",
    too_big_unsized="Çok büyük: beklenen {origin} {adj}{threshold}",
    starts_with_empty="Geçersiz metin: belirtilen önek ile başlamalı",
    starts_with='Geçersiz metin: "{operand}" ile başlamalı',
    ends_with_empty="Geçersiz metin: belirtilen sonek ile bitmeli",
    ends_with='Geçersiz metin: "{operand}" ile bitmeli',
    includes_empty="Geçersiz metin: belirtilen alt dizeyi içermeli",
    includes='Geçersiz metin: "{operand}" içermeli',
    regex_empty="Geçersiz metin: desene uymalı",
    regex="Geçersiz metin: {operand} desenine uymalı",
    invalid_format_noun="Geçersiz {noun}",
    invalid_input="Geçersiz değer",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "tr")


def format_message_tr(issue: Issue) -> str:
    """Render an issue in Turkish."""
    return FORMATTER(issue)


def config_tr() -> LocaleConfig:
    """Configuration installing the Turkish formatter."""
    return LocaleConfig(FORMATTER, "tr")
