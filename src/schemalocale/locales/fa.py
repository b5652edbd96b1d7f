"""Persian messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_fa", "format_message_fa"]

SIZABLE = {
    "string": SizingInfo("کاراکتر", "داشته باشد"),
    "file": SizingInfo("بایت", "داشته باشد"),
    "array": SizingInfo("آیتم", "داشته باشد"),
    "slice": SizingInfo("آیتم", "داشته باشد"),
    "set": SizingInfo("آیتم", "داشته باشد"),
    "map": SizingInfo("ورودی", "داشته باشد"),
}

FORMAT_NOUNS = {
    "regex": "ورودی",
    "email": "آدرس ایمیل",
    "url": "URL",
    "emoji": "ایموجی",
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
    "datetime": "تاریخ و زمان ایزو",
    "date": "تاریخ ایزو",
    "time": "زمان ایزو",
    "duration": "مدت زمان ایزو",
    "ipv4": "آدرس IPv4",
    "ipv6": "آدرس IPv6",
    "mac": "آدرس MAC",
    "cidrv4": "دامنه IPv4",
    "cidrv6": "دامنه IPv6",
    "base64": "رشته base64",
    "base64url": "رشته base64url",
    "json_string": "رشته JSON",
    "e164": "عدد E.164",
    "jwt": "JWT",
    "template_literal": "ورودی",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "عدد",
    "array": "آرایه",
    "slice": "آرایه",
    "string": "رشته",
    "bool": "بولی",
    "object": "شیء",
    "map": "نقشه",
    "nil": "تهی",
    "undefined": "تعریف نشده",
    "function": "تابع",
    "date": "تاریخ",
    "file": "فایل",
    "set": "مجموعه",
}

CATALOG = MessageCatalog(
    invalid_type="ورودی نامعتبر: می‌بایست {expected} می‌بود، {received} دریافت شد",
    invalid_value_empty="مقدار نامعتبر",
    invalid_value_single="ورودی نامعتبر: می‌بایست {value} می‌بود",
    invalid_value_multiple="گزینه نامعتبر: می‌بایست یکی از {values} می‌بود",
    value_separator="|",
    invalid_format_empty="فرمت نامعتبر",
    not_multiple_of_empty="عدد نامعتبر: باید مضرب باشد",
    not_multiple_of="عدد نامعتبر: باید مضرب {divisor} باشد",
    unrecognized_keys_empty="کلید ناشناس",
    key_separator=", ",
    unrecognized_key="کلید ناشناس: {keys}",
    unrecognized_keys="کلیدهای ناشناس: {keys}",
    invalid_key_empty="کلید نامعتبر",
    invalid_key="کلید ناشناس در {origin}",
    invalid_union="ورودی نامعتبر",
    invalid_element_empty="عنصر نامعتبر",
    invalid_element="مقدار نامعتبر در {origin}",
    default_field_type="فیلد",
    missing_required="{field_type} اجباری وجود ندارد",
    missing_required_named="{field_type} اجباری وجود ندارد: {field_name}",
    unknown_type="ناشناخته",
    type_conversion="تبدیل نوع ناموفق: نمی‌توان {from_type} را به {to_type} تبدیل کرد",
    invalid_schema="اسکیما نامعتبر: {reason}",
    invalid_schema_empty="تعریف اسکیما نامعتبر",
    default_discriminator="تفکیک‌کننده",
    invalid_discriminator="فیلد تفکیک‌کننده نامعتبر یا ناموجود: {field}",
    default_conflict_type="مقادیر",
    incompatible_types="نمی‌توان {conflict_type} را ادغام کرد: انواع ناسازگار",
    nil_pointer="اشاره‌گر تهی یافت شد",
    default_origin="مقدار",
    too_small="خیلی کوچک",
    too_big="خیلی بزرگ",
    too_small_sized="خیلی کوچک: {origin} باید {adj}{threshold} {unit} باشد",
    too_big_sized="خیلی بزرگ: {origin} باید {adj}{threshold} {unit} باشد",
    too_small_unsized="خیلی کوچک: {origin} باید {adj}{threshold} باشد",
    too_big_unsized="خیلی بزرگ: {origin} باید {adj}{threshold} باشد",
    starts_with_empty="رشته نامعتبر: باید با پیشوند مشخص شده شروع شود",
    starts_with='رشته نامعتبر: باید با "{operand}" شروع شود',
    ends_with_empty="رشته نامعتبر: باید با پسوند مشخص شده تمام شود",
    ends_with='رشته نامعتبر: باید با "{operand}" تمام شود',
    includes_empty="رشته نامعتبر: باید شامل زیررشته مشخص شده باشد",
    includes='رشته نامعتبر: باید شامل "{operand}" باشد',
    regex_empty="رشته نامعتبر: باید با الگو مطابقت داشته باشد",
    regex="رشته نامعتبر: باید با الگوی {operand} مطابقت داشته باشد",
    invalid_format_noun="{noun} نامعتبر",
    invalid_input="ورودی نامعتبر",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "fa")


def format_message_fa(issue: Issue) -> str:
    """Render an issue in Persian."""
    return FORMATTER(issue)


def config_fa() -> LocaleConfig:
    """Configuration installing the Persian formatter."""
    return LocaleConfig(FORMATTER, "fa")
