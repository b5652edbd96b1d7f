"""Arabic messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_ar", "format_message_ar"]

SIZABLE = {
    "string": SizingInfo("حرف", "أن يحوي"),
    "file": SizingInfo("بايت", "أن يحوي"),
    "array": SizingInfo("عنصر", "أن يحوي"),
    "slice": SizingInfo("عنصر", "أن يحوي"),
    "set": SizingInfo("عنصر", "أن يحوي"),
    "map": SizingInfo("مدخل", "أن يحوي"),
}

FORMAT_NOUNS = {
    "regex": "مدخل",
    "email": "بريد إلكتروني",
    "url": "رابط",
    "emoji": "إيموجي",
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
    "datetime": "تاريخ ووقت بمعيار ISO",
    "date": "تاريخ بمعيار ISO",
    "time": "وقت بمعيار ISO",
    "duration": "مدة بمعيار ISO",
    "ipv4": "عنوان IPv4",
    "ipv6": "عنوان IPv6",
    "mac": "عنوان MAC",
    "cidrv4": "مدى عناوين بصيغة IPv4",
    "cidrv6": "مدى عناوين بصيغة IPv6",
    "base64": "نَص بترميز base64",
    "base64url": "نَص بترميز base64url",
    "json_string": "نَص على هيئة JSON",
    "e164": "رقم هاتف بمعيار E.164",
    "jwt": "JWT",
    "template_literal": "مدخل",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "رقم",
    "array": "مصفوفة",
    "slice": "مصفوفة",
    "string": "نَص",
    "bool": "قيمة منطقية",
    "object": "كائن",
    "map": "خريطة",
    "nil": "فارغ",
    "undefined": "غير معرّف",
    "function": "دالة",
    "date": "تاريخ",
    "file": "ملف",
    "set": "مجموعة",
}

CATALOG = MessageCatalog(
    invalid_type="مدخلات غير مقبولة: يفترض إدخال {expected}، ولكن تم إدخال {received}",
    invalid_value_empty="قيمة غير مقبولة",
    invalid_value_single="مدخلات غير مقبولة: يفترض إدخال {value}",
    invalid_value_multiple="اختيار غير مقبول: يتوقع انتقاء أحد هذه الخيارات: {values}",
    value_separator="|",
    invalid_format_empty="صيغة غير مقبولة",
    not_multiple_of_empty="رقم غير مقبول: يجب أن يكون من المضاعفات",
    not_multiple_of="رقم غير مقبول: يجب أن يكون من مضاعفات {divisor}",
    unrecognized_keys_empty="معرف غريب",
    key_separator="، ",
    unrecognized_key="معرف غريب: {keys}",
    unrecognized_keys="معرفات غريبة: {keys}",
    invalid_key_empty="معرف غير مقبول",
    invalid_key="معرف غير مقبول في {origin}",
    invalid_union="مدخل غير مقبول",
    invalid_element_empty="عنصر غير مقبول",
    invalid_element="مدخل غير مقبول في {origin}",
    default_field_type="حقل",
    missing_required="{field_type} مطلوب مفقود",
    missing_required_named="{field_type} مطلوب مفقود: {field_name}",
    unknown_type="غير معروف",
    type_conversion="فشل تحويل النوع: لا يمكن تحويل {from_type} إلى {to_type}",
    invalid_schema="مخطط غير مقبول: {reason}",
    invalid_schema_empty="تعريف مخطط غير مقبول",
    default_discriminator="المميز",
    invalid_discriminator="حقل مميز غير مقبول أو مفقود: {field}",
    default_conflict_type="القيم",
    incompatible_types="لا يمكن دمج {conflict_type}: أنواع غير متوافقة",
    nil_pointer="تم اكتشاف مؤشر فارغ",
    default_origin="القيمة",
    too_small="أصغر من اللازم",
    too_big="أكبر من اللازم",
    too_small_sized="أصغر من اللازم: يفترض لـ {origin} أن يكون {adj} {threshold} {unit}",
    too_big_sized="أكبر من اللازم: يفترض أن تكون {origin} {adj} {threshold} {unit}",
    too_small_unsized="أصغر من اللازم: يفترض لـ {origin} أن يكون {adj} {threshold}",
    too_big_unsized="أكبر من اللازم: يفترض أن تكون {origin} {adj} {threshold}",
    starts_with_empty="نَص غير مقبول: يجب أن يبدأ بالبادئة المحددة",
    starts_with='نَص غير مقبول: يجب أن يبدأ بـ "{operand}"',
    ends_with_empty="نَص غير مقبول: يجب أن ينتهي باللاحقة المحددة",
    ends_with='نَص غير مقبول: يجب أن ينتهي بـ "{operand}"',
    includes_empty="نَص غير مقبول: يجب أن يتضمَّن السلسلة الفرعية المحددة",
    includes='نَص غير مقبول: يجب أن يتضمَّن "{operand}"',
    regex_empty="نَص غير مقبول: يجب أن يطابق النمط",
    regex="نَص غير مقبول: يجب أن يطابق النمط {operand}",
    invalid_format_noun="{noun} غير مقبول",
    invalid_input="مدخل غير مقبول",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "ar")


def format_message_ar(issue: Issue) -> str:
    """Render an issue in Arabic."""
    return FORMATTER(issue)


def config_ar() -> LocaleConfig:
    """Configuration installing the Arabic formatter."""
    return LocaleConfig(FORMATTER, "ar")
