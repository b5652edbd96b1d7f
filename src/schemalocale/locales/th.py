"""Thai messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_th", "format_message_th"]

SIZABLE = {
    "string": SizingInfo("ตัวอักษร", "ควรมี"),
    "file": SizingInfo("ไบต์", "ควรมี"),
    "array": SizingInfo("รายการ", "ควรมี"),
    "slice": SizingInfo("รายการ", "ควรมี"),
    "set": SizingInfo("รายการ", "ควรมี"),
    "map": SizingInfo("รายการ", "ควรมี"),
}

FORMAT_NOUNS = {
    "regex": "ข้อมูลที่ป้อน",
    "email": "ที่อยู่อีเมล",
    "url": "URL",
    "emoji": "อิโมจิ",
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
    "datetime": "วันที่เวลาแบบ ISO",
    "date": "วันที่แบบ ISO",
    "time": "เวลาแบบ ISO",
    "duration": "ช่วงเวลาแบบ ISO",
    "ipv4": "ที่อยู่ IPv4",
    "ipv6": "ที่อยู่ IPv6",
    "mac": "ที่อยู่ MAC",
    "cidrv4": "ช่วง IP แบบ IPv4",
    "cidrv6": "ช่วง IP แบบ IPv6",
    "base64": "ข้อความแบบ Base64",
    "base64url": "ข้อความแบบ Base64 สำหรับ URL",
    "json_string": "ข้อความแบบ JSON",
    "e164": "เบอร์โทรศัพท์ระหว่างประเทศ (E.164)",
    "jwt": "โทเคน JWT",
    "template_literal": "ข้อมูลที่ป้อน",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "ตัวเลข",
    "array": "อาร์เรย์ (Array)",
    "slice": "อาร์เรย์ (Array)",
    "string": "ข้อความ",
    "bool": "บูลีน",
    "object": "อ็อบเจกต์",
    "map": "แผนที่",
    "nil": "ไม่มีค่า (null)",
    "undefined": "ไม่ได้กำหนดค่า",
    "function": "ฟังก์ชัน",
    "date": "วันที่",
    "file": "ไฟล์",
    "set": "เซต",
}

CATALOG = MessageCatalog(
    invalid_type="ประเภทข้อมูลไม่ถูกต้อง: ควรเป็น {expected} แต่ได้รับ {received}",
    invalid_value_empty="ค่าไม่ถูกต้อง",
    invalid_value_single="ค่าไม่ถูกต้อง: ควรเป็น {value}",
    invalid_value_multiple="ตัวเลือกไม่ถูกต้อง: ควรเป็นหนึ่งใน {values}",
    value_separator="|",
    invalid_format_empty="รูปแบบไม่ถูกต้อง",
    not_multiple_of_empty="ตัวเลขไม่ถูกต้อง: ต้องเป็นจำนวนที่หารลงตัว",
    not_multiple_of="ตัวเลขไม่ถูกต้อง: ต้องเป็นจำนวนที่หารด้วย {divisor} ได้ลงตัว",
    unrecognized_keys_empty="พบคีย์ที่ไม่รู้จัก",
    key_separator=", ",
    unrecognized_key="พบคีย์ที่ไม่รู้จัก: {keys}",
    unrecognized_keys="พบคีย์ที่ไม่รู้จัก: {keys}",
    invalid_key_empty="คีย์ไม่ถูกต้อง",
    invalid_key="คีย์ไม่ถูกต้องใน {origin}",
    invalid_union="ข้อมูลไม่ถูกต้อง: ไม่ตรงกับรูปแบบยูเนียนที่กำหนดไว้",
    invalid_element_empty="รายการไม่ถูกต้อง",
    invalid_element="ข้อมูลไม่ถูกต้องใน {origin}",
    default_field_type="ฟิลด์",
    missing_required="ไม่พบ{field_type}ที่จำเป็น",
    missing_required_named="ไม่พบ{field_type}ที่จำเป็น: {field_name}",
    unknown_type="ไม่ทราบ",
    type_conversion="การแปลงประเภทข้อมูลล้มเหลว: ไม่สามารถแปลง {from_type} เป็น {to_type} ได้",
    invalid_schema="สคีมาไม่ถูกต้อง: {reason}",
    invalid_schema_empty="การกำหนดสคีมาไม่ถูกต้อง",
    default_discriminator="ตัวแบ่งแยก",
    invalid_discriminator="ฟิลด์ตัวแบ่งแยกไม่ถูกต้องหรือไม่มี: {field}",
    default_conflict_type="ค่า",
    incompatible_types="ไม่สามารถรวม {conflict_type} ได้: ประเภทข้อมูลไม่เข้ากัน",
    nil_pointer="พบตัวชี้ที่ไม่มีค่า (null pointer)",
    default_origin="ค่า",
    too_small="น้อยกว่ากำหนด",
    too_big="เกินกำหนด",
    too_small_sized="น้อยกว่ากำหนด: {origin} ควรมี{adj} {threshold} {unit}",
    too_big_sized="เกินกำหนด: {origin} ควรมี{adj} {threshold} {unit}",
    too_small_unsized="น้อยกว่ากำหนด: {origin} ควรมี{adj} {threshold}",
    too_big_unsized="เกินกำหนด: {origin} ควรมี{adj} {threshold}",
    starts_with_empty="รูปแบบไม่ถูกต้อง: ข้อความต้องขึ้นต้นด้วยคำนำหน้าที่กำหนด",
    starts_with='รูปแบบไม่ถูกต้อง: ข้อความต้องขึ้นต้นด้วย "{operand}"',
    ends_with_empty="รูปแบบไม่ถูกต้อง: ข้อความต้องลงท้ายด้วยคำลงท้ายที่กำหนด",
    ends_with='รูปแบบไม่ถูกต้อง: ข้อความต้องลงท้ายด้วย "{operand}"',
    includes_empty="รูปแบบไม่ถูกต้อง: ข้อความต้องมีข้อความย่อยที่กำหนดอยู่ในข้อความ",
    includes='รูปแบบไม่ถูกต้อง: ข้อความต้องมี "{operand}" อยู่ในข้อความ',
    regex_empty="รูปแบบไม่ถูกต้อง: ต้องตรงกับรูปแบบที่กำหนด",
    regex="รูปแบบไม่ถูกต้อง: ต้องตรงกับรูปแบบที่กำหนด {operand}",
    invalid_format_noun="รูปแบบไม่ถูกต้อง: {noun}",
    invalid_input="ข้อมูลไม่ถูกต้อง",
    comparison_words={">=": "อย่างน้อย", ">": "มากกว่า", "<=": "ไม่เกิน", "<": "น้อยกว่า"},
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "th")


def format_message_th(issue: Issue) -> str:
    """Render an issue in Thai."""
    return FORMATTER(issue)


def config_th() -> LocaleConfig:
    """Configuration installing the Thai formatter."""
    return LocaleConfig(FORMATTER, "th")
