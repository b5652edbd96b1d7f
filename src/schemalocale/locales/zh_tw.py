""""Traditional Chinese" messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_zh_tw", "format_message_zh_tw"]

SIZABLE = {
    "string": SizingInfo("字元", "擁有"),
    "file": SizingInfo("位元組", "擁有"),
    "array": SizingInfo("項目", "擁有"),
    "slice": SizingInfo("項目", "擁有"),
    "set": SizingInfo("項目", "擁有"),
    "map": SizingInfo("項目", "擁有"),
}

FORMAT_NOUNS = {
    "regex": "輸入",
    "email": "郵件地址",
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
    "datetime": "ISO 日期時間",
    "date": "ISO 日期",
    "time": "ISO 時間",
    "duration": "ISO 期間",
    "ipv4": "IPv4 位址",
    "ipv6": "IPv6 位址",
    "mac": "MAC 位址",
    "cidrv4": "IPv4 範圍",
    "cidrv6": "IPv6 範圍",
    "base64": "base64 編碼字串",
    "base64url": "base64url 編碼字串",
    "json_string": "JSON 字串",
    "e164": "E.164 數值",
    "jwt": "JWT",
    "template_literal": "輸入",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "數字",
    "array": "陣列",
    "slice": "陣列",
    "string": "字串",
    "bool": "布林值",
    "object": "物件",
    "map": "對應表",
    "nil": "null",
    "undefined": "undefined",
    "function": "函式",
    "date": "日期",
    "file": "檔案",
    "set": "集合",
}

CATALOG = MessageCatalog(
    invalid_type="無效的輸入值：預期為 {expected}，但收到 {received}",
    invalid_value_empty="無效的數值",
    invalid_value_single="無效的輸入值：預期為 {value}",
    invalid_value_multiple="無效的選項：預期為以下其中之一 {values}",
    value_separator="|",
    invalid_format_empty="無效的格式",
    not_multiple_of_empty="無效的數字：必須為倍數",
    not_multiple_of="無效的數字：必須為 {divisor} 的倍數",
    unrecognized_keys_empty="無法識別的鍵值",
    key_separator="、",
    unrecognized_key="無法識別的鍵值：{keys}",
    unrecognized_keys="無法識別的鍵值：{keys}",
    invalid_key_empty="無效的鍵值",
    invalid_key="{origin} 中有無效的鍵值",
    invalid_union="無效的輸入值",
    invalid_element_empty="無效的元素",
    invalid_element="{origin} 中有無效的值",
    default_field_type="欄位",
    missing_required="缺少必填的{field_type}",
    missing_required_named="缺少必填的{field_type}：{field_name}",
    unknown_type="未知",
    type_conversion="型別轉換失敗：無法將 {from_type} 轉換為 {to_type}",
    invalid_schema="無效的結構描述：{reason}",
    invalid_schema_empty="無效的結構描述定義",
    default_discriminator="辨別器",
    invalid_discriminator="無效或缺少辨別器欄位：{field}",
    default_conflict_type="數值",
    incompatible_types="無法合併 {conflict_type}：型別不相容",
    nil_pointer="偵測到空指標",
    default_origin="值",
    too_small="數值過小",
    too_big="數值過大",
    too_small_sized="數值過小：預期 {origin} 應為 {adj}{threshold} {unit}",
    too_big_sized="數值過大：預期 {origin} 應為 {adj}{threshold} {unit}",
    too_small_unsized="數值過小：預期 {origin} 應為 {adj}{threshold}",
    too_big_unsized="數值過大：預期 {origin} 應為 {adj}{threshold}",
    starts_with_empty="無效的字串：必須以指定前綴開頭",
    starts_with='無效的字串：必須以 "{operand}" 開頭',
    ends_with_empty="無效的字串：必須以指定後綴結尾",
    ends_with='無效的字串：必須以 "{operand}" 結尾',
    includes_empty="無效的字串：必須包含指定子字串",
    includes='無效的字串：必須包含 "{operand}"',
    regex_empty="無效的字串：必須符合格式",
    regex="無效的字串：必須符合格式 {operand}",
    invalid_format_noun="無效的 {noun}",
    invalid_input="無效的輸入值",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "zh-TW")


def format_message_zh_tw(issue: Issue) -> str:
    """Render an issue in "Traditional Chinese"."""
    return FORMATTER(issue)


def config_zh_tw() -> LocaleConfig:
    """Configuration installing the "Traditional Chinese" formatter."""
    return LocaleConfig(FORMATTER, "zh-TW")
