"""Simplified Chinese messages.

Received types are translated ("字符串", "空值(nil)"); expected types are
reported as given by the validator. Also registered under the bare "zh" id.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_zh_cn", "format_message_zh_cn"]

SIZABLE = {
    "string": SizingInfo("字符", "包含"),
    "file": SizingInfo("字节", "包含"),
    "array": SizingInfo("项", "包含"),
    "slice": SizingInfo("项", "包含"),
    "set": SizingInfo("项", "包含"),
}

FORMAT_NOUNS = {
    "regex": "输入",
    "email": "电子邮件",
    "url": "URL",
    "emoji": "表情符号",
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
    "datetime": "ISO日期时间",
    "date": "ISO日期",
    "time": "ISO时间",
    "duration": "ISO时长",
    "ipv4": "IPv4地址",
    "ipv6": "IPv6地址",
    "mac": "MAC地址",
    "cidrv4": "IPv4网段",
    "cidrv6": "IPv6网段",
    "base64": "base64编码字符串",
    "base64url": "base64url编码字符串",
    "json_string": "JSON字符串",
    "e164": "E.164号码",
    "jwt": "JWT",
    "template_literal": "输入",
}

# Keyed by received-type label.
TYPE_NAMES = {
    "string": "字符串",
    "number": "数字",
    "bigint": "大整数",
    "bool": "布尔值",
    "float": "浮点数",
    "object": "对象",
    "function": "函数",
    "file": "文件",
    "date": "日期",
    "array": "数组",
    "slice": "切片",
    "map": "映射",
    "NaN": "非数字(NaN)",
    "nil": "空值(nil)",
    "complex": "复数",
}

CATALOG = MessageCatalog(
    invalid_type="无效输入：期望 {expected}，实际接收 {received}",
    invalid_value_empty="无效值",
    invalid_value_single="无效输入：期望 {value}",
    invalid_value_multiple="无效选项：期望以下之一 {values}",
    too_small="数值过小",
    too_big="数值过大",
    too_small_sized="数值过小：期望 {origin} {adj}{threshold} {unit}",
    too_big_sized="数值过大：期望 {origin} {adj}{threshold} {unit}",
    too_small_unsized="数值过小：期望 {origin} {adj}{threshold}",
    too_big_unsized="数值过大：期望 {origin} {adj}{threshold}",
    default_origin="值",
    invalid_format_empty="无效格式",
    starts_with='无效字符串：必须以 "{operand}" 开头',
    starts_with_empty="无效字符串：必须以指定前缀开头",
    ends_with='无效字符串：必须以 "{operand}" 结尾',
    ends_with_empty="无效字符串：必须以指定后缀结尾",
    includes='无效字符串：必须包含 "{operand}"',
    includes_empty="无效字符串：必须包含指定子字符串",
    regex="无效字符串：必须满足正则表达式 {operand}",
    regex_empty="无效字符串：必须满足正则表达式",
    invalid_format_noun="无效{noun}",
    not_multiple_of="无效数字：必须是 {divisor} 的倍数",
    not_multiple_of_empty="无效数字：必须是倍数",
    unrecognized_keys_empty="出现未知的键(key)",
    unrecognized_key="出现未知的键(key): {keys}",
    unrecognized_keys="出现未知的键(key): {keys}",
    invalid_key="{origin} 中的键(key)无效",
    invalid_key_empty="无效的键(key)",
    invalid_union="无效输入",
    invalid_element="{origin} 中包含无效值(value)",
    invalid_element_empty="无效元素",
    missing_required="缺少必填的{field_type}",
    missing_required_named="缺少必填的{field_type}：{field_name}",
    default_field_type="字段",
    type_conversion="类型转换失败：无法将 {from_type} 转换为 {to_type}",
    unknown_type="未知",
    invalid_schema="无效的模式：{reason}",
    invalid_schema_empty="无效的模式定义",
    invalid_discriminator="无效或缺少鉴别器字段：{field}",
    default_discriminator="鉴别器",
    incompatible_types="无法合并 {conflict_type}：类型不兼容",
    default_conflict_type="值",
    nil_pointer="检测到空指针",
    invalid_input="无效输入",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
    translate_expected=False,
)

FORMATTER = IssueFormatter(CATALOG, "zh-CN")


def format_message_zh_cn(issue: Issue) -> str:
    """Render an issue in Simplified Chinese."""
    return FORMATTER(issue)


def config_zh_cn() -> LocaleConfig:
    """Configuration installing the Simplified Chinese formatter."""
    return LocaleConfig(FORMATTER, "zh-CN")
