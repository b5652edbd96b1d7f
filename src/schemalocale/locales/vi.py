"""Vietnamese messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_vi", "format_message_vi"]

SIZABLE = {
    "string": SizingInfo("ký tự", "có"),
    "file": SizingInfo("byte", "có"),
    "array": SizingInfo("phần tử", "có"),
    "slice": SizingInfo("phần tử", "có"),
    "set": SizingInfo("phần tử", "có"),
    "map": SizingInfo("mục", "có"),
}

FORMAT_NOUNS = {
    "regex": "đầu vào",
    "email": "địa chỉ email",
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
    "datetime": "ngày giờ ISO",
    "date": "ngày ISO",
    "time": "giờ ISO",
    "duration": "khoảng thời gian ISO",
    "ipv4": "địa chỉ IPv4",
    "ipv6": "địa chỉ IPv6",
    "mac": "địa chỉ MAC",
    "cidrv4": "dải IPv4",
    "cidrv6": "dải IPv6",
    "base64": "chuỗi mã hóa base64",
    "base64url": "chuỗi mã hóa base64url",
    "json_string": "chuỗi JSON",
    "e164": "số E.164",
    "jwt": "JWT",
    "template_literal": "đầu vào",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "số",
    "array": "mảng",
    "slice": "mảng",
    "string": "chuỗi",
    "bool": "boolean",
    "object": "đối tượng",
    "map": "bản đồ",
    "nil": "null",
    "undefined": "không xác định",
    "function": "hàm",
    "date": "ngày",
    "file": "tệp",
    "set": "tập hợp",
}

CATALOG = MessageCatalog(
    invalid_type="Đầu vào không hợp lệ: mong đợi {expected}, nhận được {received}",
    invalid_value_empty="Giá trị không hợp lệ",
    invalid_value_single="Đầu vào không hợp lệ: mong đợi {value}",
    invalid_value_multiple="Tùy chọn không hợp lệ: mong đợi một trong các giá trị {values}",
    value_separator="|",
    invalid_format_empty="Định dạng không hợp lệ",
    not_multiple_of_empty="Số không hợp lệ: phải là bội số",
    not_multiple_of="Số không hợp lệ: phải là bội số của {divisor}",
    unrecognized_keys_empty="Khóa không được nhận dạng",
    key_separator=", ",
    unrecognized_key="Khóa không được nhận dạng: {keys}",
    unrecognized_keys="Khóa không được nhận dạng: {keys}",
    invalid_key_empty="Khóa không hợp lệ",
    invalid_key="Khóa không hợp lệ trong {origin}",
    invalid_union="Đầu vào không hợp lệ",
    invalid_element_empty="Phần tử không hợp lệ",
    invalid_element="Giá trị không hợp lệ trong {origin}",
    default_field_type="trường",
    missing_required="Thiếu {field_type} bắt buộc",
    missing_required_named="Thiếu {field_type} bắt buộc: {field_name}",
    unknown_type="không xác định",
    type_conversion="Chuyển đổi kiểu thất bại: không thể chuyển {from_type} sang {to_type}",
    invalid_schema="Lược đồ không hợp lệ: {reason}",
    invalid_schema_empty="Định nghĩa lược đồ không hợp lệ",
    default_discriminator="bộ phân biệt",
    invalid_discriminator="Trường phân biệt không hợp lệ hoặc bị thiếu: {field}",
    default_conflict_type="giá trị",
    incompatible_types="Không thể hợp nhất {conflict_type}: kiểu không tương thích",
    nil_pointer="Phát hiện con trỏ null",
    default_origin="giá trị",
    too_small="Quá nhỏ",
    too_big="Quá lớn",
    too_small_sized="Quá nhỏ: mong đợi {origin} {verb} {adj}{threshold} {unit}",
    too_big_sized="Quá lớn: mong đợi {origin} {verb} {adj}{threshold} {unit}",
    too_small_unsized="Quá nhỏ: mong đợi {origin} {adj}{threshold}",
    too_big_unsized="Quá lớn: mong đợi {origin} {adj}{threshold}",
    starts_with_empty="Chuỗi không hợp lệ: phải bắt đầu bằng tiền tố được chỉ định",
    starts_with='Chuỗi không hợp lệ: phải bắt đầu bằng "{operand}"',
    ends_with_empty="Chuỗi không hợp lệ: phải kết thúc bằng hậu tố được chỉ định",
    ends_with='Chuỗi không hợp lệ: phải kết thúc bằng "{operand}"',
    includes_empty="Chuỗi không hợp lệ: phải bao gồm chuỗi con được chỉ định",
    includes='Chuỗi không hợp lệ: phải bao gồm "{operand}"',
    regex_empty="Chuỗi không hợp lệ: phải khớp với mẫu",
    regex="Chuỗi không hợp lệ: phải khớp với mẫu {operand}",
    invalid_format_noun="{noun} không hợp lệ",
    invalid_input="Đầu vào không hợp lệ",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "vi")


def format_message_vi(issue: Issue) -> str:
    """Render an issue in Vietnamese."""
    return FORMATTER(issue)


def config_vi() -> LocaleConfig:
    """Configuration installing the Vietnamese formatter."""
    return LocaleConfig(FORMATTER, "vi")
