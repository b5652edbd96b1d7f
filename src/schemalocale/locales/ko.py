"""Korean messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_ko", "format_message_ko"]

SIZABLE = {
    "string": SizingInfo("문자", ""),
    "file": SizingInfo("바이트", ""),
    "array": SizingInfo("개", ""),
    "slice": SizingInfo("개", ""),
    "set": SizingInfo("개", ""),
    "map": SizingInfo("개", ""),
}

FORMAT_NOUNS = {
    "regex": "입력",
    "email": "이메일 주소",
    "url": "URL",
    "emoji": "이모지",
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
    "datetime": "ISO 날짜시간",
    "date": "ISO 날짜",
    "time": "ISO 시간",
    "duration": "ISO 기간",
    "ipv4": "IPv4 주소",
    "ipv6": "IPv6 주소",
    "mac": "MAC 주소",
    "cidrv4": "IPv4 범위",
    "cidrv6": "IPv6 범위",
    "base64": "base64 인코딩 문자열",
    "base64url": "base64url 인코딩 문자열",
    "json_string": "JSON 문자열",
    "e164": "E.164 번호",
    "jwt": "JWT",
    "template_literal": "입력",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "숫자",
    "array": "배열",
    "slice": "배열",
    "string": "문자열",
    "bool": "불리언",
    "object": "객체",
    "map": "맵",
    "nil": "null",
    "undefined": "undefined",
    "function": "함수",
    "date": "날짜",
    "file": "파일",
    "set": "세트",
}

CATALOG = MessageCatalog(
    invalid_type="잘못된 입력: 예상 타입은 {expected}, 받은 타입은 {received}입니다",
    invalid_value_empty="잘못된 값",
    invalid_value_single="잘못된 입력: 값은 {value} 이어야 합니다",
    invalid_value_multiple="잘못된 옵션: {values} 중 하나여야 합니다",
    value_separator=" 또는 ",
    invalid_format_empty="잘못된 형식",
    not_multiple_of_empty="잘못된 숫자: 배수여야 합니다",
    not_multiple_of="잘못된 숫자: {divisor}의 배수여야 합니다",
    unrecognized_keys_empty="인식할 수 없는 키",
    key_separator=", ",
    unrecognized_key="인식할 수 없는 키: {keys}",
    unrecognized_keys="인식할 수 없는 키: {keys}",
    invalid_key_empty="잘못된 키",
    invalid_key="잘못된 키: {origin}",
    invalid_union="잘못된 입력",
    invalid_element_empty="잘못된 요소",
    invalid_element="잘못된 값: {origin}",
    default_field_type="필드",
    missing_required="필수 {field_type}이(가) 없습니다",
    missing_required_named="필수 {field_type}: {field_name}이(가) 없습니다",
    unknown_type="알 수 없음",
    type_conversion="타입 변환 실패: {from_type}을(를) {to_type}(으)로 변환할 수 없습니다",
    invalid_schema="잘못된 스키마: {reason}",
    invalid_schema_empty="잘못된 스키마 정의",
    default_discriminator="판별자",
    invalid_discriminator="잘못되거나 누락된 판별자 필드: {field}",
    default_conflict_type="값",
    incompatible_types="{conflict_type}을(를) 병합할 수 없습니다: 호환되지 않는 타입",
    nil_pointer="nil 포인터가 발견되었습니다",
    default_origin="값",
    too_small="너무 작습니다",
    too_big="너무 큽니다",
    too_small_sized="{origin}이(가) 너무 작습니다: {threshold}{unit} {adj}",
    too_big_sized="{origin}이(가) 너무 큽니다: {threshold}{unit} {adj}",
    too_small_unsized="{origin}이(가) 너무 작습니다: {threshold} {adj}",
    too_big_unsized="{origin}이(가) 너무 큽니다: {threshold} {adj}",
    starts_with_empty="잘못된 문자열: 지정된 접두사로 시작해야 합니다",
    starts_with='잘못된 문자열: "{operand}"(으)로 시작해야 합니다',
    ends_with_empty="잘못된 문자열: 지정된 접미사로 끝나야 합니다",
    ends_with='잘못된 문자열: "{operand}"(으)로 끝나야 합니다',
    includes_empty="잘못된 문자열: 지정된 문자열을 포함해야 합니다",
    includes='잘못된 문자열: "{operand}"을(를) 포함해야 합니다',
    regex_empty="잘못된 문자열: 패턴과 일치해야 합니다",
    regex="잘못된 문자열: 정규식 {operand} 패턴과 일치해야 합니다",
    invalid_format_noun="잘못된 {noun}",
    invalid_input="잘못된 입력",
    comparison_words={
        ">=": "이상이어야 합니다",
        ">": "초과여야 합니다",
        "<=": "이하여야 합니다",
        "<": "미만이어야 합니다",
    },
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "ko")


def format_message_ko(issue: Issue) -> str:
    """Render an issue in Korean."""
    return FORMATTER(issue)


def config_ko() -> LocaleConfig:
    """Configuration installing the Korean formatter."""
    return LocaleConfig(FORMATTER, "ko")
