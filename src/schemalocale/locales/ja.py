"""Japanese messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_ja", "format_message_ja"]

SIZABLE = {
    "string": SizingInfo("文字", "である"),
    "file": SizingInfo("バイト", "である"),
    "array": SizingInfo("要素", "である"),
    "slice": SizingInfo("要素", "である"),
    "set": SizingInfo("要素", "である"),
    "map": SizingInfo("エントリ", "である"),
}

FORMAT_NOUNS = {
    "regex": "入力値",
    "email": "メールアドレス",
    "url": "URL",
    "emoji": "絵文字",
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
    "datetime": "ISO日時",
    "date": "ISO日付",
    "time": "ISO時刻",
    "duration": "ISO期間",
    "ipv4": "IPv4アドレス",
    "ipv6": "IPv6アドレス",
    "mac": "MACアドレス",
    "cidrv4": "IPv4範囲",
    "cidrv6": "IPv6範囲",
    "base64": "base64エンコード文字列",
    "base64url": "base64urlエンコード文字列",
    "json_string": "JSON文字列",
    "e164": "E.164番号",
    "jwt": "JWT",
    "template_literal": "入力値",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "数値",
    "array": "配列",
    "slice": "配列",
    "string": "文字列",
    "bool": "真偽値",
    "object": "オブジェクト",
    "map": "マップ",
    "nil": "null",
    "undefined": "undefined",
    "function": "関数",
    "date": "日付",
    "file": "ファイル",
    "set": "セット",
}

CATALOG = MessageCatalog(
    invalid_type="無効な入力: {expected}が期待されましたが、{received}が入力されました",
    invalid_value_empty="無効な値",
    invalid_value_single="無効な入力: {value}が期待されました",
    invalid_value_multiple="無効な選択: {values}のいずれかである必要があります",
    value_separator="、",
    invalid_format_empty="無効な形式",
    not_multiple_of_empty="無効な数値: 倍数である必要があります",
    not_multiple_of="無効な数値: {divisor}の倍数である必要があります",
    unrecognized_keys_empty="認識されていないキー",
    key_separator="、",
    unrecognized_key="認識されていないキー: {keys}",
    unrecognized_keys="認識されていないキー群: {keys}",
    invalid_key_empty="無効なキー",
    invalid_key="{origin}内の無効なキー",
    invalid_union="無効な入力",
    invalid_element_empty="無効な要素",
    invalid_element="{origin}内の無効な値",
    default_field_type="フィールド",
    missing_required="必須の{field_type}がありません",
    missing_required_named="必須の{field_type}: {field_name}がありません",
    unknown_type="不明",
    type_conversion="型変換エラー: {from_type}を{to_type}に変換できません",
    invalid_schema="無効なスキーマ: {reason}",
    invalid_schema_empty="無効なスキーマ定義",
    default_discriminator="判別フィールド",
    invalid_discriminator="無効または欠落している判別フィールド: {field}",
    default_conflict_type="値",
    incompatible_types="{conflict_type}をマージできません: 互換性のない型",
    nil_pointer="nilポインタが検出されました",
    default_origin="値",
    too_small="小さすぎる値",
    too_big="大きすぎる値",
    too_small_sized="小さすぎる値: {origin}は{threshold}{unit}{adj}必要があります",
    too_big_sized="大きすぎる値: {origin}は{threshold}{unit}{adj}必要があります",
    too_small_unsized="小さすぎる値: {origin}は{threshold}{adj}必要があります",
    too_big_unsized="大きすぎる値: {origin}は{threshold}{adj}必要があります",
    starts_with_empty="無効な文字列: 指定された接頭辞で始まる必要があります",
    starts_with='無効な文字列: "{operand}"で始まる必要があります',
    ends_with_empty="無効な文字列: 指定された接尾辞で終わる必要があります",
    ends_with='無効な文字列: "{operand}"で終わる必要があります',
    includes_empty="無効な文字列: 指定された文字列を含む必要があります",
    includes='無効な文字列: "{operand}"を含む必要があります',
    regex_empty="無効な文字列: パターンに一致する必要があります",
    regex="無効な文字列: パターン{operand}に一致する必要があります",
    invalid_format_noun="無効な{noun}",
    invalid_input="無効な入力",
    comparison_words={">=": "以上である", ">": "より大きい", "<=": "以下である", "<": "より小さい"},
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "ja")


def format_message_ja(issue: Issue) -> str:
    """Render an issue in Japanese."""
    return FORMATTER(issue)


def config_ja() -> LocaleConfig:
    """Configuration installing the Japanese formatter."""
    return LocaleConfig(FORMATTER, "ja")
