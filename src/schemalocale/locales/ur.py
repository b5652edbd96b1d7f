"""Urdu messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_ur", "format_message_ur"]

SIZABLE = {
    "string": SizingInfo("حروف", "ہونا"),
    "file": SizingInfo("بائٹس", "ہونا"),
    "array": SizingInfo("آئٹمز", "ہونا"),
    "slice": SizingInfo("آئٹمز", "ہونا"),
    "set": SizingInfo("آئٹمز", "ہونا"),
    "map": SizingInfo("اندراجات", "ہونا"),
}

FORMAT_NOUNS = {
    "regex": "ان پٹ",
    "email": "ای میل ایڈریس",
    "url": "یو آر ایل",
    "emoji": "ایموجی",
    "uuid": "یو یو آئی ڈی",
    "uuidv4": "یو یو آئی ڈی وی 4",
    "uuidv6": "یو یو آئی ڈی وی 6",
    "nanoid": "نینو آئی ڈی",
    "guid": "جی یو آئی ڈی",
    "cuid": "سی یو آئی ڈی",
    "cuid2": "سی یو آئی ڈی 2",
    "ulid": "یو ایل آئی ڈی",
    "xid": "ایکس آئی ڈی",
    "ksuid": "کے ایس یو آئی ڈی",
    "datetime": "آئی ایس او ڈیٹ ٹائم",
    "date": "آئی ایس او تاریخ",
    "time": "آئی ایس او وقت",
    "duration": "آئی ایس او مدت",
    "ipv4": "آئی پی وی 4 ایڈریس",
    "ipv6": "آئی پی وی 6 ایڈریس",
    "mac": "میک ایڈریس",
    "cidrv4": "آئی پی وی 4 رینج",
    "cidrv6": "آئی پی وی 6 رینج",
    "base64": "بیس 64 ان کوڈڈ سٹرنگ",
    "base64url": "بیس 64 یو آر ایل ان کوڈڈ سٹرنگ",
    "json_string": "جے ایس او این سٹرنگ",
    "e164": "ای 164 نمبر",
    "jwt": "جے ڈبلیو ٹی",
    "template_literal": "ان پٹ",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "نمبر",
    "array": "آرے",
    "slice": "آرے",
    "string": "سٹرنگ",
    "bool": "بولین",
    "object": "آبجیکٹ",
    "map": "میپ",
    "nil": "نل",
    "null": "نل",
    "undefined": "غیر متعین",
    "function": "فنکشن",
    "date": "تاریخ",
    "file": "فائل",
    "set": "سیٹ",
}

CATALOG = MessageCatalog(
    invalid_type="غلط ان پٹ: {expected} متوقع تھا، {received} موصول ہوا",
    invalid_value_empty="غلط ویلیو",
    invalid_value_single="غلط ان پٹ: {value} متوقع تھا",
    invalid_value_multiple="غلط آپشن: {values} میں سے ایک متوقع تھا",
    value_separator="|",
    invalid_format_empty="غلط فارمیٹ",
    not_multiple_of_empty="غلط نمبر: مضاعف ہونا چاہیے",
    not_multiple_of="غلط نمبر: {divisor} کا مضاعف ہونا چاہیے",
    unrecognized_keys_empty="غیر تسلیم شدہ کی",
    key_separator="، ",
    unrecognized_key="غیر تسلیم شدہ کی: {keys}",
    unrecognized_keys="غیر تسلیم شدہ کیز: {keys}",
    invalid_key_empty="غلط کی",
    invalid_key="{origin} میں غلط کی",
    invalid_union="غلط ان پٹ",
    invalid_element_empty="غلط عنصر",
    invalid_element="{origin} میں غلط ویلیو",
    default_field_type="فیلڈ",
    missing_required="مطلوبہ {field_type} غائب ہے",
    missing_required_named="مطلوبہ {field_type} غائب ہے: {field_name}",
    unknown_type="نامعلوم",
    type_conversion="ٹائپ کنورژن ناکام: {from_type} کو {to_type} میں تبدیل نہیں کیا جا سکتا",
    invalid_schema="غلط اسکیما: {reason}",
    invalid_schema_empty="غلط اسکیما ڈیفینیشن",
    default_discriminator="ڈسکریمینیٹر",
    invalid_discriminator="غلط یا غائب ڈسکریمینیٹر فیلڈ: {field}",
    default_conflict_type="ویلیوز",
    incompatible_types="{conflict_type} کو ضم نہیں کیا جا سکتا: غیر موافق ٹائپس",
    nil_pointer="نل پوائنٹر پایا گیا",
    default_origin="ویلیو",
    too_small="بہت چھوٹا",
    too_big="بہت بڑا",
    too_small_sized="بہت چھوٹا: {origin} کے {adj}{threshold} {unit} ہونے متوقع تھے",
    too_big_sized="بہت بڑا: {origin} کے {adj}{threshold} {unit} ہونے متوقع تھے",
    too_small_unsized="بہت چھوٹا: {origin} کا {adj}{threshold} ہونا متوقع تھا",
    too_big_unsized="بہت بڑا: {origin} کا {adj}{threshold} ہونا متوقع تھا",
    starts_with_empty="غلط سٹرنگ: مخصوص پریفکس سے شروع ہونا چاہیے",
    starts_with='غلط سٹرنگ: "{operand}" سے شروع ہونا چاہیے',
    ends_with_empty="غلط سٹرنگ: مخصوص سفکس پر ختم ہونا چاہیے",
    ends_with='غلط سٹرنگ: "{operand}" پر ختم ہونا چاہیے',
    includes_empty="غلط سٹرنگ: مخصوص سب سٹرنگ شامل ہونا چاہیے",
    includes='غلط سٹرنگ: "{operand}" شامل ہونا چاہیے',
    regex_empty="غلط سٹرنگ: پیٹرن سے میچ ہونا چاہیے",
    regex="غلط سٹرنگ: پیٹرن {operand} سے میچ ہونا چاہیے",
    invalid_format_noun="غلط {noun}",
    invalid_input="غلط ان پٹ",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "ur")


def format_message_ur(issue: Issue) -> str:
    """Render an issue in Urdu."""
    return FORMATTER(issue)


def config_ur() -> LocaleConfig:
    """Configuration installing the Urdu formatter."""
    return LocaleConfig(FORMATTER, "ur")
