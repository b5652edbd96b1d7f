"""Tamil messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_ta", "format_message_ta"]

SIZABLE = {
    "string": SizingInfo("எழுத்துக்கள்", "கொண்டிருக்க வேண்டும்"),
    "file": SizingInfo("பைட்டுகள்", "கொண்டிருக்க வேண்டும்"),
    "array": SizingInfo("உறுப்புகள்", "கொண்டிருக்க வேண்டும்"),
    "slice": SizingInfo("உறுப்புகள்", "கொண்டிருக்க வேண்டும்"),
    "set": SizingInfo("உறுப்புகள்", "கொண்டிருக்க வேண்டும்"),
    "map": SizingInfo("உள்ளீடுகள்", "கொண்டிருக்க வேண்டும்"),
}

FORMAT_NOUNS = {
    "regex": "உள்ளீடு",
    "email": "மின்னஞ்சல் முகவரி",
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
    "datetime": "ISO தேதி நேரம்",
    "date": "ISO தேதி",
    "time": "ISO நேரம்",
    "duration": "ISO கால அளவு",
    "ipv4": "IPv4 முகவரி",
    "ipv6": "IPv6 முகவரி",
    "mac": "MAC முகவரி",
    "cidrv4": "IPv4 வரம்பு",
    "cidrv6": "IPv6 வரம்பு",
    "base64": "base64-encoded சரம்",
    "base64url": "base64url-encoded சரம்",
    "json_string": "JSON சரம்",
    "e164": "E.164 எண்",
    "jwt": "JWT",
    "template_literal": "உள்ளீடு",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "எண்",
    "array": "அணி",
    "slice": "அணி",
    "string": "சரம்",
    "bool": "பூலியன்",
    "object": "பொருள்",
    "map": "வரைபடம்",
    "nil": "வெறுமை",
    "null": "வெறுமை",
    "undefined": "வரையறுக்கப்படாதது",
    "function": "செயல்பாடு",
    "date": "தேதி",
    "file": "கோப்பு",
    "set": "தொகுப்பு",
}

CATALOG = MessageCatalog(
    invalid_type="தவறான உள்ளீடு: எதிர்பார்க்கப்பட்டது {expected}, பெறப்பட்டது {received}",
    invalid_value_empty="தவறான மதிப்பு",
    invalid_value_single="தவறான உள்ளீடு: எதிர்பார்க்கப்பட்டது {value}",
    invalid_value_multiple="தவறான விருப்பம்: எதிர்பார்க்கப்பட்டது {values} இல் ஒன்று",
    value_separator="|",
    invalid_format_empty="தவறான வடிவம்",
    not_multiple_of_empty="தவறான எண்: பலமாக இருக்க வேண்டும்",
    not_multiple_of="தவறான எண்: {divisor} இன் பலமாக இருக்க வேண்டும்",
    unrecognized_keys_empty="அடையாளம் தெரியாத விசை",
    key_separator=", ",
    unrecognized_key="அடையாளம் தெரியாத விசை: {keys}",
    unrecognized_keys="அடையாளம் தெரியாத விசைகள்: {keys}",
    invalid_key_empty="தவறான விசை",
    invalid_key="{origin} இல் தவறான விசை",
    invalid_union="தவறான உள்ளீடு",
    invalid_element_empty="தவறான உறுப்பு",
    invalid_element="{origin} இல் தவறான மதிப்பு",
    default_field_type="புலம்",
    missing_required="தேவையான {field_type} இல்லை",
    missing_required_named="தேவையான {field_type} இல்லை: {field_name}",
    unknown_type="தெரியாதது",
    type_conversion="வகை மாற்றம் தோல்வியடைந்தது: {from_type} ஐ {to_type} ஆக மாற்ற முடியவில்லை",
    invalid_schema="தவறான திட்டம்: {reason}",
    invalid_schema_empty="தவறான திட்ட வரையறை",
    default_discriminator="வேறுபாடு காட்டி",
    invalid_discriminator="தவறான அல்லது இல்லாத வேறுபாடு காட்டி புலம்: {field}",
    default_conflict_type="மதிப்புகள்",
    incompatible_types="{conflict_type} ஐ இணைக்க முடியவில்லை: பொருந்தாத வகைகள்",
    nil_pointer="வெற்று சுட்டி கண்டறியப்பட்டது",
    default_origin="மதிப்பு",
    too_small="மிகச் சிறியது",
    too_big="மிக பெரியது",
    too_small_sized="மிகச் சிறியது: எதிர்பார்க்கப்பட்டது {origin} {adj}{threshold} {unit} ஆக இருக்க வேண்டும்",
    too_big_sized="மிக பெரியது: எதிர்பார்க்கப்பட்டது {origin} {adj}{threshold} {unit} ஆக இருக்க வேண்டும்",
    too_small_unsized="மிகச் சிறியது: எதிர்பார்க்கப்பட்டது {origin} {adj}{threshold} ஆக இருக்க வேண்டும்",
    too_big_unsized="மிக பெரியது: எதிர்பார்க்கப்பட்டது {origin} {adj}{threshold} ஆக இருக்க வேண்டும்",
    starts_with_empty="தவறான சரம்: குறிப்பிட்ட முன்னொட்டில் தொடங்க வேண்டும்",
    starts_with='தவறான சரம்: "{operand}" இல் தொடங்க வேண்டும்',
    ends_with_empty="தவறான சரம்: குறிப்பிட்ட பின்னொட்டில் முடிவடைய வேண்டும்",
    ends_with='தவறான சரம்: "{operand}" இல் முடிவடைய வேண்டும்',
    includes_empty="தவறான சரம்: குறிப்பிட்ட துணை சரத்தை உள்ளடக்க வேண்டும்",
    includes='தவறான சரம்: "{operand}" ஐ உள்ளடக்க வேண்டும்',
    regex_empty="தவறான சரம்: முறைபாட்டுடன் பொருந்த வேண்டும்",
    regex="தவறான சரம்: {operand} முறைபாட்டுடன் பொருந்த வேண்டும்",
    invalid_format_noun="தவறான {noun}",
    invalid_input="தவறான உள்ளீடு",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "ta")


def format_message_ta(issue: Issue) -> str:
    """Render an issue in Tamil."""
    return FORMATTER(issue)


def config_ta() -> LocaleConfig:
    """Configuration installing the Tamil formatter."""
    return LocaleConfig(FORMATTER, "ta")
