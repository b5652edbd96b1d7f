"""English messages.

English is the default locale and the only one with grammar beyond the
shared skeleton:

- ``expected`` labels are normalized ("stringbool" -> "boolean").
- An object expected where a string or map arrived reads as a failed
  conversion.
- File sizes use "File size must be at least/at most N bytes".
- Arrays report exact lengths and rest parameters.
- Element issues carry a nested ``element_error`` issue that is rendered in
  the same locale, followed by the element index.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.core.primitives import format_threshold, received_type_label
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo
from schemalocale.issues import Issue

if TYPE_CHECKING:
    from schemalocale.core.properties import PropertyAccessor

__all__ = ["CATALOG", "FORMATTER", "EnglishFormatter", "config_en", "format_message_en"]

_HAVE = "to have"

SIZABLE = {
    "string": SizingInfo("characters", _HAVE),
    "file": SizingInfo("bytes", _HAVE),
    "array": SizingInfo("items", _HAVE),
    "slice": SizingInfo("items", _HAVE),
    "set": SizingInfo("items", _HAVE),
    "object": SizingInfo("keys", _HAVE),
    "map": SizingInfo("keys", _HAVE),
}

FORMAT_NOUNS = {
    "regex": "input",
    "email": "email address",
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
    "datetime": "ISO datetime",
    "date": "ISO date",
    "time": "ISO time",
    "duration": "ISO duration",
    "ipv4": "IPv4 address",
    "ipv6": "IPv6 address",
    "mac": "MAC address",
    "cidrv4": "IPv4 range",
    "cidrv6": "IPv6 range",
    "base64": "base64-encoded string",
    "base64url": "base64url-encoded string",
    "json_string": "JSON string",
    "e164": "E.164 number",
    "jwt": "JWT",
    "template_literal": "input",
    "iso_date": "ISO date format",
    "iso_time": "ISO time format",
    "iso_datetime": "ISO datetime format",
    "iso_duration": "ISO duration",
    "int8": "8-bit integer",
    "int16": "16-bit integer",
    "int32": "32-bit integer",
    "int64": "64-bit integer",
    "uint8": "8-bit unsigned integer",
    "uint16": "16-bit unsigned integer",
    "uint32": "32-bit unsigned integer",
    "uint64": "64-bit unsigned integer",
    "float32": "32-bit float",
    "float64": "64-bit float",
    "complex64": "64-bit complex number",
    "complex128": "128-bit complex number",
}

CATALOG = MessageCatalog(
    invalid_type="Invalid input: expected {expected}, received {received}",
    invalid_value_empty="Invalid value",
    invalid_value_single="Invalid input: expected {value}",
    invalid_value_multiple="Invalid option: expected one of {values}",
    too_small="Too small",
    too_big="Too big",
    too_small_sized="Too small: expected {origin} to have {adj}{threshold} {unit}",
    too_big_sized="Too big: expected {origin} to have {adj}{threshold} {unit}",
    too_small_unsized="Too small: expected {origin} to be {adj}{threshold}",
    too_big_unsized="Too big: expected {origin} to be {adj}{threshold}",
    default_origin="value",
    invalid_format_empty="Invalid format",
    starts_with='Invalid string: must start with "{operand}"',
    starts_with_empty="Invalid string: must start with specified prefix",
    ends_with='Invalid string: must end with "{operand}"',
    ends_with_empty="Invalid string: must end with specified suffix",
    includes='Invalid string: must include "{operand}"',
    includes_empty="Invalid string: must include specified substring",
    regex="Invalid string: must match pattern {operand}",
    regex_empty="Invalid string: must match pattern",
    invalid_format_noun="Invalid {noun}",
    not_multiple_of="Invalid number: must be a multiple of {divisor}",
    not_multiple_of_empty="Invalid number: must be a multiple of divisor",
    unrecognized_keys_empty="Unrecognized key(s) in object",
    unrecognized_key="Unrecognized key: {keys}",
    unrecognized_keys="Unrecognized keys: {keys}",
    invalid_key="Invalid key in {origin}",
    invalid_key_empty="Invalid key",
    invalid_union="Invalid input: no union member matched",
    invalid_element="Invalid value in {origin}",
    invalid_element_empty="Invalid element",
    missing_required="Missing required {field_type}",
    missing_required_named="Missing required {field_type}: {field_name}",
    default_field_type="field",
    type_conversion="Type conversion failed: cannot convert {from_type} to {to_type}",
    unknown_type="unknown",
    invalid_schema="Invalid schema: {reason}",
    invalid_schema_empty="Invalid schema definition",
    invalid_discriminator="Invalid or missing discriminator field: {field}",
    default_discriminator="discriminator",
    incompatible_types="Cannot merge {conflict_type}: incompatible types",
    default_conflict_type="values",
    nil_pointer="Nil pointer encountered",
    invalid_input="Invalid input",
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
    expected_aliases={
        "stringbool": "boolean",
        "complex64": "complex",
        "complex128": "complex",
    },
    translate_expected=False,
    translate_received=False,
)

# Origin used by validators for the variadic tail of a tuple.
_REST_ORIGIN = "array rest"


class EnglishFormatter(IssueFormatter):
    """English formatter with conversion, file, array and element rules."""

    __slots__ = ()

    def format_invalid_type(self, issue: Issue, props: PropertyAccessor) -> str:
        expected = self.expected_label(props.get_string_or("expected", ""))
        received = str(received_type_label(issue.input))
        if expected == "object" and received in ("string", "map"):
            return self.catalog.type_conversion.format(from_type=received, to_type=expected)
        return self.catalog.invalid_type.format(expected=expected, received=received)

    def format_size_constraint(self, props: PropertyAccessor, *, is_too_small: bool) -> str:
        threshold = props.get_any("minimum" if is_too_small else "maximum")
        if threshold is None:
            return super().format_size_constraint(props, is_too_small=is_too_small)

        origin = props.get_string_or("origin", "")
        if origin == "file":
            bound = "at least" if is_too_small else "at most"
            return f"File size must be {bound} {format_threshold(threshold)} bytes"

        if origin == "array":
            exact = self._array_length_rule(props, is_too_small=is_too_small)
            if exact is not None:
                phrase = "Too small" if is_too_small else "Too big"
                return f"{phrase}: expected array to have {exact} items"

        return super().format_size_constraint(props, is_too_small=is_too_small)

    @staticmethod
    def _array_length_rule(props: PropertyAccessor, *, is_too_small: bool) -> str | None:
        """Describe rest-parameter and fixed-length array bounds."""
        minimum = props.get_any("minimum")
        if is_too_small and props.get_bool_or("is_rest_param", False) and minimum is not None:
            return f"at least {format_threshold(minimum)}"
        maximum = props.get_any("maximum")
        if minimum is None or maximum is None:
            return None
        low, high = format_threshold(minimum), format_threshold(maximum)
        return f"exactly {low}" if low == high else None

    def format_invalid_element(self, props: PropertyAccessor) -> str:
        origin = props.get_string_or("origin", "")
        index = props.get_any("index")
        element = "rest element" if origin == _REST_ORIGIN else "element"

        nested = props.get_any("element_error")
        if isinstance(nested, Issue):
            message = self.format_sub_issue(nested)
            if index is None:
                return message
            return f"{message} ({element} at index {format_threshold(index)})"

        if not origin:
            return self.catalog.invalid_element_empty
        message = self.catalog.invalid_element.format(origin=origin)
        if index is None:
            return message
        return f"{message}: {element} at index {format_threshold(index)}"


FORMATTER = EnglishFormatter(CATALOG, "en")


def format_message_en(issue: Issue) -> str:
    """Render an issue in English."""
    return FORMATTER(issue)


def config_en() -> LocaleConfig:
    """Configuration installing the English formatter."""
    return LocaleConfig(FORMATTER, "en")
