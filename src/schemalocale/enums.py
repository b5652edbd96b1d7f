"""Enumerations for schemalocale type-safe constants.

Uses StrEnum so members compare equal to the plain strings produced by
validators: IssueCode.TOO_SMALL == "too_small".

Python 3.13+.
"""

from enum import StrEnum


class IssueCode(StrEnum):
    """Closed taxonomy of validation issue codes.

    Codes outside this set are rendered as a custom issue without message.
    """

    INVALID_TYPE = "invalid_type"
    """Value has the wrong runtime type."""

    INVALID_VALUE = "invalid_value"
    """Value is not one of the allowed literals."""

    TOO_BIG = "too_big"
    """Size or magnitude exceeds the maximum."""

    TOO_SMALL = "too_small"
    """Size or magnitude is below the minimum."""

    INVALID_FORMAT = "invalid_format"
    """String does not match a format check (email, regex, prefix, ...)."""

    NOT_MULTIPLE_OF = "not_multiple_of"
    """Number is not a multiple of the divisor."""

    UNRECOGNIZED_KEYS = "unrecognized_keys"
    """Object carries keys the schema does not declare."""

    INVALID_KEY = "invalid_key"
    """A map or record key failed validation."""

    INVALID_UNION = "invalid_union"
    """No union member accepted the value."""

    INVALID_ELEMENT = "invalid_element"
    """A collection element failed validation."""

    MISSING_REQUIRED = "missing_required"
    """A required field is absent."""

    TYPE_CONVERSION = "type_conversion"
    """Coercion between two types failed."""

    INVALID_SCHEMA = "invalid_schema"
    """The schema definition itself is malformed."""

    INVALID_DISCRIMINATOR = "invalid_discriminator"
    """Discriminated union tag is missing or unknown."""

    INCOMPATIBLE_TYPES = "incompatible_types"
    """Intersection members cannot be merged."""

    NIL_POINTER = "nil_pointer"
    """A nil reference was encountered."""

    CUSTOM = "custom"
    """User-defined check with an optional message."""


class ReceivedType(StrEnum):
    """Canonical labels for the runtime type of a rejected input.

    StrEnum provides automatic string conversion: str(ReceivedType.NIL) == "nil"
    """

    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOL = "bool"
    FLOAT = "float"
    OBJECT = "object"
    FUNCTION = "function"
    FILE = "file"
    DATE = "date"
    ARRAY = "array"
    SLICE = "slice"
    MAP = "map"
    NAN = "NaN"
    NIL = "nil"
    COMPLEX = "complex"
    ENUM = "enum"
    UNKNOWN = "unknown"


__all__ = [
    "IssueCode",
    "ReceivedType",
]
