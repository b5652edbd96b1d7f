"""Shared formatting primitives consumed by every locale formatter.

All functions here are pure and total: they accept any value, never raise,
and return the same text for the same input on every run.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import datetime
import io
import math
from collections.abc import Iterable, Mapping
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal
from enum import Enum
from numbers import Number
from typing import Any

from schemalocale.constants import INT64_MAX, INT64_MIN
from schemalocale.enums import ReceivedType

__all__ = [
    "comparison_operator",
    "format_threshold",
    "join_values",
    "received_type_label",
    "stringify_primitive",
]

# Numbers with larger exponents render in scientific notation.
_PLAIN_DIGIT_LIMIT = 40
_SCIENTIFIC_CONTEXT = Context(Emax=MAX_EMAX, Emin=MIN_EMIN)


def received_type_label(value: Any) -> ReceivedType:
    """Classify a runtime value into a canonical received-type label.

    Order matters: bool before int (bool subclasses int), Enum before str
    and int (StrEnum/IntEnum members subclass both), tuple before list.

    Examples:
        >>> received_type_label(123)
        <ReceivedType.NUMBER: 'number'>
        >>> received_type_label(None)
        <ReceivedType.NIL: 'nil'>
        >>> received_type_label(2**70)
        <ReceivedType.BIGINT: 'bigint'>
    """
    match value:
        case None:
            return ReceivedType.NIL
        case bool():
            return ReceivedType.BOOL
        case Enum():
            return ReceivedType.ENUM
        case str():
            return ReceivedType.STRING
        case int():
            if INT64_MIN <= value <= INT64_MAX:
                return ReceivedType.NUMBER
            return ReceivedType.BIGINT
        case float():
            return ReceivedType.NAN if math.isnan(value) else ReceivedType.NUMBER
        case complex():
            return ReceivedType.COMPLEX
        case Decimal():
            return ReceivedType.NAN if value.is_nan() else ReceivedType.NUMBER
        case Number():
            return ReceivedType.NUMBER
        case datetime.date() | datetime.time():
            return ReceivedType.DATE
        case io.IOBase():
            return ReceivedType.FILE
        case Mapping():
            return ReceivedType.MAP
        case tuple():
            return ReceivedType.ARRAY
        case list() | set() | frozenset() | bytes() | bytearray():
            return ReceivedType.SLICE
        case _ if callable(value):
            return ReceivedType.FUNCTION
        case _ if hasattr(value, "__dict__") or hasattr(type(value), "__slots__"):
            return ReceivedType.OBJECT
        case _:
            return ReceivedType.UNKNOWN


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    # repr gives the shortest text that round-trips
    return repr(value)


def _format_int(value: int) -> str:
    return _format_decimal(Decimal(value))


def _text(value: Any) -> str:
    try:
        return str(value)
    except ValueError:
        # Containers holding ints past the interpreter's str() digit limit
        return f"<{type(value).__name__}>"


def _format_decimal(value: Decimal) -> str:
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_zero():
        return "0"
    if abs(value.adjusted()) > _PLAIN_DIGIT_LIMIT:
        return str(value.normalize(_SCIENTIFIC_CONTEXT))
    if value == value.to_integral_value():
        return format(value.to_integral_value(), "f")
    return format(value.normalize(), "f")


def stringify_primitive(value: Any) -> str:
    """Render one primitive for embedding in a message.

    Strings are double-quoted, None renders as ``null``, booleans as
    ``true``/``false``, numbers without a trailing ``.0``. Enum members render
    as their value. Anything else is rendered from ``str()`` and quoted.

    Examples:
        >>> stringify_primitive("x")
        '"x"'
        >>> stringify_primitive(3.0)
        '3'
        >>> stringify_primitive(None)
        'null'
    """
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case Enum():
            return stringify_primitive(value.value)
        case str():
            return f'"{value}"'
        case int():
            return _format_int(value)
        case float():
            return _format_float(value)
        case Decimal():
            return _format_decimal(value)
        case _:
            return f'"{_text(value)}"'


def join_values(values: Iterable[Any], separator: str) -> str:
    """Stringify each value and join with separator, preserving order.

    Example:
        >>> join_values(["x", "y", 3], "|")
        '"x"|"y"|3'
    """
    return separator.join(stringify_primitive(value) for value in values)


def format_threshold(value: Any) -> str:
    """Canonicalize a numeric bound or divisor to text.

    Integral values drop any fractional tail; other floats use the minimal
    number of digits that round-trips. Non-numeric values use ``str()``.

    Examples:
        >>> format_threshold(5)
        '5'
        >>> format_threshold(5.0)
        '5'
        >>> format_threshold(2.5)
        '2.5'
    """
    match value:
        case bool():
            return str(value).lower()
        case int():
            return _format_int(value)
        case float():
            return _format_float(value)
        case Decimal():
            return _format_decimal(value)
        case _:
            return _text(value)


def comparison_operator(inclusive: bool, is_too_small: bool) -> str:
    """Select the comparison symbol for a size bound.

    A too-small issue states the lower bound (``>=`` or ``>``), a too-big
    issue the upper bound (``<=`` or ``<``).
    """
    if is_too_small:
        return ">=" if inclusive else ">"
    return "<=" if inclusive else "<"
