"""Locale-independent building blocks shared by every formatter.

Python 3.13+.
"""

from .primitives import (
    comparison_operator,
    format_threshold,
    join_values,
    received_type_label,
    stringify_primitive,
)
from .properties import PropertyAccessor

__all__ = [
    "PropertyAccessor",
    "comparison_operator",
    "format_threshold",
    "join_values",
    "received_type_label",
    "stringify_primitive",
]
