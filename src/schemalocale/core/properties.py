"""Typed read-only view over an issue's property bag.

Formatters never inspect raw property values directly; they read through
PropertyAccessor, which applies one set of coercion rules for every locale:

- A missing key, a None value and a value of the wrong type are all "absent".
- Integer reads accept int, finite float (truncated toward zero) and finite
  Decimal. Float reads accept int, float and Decimal.
- bool is never accepted as a number even though it subclasses int.
- Sequence reads accept list and tuple; string-list reads require every
  element to be a str.

Thread Safety:
    The accessor holds a reference to the mapping and never mutates it.
    Safe for concurrent use.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

__all__ = ["PropertyAccessor"]


class PropertyAccessor:
    """Typed, defaulted accessor for issue properties.

    Each ``get_*`` method returns the typed value or None when the key is
    absent or holds an incompatible value. Each ``*_or`` companion returns a
    caller-supplied default instead of None.

    Example:
        >>> props = PropertyAccessor({"minimum": 5.0, "origin": "string"})
        >>> props.get_int("minimum")
        5
        >>> props.get_bool_or("inclusive", True)
        True
    """

    __slots__ = ("_properties",)

    def __init__(self, properties: Mapping[str, Any] | None) -> None:
        self._properties: Mapping[str, Any] = properties if properties is not None else {}

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._properties.get(key) is not None

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def get_any(self, key: str) -> Any | None:
        """Return the raw value, or None when missing."""
        return self._properties.get(key)

    def get_any_or(self, key: str, default: Any) -> Any:
        value = self.get_any(key)
        return default if value is None else value

    def get_string(self, key: str) -> str | None:
        value = self._properties.get(key)
        return value if isinstance(value, str) else None

    def get_string_or(self, key: str, default: str) -> str:
        value = self.get_string(key)
        return default if value is None else value

    def get_bool(self, key: str) -> bool | None:
        value = self._properties.get(key)
        return value if isinstance(value, bool) else None

    def get_bool_or(self, key: str, default: bool) -> bool:
        value = self.get_bool(key)
        return default if value is None else value

    def get_int(self, key: str) -> int | None:
        """Return an integer, widening from float and Decimal.

        Non-integral values are truncated toward zero. NaN and infinities
        cannot be represented and read as absent.
        """
        value = self._properties.get(key)
        match value:
            case bool():
                return None
            case int():
                return value
            case float() if math.isfinite(value):
                return int(value)
            case Decimal() if value.is_finite():
                return int(value)
            case _:
                return None

    def get_int_or(self, key: str, default: int) -> int:
        value = self.get_int(key)
        return default if value is None else value

    def get_float(self, key: str) -> float | None:
        value = self._properties.get(key)
        match value:
            case bool():
                return None
            case int():
                try:
                    return float(value)
                except OverflowError:
                    return math.inf if value > 0 else -math.inf
            case Decimal() if value.is_snan():
                return None
            case float() | Decimal():
                return float(value)
            case _:
                return None

    def get_float_or(self, key: str, default: float) -> float:
        value = self.get_float(key)
        return default if value is None else value

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def get_strings(self, key: str) -> list[str] | None:
        value = self._properties.get(key)
        if not isinstance(value, (list, tuple)):
            return None
        if not all(isinstance(item, str) for item in value):
            return None
        return list(value)

    def get_strings_or(self, key: str, default: list[str]) -> list[str]:
        value = self.get_strings(key)
        return default if value is None else value

    def get_any_slice(self, key: str) -> list[Any] | None:
        value = self._properties.get(key)
        if isinstance(value, (list, tuple)):
            return list(value)
        return None

    def get_any_slice_or(self, key: str, default: list[Any]) -> list[Any]:
        value = self.get_any_slice(key)
        return default if value is None else value

    def get_map(self, key: str) -> Mapping[str, Any] | None:
        value = self._properties.get(key)
        return value if isinstance(value, Mapping) else None

    def get_map_or(self, key: str, default: Mapping[str, Any]) -> Mapping[str, Any]:
        value = self.get_map(key)
        return default if value is None else value
