"""Tests for PropertyAccessor typed reads over issue property bags.

Tests verify:
- Missing keys, None values and wrong types all read as absent
- Numeric widening and truncation rules for get_int/get_float
- bool is never accepted as a number
- Collection reads accept list and tuple only
"""

import math
from decimal import Decimal

from hypothesis import given
from hypothesis import strategies as st

from schemalocale.core.properties import PropertyAccessor
from tests.strategies import any_values


class TestPropertyAccessorStrings:
    """Test string and bool reads."""

    def test_present_string(self) -> None:
        """String value is returned as is."""
        props = PropertyAccessor({"origin": "string"})
        assert props.get_string("origin") == "string"

    def test_missing_key(self) -> None:
        """Missing key reads as absent."""
        assert PropertyAccessor({}).get_string("origin") is None

    def test_none_value_is_absent(self) -> None:
        """Explicit None is indistinguishable from a missing key."""
        props = PropertyAccessor({"origin": None})
        assert props.get_string("origin") is None
        assert "origin" not in props

    def test_wrong_type_uses_default(self) -> None:
        """Non-string value falls back to the default."""
        props = PropertyAccessor({"origin": 42})
        assert props.get_string_or("origin", "value") == "value"

    def test_none_mapping(self) -> None:
        """A None property bag behaves like an empty one."""
        props = PropertyAccessor(None)
        assert props.get_any("anything") is None
        assert props.get_bool_or("inclusive", True) is True

    def test_bool_strict(self) -> None:
        """Only real booleans are booleans."""
        assert PropertyAccessor({"inclusive": False}).get_bool("inclusive") is False
        assert PropertyAccessor({"inclusive": 0}).get_bool("inclusive") is None
        assert PropertyAccessor({"inclusive": "false"}).get_bool_or("inclusive", True)


class TestPropertyAccessorNumbers:
    """Test integer and float reads."""

    def test_int_from_int(self) -> None:
        """Integers are returned unchanged."""
        assert PropertyAccessor({"minimum": 5}).get_int("minimum") == 5

    def test_int_truncates_float(self) -> None:
        """Floats are truncated toward zero."""
        assert PropertyAccessor({"minimum": 5.9}).get_int("minimum") == 5
        assert PropertyAccessor({"minimum": -5.9}).get_int("minimum") == -5

    def test_int_from_decimal(self) -> None:
        """Finite Decimals are widened."""
        assert PropertyAccessor({"minimum": Decimal("7.2")}).get_int("minimum") == 7

    def test_int_rejects_non_finite(self) -> None:
        """NaN and infinities cannot be represented as int."""
        for value in (math.nan, math.inf, Decimal("NaN"), Decimal("-Infinity")):
            assert PropertyAccessor({"minimum": value}).get_int("minimum") is None

    def test_int_rejects_bool(self) -> None:
        """bool is not a number even though it subclasses int."""
        assert PropertyAccessor({"minimum": True}).get_int_or("minimum", -1) == -1

    def test_float_widens(self) -> None:
        """int and Decimal widen to float."""
        assert PropertyAccessor({"maximum": 3}).get_float("maximum") == 3.0
        assert PropertyAccessor({"maximum": Decimal("2.5")}).get_float("maximum") == 2.5

    def test_float_rejects_bool_and_string(self) -> None:
        """Non-numeric values read as absent."""
        assert PropertyAccessor({"maximum": False}).get_float("maximum") is None
        assert PropertyAccessor({"maximum": "3"}).get_float_or("maximum", 0.5) == 0.5


class TestPropertyAccessorCollections:
    """Test list, string-list and map reads."""

    def test_any_slice_accepts_tuple(self) -> None:
        """Tuples are returned as lists."""
        props = PropertyAccessor({"values": ("x", 1)})
        assert props.get_any_slice("values") == ["x", 1]

    def test_any_slice_rejects_string(self) -> None:
        """A string is not a sequence of values."""
        assert PropertyAccessor({"values": "xyz"}).get_any_slice_or("values", []) == []

    def test_strings_require_all_str(self) -> None:
        """A mixed list is not a string list."""
        assert PropertyAccessor({"keys": ["a", 1]}).get_strings("keys") is None
        assert PropertyAccessor({"keys": ["a", "b"]}).get_strings("keys") == ["a", "b"]

    def test_map(self) -> None:
        """Mappings are returned, other values use the default."""
        assert PropertyAccessor({"meta": {"a": 1}}).get_map("meta") == {"a": 1}
        assert PropertyAccessor({"meta": [1]}).get_map_or("meta", {}) == {}

    def test_any_or(self) -> None:
        """get_any_or only replaces missing values."""
        props = PropertyAccessor({"index": 0})
        assert props.get_any_or("index", 9) == 0
        assert props.get_any_or("other", 9) == 9


class TestPropertyAccessorTotality:
    """Property tests: reads never raise."""

    @given(st.dictionaries(st.sampled_from(["a", "b"]), any_values(), max_size=2))
    def test_all_reads_total(self, bag: dict[str, object]) -> None:
        """PROPERTY: Every typed read returns a value of its type or None."""
        props = PropertyAccessor(bag)
        for key in ("a", "b"):
            assert props.get_string(key) is None or isinstance(props.get_string(key), str)
            assert props.get_int(key) is None or isinstance(props.get_int(key), int)
            assert props.get_float(key) is None or isinstance(props.get_float(key), float)
            assert props.get_bool(key) is None or isinstance(props.get_bool(key), bool)
            assert props.get_any_slice(key) is None or isinstance(props.get_any_slice(key), list)
            assert props.get_strings(key) is None or isinstance(props.get_strings(key), list)
