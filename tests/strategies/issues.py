"""Hypothesis strategies for issues, property bags and locale identifiers.

Provides reusable strategies for formatter and registry property tests:
- Issue codes from the taxonomy plus unknown codes
- Property bags with well-typed, mistyped and missing values
- Locale identifiers: registered, prefix-resolvable and unknown

Event-Emitting Strategies (HypoFuzz-Optimized):
- issues: Emits issue_code=<code>
- locale_ids: Emits locale_kind=registered|prefixed|unknown

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Any

from hypothesis import event
from hypothesis import strategies as st

from schemalocale.constants import BUILTIN_LOCALES, FORMAT_TAGS, SIZED_ORIGINS
from schemalocale.enums import IssueCode
from schemalocale.issues import Issue

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

__all__ = [
    "PROPERTY_KEYS",
    "any_values",
    "issue_codes",
    "issues",
    "locale_ids",
    "numbers",
    "primitives",
    "property_bags",
    "unknown_format_tags",
]

# Every key any formatter reads.
PROPERTY_KEYS = (
    "expected",
    "values",
    "origin",
    "minimum",
    "maximum",
    "inclusive",
    "is_rest_param",
    "format",
    "prefix",
    "suffix",
    "includes",
    "pattern",
    "divisor",
    "keys",
    "index",
    "element_error",
    "field_type",
    "field_name",
    "from_type",
    "to_type",
    "reason",
    "field",
    "conflict_type",
    "message",
)

_REGISTERED = sorted(set(BUILTIN_LOCALES))
_TWO_LETTER = [locale for locale in _REGISTERED if len(locale) == 2]
_REGION_CHARS = string.ascii_letters + string.digits


def numbers() -> SearchStrategy[Any]:
    """Ints (huge ones included), floats (NaN and infinities) and Decimals."""
    return st.one_of(
        st.integers(),
        st.sampled_from([10**5000, -(10**4400), 7 * 10**4301 + 1]),
        st.floats(allow_nan=True, allow_infinity=True),
        st.decimals(allow_nan=True, allow_infinity=True),
    )


def primitives() -> SearchStrategy[Any]:
    return st.one_of(
        st.none(),
        st.booleans(),
        st.text(max_size=20),
        numbers(),
    )


def any_values() -> SearchStrategy[Any]:
    """Arbitrary nested values, including containers and wrong types."""
    return st.recursive(
        primitives() | st.binary(max_size=8) | st.complex_numbers(),
        lambda children: st.one_of(
            st.lists(children, max_size=4),
            st.tuples(children, children),
            st.dictionaries(st.text(max_size=5), children, max_size=3),
        ),
        max_leaves=8,
    )


def issue_codes() -> SearchStrategy[IssueCode | str]:
    """Taxonomy members, their plain string values and unknown codes."""
    return st.one_of(
        st.sampled_from(list(IssueCode)),
        st.sampled_from([str(code) for code in IssueCode]),
        st.text(alphabet=string.ascii_lowercase + "_", max_size=12),
    )


@st.composite
def property_bags(draw: DrawFn) -> dict[str, Any]:
    """Property bags mixing plausible and mistyped values."""
    plausible: dict[str, SearchStrategy[Any]] = {
        "origin": st.sampled_from(sorted(SIZED_ORIGINS | {"number", "date", "bigint"})),
        "format": st.sampled_from(sorted(FORMAT_TAGS) + ["starts_with", "includes"]),
        "minimum": numbers(),
        "maximum": numbers(),
        "inclusive": st.booleans(),
        "values": st.lists(primitives(), max_size=4),
        "keys": st.lists(st.text(max_size=6), max_size=4),
    }
    keys = draw(st.lists(st.sampled_from(PROPERTY_KEYS), unique=True, max_size=8))
    bag: dict[str, Any] = {}
    for key in keys:
        if key in plausible and draw(st.booleans()):
            bag[key] = draw(plausible[key])
        else:
            bag[key] = draw(any_values())
    return bag


@st.composite
def issues(draw: DrawFn) -> Issue:
    """Issues with any code, any input and a mixed property bag.

    Events emitted:
    - issue_code=<code>
    """
    code = draw(issue_codes())
    properties = draw(property_bags())
    if code == IssueCode.INVALID_ELEMENT and draw(st.booleans()):
        properties["element_error"] = Issue(
            draw(st.sampled_from(list(IssueCode))), properties=draw(property_bags())
        )
    message = draw(st.none() | st.text(max_size=20))
    event(f"issue_code={code if code in set(IssueCode) else 'unknown'}")
    return Issue(code, draw(any_values()), properties, message)


@st.composite
def locale_ids(draw: DrawFn) -> str:
    """Locale identifiers across the three resolution outcomes.

    Events emitted:
    - locale_kind=registered|prefixed|unknown
    """
    kind = draw(st.sampled_from(["registered", "prefixed", "unknown"]))
    event(f"locale_kind={kind}")
    match kind:
        case "registered":
            return draw(st.sampled_from(_REGISTERED))
        case "prefixed":
            region = draw(st.text(alphabet=_REGION_CHARS, min_size=1, max_size=4))
            return f"{draw(st.sampled_from(_TWO_LETTER))}-{region}"
        case _:
            return draw(st.text(max_size=8))


def unknown_format_tags(known: frozenset[str] | set[str]) -> SearchStrategy[str]:
    """Format tags absent from a noun dictionary and without operand handling."""
    reserved = {"starts_with", "ends_with", "includes", "regex", ""}
    tags = st.text(alphabet=string.ascii_lowercase + "_0123456789", min_size=1, max_size=12)
    return tags.filter(lambda tag: tag not in known and tag not in reserved)
