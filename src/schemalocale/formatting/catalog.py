"""Per-locale message data.

A MessageCatalog is everything a locale contributes besides grammar that
cannot be expressed as data: one template per issue branch, the three
dictionaries (type names, format nouns, sizing) and a few switches.

Templates use ``str.format`` fields. Available fields per template:

=========================  ==================================================
invalid_type               {expected} {received}
invalid_value_single       {value}
invalid_value_pair         {first} {second}
invalid_value_multiple     {values}
too_small / too_big        fields returned by IssueFormatter.size_fields
*_sized / *_unsized        {origin} {adj} {threshold} {unit} {verb} {subject}
                           plus size_fields
starts_with ... regex      {operand}
invalid_format_noun        {noun}
not_multiple_of            {divisor}
unrecognized_key(s)        {keys}
invalid_key/element        {origin}
missing_required           {field_type}
missing_required_named     {field_type} {field_name}
type_conversion            {from_type} {to_type}
invalid_schema             {reason}
invalid_discriminator      {field}
incompatible_types         {conflict_type}
=========================  ==================================================

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

__all__ = ["MessageCatalog", "SizingInfo"]


@dataclass(frozen=True, slots=True)
class SizingInfo:
    """Unit and verb used when a size bound applies to a countable origin.

    Attributes:
        unit: Unit word ("characters", "Zeichen"). Empty when the origin is
            measured without a unit.
        verb: Verb phrase some templates place before the bound ("to have").
        subject: Inflected subject for languages that decline the origin
            (Finnish genitive "merkkijonon"). Empty to use the origin label.
        plural_units: Unit words for CLDR categories, keyed by category name
            ("one", "few", "many"). Selected by the integer part of the bound.
    """

    unit: str
    verb: str = ""
    subject: str = ""
    plural_units: Mapping[str, str] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageCatalog:
    """Immutable message templates and dictionaries for one locale."""

    invalid_type: str
    invalid_value_empty: str
    invalid_value_single: str
    invalid_value_multiple: str

    too_small: str
    too_big: str
    too_small_sized: str
    too_big_sized: str
    too_small_unsized: str
    too_big_unsized: str
    default_origin: str

    invalid_format_empty: str
    starts_with: str
    starts_with_empty: str
    ends_with: str
    ends_with_empty: str
    includes: str
    includes_empty: str
    regex: str
    regex_empty: str
    invalid_format_noun: str

    not_multiple_of: str
    not_multiple_of_empty: str

    unrecognized_keys_empty: str
    unrecognized_key: str
    unrecognized_keys: str

    invalid_key: str
    invalid_key_empty: str
    invalid_union: str
    invalid_element: str
    invalid_element_empty: str

    missing_required: str
    missing_required_named: str
    default_field_type: str

    type_conversion: str
    unknown_type: str

    invalid_schema: str
    invalid_schema_empty: str

    invalid_discriminator: str
    default_discriminator: str

    incompatible_types: str
    default_conflict_type: str

    nil_pointer: str
    invalid_input: str

    value_separator: str = "|"
    key_separator: str = ", "
    invalid_value_pair: str | None = None

    type_names: Mapping[str, str] = field(default_factory=dict)
    format_nouns: Mapping[str, str] = field(default_factory=dict)
    sizable: Mapping[str, SizingInfo] = field(default_factory=dict)
    # Word replacements for ">=", ">", "<=", "<".
    comparison_words: Mapping[str, str] = field(default_factory=dict)
    # Canonical expected-type rewrites applied before translation.
    expected_aliases: Mapping[str, str] = field(default_factory=dict)

    translate_expected: bool = True
    translate_received: bool = True
    translate_origin: bool = False
