"""Shared dispatch skeleton for locale formatters.

IssueFormatter turns an Issue into one sentence using a MessageCatalog.
Every locale goes through the same dispatch so every locale covers the same
issue codes. Grammar that data cannot express is supplied by overriding one
of the small hooks:

- size_fields: extra template fields for size messages (Dutch adjectives)
- unit_for: unit word chosen by the bound (Russian plural forms)
- format_size_constraint: full size renderer (Hebrew)
- format_invalid_noun: gender-aware format nouns (Hebrew, Bulgarian)
- format_invalid_element: nested element issues (English)

Thread Safety:
    Formatters hold only immutable data. Formatting is pure and can run on
    any thread.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from schemalocale.core.primitives import (
    comparison_operator,
    format_threshold,
    join_values,
    received_type_label,
    stringify_primitive,
)
from schemalocale.core.properties import PropertyAccessor
from schemalocale.enums import IssueCode

if TYPE_CHECKING:
    from schemalocale.issues import Issue

    from .catalog import MessageCatalog, SizingInfo

__all__ = ["IssueFormatter"]


class IssueFormatter:
    """Render issues in one locale from a MessageCatalog.

    Instances are callable, so they can be registered directly as locale
    formatters.

    Example:
        >>> from schemalocale.issues import Issue
        >>> from schemalocale.locales.en import FORMATTER
        >>> FORMATTER(Issue("invalid_format", properties={"format": "email"}))
        'Invalid email address'
    """

    __slots__ = ("catalog", "locale")

    def __init__(self, catalog: MessageCatalog, locale: str = "") -> None:
        self.catalog = catalog
        self.locale = locale

    def __call__(self, issue: Issue) -> str:
        return self.format(issue)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r})"

    def format(self, issue: Issue) -> str:
        """Render one issue. Never raises for any property content."""
        props = PropertyAccessor(issue.properties)
        c = self.catalog

        match issue.code:
            case IssueCode.INVALID_TYPE:
                return self.format_invalid_type(issue, props)
            case IssueCode.INVALID_VALUE:
                return self.format_invalid_value(props)
            case IssueCode.TOO_BIG:
                return self.format_size_constraint(props, is_too_small=False)
            case IssueCode.TOO_SMALL:
                return self.format_size_constraint(props, is_too_small=True)
            case IssueCode.INVALID_FORMAT:
                return self.format_invalid_format(props)
            case IssueCode.NOT_MULTIPLE_OF:
                divisor = props.get_any("divisor")
                if divisor is None:
                    return c.not_multiple_of_empty
                return c.not_multiple_of.format(divisor=format_threshold(divisor))
            case IssueCode.UNRECOGNIZED_KEYS:
                return self.format_unrecognized_keys(props)
            case IssueCode.INVALID_KEY:
                origin = props.get_string_or("origin", "")
                if not origin:
                    return c.invalid_key_empty
                return c.invalid_key.format(origin=origin)
            case IssueCode.INVALID_UNION:
                return c.invalid_union
            case IssueCode.INVALID_ELEMENT:
                return self.format_invalid_element(props)
            case IssueCode.MISSING_REQUIRED:
                field_type = props.get_string_or("field_type", c.default_field_type)
                field_name = props.get_string_or("field_name", "")
                if not field_name:
                    return c.missing_required.format(field_type=field_type)
                return c.missing_required_named.format(
                    field_type=field_type, field_name=field_name
                )
            case IssueCode.TYPE_CONVERSION:
                return c.type_conversion.format(
                    from_type=props.get_string_or("from_type", c.unknown_type),
                    to_type=props.get_string_or("to_type", c.unknown_type),
                )
            case IssueCode.INVALID_SCHEMA:
                reason = props.get_string_or("reason", "")
                if not reason:
                    return c.invalid_schema_empty
                return c.invalid_schema.format(reason=reason)
            case IssueCode.INVALID_DISCRIMINATOR:
                return c.invalid_discriminator.format(
                    field=props.get_string_or("field", c.default_discriminator)
                )
            case IssueCode.INCOMPATIBLE_TYPES:
                return c.incompatible_types.format(
                    conflict_type=props.get_string_or(
                        "conflict_type", c.default_conflict_type
                    )
                )
            case IssueCode.NIL_POINTER:
                return c.nil_pointer
            case IssueCode.CUSTOM:
                return self.format_custom(issue, props)
            case _:
                return c.invalid_input

    def format_sub_issue(self, issue: Issue) -> str:
        """Render a nested issue with this same locale."""
        return self.format(issue)

    # ------------------------------------------------------------------
    # Dictionary lookups. Unknown keys pass through unchanged.
    # ------------------------------------------------------------------

    def type_name(self, name: str) -> str:
        return self.catalog.type_names.get(name, name)

    def format_noun(self, format_tag: str) -> str:
        return self.catalog.format_nouns.get(format_tag, format_tag)

    def sizing_for(self, origin: str) -> SizingInfo | None:
        return self.catalog.sizable.get(origin)

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def expected_label(self, expected: str) -> str:
        expected = self.catalog.expected_aliases.get(expected, expected)
        return self.type_name(expected) if self.catalog.translate_expected else expected

    def received_label(self, value: Any) -> str:
        label = str(received_type_label(value))
        return self.type_name(label) if self.catalog.translate_received else label

    def format_invalid_type(self, issue: Issue, props: PropertyAccessor) -> str:
        return self.catalog.invalid_type.format(
            expected=self.expected_label(props.get_string_or("expected", "")),
            received=self.received_label(issue.input),
        )

    def format_invalid_value(self, props: PropertyAccessor) -> str:
        c = self.catalog
        values = props.get_any_slice_or("values", [])
        if not values:
            return c.invalid_value_empty
        if len(values) == 1:
            return c.invalid_value_single.format(value=stringify_primitive(values[0]))
        if len(values) == 2 and c.invalid_value_pair is not None:
            return c.invalid_value_pair.format(
                first=stringify_primitive(values[0]),
                second=stringify_primitive(values[1]),
            )
        return c.invalid_value_multiple.format(
            values=join_values(values, c.value_separator)
        )

    def origin_label(self, origin: str) -> str:
        if not origin:
            return self.catalog.default_origin
        return self.type_name(origin) if self.catalog.translate_origin else origin

    def size_fields(self, origin: str, is_too_small: bool) -> dict[str, str]:  # noqa: ARG002
        """Extra template fields for size messages. Empty by default."""
        return {}

    def unit_for(self, sizing: SizingInfo, threshold: Any) -> str:  # noqa: ARG002
        """Unit word for the given bound."""
        return sizing.unit

    def format_size_constraint(self, props: PropertyAccessor, *, is_too_small: bool) -> str:
        c = self.catalog
        raw_origin = props.get_string_or("origin", "")
        threshold = props.get_any("minimum" if is_too_small else "maximum")
        extra = self.size_fields(raw_origin, is_too_small)

        if threshold is None:
            bare = c.too_small if is_too_small else c.too_big
            return bare.format_map(extra)

        origin = self.origin_label(raw_origin)
        operator = comparison_operator(
            props.get_bool_or("inclusive", True), is_too_small
        )
        sizing = self.sizing_for(raw_origin)
        fields = {
            "origin": origin,
            "adj": c.comparison_words.get(operator, operator),
            "threshold": format_threshold(threshold),
            "subject": sizing.subject if sizing is not None and sizing.subject else origin,
            "verb": sizing.verb if sizing is not None else "",
            **extra,
        }

        if sizing is not None and sizing.unit:
            template = c.too_small_sized if is_too_small else c.too_big_sized
            return template.format_map({**fields, "unit": self.unit_for(sizing, threshold)})
        template = c.too_small_unsized if is_too_small else c.too_big_unsized
        return template.format_map(fields)

    def format_invalid_format(self, props: PropertyAccessor) -> str:
        c = self.catalog
        format_tag = props.get_string_or("format", "")
        match format_tag:
            case "":
                return c.invalid_format_empty
            case "starts_with":
                return self._operand(props, "prefix", c.starts_with, c.starts_with_empty)
            case "ends_with":
                return self._operand(props, "suffix", c.ends_with, c.ends_with_empty)
            case "includes":
                return self._operand(props, "includes", c.includes, c.includes_empty)
            case "regex":
                return self._operand(props, "pattern", c.regex, c.regex_empty)
            case _:
                return self.format_invalid_noun(format_tag)

    @staticmethod
    def _operand(props: PropertyAccessor, key: str, template: str, fallback: str) -> str:
        operand = props.get_string_or(key, "")
        if not operand:
            return fallback
        return template.format(operand=operand)

    def format_invalid_noun(self, format_tag: str) -> str:
        return self.catalog.invalid_format_noun.format(noun=self.format_noun(format_tag))

    def format_unrecognized_keys(self, props: PropertyAccessor) -> str:
        c = self.catalog
        keys = props.get_any_slice_or("keys", [])
        if not keys:
            return c.unrecognized_keys_empty
        template = c.unrecognized_key if len(keys) == 1 else c.unrecognized_keys
        return template.format(keys=join_values(keys, c.key_separator))

    def format_invalid_element(self, props: PropertyAccessor) -> str:
        origin = props.get_string_or("origin", "")
        if not origin:
            return self.catalog.invalid_element_empty
        return self.catalog.invalid_element.format(origin=origin)

    def format_custom(self, issue: Issue, props: PropertyAccessor) -> str:
        if isinstance(issue.message, str) and issue.message:
            return issue.message
        return props.get_string("message") or self.catalog.invalid_input
