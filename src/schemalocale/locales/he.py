"""Hebrew messages.

Hebrew needs more than templates:

- Size subjects carry the definite article ("המחרוזת", "המערך") and the
  verb agrees with the grammatical gender of the subject.
- Strings, numbers and collections each read with their own sentence shape.
- Format nouns take "תקין" or "תקינה" by gender.
- Element issues name the collection with the definite article.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.core.primitives import format_threshold
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.core.properties import PropertyAccessor
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "HebrewFormatter", "config_he", "format_message_he"]

TYPE_NAMES = {
    "string": "מחרוזת",
    "number": "מספר",
    "bool": "ערך בוליאני",
    "boolean": "ערך בוליאני",
    "bigint": "BigInt",
    "date": "תאריך",
    "array": "מערך",
    "slice": "מערך",
    "object": "אובייקט",
    "nil": "ערך ריק (null)",
    "undefined": "ערך לא מוגדר (undefined)",
    "symbol": "סימבול (Symbol)",
    "function": "פונקציה",
    "map": "מפה (Map)",
    "set": "קבוצה (Set)",
    "file": "קובץ",
    "promise": "Promise",
    "NaN": "NaN",
    "unknown": "ערך לא ידוע",
    "value": "ערך",
}

FEMININE_TYPES = frozenset({"string", "function", "map", "set"})

SIZABLE = {
    "string": SizingInfo("תווים"),
    "file": SizingInfo("בייטים"),
    "array": SizingInfo("פריטים"),
    "slice": SizingInfo("פריטים"),
    "set": SizingInfo("פריטים"),
    "map": SizingInfo("פריטים"),
    "number": SizingInfo(""),
}

# (too small, too big) adjectives per sized origin.
SIZE_LABELS = {
    "string": ("קצר", "ארוך"),
    "file": ("קטן", "גדול"),
    "array": ("קטן", "גדול"),
    "slice": ("קטן", "גדול"),
    "set": ("קטן", "גדול"),
    "map": ("קטן", "גדול"),
    "number": ("קטן", "גדול"),
}

FORMAT_NOUNS = {
    "regex": "קלט",
    "email": "כתובת אימייל",
    "url": "כתובת רשת",
    "emoji": "אימוג'י",
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
    "datetime": "תאריך וזמן ISO",
    "date": "תאריך ISO",
    "time": "זמן ISO",
    "duration": "משך זמן ISO",
    "ipv4": "כתובת IPv4",
    "ipv6": "כתובת IPv6",
    "mac": "כתובת MAC",
    "cidrv4": "טווח IPv4",
    "cidrv6": "טווח IPv6",
    "base64": "מחרוזת בבסיס 64",
    "base64url": "מחרוזת בבסיס 64 לכתובות רשת",
    "json_string": "מחרוזת JSON",
    "e164": "מספר E.164",
    "jwt": "JWT",
    "template_literal": "קלט",
}

FEMININE_NOUNS = frozenset(
    {"email", "url", "ipv4", "ipv6", "mac", "base64", "base64url", "json_string"}
)

CATALOG = MessageCatalog(
    invalid_type="קלט לא תקין: צריך להיות {expected}, התקבל {received}",
    invalid_value_empty="ערך לא תקין",
    invalid_value_single="ערך לא תקין: הערך חייב להיות {value}",
    invalid_value_pair="ערך לא תקין: האפשרויות המתאימות הן {first} או {second}",
    invalid_value_multiple="ערך לא תקין: האפשרויות המתאימות הן {values}",
    value_separator=", ",
    too_small="קטן מדי",
    too_big="גדול מדי",
    too_small_sized="{size_label} מדי: {subject} {be} {adj}{threshold} {unit}",
    too_big_sized="{size_label} מדי: {subject} {be} {adj}{threshold} {unit}",
    too_small_unsized="{size_label} מדי: {subject} {be} {adj}{threshold}",
    too_big_unsized="{size_label} מדי: {subject} {be} {adj}{threshold}",
    default_origin="value",
    invalid_format_empty="פורמט לא תקין",
    starts_with='המחרוזת חייבת להתחיל ב "{operand}"',
    starts_with_empty="המחרוזת חייבת להתחיל בקידומת מסוימת",
    ends_with='המחרוזת חייבת להסתיים ב "{operand}"',
    ends_with_empty="המחרוזת חייבת להסתיים בסיומת מסוימת",
    includes='המחרוזת חייבת לכלול "{operand}"',
    includes_empty="המחרוזת חייבת לכלול מחרוזת מסוימת",
    regex="המחרוזת חייבת להתאים לתבנית {operand}",
    regex_empty="המחרוזת חייבת להתאים לתבנית",
    invalid_format_noun="{noun} לא {adjective}",
    not_multiple_of="מספר לא תקין: חייב להיות מכפלה של {divisor}",
    not_multiple_of_empty="מספר לא תקין: חייב להיות מכפלה",
    unrecognized_keys_empty="מפתח לא מזוהה",
    unrecognized_key="מפתח לא מזוהה: {keys}",
    unrecognized_keys="מפתחות לא מזוהים: {keys}",
    invalid_key="שדה לא תקין באובייקט",
    invalid_key_empty="שדה לא תקין באובייקט",
    invalid_union="קלט לא תקין",
    invalid_element="ערך לא תקין ב{origin}",
    invalid_element_empty="ערך לא תקין",
    missing_required="{field_type} נדרש חסר",
    missing_required_named="{field_type} נדרש חסר: {field_name}",
    default_field_type="שדה",
    type_conversion="המרת סוג נכשלה: לא ניתן להמיר {from_type} ל-{to_type}",
    unknown_type="לא ידוע",
    invalid_schema="סכמה לא תקינה: {reason}",
    invalid_schema_empty="הגדרת סכמה לא תקינה",
    invalid_discriminator="שדה מפריד לא תקין או חסר: {field}",
    default_discriminator="מפריד",
    incompatible_types="לא ניתן למזג {conflict_type}: סוגים לא תואמים",
    default_conflict_type="ערכים",
    nil_pointer="זוהה מצביע ריק",
    invalid_input="קלט לא תקין",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

_COLLECTIONS = frozenset({"array", "slice", "set"})


class HebrewFormatter(IssueFormatter):
    """Hebrew formatter with definite subjects and gender agreement."""

    __slots__ = ()

    def definite(self, type_name: str) -> str:
        """Type label with the definite article prefix."""
        return "ה" + self.type_name(type_name)

    def size_fields(self, origin: str, is_too_small: bool) -> dict[str, str]:
        origin = origin or self.catalog.default_origin
        small, big = SIZE_LABELS.get(origin, ("קטן", "גדול"))
        return {
            "subject": self.definite(origin),
            "be": "צריכה להיות" if origin in FEMININE_TYPES else "צריך להיות",
            "size_label": small if is_too_small else big,
        }

    def format_size_constraint(self, props: PropertyAccessor, *, is_too_small: bool) -> str:
        threshold = props.get_any("minimum" if is_too_small else "maximum")
        origin = props.get_string_or("origin", "")
        if threshold is None or origin not in ("string", "number", *_COLLECTIONS):
            return super().format_size_constraint(props, is_too_small=is_too_small)

        bound = format_threshold(threshold)
        inclusive = props.get_bool_or("inclusive", True)
        subject = self.definite(origin)

        if origin == "number":
            if is_too_small:
                comparison = f"גדול או שווה ל-{bound}" if inclusive else f"גדול מ-{bound}"
                return f"קטן מדי: {subject} צריך להיות {comparison}"
            comparison = f"קטן או שווה ל-{bound}" if inclusive else f"קטן מ-{bound}"
            return f"גדול מדי: {subject} צריך להיות {comparison}"

        unit = SIZABLE[origin].unit
        if origin == "string":
            short, long = SIZE_LABELS["string"]
            if is_too_small:
                comparison = f"{bound} {unit} או יותר" if inclusive else f"לפחות {bound} {unit}"
                return f"{short} מדי: {subject} צריכה להכיל {comparison}"
            comparison = f"{bound} {unit} או פחות" if inclusive else f"לכל היותר {bound} {unit}"
            return f"{long} מדי: {subject} צריכה להכיל {comparison}"

        verb = "צריכה" if origin == "set" else "צריך"
        if is_too_small:
            comparison = f"{bound} {unit} או יותר" if inclusive else f"יותר מ-{bound} {unit}"
            return f"קטן מדי: {subject} {verb} להכיל {comparison}"
        comparison = f"{bound} {unit} או פחות" if inclusive else f"פחות מ-{bound} {unit}"
        return f"גדול מדי: {subject} {verb} להכיל {comparison}"

    def format_invalid_noun(self, format_tag: str) -> str:
        if format_tag not in FORMAT_NOUNS:
            return f"{format_tag} לא תקין"
        adjective = "תקינה" if format_tag in FEMININE_NOUNS else "תקין"
        return self.catalog.invalid_format_noun.format(
            noun=self.format_noun(format_tag), adjective=adjective
        )

    def format_invalid_element(self, props: PropertyAccessor) -> str:
        origin = props.get_string_or("origin", "")
        if not origin:
            return self.catalog.invalid_element_empty
        return self.catalog.invalid_element.format(origin=self.definite(origin))


FORMATTER = HebrewFormatter(CATALOG, "he")


def format_message_he(issue: Issue) -> str:
    """Render an issue in Hebrew."""
    return FORMATTER(issue)


def config_he() -> LocaleConfig:
    """Configuration installing the Hebrew formatter."""
    return LocaleConfig(FORMATTER, "he")
