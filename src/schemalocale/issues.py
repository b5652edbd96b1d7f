"""Validation issue value type.

An Issue is what a schema validator hands to a locale formatter: a code from
the closed taxonomy, the rejected input and a bag of code-specific properties.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .enums import IssueCode

__all__ = ["Issue"]


@dataclass(frozen=True, slots=True)
class Issue:
    """Immutable description of one validation failure.

    Attributes:
        code: Issue code. Either an IssueCode member or its string value;
            unknown strings are rendered as a custom issue without message.
        input: The rejected value. Only used to derive the received-type label.
        properties: Code-specific data (expected, origin, minimum, keys, ...).
            Stored as a read-only view; None means no properties.
        message: Direct message for custom issues. Takes precedence over
            ``properties["message"]``.

    Example:
        >>> issue = Issue("too_small", "hi", {"origin": "string", "minimum": 5})
        >>> issue.properties["minimum"]
        5
    """

    code: IssueCode | str
    input: Any = None
    properties: Mapping[str, Any] = field(default_factory=dict)
    message: str | None = None

    def __post_init__(self) -> None:
        """Freeze the property bag behind a read-only proxy."""
        if not isinstance(self.properties, MappingProxyType):
            object.__setattr__(
                self, "properties", MappingProxyType(dict(self.properties or {}))
            )

    def with_properties(self, **updates: Any) -> Issue:
        """Return a copy of this issue with some properties replaced."""
        merged = {**self.properties, **updates}
        return Issue(self.code, self.input, merged, self.message)
