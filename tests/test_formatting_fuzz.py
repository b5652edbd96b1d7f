"""Intensive fuzzing of every formatter with hostile property bags.

Marked ``fuzz``: skipped in normal runs, enabled with ``pytest -m fuzz``.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from schemalocale import Issue, IssueCode, get_localized_error
from schemalocale.constants import BUILTIN_LOCALES
from tests.strategies import any_values, issues, locale_ids

pytestmark = pytest.mark.fuzz

_LOCALES = sorted(set(BUILTIN_LOCALES))


class TestFormatterFuzz:
    """Totality under arbitrary inputs."""

    @settings(
        max_examples=1500, deadline=None, suppress_health_check=[HealthCheck.too_slow]
    )
    @given(locale_ids(), issues())
    def test_any_locale_any_issue(self, locale: str, issue: Issue) -> None:
        """PROPERTY: Any identifier and any issue render to non-empty text."""
        assert get_localized_error(issue, locale)

    @settings(
        max_examples=1000, deadline=None, suppress_health_check=[HealthCheck.too_slow]
    )
    @given(
        st.sampled_from(_LOCALES),
        st.sampled_from(list(IssueCode)),
        st.dictionaries(st.text(max_size=12), any_values(), max_size=10),
    )
    def test_arbitrary_keys(
        self, locale: str, code: IssueCode, properties: dict[str, object]
    ) -> None:
        """PROPERTY: Unknown and oddly typed keys never break formatting."""
        event(f"code={code}")
        assert get_localized_error(Issue(code, properties=properties), locale)

    @settings(max_examples=500)
    @given(st.sampled_from(_LOCALES), st.integers(min_value=1, max_value=6))
    def test_nested_element_issues(self, locale: str, depth: int) -> None:
        """PROPERTY: Deeply nested element issues still render."""
        issue = Issue("nil_pointer")
        for index in range(depth):
            issue = Issue("invalid_element", properties={"index": index, "element_error": issue})
        assert get_localized_error(issue, locale)
