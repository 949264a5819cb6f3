#!/usr/bin/env python3
import pytest

from pubmeta.core.formatting import format_issue_path, format_issues
from pubmeta.core.validation import IssueKind, ValidationIssue


# --- Unit tests for format_issue_path --- #

@pytest.mark.parametrize("loc,expected", [
    (("lens", "attributes", 0, "key"), "lens.attributes[0].key"),
    ((0, "items"), "[0].items"),
    ((), "<root>"),
    ((0, 1, "x"), "[0][1].x"),
    (("$schema",), "$schema"),
    (("a", 3, 2, "b"), "a[3][2].b"),
])
def test_format_issue_path(loc, expected):
    assert format_issue_path(loc) == expected


# --- format_issues --- #

def test_format_issues_uses_one_line_form():
    issues = [
        ValidationIssue("lens.locale", IssueKind.MISSING, "Field required"),
        ValidationIssue("tags", IssueKind.BOUNDS, "List should have at most 10 items"),
    ]
    assert format_issues(issues) == [
        "lens.locale: Field required [missing]",
        "tags: List should have at most 10 items [bounds]",
    ]
    assert format_issues([]) == []
