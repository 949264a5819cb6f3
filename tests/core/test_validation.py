#!/usr/bin/env python3
import pytest
from pydantic import BaseModel, Field, StrictBool, ValidationError

from pubmeta.core.validation import (
    IssueKind,
    PublicationValidationError,
    ValidationIssue,
    ValidationResult,
    issues_from_pydantic,
)


# --- IssueKind.from_pydantic --- #

@pytest.mark.parametrize("error_type,expected", [
    ("missing", IssueKind.MISSING),
    ("too_short", IssueKind.BOUNDS),
    ("too_long", IssueKind.BOUNDS),
    ("string_too_short", IssueKind.BOUNDS),
    ("literal_error", IssueKind.ENUM),
    ("enum", IssueKind.ENUM),
    ("union_tag_invalid", IssueKind.ENUM),
    ("string_pattern_mismatch", IssueKind.FORMAT),
    ("bool_type", IssueKind.TYPE_MISMATCH),
    ("string_type", IssueKind.TYPE_MISMATCH),
    ("model_attributes_type", IssueKind.TYPE_MISMATCH),
    ("value_error", IssueKind.VALUE),
])
def test_issue_kind_from_pydantic(error_type, expected):
    assert IssueKind.from_pydantic(error_type) is expected


# --- issues_from_pydantic --- #

class _Sample(BaseModel):
    flag: StrictBool
    items: list[str] = Field(..., min_length=1)


def test_issues_from_pydantic_collects_every_error():
    with pytest.raises(ValidationError) as exc:
        _Sample.model_validate({"flag": "yes", "items": []})

    issues = issues_from_pydantic(exc.value)
    assert {(i.path, i.kind) for i in issues} == {
        ("flag", IssueKind.TYPE_MISMATCH),
        ("items", IssueKind.BOUNDS),
    }


# --- PublicationValidationError --- #

def test_publication_validation_error_lists_issues():
    issues = [
        ValidationIssue("id", IssueKind.MISSING, "Field required", ("id",)),
        ValidationIssue("tags", IssueKind.BOUNDS, "too long", ("tags",)),
    ]
    err = PublicationValidationError("Sample", issues)

    assert isinstance(err, ValueError)
    assert err.schema_name == "Sample"
    assert err.paths() == ["id", "tags"]
    text = str(err)
    assert "2 validation issue(s) for Sample" in text
    assert "id: Field required [missing]" in text


# --- ValidationResult --- #

def test_validation_result_collects_and_reports():
    result = ValidationResult()
    assert result.is_valid() and len(result) == 0

    issue = ValidationIssue("$schema", IssueKind.MISSING, "Field required")
    result.report(issue)
    assert not result.is_valid()
    assert list(result) == [issue]
    assert result.errors == ["$schema: Field required [missing]"]
    assert "valid=False" in repr(result)


def test_validation_result_strict_report_raises():
    issue = ValidationIssue("$schema", IssueKind.ENUM, "Unknown")
    with pytest.raises(PublicationValidationError) as exc:
        ValidationResult().report(issue, strict=True, schema_name="Doc")
    assert exc.value.issues == (issue,)
