#!/usr/bin/env python3
"""
Purpose:
    Structured validation outcomes for pubmeta: issue kinds, individual
    issues, the non-raising `ValidationResult` collector, and the two
    exception types (`PublicationValidationError` for bad data,
    `SchemaCompositionError` for misbuilt schemas).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from pubmeta.core.formatting import format_issue_path, format_issues


class IssueKind(str, Enum):
    """
    Classification of a single validation issue.

    - type_mismatch : value present but of the wrong type
    - missing       : required field absent
    - bounds        : length outside its allowed range (arrays, strings)
    - enum          : value outside a closed set (enums, literals, discriminators)
    - format        : string does not match its expected pattern
    - value         : any other constraint violation
    """

    TYPE_MISMATCH = "type_mismatch"
    MISSING = "missing"
    BOUNDS = "bounds"
    ENUM = "enum"
    FORMAT = "format"
    VALUE = "value"

    @classmethod
    def from_pydantic(cls, error_type: str) -> IssueKind:
        """Map a pydantic-core error type (e.g. `too_short`) to an `IssueKind`."""
        if error_type in _PYDANTIC_KINDS:
            return _PYDANTIC_KINDS[error_type]
        if error_type.endswith("_type") or error_type.endswith("_parsing"):
            return cls.TYPE_MISMATCH
        return cls.VALUE


_PYDANTIC_KINDS = {
    "missing": IssueKind.MISSING,
    "union_tag_not_found": IssueKind.MISSING,
    "too_short": IssueKind.BOUNDS,
    "too_long": IssueKind.BOUNDS,
    "string_too_short": IssueKind.BOUNDS,
    "string_too_long": IssueKind.BOUNDS,
    "literal_error": IssueKind.ENUM,
    "enum": IssueKind.ENUM,
    "union_tag_invalid": IssueKind.ENUM,
    "string_pattern_mismatch": IssueKind.FORMAT,
    "model_attributes_type": IssueKind.TYPE_MISMATCH,
    "is_instance_of": IssueKind.TYPE_MISMATCH,
}


@dataclass(frozen=True)
class ValidationIssue:
    """One violated constraint, located by its field path."""
    path: str
    kind: IssueKind
    message: str
    loc: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"{self.path}: {self.message} [{self.kind.value}]"


def issues_from_pydantic(exc: ValidationError) -> Tuple[ValidationIssue, ...]:
    """Convert every entry of a pydantic `ValidationError` into a `ValidationIssue`."""
    issues = []
    for err in exc.errors():
        loc = tuple(err.get("loc", ()))
        issues.append(
            ValidationIssue(
                path=format_issue_path(loc),
                kind=IssueKind.from_pydantic(err.get("type", "")),
                message=err.get("msg", "Validation error"),
                loc=loc,
            )
        )
    return tuple(issues)


# --- Exceptions --- #

class SchemaCompositionError(TypeError):
    """A schema was assembled from an augmentation of the wrong shape."""


class PublicationValidationError(ValueError):
    """Input data does not conform to a publication schema; carries every issue."""

    def __init__(self, schema_name: str, issues: Sequence[ValidationIssue]):
        self.schema_name = schema_name
        self.issues: Tuple[ValidationIssue, ...] = tuple(issues)
        lines = [f"{len(self.issues)} validation issue(s) for {schema_name}"]
        lines.extend(f"  - {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))

    @classmethod
    def from_pydantic(cls, schema_name: str, exc: ValidationError) -> PublicationValidationError:
        return cls(schema_name, issues_from_pydantic(exc))

    def paths(self) -> List[str]:
        return [issue.path for issue in self.issues]


# --- Collector --- #

class ValidationResult:
    def __init__(self, value: Optional[Any] = None, issues: Sequence[ValidationIssue] = ()):
        self.value = value
        self.issues: List[ValidationIssue] = list(issues)

    @property
    def errors(self) -> List[str]:
        return format_issues(self.issues)

    def add(self, issue: ValidationIssue):
        self.issues.append(issue)

    def report(self, issue: ValidationIssue, strict: bool = False, schema_name: str = "<unknown>"):
        """
        Add an issue to the result, or raise immediately if in strict mode.

        Args:
            issue (ValidationIssue): The issue to record.
            strict (bool): Whether to raise immediately.
            schema_name (str): Schema name used in the raised error.
        """
        if strict:
            raise PublicationValidationError(schema_name, [issue])
        self.add(issue)

    def is_valid(self) -> bool:
        return not self.issues

    def __len__(self):
        return len(self.issues)

    def __iter__(self) -> Iterator[ValidationIssue]:
        return iter(self.issues)

    def __repr__(self):
        return f"<ValidationResult valid={self.is_valid()} issues={len(self.issues)}>"
