#!/usr/bin/env python3
import pytest

from pubmeta.core.validation import IssueKind, PublicationValidationError
from pubmeta.publication import PublicationMetadataCoreSchema

validator = PublicationMetadataCoreSchema.validator


def _issues(data):
    with pytest.raises(PublicationValidationError) as exc:
        validator.validate(data)
    return [(i.path, i.kind) for i in exc.value.issues]


# --- Accepted input --- #

@pytest.mark.parametrize("data", [
    {"id": "abc123"},
    {"id": "abc123", "hideFromFeed": True, "globalReach": False},
    {"id": "abc123", "appId": "my-app"},
])
def test_conforming_input_is_echoed(data):
    assert validator.validate(data) == data


def test_unknown_keys_are_dropped():
    assert validator.validate({"id": "abc123", "colour": "blue"}) == {"id": "abc123"}


def test_absent_flags_are_not_filled_in():
    inst = validator.parse({"id": "abc123"})
    assert inst.hideFromFeed is None and inst.globalReach is None


# --- Rejected input --- #

def test_missing_id_is_exactly_one_missing_issue():
    assert _issues({}) == [("id", IssueKind.MISSING)]


@pytest.mark.parametrize("data,expected", [
    ({"id": ""}, [("id", IssueKind.BOUNDS)]),
    ({"id": 123}, [("id", IssueKind.TYPE_MISMATCH)]),
    ({"id": "x", "hideFromFeed": "true"}, [("hideFromFeed", IssueKind.TYPE_MISMATCH)]),
    ({"id": "x", "globalReach": 1}, [("globalReach", IssueKind.TYPE_MISMATCH)]),
    ({"id": "x", "appId": ""}, [("appId", IssueKind.BOUNDS)]),
])
def test_single_field_failures(data, expected):
    assert _issues(data) == expected


def test_all_failures_reported_together():
    assert sorted(_issues({"hideFromFeed": "no", "appId": 7})) == [
        ("appId", IssueKind.TYPE_MISMATCH),
        ("hideFromFeed", IssueKind.TYPE_MISMATCH),
        ("id", IssueKind.MISSING),
    ]


def test_error_message_names_schema_and_paths():
    with pytest.raises(PublicationValidationError) as exc:
        validator.validate({})
    text = str(exc.value)
    assert text.startswith("1 validation issue(s) for PublicationMetadataCore")
    assert "id: Field required [missing]" in text


def test_json_schema_carries_descriptions():
    js = validator.json_schema()
    assert js["required"] == ["id"]
    assert "UUID" in js["properties"]["id"]["description"]
    assert js["properties"]["hideFromFeed"]["description"]
