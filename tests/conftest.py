#!/usr/bin/env python3
import pytest

from pubmeta.publication.schema_id import PublicationSchemaId


OWNER = "0x" + "a" * 40


@pytest.fixture
def lit_strategy() -> dict:
    """A well-formed LIT protocol encryption descriptor (wire shape)."""
    return {
        "provider": "LIT_PROTOCOL",
        "encryptionKey": "deadbeef" * 8,
        "accessCondition": {
            "type": "OR",
            "criteria": [
                {"type": "PROFILE_OWNERSHIP", "profileId": "0x01"},
                {"type": "FOLLOW", "follow": "0x02"},
            ],
        },
        "encryptedPaths": ["lens.content"],
    }


@pytest.fixture
def text_only_document() -> dict:
    return {
        "$schema": PublicationSchemaId.TEXT_ONLY_LATEST.value,
        "lens": {
            "id": "abc123",
            "locale": "en",
            "mainContentFocus": "TEXT_ONLY",
            "content": "hello",
        },
    }


def make_attributes(n: int) -> list[dict]:
    return [{"type": "String", "key": f"k{i}", "value": f"v{i}"} for i in range(n)]


@pytest.fixture
def attributes():
    """Factory for `n` valid String attributes."""
    return make_attributes
