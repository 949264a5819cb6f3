#!/usr/bin/env python3
import pytest

from pubmeta.core.validation import IssueKind, PublicationValidationError
from pubmeta.publication import (
    PublicationRegistry,
    PublicationSchemaId,
    TextOnlyMetadataSchema,
    VideoMetadataSchema,
    default_registry,
)
from pubmeta.publication.common.metadata import MetadataCommonSchema


# --- Lookup --- #

def test_default_registry_holds_every_variant():
    registry = default_registry()
    assert registry is default_registry()
    assert len(registry) == len(PublicationSchemaId)
    assert registry.names() == [
        "ArticleMetadata", "AudioMetadata", "EmbedMetadata", "ImageMetadata",
        "LinkMetadata", "TextOnlyMetadata", "VideoMetadata",
    ]
    for schema_id in PublicationSchemaId:
        assert schema_id.value in registry


@pytest.mark.parametrize("key", [
    PublicationSchemaId.TEXT_ONLY_LATEST.value,
    "TextOnlyMetadata",
    "textonlymetadata",
    " TextOnlyMetadata ",
])
def test_get_by_id_or_name(key):
    assert default_registry().get(key) is TextOnlyMetadataSchema


def test_require_unknown_raises_lookup_error():
    assert default_registry().get("Nope") is None
    with pytest.raises(LookupError, match="Nope"):
        default_registry().require("Nope")


def test_entries_list_focuses():
    entries = {e.name: e for e in default_registry().entries()}
    assert entries["VideoMetadata"].focuses == ("VIDEO", "SHORT_VIDEO")
    assert entries["VideoMetadata"].schema_id == PublicationSchemaId.VIDEO_LATEST.value


# --- Registration --- #

def test_register_rejects_duplicates():
    registry = PublicationRegistry([TextOnlyMetadataSchema])
    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(TextOnlyMetadataSchema)


def test_register_rejects_duplicate_names():
    registry = PublicationRegistry([TextOnlyMetadataSchema])
    renamed = VideoMetadataSchema.extend({}, name="textonlymetadata")
    with pytest.raises(ValueError, match="name"):
        registry.register(renamed)


def test_register_rejects_non_publication_schemas():
    with pytest.raises(TypeError):
        PublicationRegistry([MetadataCommonSchema])


# --- Documents --- #

def test_validate_document_dispatches_on_schema(text_only_document):
    registry = default_registry()
    assert registry.for_document(text_only_document) is TextOnlyMetadataSchema
    assert registry.validate_document(text_only_document) == text_only_document


@pytest.mark.parametrize("data,path,kind", [
    (["not", "an", "object"], "<root>", IssueKind.TYPE_MISMATCH),
    ({"lens": {}}, "$schema", IssueKind.MISSING),
    ({"$schema": "https://example.com/nope.json"}, "$schema", IssueKind.ENUM),
    ({"$schema": 3}, "$schema", IssueKind.ENUM),
])
def test_unresolvable_documents(data, path, kind):
    result = default_registry().check_document(data)
    assert [(i.path, i.kind) for i in result] == [(path, kind)]

    with pytest.raises(PublicationValidationError) as exc:
        default_registry().validate_document(data)
    assert exc.value.paths() == [path]


def test_check_document_reports_variant_issues(text_only_document):
    del text_only_document["lens"]["locale"]
    result = default_registry().check_document(text_only_document)
    assert not result.is_valid()
    assert result.errors == ["lens.locale: Field required [missing]"]


# --- Compilation --- #

def test_builtin_validators_are_compiled_at_import():
    for schema in (TextOnlyMetadataSchema, VideoMetadataSchema):
        assert "validator" in vars(schema)
        assert "model" in vars(schema)


def test_register_compiles_the_validator():
    schema = TextOnlyMetadataSchema.describe("Another text-only publication.")
    assert "validator" not in vars(schema)

    PublicationRegistry([schema])
    assert "validator" in vars(schema)
    assert schema.validator.is_valid({
        "$schema": schema.schema_id,
        "lens": {"id": "x", "locale": "en", "mainContentFocus": "TEXT_ONLY", "content": "hi"},
    })
