#!/usr/bin/env python3
import pytest
from pydantic import BaseModel, StrictBool, StrictStr

from pubmeta.core.validation import SchemaCompositionError
from pubmeta.schema.descriptor import MetadataModel, SchemaDescriptor
from pubmeta.schema.field import optional, required


def _base() -> SchemaDescriptor:
    return SchemaDescriptor(
        name="Base",
        description="A base schema.",
        fields={
            "id": required(StrictStr, "Identifier.", min_length=1),
            "flag": optional(StrictBool, "A flag."),
        },
    )


# --- Construction checks --- #

def test_descriptor_rejects_non_field_values():
    with pytest.raises(SchemaCompositionError, match="expected a FieldDef"):
        SchemaDescriptor(name="Bad", fields={"id": str})


@pytest.mark.parametrize("key", ["", 3])
def test_descriptor_rejects_bad_field_names(key):
    with pytest.raises(SchemaCompositionError):
        SchemaDescriptor(name="Bad", fields={key: required(StrictStr)})


def test_descriptor_requires_a_name():
    with pytest.raises(SchemaCompositionError):
        SchemaDescriptor(name=" ", fields={})


def test_descriptor_fields_are_read_only():
    base = _base()
    with pytest.raises(TypeError):
        base.fields["other"] = required(StrictStr)  # type: ignore[index]


# --- extend --- #

def test_extend_adds_fields_without_touching_the_original():
    base = _base()
    child = base.extend({"title": required(StrictStr)}, name="Child")

    assert list(child.fields) == ["id", "flag", "title"]
    assert list(base.fields) == ["id", "flag"]
    assert child.name == "Child"
    assert child.description == "A base schema."


def test_extend_augmentation_wins_on_collision():
    base = _base()
    child = base.extend({"flag": required(StrictStr, "Now a string.")})

    assert child.field_def("flag").required is True
    assert child.field_def("flag").description == "Now a string."
    assert base.field_def("flag").required is False


def test_extend_into_subclass():
    class Special(SchemaDescriptor):
        pass

    child = _base().extend({}, into=Special)
    assert isinstance(child, Special)
    assert isinstance(child.extend({}), Special)


def test_describe_returns_new_descriptor():
    base = _base()
    described = base.describe("Other.")
    assert described.description == "Other."
    assert base.description == "A base schema."
    assert type(described) is type(base)


def test_required_fields_and_contains():
    base = _base()
    assert base.required_fields() == ["id"]
    assert "id" in base and "missing" not in base


# --- Compilation --- #

def test_model_is_generated_once_with_aliases():
    base = _base()
    model = base.model

    assert model is base.model
    assert issubclass(model, MetadataModel)
    assert model.__name__ == "Base"
    assert model.__doc__ == "A base schema."
    assert model.model_fields["id"].alias == "id"


def test_nested_descriptor_becomes_required_object_field():
    inner = SchemaDescriptor(name="Inner", fields={"x": required(StrictStr)}, description="Inner thing.")
    outer = SchemaDescriptor(
        name="Outer",
        fields={"$schema": required(StrictStr), "inner": inner, "maybe": inner.optional()},
    )

    fd = outer.field_def("inner")
    assert fd.required is True and fd.annotation is inner.model
    assert outer.field_def("maybe").required is False
    assert outer.field_def("maybe").description == "Inner thing."

    model = outer.model
    assert model.model_fields["schema_"].alias == "$schema"
    assert issubclass(model.model_fields["inner"].annotation, BaseModel)


def test_validator_is_cached_per_descriptor():
    base = _base()
    assert base.validator is base.validator
    assert base.validator.descriptor is base
