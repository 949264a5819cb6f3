#!/usr/bin/env python3
"""
Purpose:
    Implements `SchemaDescriptor`, an immutable named map of wire field
    names to field definitions. Descriptors compose by value: `extend`
    merges two field maps (the augmentation wins on name collisions) into
    a new descriptor, and a pydantic model is generated from the merged
    map on first use.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, create_model

from pubmeta.core.validation import SchemaCompositionError
from pubmeta.schema.field import FieldDef, python_name

if TYPE_CHECKING:
    from pubmeta.schema.validator import Validator

logger = logging.getLogger(__name__)

FieldLike = Union[FieldDef, "SchemaDescriptor"]
D = TypeVar("D", bound="SchemaDescriptor")


# --- Generated model base --- #

class MetadataModel(BaseModel):
    """
    Base for every model generated from a descriptor.

    Unknown keys are dropped; instances are immutable.
    """
    model_config = ConfigDict(extra="ignore", frozen=True, protected_namespaces=())


# --- Descriptor --- #

@dataclass(frozen=True, eq=False)
class SchemaDescriptor:
    """
    Immutable description of an object schema.

    Fields map wire names (e.g. "hideFromFeed", "$schema") to either a
    `FieldDef` or another `SchemaDescriptor` (a required nested object).
    """

    name: str
    fields: Mapping[str, FieldLike]
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise SchemaCompositionError("A schema descriptor needs a non-empty name")
        checked: Dict[str, FieldLike] = {}
        for key, value in dict(self.fields).items():
            if not isinstance(key, str) or not key:
                raise SchemaCompositionError(f"{self.name}: field names must be non-empty strings, got {key!r}")
            if not isinstance(value, (FieldDef, SchemaDescriptor)):
                raise SchemaCompositionError(
                    f"{self.name}.{key}: expected a FieldDef or SchemaDescriptor, got {type(value).__name__}"
                )
            checked[key] = value
        object.__setattr__(self, "fields", MappingProxyType(checked))

    # --- Composition --- #

    def extend(
        self,
        augmentation: Mapping[str, FieldLike],
        *,
        name: Optional[str] = None,
        into: Optional[Type[D]] = None,
    ) -> D:
        """
        Return a new descriptor holding this descriptor's fields plus `augmentation`.

        Args:
            augmentation: fields to add; entries override same-named fields.
            name: name of the new descriptor (defaults to this one's name).
            into: descriptor class to build (defaults to this one's class).
        """
        target = into or type(self)
        merged = {**self.fields, **dict(augmentation)}
        overridden = sorted(set(self.fields) & set(augmentation))
        if overridden:
            logger.debug("%s: augmentation overrides %s", name or self.name, ", ".join(overridden))
        return target(name=name or self.name, fields=merged, description=self.description)  # type: ignore[return-value]

    def describe(self: D, description: str) -> D:
        return replace(self, description=description)

    def as_field(self) -> FieldDef:
        """This schema as a required nested-object field."""
        return FieldDef(self.model, required=True, description=self.description)

    def optional(self, description: Optional[str] = None) -> FieldDef:
        """This schema as an optional nested-object field."""
        return FieldDef(self.model, required=False, description=description or self.description)

    # --- Introspection --- #

    def field_def(self, key: str) -> FieldDef:
        value = self.fields[key]
        return value if isinstance(value, FieldDef) else value.as_field()

    def required_fields(self) -> list[str]:
        return [k for k in self.fields if self.field_def(k).required]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} fields={list(self.fields)}>"

    # --- Compilation --- #

    @cached_property
    def model(self) -> Type[MetadataModel]:
        """Pydantic model generated from the field map (built once per descriptor)."""
        return _compile(self)

    @cached_property
    def validator(self) -> "Validator":
        """Reusable `Validator` for this descriptor (built once per descriptor)."""
        from pubmeta.schema.validator import Validator
        return Validator(self)


# --- Internals --- #

def _compile(descriptor: SchemaDescriptor) -> Type[MetadataModel]:
    """
    Create a Pydantic model class mirroring the descriptor's fields.

    Each field is declared under a Python-safe attribute name with the
    wire name as alias, so errors and dumps use wire names.
    """
    field_defs: Dict[str, tuple[Any, Any]] = {}
    for wire_name in descriptor.fields:
        attr = python_name(wire_name)
        while attr in field_defs:
            attr = f"{attr}_"
        field_defs[attr] = descriptor.field_def(wire_name).to_pydantic(alias=wire_name)

    model = create_model(  # type: ignore[call-overload]
        descriptor.name,
        __base__=MetadataModel,
        __doc__=descriptor.description,
        **field_defs,
    )
    logger.debug("Compiled %s (%d fields)", descriptor.name, len(field_defs))
    return model
