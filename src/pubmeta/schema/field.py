#!/usr/bin/env python3
"""
Purpose:
    Implements `FieldDef`, the immutable description of one field in a
    publication schema (value type, required/optional, human description,
    pydantic constraints), plus small factories for authoring fields.
"""
from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Tuple, get_args, get_origin

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo

from pubmeta.core.constants import IDENTIFIER_SAFE_RE


# --- Model --- #

@dataclass(frozen=True, eq=False)
class FieldDef:
    """
    One field of a `SchemaDescriptor`.

    - annotation  : any type pydantic can validate (str, Literal[...], a model, Annotated[...])
    - required    : absent values fail with a `missing` issue when True
    - description : human-readable text, carried into the generated JSON Schema
    - constraints : extra keyword arguments for `pydantic.Field` (min_length, max_length, ...)
    """

    annotation: Any
    required: bool = True
    description: str | None = None
    constraints: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "constraints", MappingProxyType(dict(self.constraints)))

    # --- Introspection --- #

    @property
    def literal_values(self) -> Tuple[Any, ...]:
        """Allowed values when the annotation is `Literal[...]`, otherwise an empty tuple."""
        if get_origin(self.annotation) is Literal:
            return get_args(self.annotation)
        return ()

    def to_pydantic(self, alias: str) -> tuple[Any, FieldInfo]:
        """Return the `(annotation, FieldInfo)` pair expected by `pydantic.create_model`."""
        default = ... if self.required else None
        info = Field(default, alias=alias, description=self.description, **self.constraints)
        return self.annotation, info

    def __repr__(self) -> str:
        flag = "required" if self.required else "optional"
        return f"FieldDef({self.annotation!r}, {flag})"


# --- Factories --- #

def required(annotation: Any, description: str | None = None, **constraints: Any) -> FieldDef:
    """A field that must be present."""
    return FieldDef(annotation, required=True, description=description, constraints=constraints)


def optional(annotation: Any, description: str | None = None, **constraints: Any) -> FieldDef:
    """A field that may be omitted; when present it must conform."""
    return FieldDef(annotation, required=False, description=description, constraints=constraints)


def literal(*values: Any, description: str | None = None) -> FieldDef:
    """A required field accepting exactly one of `values`."""
    if not values:
        raise ValueError("literal() needs at least one value")
    return FieldDef(Literal[values], required=True, description=description)  # type: ignore[valid-type]


# --- Naming --- #

def python_name(name: str) -> str:
    """
    Derive a model attribute name for a wire field name.

    The wire name is always kept as the pydantic alias; this only avoids
    names pydantic or Python reject ("$schema", "class", "_x", "json").

    Examples:
        "hideFromFeed" -> "hideFromFeed"
        "$schema"      -> "schema_"
        "class"        -> "class_"
    """
    ident = IDENTIFIER_SAFE_RE.sub("", name).lstrip("_")
    if not ident:
        ident = "field"
    if ident[0].isdigit():
        ident = f"f_{ident}"
    if keyword.iskeyword(ident) or hasattr(BaseModel, ident) or ident.startswith("model_"):
        ident = f"{ident}_"
    return ident
