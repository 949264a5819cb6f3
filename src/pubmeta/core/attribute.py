#!/usr/bin/env python3
"""
Purpose:
    Defines the generic `MetadataAttribute` record: a typed key/value pair
    whose string value must be shaped according to its declared `type`.
"""

from __future__ import annotations

import json
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, StringConstraints, field_validator

from pubmeta.core import constants as C
from pubmeta.core.primitives import NonEmptyString


# --- Per-type attribute models --- #

class _AttributeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: NonEmptyString = Field(..., description="The attribute's unique identifier.")


class BooleanAttribute(_AttributeBase):
    """A boolean attribute; `value` is "true" or "false"."""
    type: Literal["Boolean"] = Field(..., description="This metadata attribute type.")
    value: Literal["true", "false"] = Field(..., description="A JS boolean value serialized as string.")


class DateAttribute(_AttributeBase):
    """A date attribute; `value` is an ISO-8601 date or date-time."""
    type: Literal["Date"] = Field(..., description="This metadata attribute type.")
    value: Annotated[StrictStr, StringConstraints(pattern=C.ISO_DATETIME_RE.pattern)] = Field(
        ..., description="A valid ISO 8601 date string."
    )


class NumberAttribute(_AttributeBase):
    """A numeric attribute; `value` is a decimal number as a string."""
    type: Literal["Number"] = Field(..., description="This metadata attribute type.")
    value: Annotated[StrictStr, StringConstraints(pattern=C.NUMERIC_RE.pattern)] = Field(
        ..., description="A valid JS number serialized as string."
    )


class StringAttribute(_AttributeBase):
    """A free-form string attribute."""
    type: Literal["String"] = Field(..., description="This metadata attribute type.")
    value: NonEmptyString = Field(..., description="Any string value.")


class JSONAttribute(_AttributeBase):
    """An attribute whose `value` is a JSON document serialized as a string."""
    type: Literal["JSON"] = Field(..., description="This metadata attribute type.")
    value: NonEmptyString = Field(..., description="A valid JSON string.")

    @field_validator("value")
    @classmethod
    def _must_be_json(cls, v: str) -> str:
        try:
            json.loads(v)
        except ValueError as e:
            raise ValueError(f"Invalid JSON string: {e}") from e
        return v


# --- Discriminated union of all attribute types --- #
# Dispatches on the wire `type` key.

MetadataAttribute = Annotated[
    Union[BooleanAttribute, DateAttribute, NumberAttribute, StringAttribute, JSONAttribute],
    Field(discriminator="type"),
]
