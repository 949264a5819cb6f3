#!/usr/bin/env python3
"""
Purpose:
    Wraps the pydantic model generated from a `SchemaDescriptor` in a
    `TypeAdapter` and exposes the validation contract used across pubmeta:
    typed parse, JSON-ready validate, non-raising check, and JSON Schema
    export for documentation.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Type

from pydantic import BaseModel, TypeAdapter, ValidationError

from pubmeta.core.validation import (
    PublicationValidationError,
    ValidationResult,
    issues_from_pydantic,
)

if TYPE_CHECKING:
    from pubmeta.schema.descriptor import SchemaDescriptor


class Validator:
    """
    Immutable validator for one descriptor.

    Example:
        validator = PublicationMetadataCoreSchema.validator
        data = validator.validate({"id": "abc123"})   # raises PublicationValidationError if invalid
    """

    def __init__(self, descriptor: "SchemaDescriptor"):
        self._descriptor = descriptor
        self._adapter: TypeAdapter = TypeAdapter(descriptor.model)

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def descriptor(self) -> "SchemaDescriptor":
        return self._descriptor

    @property
    def model(self) -> Type[BaseModel]:
        return self._descriptor.model

    # --- Validation --- #

    def parse(self, data: Any) -> BaseModel:
        """
        Validate `data` and return the typed model instance.

        Raises:
            PublicationValidationError: listing every violated field path.
        """
        try:
            return self._adapter.validate_python(data)
        except ValidationError as e:
            raise PublicationValidationError.from_pydantic(self.name, e) from e

    def validate(self, data: Any) -> Dict[str, Any]:
        """
        Validate `data` and return it as a JSON-ready dict.

        Only the fields that were supplied are emitted, under their wire
        names, so conforming input round-trips unchanged (minus unknown keys).
        """
        return self.dump(self.parse(data))

    def check(self, data: Any) -> ValidationResult:
        """Validate without raising; the result holds either the value or every issue."""
        try:
            instance = self._adapter.validate_python(data)
        except ValidationError as e:
            return ValidationResult(issues=issues_from_pydantic(e))
        return ValidationResult(value=self.dump(instance))

    def is_valid(self, data: Any) -> bool:
        return self.check(data).is_valid()

    # --- Output --- #

    @staticmethod
    def dump(instance: BaseModel) -> Dict[str, Any]:
        return instance.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def json_schema(self) -> Dict[str, Any]:
        """JSON Schema (by alias) including every field and schema description."""
        return self._adapter.json_schema(by_alias=True)

    def __repr__(self) -> str:
        return f"<Validator {self.name}>"
