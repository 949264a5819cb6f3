#!/usr/bin/env python3
"""
Purpose:
    Implements the PublicationRegistry, which indexes publication schemas
    by their `$schema` id and by name, and validates raw documents against
    the variant their `$schema` declares.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pubmeta.core.validation import (
    IssueKind,
    ValidationIssue,
    ValidationResult,
)
from pubmeta.publication.article import ArticleMetadataSchema
from pubmeta.publication.audio import AudioMetadataSchema
from pubmeta.publication.common.metadata import PublicationSchema
from pubmeta.publication.embed import EmbedMetadataSchema
from pubmeta.publication.image import ImageMetadataSchema
from pubmeta.publication.link import LinkMetadataSchema
from pubmeta.publication.text_only import TextOnlyMetadataSchema
from pubmeta.publication.video import VideoMetadataSchema

logger = logging.getLogger(__name__)

SCHEMA_KEY = "$schema"


@dataclass(frozen=True)
class VariantEntry:
    """
    Lightweight record describing a registered variant.
    - name: schema name (e.g. "TextOnlyMetadata")
    - schema_id: the `$schema` URL
    - focuses: accepted `mainContentFocus` values
    """
    name: str
    schema_id: str
    focuses: Tuple[str, ...]


class PublicationRegistry:
    """
    Lookup table of publication schemas.

    Duplicate policy: registering a second schema with the same `$schema`
    id or name raises ValueError.
    """

    def __init__(self, schemas: Iterable[PublicationSchema] = ()):
        self._by_id: Dict[str, PublicationSchema] = {}
        self._by_name: Dict[str, PublicationSchema] = {}
        for schema in schemas:
            self.register(schema)

    # --- Registration --- #

    def register(self, schema: PublicationSchema) -> None:
        """Add `schema` and compile its validator now rather than on first validation."""
        if not isinstance(schema, PublicationSchema):
            raise TypeError(f"Expected a PublicationSchema, got {type(schema).__name__}")
        name_key = schema.name.strip().lower()
        if schema.schema_id in self._by_id:
            raise ValueError(f"Duplicate $schema id {schema.schema_id!r}")
        if name_key in self._by_name:
            raise ValueError(f"Duplicate schema name {schema.name!r}")
        validator = schema.validator
        self._by_id[schema.schema_id] = schema
        self._by_name[name_key] = schema
        logger.debug("Registered %r (%s)", validator, schema.schema_id)

    # --- Query API --- #

    def get(self, key: str) -> Optional[PublicationSchema]:
        """Return a schema by `$schema` id or by name (case-insensitive), or None."""
        return self._by_id.get(key) or self._by_name.get(key.strip().lower())

    def require(self, key: str) -> PublicationSchema:
        """Return a schema by id or name or raise LookupError if not registered."""
        schema = self.get(key)
        if schema is None:
            raise LookupError(f"Publication schema {key!r} not found")
        return schema

    def names(self) -> List[str]:
        """Sorted names of registered schemas."""
        return sorted(s.name for s in self._by_id.values())

    def entries(self) -> List[VariantEntry]:
        return [
            VariantEntry(
                name=s.name,
                schema_id=s.schema_id,
                focuses=tuple(f.value for f in s.focuses),
            )
            for s in sorted(self._by_id.values(), key=lambda s: s.name)
        ]

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    # --- Document validation --- #

    def for_document(self, data: Any) -> PublicationSchema:
        """
        Resolve the schema a document declares through its `$schema` key.

        Raises:
            PublicationValidationError: if the document is not an object or
                its `$schema` is missing or unknown.
        """
        return self._resolve(data, ValidationResult(), strict=True)  # type: ignore[return-value]

    def validate_document(self, data: Any) -> Dict[str, Any]:
        """Validate `data` against its declared variant; raises PublicationValidationError."""
        return self.for_document(data).validator.validate(data)

    def check_document(self, data: Any) -> ValidationResult:
        """Validate without raising; resolution problems become issues on `$schema`."""
        result = ValidationResult()
        schema = self._resolve(data, result, strict=False)
        if schema is None:
            return result
        return schema.validator.check(data)

    def _resolve(self, data: Any, result: ValidationResult, strict: bool) -> Optional[PublicationSchema]:
        if not isinstance(data, dict):
            result.report(
                ValidationIssue("<root>", IssueKind.TYPE_MISMATCH, "A publication document must be an object"),
                strict,
                schema_name="PublicationMetadata",
            )
            return None

        schema_id = data.get(SCHEMA_KEY)
        if schema_id is None:
            result.report(
                ValidationIssue(SCHEMA_KEY, IssueKind.MISSING, "Field required", (SCHEMA_KEY,)),
                strict,
                schema_name="PublicationMetadata",
            )
            return None

        schema = self._by_id.get(schema_id) if isinstance(schema_id, str) else None
        if schema is None:
            result.report(
                ValidationIssue(
                    SCHEMA_KEY,
                    IssueKind.ENUM,
                    f"Unknown publication schema {schema_id!r}",
                    (SCHEMA_KEY,),
                ),
                strict,
                schema_name="PublicationMetadata",
            )
            return None

        logger.debug("Resolved %s for %s", schema.name, schema_id)
        return schema


# --- Default registry --- #

@lru_cache(maxsize=None)
def default_registry() -> PublicationRegistry:
    """Registry of every built-in publication variant (built once)."""
    return PublicationRegistry(
        [
            ArticleMetadataSchema,
            AudioMetadataSchema,
            EmbedMetadataSchema,
            ImageMetadataSchema,
            LinkMetadataSchema,
            TextOnlyMetadataSchema,
            VideoMetadataSchema,
        ]
    )


# Built at import, so every variant validator is compiled before first use
default_registry()
