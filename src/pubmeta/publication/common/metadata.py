#!/usr/bin/env python3
"""
Purpose:
    Defines the layered publication schemas and the builders that compose
    them into per-variant validators:

        PublicationMetadataCoreSchema   operational envelope (id, feed flags, app)
          -> MetadataCommonSchema       shared descriptive fields (locale, tags, ...)
            -> metadata_details_with()  + focus-specific fields (the `lens` object)
              -> publication_with()     + marketplace fields, signature, `$schema`

    The builders check the shape of their augmentation once, when a variant
    is defined, and raise `SchemaCompositionError` on misuse; a misbuilt
    variant never reaches the point of validating data.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Mapping, Tuple

from pydantic import StrictBool

from pubmeta.core import constants as C
from pubmeta.core.attribute import MetadataAttribute
from pubmeta.core.primitives import AppId, Locale, Signature, Tag, non_empty_string
from pubmeta.core.validation import SchemaCompositionError
from pubmeta.publication.common.encryption import PublicationEncryptionStrategy
from pubmeta.publication.common.marketplace import MarketplaceMetadataSchema
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.schema.descriptor import FieldLike, SchemaDescriptor
from pubmeta.schema.field import FieldDef, literal, optional, required

logger = logging.getLogger(__name__)

MAIN_CONTENT_FOCUS_DESCRIPTION = "The main focus of the publication."


class PublicationContentWarning(str, Enum):
    NSFW = "NSFW"
    SENSITIVE = "SENSITIVE"
    SPOILER = "SPOILER"


# --- Core --- #

PublicationMetadataCoreSchema = SchemaDescriptor(
    name="PublicationMetadataCore",
    description="The operational metadata fields of a publication.",
    fields={
        "id": non_empty_string(
            "A unique identifier that in storages like IPFS ensures the uniqueness of the metadata URI. "
            "Use a UUID if unsure."
        ),
        "hideFromFeed": optional(
            StrictBool, "Determine if the publication should not be shown in any feed."
        ),
        "globalReach": optional(
            StrictBool,
            "Ability to only show when you filter on your App Id. "
            "This is useful for apps that want to show only their content on their apps.",
        ),
        "appId": optional(AppId, "The App Id that this publication belongs to."),
    },
)


# --- Common --- #

MetadataCommonSchema = PublicationMetadataCoreSchema.extend(
    {
        "attributes": optional(
            List[MetadataAttribute],
            "A bag of attributes that can be used to store any kind of metadata that is not currently "
            "supported by the standard. Over time, common attributes will be added to the standard and "
            "their usage as arbitrary attributes will be discouraged.",
            min_length=C.ATTRIBUTES_MIN_LENGTH,
            max_length=C.ATTRIBUTES_MAX_LENGTH,
        ),
        "locale": required(Locale, "The locale of the metadata."),
        "encryptedWith": optional(
            PublicationEncryptionStrategy,
            "The encryption strategy used to encrypt the publication. "
            "If not present, the publication is presumed to be unencrypted.",
        ),
        "tags": optional(List[Tag], "An arbitrary list of tags.", max_length=C.TAGS_MAX_LENGTH),
        "contentWarning": optional(PublicationContentWarning, "Specify a content warning."),
    },
    name="PublicationMetadataCommon",
).describe("The common publication metadata details.")


# --- Composed schema kinds --- #

class MetadataDetailsSchema(SchemaDescriptor):
    """Common fields plus one focus-specific field set; the `lens` object of a publication."""

    @property
    def focuses(self) -> Tuple[PublicationMainFocus, ...]:
        """The focus values this variant accepts for `mainContentFocus`."""
        return tuple(PublicationMainFocus(v) for v in self.field_def("mainContentFocus").literal_values)


class PublicationSchema(SchemaDescriptor):
    """Marketplace envelope + `signature` + `$schema` + `lens` details."""

    @property
    def schema_id(self) -> str:
        """The `$schema` literal identifying this variant."""
        return self.field_def("$schema").literal_values[0]

    @property
    def details(self) -> MetadataDetailsSchema:
        return self.fields["lens"]  # type: ignore[return-value]

    @property
    def focuses(self) -> Tuple[PublicationMainFocus, ...]:
        return self.details.focuses


# --- Builders --- #

def metadata_details_with(
    augmentation: Mapping[str, FieldLike],
    *,
    name: str = "PublicationMetadataDetails",
) -> MetadataDetailsSchema:
    """
    Extend the common schema with focus-specific fields.

    Args:
        augmentation: must hold `mainContentFocus`, built with `main_content_focus()`
            (a required literal, or closed literal set, of PublicationMainFocus values),
            plus any focus-specific fields. Augmentation fields override common ones.
        name: name of the resulting schema (used for the generated model).

    Raises:
        SchemaCompositionError: if `mainContentFocus` is missing or not a focus literal.
    """
    _require_focus_literal(name, augmentation.get("mainContentFocus"))
    details = MetadataCommonSchema.extend(augmentation, name=name, into=MetadataDetailsSchema)
    logger.debug("Composed %s for %s", name, ", ".join(f.value for f in details.focuses))
    return details


def publication_with(
    augmentation: Mapping[str, FieldLike],
    *,
    name: str = "PublicationMetadata",
) -> PublicationSchema:
    """
    Wrap focus details into a complete publication schema.

    Args:
        augmentation: must hold `$schema` (a required single string literal, see `literal()`)
            and `lens` (a schema returned by `metadata_details_with`).
        name: name of the resulting schema (used for the generated model).

    Raises:
        SchemaCompositionError: if `$schema` or `lens` have the wrong shape.
    """
    _require_schema_literal(name, augmentation.get("$schema"))
    lens = augmentation.get("lens")
    if not isinstance(lens, MetadataDetailsSchema):
        raise SchemaCompositionError(
            f"{name}: 'lens' must be the result of metadata_details_with(), got {type(lens).__name__}"
        )
    return MarketplaceMetadataSchema.extend(
        {
            "signature": optional(Signature, "A cryptographic signature of the metadata."),
            **augmentation,
        },
        name=name,
        into=PublicationSchema,
    )


def main_content_focus(*focuses: PublicationMainFocus | str) -> FieldDef:
    """
    Build the `mainContentFocus` field for `metadata_details_with`.

    One focus gives a field accepting only that literal; several give a
    field accepting exactly that closed set (duplicates collapse).

    Raises:
        SchemaCompositionError: if no focus is given or a value is not a PublicationMainFocus.
    """
    if not focuses:
        raise SchemaCompositionError("main_content_focus() needs at least one PublicationMainFocus")

    values: List[str] = []
    for raw in focuses:
        focus = PublicationMainFocus.try_parse(raw)
        if focus is None:
            raise SchemaCompositionError(f"{raw!r} is not a PublicationMainFocus")
        if focus.value not in values:
            values.append(focus.value)
    return literal(*values, description=MAIN_CONTENT_FOCUS_DESCRIPTION)


# --- Augmentation checks --- #

def _require_focus_literal(name: str, value: object) -> None:
    if not isinstance(value, FieldDef) or not value.required or not value.literal_values:
        raise SchemaCompositionError(
            f"{name}: 'mainContentFocus' must be a required literal built with main_content_focus()"
        )
    unknown = [v for v in value.literal_values if PublicationMainFocus.try_parse(v) is None]
    if unknown:
        raise SchemaCompositionError(
            f"{name}: 'mainContentFocus' allows values outside PublicationMainFocus: {unknown}"
        )


def _require_schema_literal(name: str, value: object) -> None:
    if (
        not isinstance(value, FieldDef)
        or not value.required
        or len(value.literal_values) != 1
        or not isinstance(value.literal_values[0], str)
    ):
        raise SchemaCompositionError(f"{name}: '$schema' must be a required single string literal")
