#!/usr/bin/env python3
"""
Purpose:
    Defines the marketplace (NFT listing) envelope of a publication: the
    top-level fields marketplaces read when a publication is minted.
    Every field is optional and nullable.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from pubmeta.core.primitives import URI, Markdown, NonEmptyString
from pubmeta.schema.descriptor import SchemaDescriptor
from pubmeta.schema.field import optional


class MarketplaceMetadataAttributeDisplayType(str, Enum):
    NUMBER = "number"
    STRING = "string"
    DATE = "date"


class MarketplaceMetadataAttribute(BaseModel):
    """One trait shown by marketplaces."""
    model_config = ConfigDict(frozen=True)

    display_type: Optional[MarketplaceMetadataAttributeDisplayType] = Field(
        None, description="The display type of the attribute."
    )
    trait_type: Optional[NonEmptyString] = Field(None, description="The name of the trait.")
    value: Optional[Union[StrictStr, StrictInt, StrictFloat]] = Field(
        None, description="The value of the trait."
    )


MarketplaceMetadataSchema = SchemaDescriptor(
    name="MarketplaceMetadata",
    description="The marketplace metadata fields.",
    fields={
        "description": optional(
            Optional[Markdown],
            "A human-readable description of the item. It could be plain text or markdown.",
        ),
        "external_url": optional(
            Optional[URI],
            "This is the URL that will appear below the asset's image on OpenSea and others "
            "and will allow users to leave OpenSea and view the item on the site.",
        ),
        "name": optional(Optional[NonEmptyString], "Name of the NFT item."),
        "attributes": optional(
            Optional[List[MarketplaceMetadataAttribute]],
            "These are the attributes for the item, which will show up on the OpenSea and others NFT trading websites on the item.",
        ),
        "image": optional(Optional[URI], "Marketplaces will store any NFT image here."),
        "animation_url": optional(
            Optional[URI],
            "A URL to a multi-media attachment for the item. The file extensions GLTF, GLB, WEBM, MP4, M4V, OGV, "
            "and OGG are supported, along with the audio-only extensions MP3, WAV, and OGA.",
        ),
    },
)
