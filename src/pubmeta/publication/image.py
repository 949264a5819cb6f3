#!/usr/bin/env python3
"""
Purpose:
    Image publication: one main image plus optional title, text and attachments.
"""

from pubmeta.publication.common.media import MediaImage
from pubmeta.publication.common.metadata import (
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.publication.media_fields import ATTACHMENTS, CONTENT, TITLE
from pubmeta.publication.schema_id import PublicationSchemaId
from pubmeta.schema.field import literal, required


ImageMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.IMAGE),
        "image": required(MediaImage, "The image."),
        "title": TITLE,
        "content": CONTENT,
        "attachments": ATTACHMENTS,
    },
    name="ImageMetadataDetails",
)

ImageMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.IMAGE_LATEST.value,
            description="The schema id of the image publication metadata.",
        ),
        "lens": ImageMetadataDetailsSchema,
    },
    name="ImageMetadata",
).describe("An image publication.")
