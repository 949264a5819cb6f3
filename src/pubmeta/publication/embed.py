#!/usr/bin/env python3
"""
Purpose:
    Embed publication: an embeddable resource (e.g. an iframe source).
"""

from pubmeta.core.primitives import URI
from pubmeta.publication.common.metadata import (
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.publication.media_fields import ATTACHMENTS, CONTENT
from pubmeta.publication.schema_id import PublicationSchemaId
from pubmeta.schema.field import literal, required


EmbedMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.EMBED),
        "embed": required(URI, "The embed URL."),
        "content": CONTENT,
        "attachments": ATTACHMENTS,
    },
    name="EmbedMetadataDetails",
)

EmbedMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.EMBED_LATEST.value,
            description="The schema id of the embed publication metadata.",
        ),
        "lens": EmbedMetadataDetailsSchema,
    },
    name="EmbedMetadata",
).describe("An embed publication.")
