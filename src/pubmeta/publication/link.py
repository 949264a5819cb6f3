#!/usr/bin/env python3
"""
Purpose:
    Link publication: a shared URL with optional commentary.
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


LinkMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.LINK),
        "sharingLink": required(URI, "The sharing link url."),
        "content": CONTENT,
        "attachments": ATTACHMENTS,
    },
    name="LinkMetadataDetails",
)

LinkMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.LINK_LATEST.value,
            description="The schema id of the link publication metadata.",
        ),
        "lens": LinkMetadataDetailsSchema,
    },
    name="LinkMetadata",
).describe("A link publication.")
