#!/usr/bin/env python3
"""
Purpose:
    Text-only publication: markdown content and nothing else.
"""

from pubmeta.core.primitives import Markdown
from pubmeta.publication.common.metadata import (
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.publication.schema_id import PublicationSchemaId
from pubmeta.schema.field import literal, required


TextOnlyMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.TEXT_ONLY),
        "content": required(Markdown, "The content for the publication as markdown."),
    },
    name="TextOnlyMetadataDetails",
)

TextOnlyMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.TEXT_ONLY_LATEST.value,
            description="The schema id of the text-only publication metadata.",
        ),
        "lens": TextOnlyMetadataDetailsSchema,
    },
    name="TextOnlyMetadata",
).describe("A text-only publication.")
