#!/usr/bin/env python3
"""
Purpose:
    Article publication: long-form markdown with an optional title and attachments.
"""

from pubmeta.core.primitives import Markdown
from pubmeta.publication.common.metadata import (
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.publication.media_fields import ATTACHMENTS, TITLE
from pubmeta.publication.schema_id import PublicationSchemaId
from pubmeta.schema.field import literal, required


ArticleMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.ARTICLE),
        "title": TITLE,
        "content": required(Markdown, "The content for the publication as markdown."),
        "attachments": ATTACHMENTS,
    },
    name="ArticleMetadataDetails",
)

ArticleMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.ARTICLE_LATEST.value,
            description="The schema id of the article publication metadata.",
        ),
        "lens": ArticleMetadataDetailsSchema,
    },
    name="ArticleMetadata",
).describe("An article publication.")
