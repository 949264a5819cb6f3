#!/usr/bin/env python3
"""
Purpose:
    Video publication: a main video, either full-length or short-form.
"""

from pubmeta.publication.common.media import MediaVideo
from pubmeta.publication.common.metadata import (
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.publication.media_fields import ATTACHMENTS, CONTENT, TITLE
from pubmeta.publication.schema_id import PublicationSchemaId
from pubmeta.schema.field import literal, required


VideoMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.VIDEO, PublicationMainFocus.SHORT_VIDEO),
        "video": required(MediaVideo, "The video."),
        "title": TITLE,
        "content": CONTENT,
        "attachments": ATTACHMENTS,
    },
    name="VideoMetadataDetails",
)

VideoMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.VIDEO_LATEST.value,
            description="The schema id of the video publication metadata.",
        ),
        "lens": VideoMetadataDetailsSchema,
    },
    name="VideoMetadata",
).describe("A video publication.")
