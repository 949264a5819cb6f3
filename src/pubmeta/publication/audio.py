#!/usr/bin/env python3
"""
Purpose:
    Audio publication: a main audio track with optional title, text and attachments.
"""

from pubmeta.publication.common.media import MediaAudio
from pubmeta.publication.common.metadata import (
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from pubmeta.publication.main_focus import PublicationMainFocus
from pubmeta.publication.media_fields import ATTACHMENTS, CONTENT, TITLE
from pubmeta.publication.schema_id import PublicationSchemaId
from pubmeta.schema.field import literal, required


AudioMetadataDetailsSchema = metadata_details_with(
    {
        "mainContentFocus": main_content_focus(PublicationMainFocus.AUDIO),
        "audio": required(MediaAudio, "The audio."),
        "title": TITLE,
        "content": CONTENT,
        "attachments": ATTACHMENTS,
    },
    name="AudioMetadataDetails",
)

AudioMetadataSchema = publication_with(
    {
        "$schema": literal(
            PublicationSchemaId.AUDIO_LATEST.value,
            description="The schema id of the audio publication metadata.",
        ),
        "lens": AudioMetadataDetailsSchema,
    },
    name="AudioMetadata",
).describe("An audio publication.")
