#!/usr/bin/env python3
"""
Purpose:
    Enumerates the `$schema` identifiers of the supported publication variants.
"""

from enum import Enum

from pubmeta.core.constants import PUBLICATION_SCHEMA_BASE_URL, PUBLICATION_SCHEMA_VERSION


def _schema_url(slug: str) -> str:
    return f"{PUBLICATION_SCHEMA_BASE_URL}/{slug}/{PUBLICATION_SCHEMA_VERSION}.json"


class PublicationSchemaId(str, Enum):
    ARTICLE_LATEST = _schema_url("article")
    AUDIO_LATEST = _schema_url("audio")
    EMBED_LATEST = _schema_url("embed")
    IMAGE_LATEST = _schema_url("image")
    LINK_LATEST = _schema_url("link")
    TEXT_ONLY_LATEST = _schema_url("text-only")
    VIDEO_LATEST = _schema_url("video")
