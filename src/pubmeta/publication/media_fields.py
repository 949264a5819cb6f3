#!/usr/bin/env python3
"""
Purpose:
    Field definitions shared by several publication variants.
"""

from typing import List

from pubmeta.core.primitives import Markdown, NonEmptyString
from pubmeta.publication.common.media import AnyMedia
from pubmeta.schema.field import optional

ATTACHMENTS = optional(
    List[AnyMedia],
    "The other attachments you want to include with it.",
    min_length=1,
)

TITLE = optional(NonEmptyString, "The optional title of the publication.")

CONTENT = optional(Markdown, "Optional markdown content.")
