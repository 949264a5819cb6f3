#!/usr/bin/env python3
"""
Purpose:
    Defines the closed PublicationMainFocus enumeration used as the
    discriminant between publication variants.
"""

from __future__ import annotations

from enum import Enum


class PublicationMainFocus(str, Enum):
    """What kind of content a publication primarily represents."""

    VIDEO = "VIDEO"
    IMAGE = "IMAGE"
    ARTICLE = "ARTICLE"
    TEXT_ONLY = "TEXT_ONLY"
    AUDIO = "AUDIO"
    LINK = "LINK"
    LIVESTREAM = "LIVESTREAM"
    MINT = "MINT"
    EMBED = "EMBED"
    CHECKING_IN = "CHECKING_IN"
    SPACE = "SPACE"
    STORY = "STORY"
    TRANSACTION = "TRANSACTION"
    THREE_D = "THREE_D"
    EVENT = "EVENT"
    SHORT_VIDEO = "SHORT_VIDEO"

    @classmethod
    def try_parse(cls, value: str | PublicationMainFocus | None) -> PublicationMainFocus | None:
        """
        Coerce `value` to a member, or return None when it is not one.

        Examples
        --------
        >>> PublicationMainFocus.try_parse("VIDEO")
        <PublicationMainFocus.VIDEO: 'VIDEO'>
        >>> PublicationMainFocus.try_parse("video") is None
        True
        """
        if isinstance(value, PublicationMainFocus):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
