#!/usr/bin/env python3
"""
Purpose:
    Defines media item models (image, video, audio) referenced by
    publication variants, with their accepted mime types.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import Field

from pubmeta.core.primitives import URI, NonEmptyString, PositiveInt
from pubmeta.core.wire_model import WireModel
from pubmeta.publication.common.license import MetadataLicenseType


# --- Mime types --- #

class MediaImageMimeType(str, Enum):
    BMP = "image/bmp"
    GIF = "image/gif"
    HEIC = "image/heic"
    JPEG = "image/jpeg"
    PNG = "image/png"
    SVG_XML = "image/svg+xml"
    TIFF = "image/tiff"
    WEBP = "image/webp"
    X_MS_BMP = "image/x-ms-bmp"


class MediaVideoMimeType(str, Enum):
    GLTF = "model/gltf+json"
    GLTF_BINARY = "model/gltf-binary"
    M4V = "video/x-m4v"
    MKV = "video/x-matroska"
    MOV = "video/quicktime"
    MP4 = "video/mp4"
    MPEG = "video/mpeg"
    OGG = "video/ogg"
    OGV = "video/ogv"
    WEBM = "video/webm"


class MediaAudioMimeType(str, Enum):
    WAV = "audio/wav"
    WAV_VND = "audio/vnd.wave"
    MP4 = "audio/mp4"
    MPEG = "audio/mpeg"
    OGG_AUDIO = "audio/ogg"
    WEBM_AUDIO = "audio/webm"
    AAC = "audio/aac"
    FLAC = "audio/flac"


# --- Media models --- #

class _MediaBase(WireModel):
    item: URI = Field(..., description="The location of the media file.")
    alt_tag: Optional[NonEmptyString] = Field(None, description="The alt tag for accessibility.")
    license: Optional[MetadataLicenseType] = Field(None, description="The license for the media.")


class MediaImage(_MediaBase):
    """An image file."""
    type: MediaImageMimeType = Field(..., description="The mime type of the image.")


class MediaVideo(_MediaBase):
    """A video file, optionally with a cover image and duration (seconds)."""
    type: MediaVideoMimeType = Field(..., description="The mime type of the video.")
    cover: Optional[URI] = Field(None, description="The cover image for the video.")
    duration: Optional[PositiveInt] = Field(None, description="How long the video is in seconds.")


class MediaAudio(_MediaBase):
    """An audio file with optional descriptive credits."""
    type: MediaAudioMimeType = Field(..., description="The mime type of the audio file.")
    cover: Optional[URI] = Field(None, description="The cover image for the audio.")
    duration: Optional[PositiveInt] = Field(None, description="How long the audio is in seconds.")
    artist: Optional[NonEmptyString] = Field(None, description="The name of the artist.")
    credits: Optional[NonEmptyString] = Field(None, description="The credits for the audio.")
    genre: Optional[NonEmptyString] = Field(None, description="The genre of the audio.")


# Mime types are disjoint, so the member is selected by `type`
AnyMedia = Union[MediaImage, MediaVideo, MediaAudio]
