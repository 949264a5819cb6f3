# publication/__init__.py
from .main_focus import PublicationMainFocus
from .schema_id import PublicationSchemaId
from .common import (
    MetadataCommonSchema,
    MetadataDetailsSchema,
    PublicationContentWarning,
    PublicationMetadataCoreSchema,
    PublicationSchema,
    main_content_focus,
    metadata_details_with,
    publication_with,
)
from .article import ArticleMetadataSchema
from .audio import AudioMetadataSchema
from .embed import EmbedMetadataSchema
from .image import ImageMetadataSchema
from .link import LinkMetadataSchema
from .text_only import TextOnlyMetadataSchema
from .video import VideoMetadataSchema
from .registry import PublicationRegistry, VariantEntry, default_registry

__all__ = [
    "PublicationMainFocus", "PublicationSchemaId",
    "MetadataCommonSchema", "MetadataDetailsSchema", "PublicationContentWarning",
    "PublicationMetadataCoreSchema", "PublicationSchema",
    "main_content_focus", "metadata_details_with", "publication_with",
    "ArticleMetadataSchema", "AudioMetadataSchema", "EmbedMetadataSchema", "ImageMetadataSchema",
    "LinkMetadataSchema", "TextOnlyMetadataSchema", "VideoMetadataSchema",
    "PublicationRegistry", "VariantEntry", "default_registry",
]
