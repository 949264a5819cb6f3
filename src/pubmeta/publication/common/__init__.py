# publication/common/__init__.py
from .encryption import (
    AccessCondition,
    AndCondition,
    CollectCondition,
    EoaOwnershipCondition,
    Erc20OwnershipCondition,
    FollowCondition,
    LitProtocolEncryptionStrategy,
    NetworkAddress,
    NftOwnershipCondition,
    OrCondition,
    ProfileOwnershipCondition,
    PublicationEncryptionStrategy,
)
from .license import MetadataLicenseType
from .marketplace import MarketplaceMetadataAttribute, MarketplaceMetadataSchema
from .media import (
    AnyMedia,
    MediaAudio,
    MediaAudioMimeType,
    MediaImage,
    MediaImageMimeType,
    MediaVideo,
    MediaVideoMimeType,
)
from .metadata import (
    MetadataCommonSchema,
    MetadataDetailsSchema,
    PublicationContentWarning,
    PublicationMetadataCoreSchema,
    PublicationSchema,
    main_content_focus,
    metadata_details_with,
    publication_with,
)

__all__ = [
    "AccessCondition", "AndCondition", "CollectCondition", "EoaOwnershipCondition",
    "Erc20OwnershipCondition", "FollowCondition", "LitProtocolEncryptionStrategy",
    "NetworkAddress", "NftOwnershipCondition", "OrCondition", "ProfileOwnershipCondition",
    "PublicationEncryptionStrategy",
    "MetadataLicenseType",
    "MarketplaceMetadataAttribute", "MarketplaceMetadataSchema",
    "AnyMedia", "MediaAudio", "MediaAudioMimeType", "MediaImage", "MediaImageMimeType",
    "MediaVideo", "MediaVideoMimeType",
    "MetadataCommonSchema", "MetadataDetailsSchema", "PublicationContentWarning",
    "PublicationMetadataCoreSchema", "PublicationSchema",
    "main_content_focus", "metadata_details_with", "publication_with",
]
