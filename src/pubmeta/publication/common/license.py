#!/usr/bin/env python3
"""
Purpose:
    Enumerates the licenses a media item can be published under.
"""

from enum import Enum


class MetadataLicenseType(str, Enum):
    """Creative Commons and Token Bound NFT License identifiers."""

    CCO = "CCO"
    CC_BY = "CC BY"
    CC_BY_ND = "CC BY-ND"
    CC_BY_NC = "CC BY-NC"
    TBNL_C_D_PL_R = "TBNL-C-D-PL-Legal"
    TBNL_C_D_NPL_R = "TBNL-C-D-NPL-Legal"
    TBNL_C_ND_PL_R = "TBNL-C-ND-PL-Legal"
    TBNL_C_ND_NPL_R = "TBNL-C-ND-NPL-Legal"
    TBNL_NC_D_PL_R = "TBNL-NC-D-PL-Legal"
    TBNL_NC_D_NPL_R = "TBNL-NC-D-NPL-Legal"
    TBNL_NC_ND_PL_R = "TBNL-NC-ND-PL-Legal"
    TBNL_NC_ND_NPL_R = "TBNL-NC-ND-NPL-Legal"
