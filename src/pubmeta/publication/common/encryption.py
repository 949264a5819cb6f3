#!/usr/bin/env python3
"""
Purpose:
    Defines the encryption descriptor of a publication: which paths are
    encrypted, with which key, and the access condition a reader must
    satisfy to decrypt them. Only the descriptor shape is validated here;
    no encryption or decryption happens in pubmeta.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictInt, StrictStr, StringConstraints

from pubmeta.core import constants as C
from pubmeta.core.primitives import (
    ChainId,
    EncryptionKey,
    EvmAddress,
    NonEmptyString,
    ProfileId,
    PublicationId,
)
from pubmeta.core.wire_model import WireModel


# --- Building blocks --- #

class NetworkAddress(WireModel):
    """A contract or account address on a specific chain."""
    address: EvmAddress = Field(..., description="An EVM compatible address.")
    chain_id: ChainId = Field(..., description="The chain id the address lives on.")


class NftContractType(str, Enum):
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"


class ConditionComparisonOperator(str, Enum):
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"


class Erc20(WireModel):
    contract: NetworkAddress
    decimals: StrictInt = Field(..., ge=0, description="Decimals of the ERC20 token.")


class Amount(WireModel):
    asset: Erc20
    value: Annotated[StrictStr, StringConstraints(pattern=C.NUMERIC_RE.pattern)] = Field(
        ..., description="The amount in a human-readable decimal format (e.g. 1.1)."
    )


# --- Simple conditions --- #

class EoaOwnershipCondition(WireModel):
    """Reader must control a given externally owned account."""
    type: Literal["EOA_OWNERSHIP"]
    address: EvmAddress


class ProfileOwnershipCondition(WireModel):
    """Reader must own a given profile."""
    type: Literal["PROFILE_OWNERSHIP"]
    profile_id: ProfileId


class FollowCondition(WireModel):
    """Reader must follow a given profile."""
    type: Literal["FOLLOW"]
    follow: ProfileId


class CollectCondition(WireModel):
    """Reader must have collected a given publication (or this one)."""
    type: Literal["COLLECT"]
    publication_id: PublicationId
    this_publication: Optional[StrictBool] = Field(
        None, description="Whether the condition refers to the publication being encrypted."
    )


class NftOwnershipCondition(WireModel):
    """Reader must hold an NFT from a contract (optionally specific token ids)."""
    type: Literal["NFT_OWNERSHIP"]
    contract: NetworkAddress
    contract_type: NftContractType
    token_ids: Optional[List[NonEmptyString]] = Field(None, min_length=1)


class Erc20OwnershipCondition(WireModel):
    """Reader's ERC20 balance must compare to `amount` as `condition` states."""
    type: Literal["ERC20_OWNERSHIP"]
    amount: Amount
    condition: ConditionComparisonOperator


SimpleCondition = Annotated[
    Union[
        EoaOwnershipCondition,
        ProfileOwnershipCondition,
        FollowCondition,
        CollectCondition,
        NftOwnershipCondition,
        Erc20OwnershipCondition,
    ],
    Field(discriminator="type"),
]


# --- Compound conditions --- #

class AndCondition(WireModel):
    """All criteria must hold."""
    type: Literal["AND"]
    criteria: List[SimpleCondition] = Field(
        ..., min_length=C.ACCESS_CONDITION_MIN_CRITERIA, max_length=C.ACCESS_CONDITION_MAX_CRITERIA
    )


class OrCondition(WireModel):
    """At least one criterion must hold."""
    type: Literal["OR"]
    criteria: List[
        Annotated[
            Union[
                EoaOwnershipCondition,
                ProfileOwnershipCondition,
                FollowCondition,
                CollectCondition,
                NftOwnershipCondition,
                Erc20OwnershipCondition,
                AndCondition,
            ],
            Field(discriminator="type"),
        ]
    ] = Field(..., min_length=C.ACCESS_CONDITION_MIN_CRITERIA, max_length=C.ACCESS_CONDITION_MAX_CRITERIA)


# The top-level access condition is always an OR (typically: owner OR <gate>)
AccessCondition = OrCondition


# --- Strategies --- #

class LitProtocolEncryptionStrategy(WireModel):
    """Paths encrypted with the LIT protocol, gated by `access_condition`."""
    provider: Literal["LIT_PROTOCOL"] = Field(..., description="The encryption provider.")
    encryption_key: EncryptionKey = Field(..., description="The encrypted symmetric key, hex encoded.")
    access_condition: AccessCondition = Field(..., description="The criteria to access the encrypted data.")
    encrypted_paths: List[NonEmptyString] = Field(
        ..., min_length=1, description="The paths to the encrypted fields (e.g. 'lens.content')."
    )


# LIT is the only provider
PublicationEncryptionStrategy = LitProtocolEncryptionStrategy
