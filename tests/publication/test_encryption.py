#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from pubmeta.publication.common.encryption import (
    AndCondition,
    LitProtocolEncryptionStrategy,
    ProfileOwnershipCondition,
)

OWNER = "0x" + "a" * 40
CONTRACT = {"address": "0x" + "b" * 40, "chainId": 137}


def _with_criteria(strategy, criteria):
    strategy["accessCondition"]["criteria"] = criteria
    return strategy


def test_lit_strategy_parses_into_typed_conditions(lit_strategy):
    strategy = LitProtocolEncryptionStrategy.model_validate(lit_strategy)
    assert strategy.encrypted_paths == ["lens.content"]
    assert isinstance(strategy.access_condition.criteria[0], ProfileOwnershipCondition)
    assert strategy.access_condition.criteria[1].follow == "0x02"


def test_lit_strategy_dumps_under_wire_names(lit_strategy):
    strategy = LitProtocolEncryptionStrategy.model_validate(lit_strategy)
    assert strategy.model_dump(mode="json", by_alias=True, exclude_unset=True) == lit_strategy


def test_every_simple_condition_kind(lit_strategy):
    criteria = [
        {"type": "EOA_OWNERSHIP", "address": OWNER},
        {"type": "COLLECT", "publicationId": "0x01-0x0a", "thisPublication": True},
        {"type": "NFT_OWNERSHIP", "contract": CONTRACT, "contractType": "ERC721", "tokenIds": ["1"]},
        {
            "type": "ERC20_OWNERSHIP",
            "amount": {"asset": {"contract": CONTRACT, "decimals": 18}, "value": "1.5"},
            "condition": "GREATER_THAN_OR_EQUAL",
        },
        {"type": "FOLLOW", "follow": "0x2a"},
    ]
    strategy = LitProtocolEncryptionStrategy.model_validate(_with_criteria(lit_strategy, criteria))
    assert [c.type for c in strategy.access_condition.criteria] == [c["type"] for c in criteria]


def test_and_condition_nests_inside_or(lit_strategy):
    nested = {
        "type": "AND",
        "criteria": [
            {"type": "FOLLOW", "follow": "0x02"},
            {"type": "COLLECT", "publicationId": "0x01-0x01"},
        ],
    }
    criteria = [{"type": "EOA_OWNERSHIP", "address": OWNER}, nested]
    strategy = LitProtocolEncryptionStrategy.model_validate(_with_criteria(lit_strategy, criteria))
    assert isinstance(strategy.access_condition.criteria[1], AndCondition)


@pytest.mark.parametrize("count", [1, 6])
def test_criteria_count_bounds(lit_strategy, count):
    criteria = [{"type": "FOLLOW", "follow": "0x02"}] * count
    with pytest.raises(ValidationError) as exc:
        LitProtocolEncryptionStrategy.model_validate(_with_criteria(lit_strategy, criteria))
    assert exc.value.errors()[0]["type"] in ("too_short", "too_long")


@pytest.mark.parametrize("bad", [
    {"type": "BOGUS"},
    {"type": "AND", "criteria": [
        {"type": "AND", "criteria": [{"type": "FOLLOW", "follow": "0x1"}, {"type": "FOLLOW", "follow": "0x2"}]},
        {"type": "FOLLOW", "follow": "0x3"},
    ]},
    {"type": "EOA_OWNERSHIP", "address": "0x123"},
    {"type": "NFT_OWNERSHIP", "contract": {"address": OWNER, "chainId": 0}, "contractType": "ERC721"},
    {"type": "PROFILE_OWNERSHIP", "profileId": "42"},
])
def test_malformed_conditions_are_rejected(lit_strategy, bad):
    criteria = [{"type": "FOLLOW", "follow": "0x02"}, bad]
    with pytest.raises(ValidationError):
        LitProtocolEncryptionStrategy.model_validate(_with_criteria(lit_strategy, criteria))


@pytest.mark.parametrize("field,value", [
    ("provider", "OTHER"),
    ("encryptionKey", ""),
    ("encryptedPaths", []),
])
def test_strategy_fields(lit_strategy, field, value):
    lit_strategy[field] = value
    with pytest.raises(ValidationError):
        LitProtocolEncryptionStrategy.model_validate(lit_strategy)
