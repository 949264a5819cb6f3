#!/usr/bin/env python3
"""
Purpose:
    Base model for hand-written metadata records whose wire names are
    camelCase (`altTag`, `chainId`) while attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable model validated and dumped under camelCase aliases."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
