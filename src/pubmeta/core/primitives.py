#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types for primitive publication values
    (identifiers, locales, tags, URIs, signatures) and the
    `non_empty_string` field factory.
"""

from typing import Annotated

from pydantic import Field, StrictInt, StrictStr, StringConstraints

from pubmeta.core import constants as C
from pubmeta.schema.field import FieldDef, required


# --- Reusable Annotated types --- #

NonEmptyString = Annotated[StrictStr, StringConstraints(min_length=1)]

# Identifier of the application a publication belongs to
AppId = NonEmptyString

# `[language]` or `[language]-[region]`, e.g. "en", "en-GB", "es-419"
Locale = Annotated[StrictStr, StringConstraints(pattern=C.LOCALE_RE.pattern)]

# Free-text tag
Tag = Annotated[StrictStr, StringConstraints(min_length=1, max_length=C.TAG_MAX_LENGTH)]

# Cryptographic signature over the metadata
Signature = NonEmptyString

# Markdown text
Markdown = NonEmptyString

# Any URI (https://, ipfs://, ar://, lens://, ...)
URI = Annotated[StrictStr, StringConstraints(pattern=C.URI_RE.pattern)]

EvmAddress = Annotated[StrictStr, StringConstraints(pattern=C.EVM_ADDRESS_RE.pattern)]
ProfileId = Annotated[StrictStr, StringConstraints(pattern=C.PROFILE_ID_RE.pattern)]
PublicationId = Annotated[StrictStr, StringConstraints(pattern=C.PUBLICATION_ID_RE.pattern)]
EncryptionKey = Annotated[StrictStr, StringConstraints(min_length=1, pattern=C.HEX_RE.pattern)]

PositiveInt = Annotated[StrictInt, Field(gt=0)]
ChainId = PositiveInt


# --- Field factories --- #

def non_empty_string(description: str) -> FieldDef:
    """A required, non-empty string field carrying `description`."""
    return required(NonEmptyString, description)
