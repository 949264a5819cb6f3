#!/usr/bin/env python3
"""
Core constants used across pubmeta.

- Versioning: current publication metadata standard version.
- Bounds: length limits applied to common publication fields.
- File handling: supported document extensions and default text encoding.
- Regular expressions: compiled patterns used by primitive validators.
"""

import re
from typing import Final

# --- Standard constants --- #

# Version of the publication metadata standard implemented by the variants
PUBLICATION_SCHEMA_VERSION: Final[str] = "3.0.0"

# Base URL of the published JSON schemas (one document per variant)
PUBLICATION_SCHEMA_BASE_URL: Final[str] = "https://json-schemas.lens.dev/publications"

# Bounds on the common `attributes` bag
ATTRIBUTES_MIN_LENGTH: Final[int] = 1
ATTRIBUTES_MAX_LENGTH: Final[int] = 20

# Bounds on the common `tags` list and on each tag
TAGS_MAX_LENGTH: Final[int] = 10
TAG_MAX_LENGTH: Final[int] = 50

# Bounds on the criteria of an AND/OR access condition
ACCESS_CONDITION_MIN_CRITERIA: Final[int] = 2
ACCESS_CONDITION_MAX_CRITERIA: Final[int] = 5

# Supported document file extensions (CLI)
SUPPORTED_DOCUMENT_EXT: Final[frozenset[str]] = frozenset({".json", ".yml", ".yaml"})

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #
# Matches strict SemVer strings (e.g., 1.2.3 only)
STRICT_SEMVER_RE: re.Pattern[str] = re.compile(r"^\d+\.\d+\.\d+$")

# Locale identifiers: `[language]` or `[language]-[region]` (e.g. en, en-GB, es-419)
LOCALE_RE: re.Pattern[str] = re.compile(r"^[a-z]{2,3}(?:-(?:[A-Za-z]{2}|\d{3}))?$")

# URIs: any scheme followed by a non-empty, whitespace-free remainder (https://, ipfs://, ar://, lens://)
URI_RE: re.Pattern[str] = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:\S+$")

# EVM addresses (0x + 40 hex chars)
EVM_ADDRESS_RE: re.Pattern[str] = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Profile identifiers (0x-prefixed hex)
PROFILE_ID_RE: re.Pattern[str] = re.compile(r"^0x[a-fA-F0-9]+$")

# Publication identifiers (<profile id>-<publication id>)
PUBLICATION_ID_RE: re.Pattern[str] = re.compile(r"^0x[a-fA-F0-9]+-0x[a-fA-F0-9]+$")

# Hex-encoded strings (encryption keys)
HEX_RE: re.Pattern[str] = re.compile(r"^[a-fA-F0-9]+$")

# ISO-8601 calendar date with optional time and offset
ISO_DATETIME_RE: re.Pattern[str] = re.compile(
    r"^\d{4}-\d{2}-\d{2}(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)

# Decimal numbers with optional sign, fraction and exponent
NUMERIC_RE: re.Pattern[str] = re.compile(r"^-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?$")

# Matches characters that cannot appear in generated model attribute names
IDENTIFIER_SAFE_RE: re.Pattern[str] = re.compile(r"[^0-9A-Za-z_]")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if not STRICT_SEMVER_RE.fullmatch(PUBLICATION_SCHEMA_VERSION):
        raise RuntimeError(
            f"PUBLICATION_SCHEMA_VERSION must be strict semver (x.y.z), got {PUBLICATION_SCHEMA_VERSION!r}"
        )
    if not 0 < ATTRIBUTES_MIN_LENGTH <= ATTRIBUTES_MAX_LENGTH:
        raise RuntimeError("ATTRIBUTES_MIN_LENGTH must be positive and not exceed ATTRIBUTES_MAX_LENGTH")

validate_constants()
