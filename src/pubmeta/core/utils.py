#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as dictionary merge and
    JSON/YAML file loading for pubmeta.
"""

import copy
import json
import re
from pathlib import Path
from typing import Dict, Any

import yaml

from pubmeta.core.constants import DEFAULT_TEXT_ENCODING


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    The result shares no nested containers with either argument.
    """
    result = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = copy.deepcopy(v)
    return result


# --- YAML loader --- #

_YAML_BOOL_TAG = "tag:yaml.org,2002:bool"
_YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """
    SafeLoader for metadata documents, matching what JSON would give.

    - timestamps (`2024-01-01`) stay strings
    - only true/false spellings are booleans; `yes`, `no`, `on`, `off` stay strings
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_YAML_BOOL_TAG, _YAML_TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(
    _YAML_BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e


def load_document_file(path: Path) -> Any:
    """
    Load a metadata document from a `.json`, `.yml` or `.yaml` file.

    Unlike `load_json_file`, a missing file is an error here.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the file cannot be parsed.
    """
    if not path.is_file():
        raise FileNotFoundError(f"No such document: {str(path)!r}")

    text = path.read_text(encoding=DEFAULT_TEXT_ENCODING)
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
            ) from e

    try:
        return yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {str(path)!r}: {e}") from e
