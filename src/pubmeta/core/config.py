#!/usr/bin/env python3
"""
pubmeta configuration loader.
"""

import os
from pathlib import Path
from typing import Any, Dict, Final

from pubmeta.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "logging": {"level": "WARNING"},
    "output": {"indent": 2},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "pubmeta" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load pubmeta configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/pubmeta/config.json)
        3. Project config (./pubmeta.json)
        4. Environment overrides:
           - PUBMETA_LOG_LEVEL
           - PUBMETA_OUTPUT_INDENT (integer)

    Returns:
        A merged configuration dictionary.

    Raises:
        ValueError: if a config file holds invalid JSON or PUBMETA_OUTPUT_INDENT is not an integer.
    """
    # 1) start with defaults
    config = merge_dicts({}, DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "pubmeta.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    log_level_env = os.getenv("PUBMETA_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    indent_env = os.getenv("PUBMETA_OUTPUT_INDENT")
    if indent_env:
        config.setdefault("output", {})["indent"] = _parse_indent(indent_env)

    return config


# --- Internals --- #

def _parse_indent(value: str) -> int:
    try:
        indent = int(value.strip())
    except ValueError as e:
        raise ValueError(f"PUBMETA_OUTPUT_INDENT must be an integer, got {value!r}") from e
    if indent < 0:
        raise ValueError(f"PUBMETA_OUTPUT_INDENT must not be negative, got {indent}")
    return indent
