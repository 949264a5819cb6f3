#!/usr/bin/env python3
"""
Purpose:
    Wires together the pubmeta application context: merged configuration,
    logging, and the registry of publication variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pubmeta.core.config import load_config
from pubmeta.core.log import configure_logging
from pubmeta.publication.registry import PublicationRegistry, default_registry


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and the publication registry."""
    config: Dict[str, Any]
    publications: PublicationRegistry

    @property
    def indent(self) -> int:
        return int(self.config.get("output", {}).get("indent", 2))


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    registry: Optional[PublicationRegistry] = None,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        registry:
            Optional registry override. Defaults to every built-in variant.

    Returns:
        AppContext: immutable bundle of config and publication registry.
    """
    cfg = config or load_config()
    configure_logging(cfg)
    return AppContext(config=cfg, publications=registry or default_registry())
