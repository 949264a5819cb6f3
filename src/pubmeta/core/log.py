#!/usr/bin/env python3
"""
Logging setup for the pubmeta CLI.

Library modules only create module loggers (`logging.getLogger(__name__)`);
handlers and levels are configured here, once, by the entry point.
"""

import logging
from typing import Any, Dict, Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: Dict[str, Any]) -> int:
    """
    Apply `config["logging"]["level"]` to the `pubmeta` logger hierarchy.

    Unknown level names fall back to WARNING.

    Returns:
        The numeric level that was applied.
    """
    name = str(config.get("logging", {}).get("level", "WARNING")).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("pubmeta")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return level
