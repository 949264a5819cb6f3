#!/usr/bin/env python3
"""
Formatting helpers for pubmeta.

- Stable dotted/indexed paths for validation error locations.
- One-line rendering of validation issues.
"""
from __future__ import annotations

from typing import Any, Iterable, List


# --- Public API --- #

def format_issue_path(loc: Iterable[Any]) -> str:
    """
    Convert a Pydantic error `loc` tuple into a dotted path with index suffixes.

    Examples:
        ('lens', 'attributes', 0, 'key') -> "lens.attributes[0].key"
        (0, 'items')                     -> "[0].items"
        ()                               -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"


def format_issues(issues: Iterable[Any]) -> List[str]:
    """
    Render validation issues one per line ("path: message [kind]").

    Accepts anything whose `str()` is the one-line form, such as `ValidationIssue`.
    """
    return [str(issue) for issue in issues]
