#!/usr/bin/env python3
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from pubmeta.core.app_context import AppContext
from pubmeta.core.constants import SUPPORTED_DOCUMENT_EXT
from pubmeta.core.utils import load_document_file
from pubmeta.core.validation import ValidationResult
from pubmeta.publication.registry import PublicationRegistry

logger = logging.getLogger(__name__)


def _is_supported_file(p: Path) -> bool:
    return p.is_file() and p.suffix.lower() in SUPPORTED_DOCUMENT_EXT


def _files_in_dir(root: Path, recursive: bool) -> list[Path]:
    if not root.is_dir():
        return []
    candidates = root.rglob("*") if recursive else root.glob("*")
    return [p for p in candidates if _is_supported_file(p)]


def find_all_files(paths: Iterable[str | Path], recursive: bool = False) -> list[Path]:
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if _is_supported_file(p):
            files.append(p)
        else:
            files.extend(_files_in_dir(p, recursive))
    # stable, de-duplicated order
    return sorted(set(files))


def validate_document(
    file_path: Path,
    registry: PublicationRegistry,
    schema_key: Optional[str] = None,
) -> Tuple[bool, str, List[str]]:
    """
    Returns: (is_valid, summary_message, error_list)
    """
    try:
        data = load_document_file(file_path)
    except (OSError, ValueError) as e:
        return False, f"{file_path}: Failed to read document ({e})", []

    if schema_key:
        try:
            schema = registry.require(schema_key)
        except LookupError as e:
            return False, f"{file_path}: {e}", []
        result: ValidationResult = schema.validator.check(data)
    else:
        result = registry.check_document(data)

    if not result.is_valid():
        logger.debug("%s: %d issue(s)", file_path, len(result))
        return False, f"{file_path}: Validation Failed", result.errors
    return True, f"{file_path}: Validation Passed", []


def validate(args, ctx: AppContext) -> int:
    files = find_all_files(args.files, recursive=args.recursive)
    if not files:
        print("No JSON/YAML files found.")
        return 1

    success = 0
    for fp in files:
        ok, msg, errs = validate_document(fp, ctx.publications, schema_key=args.schema)
        if ok:
            success += 1
            if args.verbose:
                print(f"\n{msg}")
            continue
        print(f"\n{msg}")
        for e in errs:
            print(f"  - {e}")

    total = len(files)
    print(f"\nValidation complete: {success}/{total} passed.")
    return 0 if success == total else 1


def register(subparser):
    parser = subparser.add_parser("validate", help="Validate publication metadata documents.")
    parser.add_argument("files", nargs="+", help="Files or directories to validate.")
    parser.add_argument("--recursive", "-r", action="store_true", help="Recursively scan directories.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show all results, not only errors.")
    parser.add_argument(
        "--schema",
        default=None,
        help="Validate against this schema (name or $schema URL) instead of each document's $schema.",
    )
    parser.set_defaults(func=validate)
