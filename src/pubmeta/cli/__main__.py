#!/usr/bin/env python3

import argparse
import sys
from typing import List, Optional

from pubmeta.core.app import get_context
from pubmeta.cli import config, schema, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pubmeta", description="Publication metadata toolkit")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they accept ctx)
    validate.register(subparsers)
    schema.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = get_context()  # built once
        return args.func(args, ctx)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
