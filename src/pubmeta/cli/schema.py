#!/usr/bin/env python3
import json

from pubmeta.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("schema", help="Publication schema utilities")
    sps = sp.add_subparsers(dest="schema_cmd")

    # default when user runs: `pubmeta schema`
    def schema_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=schema_default)

    lp = sps.add_parser("list", help="List publication variants")
    lp.add_argument("--json", action="store_true", help="JSON output")
    lp.set_defaults(func=list_schemas)

    ssp = sps.add_parser("show", help="Show a variant's JSON Schema")
    ssp.add_argument("schema", help="Schema name (e.g. TextOnlyMetadata) or $schema URL")
    ssp.set_defaults(func=show_schema)


def list_schemas(args, ctx: AppContext) -> int:
    entries = ctx.publications.entries()

    if args.json:
        payload = [{
            "name": e.name,
            "schema": e.schema_id,
            "focuses": list(e.focuses),
        } for e in entries]
        print(json.dumps(payload, indent=ctx.indent))
        return 0 if payload else 1

    if not entries:
        print("No publication schemas registered.")
        return 1

    print("\nPublication Schemas:")
    for e in entries:
        focuses = " | ".join(e.focuses)
        print(f"  - {e.name:20} {focuses:24} {e.schema_id}")
    return 0


def show_schema(args, ctx: AppContext) -> int:
    try:
        s = ctx.publications.require(args.schema)
    except LookupError as e:
        print(f"Schema '{args.schema}' not found: {e}")
        return 1
    print(json.dumps(s.validator.json_schema(), indent=ctx.indent))
    return 0
