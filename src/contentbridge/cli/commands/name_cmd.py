from __future__ import annotations

import argparse

from contentbridge.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("name", help="Resolve the display name of a content URI")
    parser.add_argument("uri")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    name = ctx.channel().name_resolver.resolve_name(args.uri)
    if name is None:
        ctx.console.print(f"[yellow]No display name for[/yellow] {args.uri}")
        return 1

    ctx.console.print(name, markup=False, highlight=False, soft_wrap=True)
    return 0
