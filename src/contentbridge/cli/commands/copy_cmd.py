from __future__ import annotations

import argparse

from contentbridge.cli.context import CLIContext
from contentbridge.core.errors import ContentCopyError


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("copy", help="Copy the bytes behind a content URI to a local path")
    parser.add_argument("uri", help="Content URI to read")
    parser.add_argument("destination", help="Destination file path (parent directories are created)")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    channel = ctx.channel()
    if not channel.copier.copy(args.uri, args.destination):
        raise ContentCopyError(f"Could not copy {args.uri} to {args.destination}")

    ctx.console.print(f"[green]Copied[/green] {args.uri} -> {args.destination}")
    return 0
