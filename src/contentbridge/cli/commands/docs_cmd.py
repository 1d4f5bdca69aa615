from __future__ import annotations

import argparse
from pathlib import Path

from rich.table import Table

from contentbridge.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("docs", help="Publish, revoke and list shared documents")
    docs_subparsers = parser.add_subparsers(dest="docs_command", required=True)

    publish = docs_subparsers.add_parser("publish", help="Share a local file under a new content URI")
    publish.add_argument("path", help="Local file to publish")
    name_group = publish.add_mutually_exclusive_group()
    name_group.add_argument("--display-name", help="Display name reported to callers (default: file name)")
    name_group.add_argument(
        "--no-display-name",
        action="store_true",
        help="Publish without display name metadata",
    )
    publish.set_defaults(handler=run_publish)

    revoke = docs_subparsers.add_parser("revoke", help="Revoke the grant behind a content URI")
    revoke.add_argument("uri")
    revoke.set_defaults(handler=run_revoke)

    list_docs = docs_subparsers.add_parser("list", help="List published documents")
    list_docs.add_argument("--limit", type=int, default=50)
    list_docs.add_argument("--all", action="store_true", help="Include revoked documents")
    list_docs.set_defaults(handler=run_list)


def run_publish(args: argparse.Namespace, ctx: CLIContext) -> int:
    provider = ctx.provider()
    document = provider.publish(
        Path(args.path),
        display_name=args.display_name,
        use_filename=not args.no_display_name,
    )
    ctx.console.print(f"[green]Published[/green] {document.local_path}")
    ctx.console.print(document.content_uri, markup=False, highlight=False, soft_wrap=True)
    return 0


def run_revoke(args: argparse.Namespace, ctx: CLIContext) -> int:
    provider = ctx.provider()
    if provider.revoke(args.uri):
        ctx.console.print(f"[green]Revoked[/green] {args.uri}")
        return 0
    ctx.console.print(f"[yellow]No active grant for[/yellow] {args.uri}")
    return 1


def run_list(args: argparse.Namespace, ctx: CLIContext) -> int:
    documents = ctx.provider().list_documents(limit=args.limit, include_revoked=args.all)

    table = Table(title=f"Documents ({len(documents)})")
    table.add_column("Content URI", overflow="fold")
    table.add_column("Display Name")
    table.add_column("Media Type")
    table.add_column("Size")
    table.add_column("Granted")

    for d in documents:
        table.add_row(
            d.content_uri,
            d.display_name or "-",
            d.media_type,
            str(d.size_bytes),
            "yes" if d.granted else f"revoked {d.revoked_at}",
        )

    ctx.console.print(table)
    return 0
