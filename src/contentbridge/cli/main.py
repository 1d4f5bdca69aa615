from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from contentbridge.cli.commands import (
    copy_cmd,
    docs_cmd,
    init_cmd,
    invoke_cmd,
    name_cmd,
    web_cmd,
)
from contentbridge.cli.context import CLIContext
from contentbridge.core.config import load_paths, load_settings
from contentbridge.core.errors import ContentBridgeError
from contentbridge.core.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contentbridge",
        description="Copy and name documents behind permission-scoped content URIs",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project root holding .contentbridge data (default: current working directory)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)
    init_cmd.register(subparsers)
    docs_cmd.register(subparsers)
    copy_cmd.register(subparsers)
    name_cmd.register(subparsers)
    invoke_cmd.register(subparsers)
    web_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        ctx = CLIContext(paths=load_paths(args.project_root), settings=load_settings(), console=console)
        return handler(args, ctx)
    except ContentBridgeError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
