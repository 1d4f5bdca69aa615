from __future__ import annotations

import argparse
import json

from contentbridge.cli.context import CLIContext
from contentbridge.domain.models.method_call import MethodCall


def _parse_arg(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {raw!r}")
    return key, value


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("invoke", help="Send a raw method call through the file handler channel")
    parser.add_argument("method", help="Channel method name, e.g. copyContentUri")
    parser.add_argument(
        "--arg",
        dest="call_args",
        action="append",
        type=_parse_arg,
        default=[],
        metavar="KEY=VALUE",
        help="Method argument (repeatable)",
    )
    parser.add_argument("--request-id", help="Correlation id to log with the call")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    channel = ctx.channel()
    call = MethodCall(method=args.method, arguments=dict(args.call_args), request_id=args.request_id)
    result = channel.handle(call)

    ctx.console.print_json(json.dumps(result.to_payload()))
    return 0 if result.ok else 1
