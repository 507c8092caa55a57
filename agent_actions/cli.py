"""Command-line interface for listing and invoking actions.

Usage:
    agent-actions list [--network-id ID]
    agent-actions manifest [--network-id ID]
    agent-actions invoke NAME [--input JSON] [--network-id ID]
"""

import argparse
import asyncio
import json
from typing import List, Optional

import httpx
from rich import box
from rich.console import Console
from rich.table import Table

from .config import Settings
from .errors import ConfigurationError
from .logging_config import setup_logging
from .network import Network
from .session import AgentSession

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agent-actions",
        description="List and invoke agent actions (DexScreener, weather).",
    )
    parser.add_argument(
        "--network-id",
        default=None,
        help="Only expose actions supported on this network (overrides NETWORK_ID)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show available actions")
    subparsers.add_parser("manifest", help="Print the action manifest as JSON")

    invoke = subparsers.add_parser("invoke", help="Invoke an action")
    invoke.add_argument("name", help="Action name")
    invoke.add_argument(
        "--input",
        default=None,
        help="Action input as a JSON object (default: {})",
    )
    return parser


def _render_actions(session: AgentSession) -> None:
    table = Table(title="Available actions", box=box.SIMPLE)
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Provider", style="magenta", no_wrap=True)
    table.add_column("Parameters")

    for action in session.available_actions():
        required = action.to_function_definition()["parameters"]["required"]
        table.add_row(action.name, action.provider_name, ", ".join(required) or "-")

    console.print(table)


def _invoke(session: AgentSession, name: str, raw_input: Optional[str]) -> int:
    try:
        params = json.loads(raw_input) if raw_input else {}
    except json.JSONDecodeError as e:
        err_console.print(f"[red]--input is not valid JSON:[/red] {e}")
        return EXIT_USAGE

    result = asyncio.run(session.run(name, params))
    if result.success:
        print(result.output)
        return EXIT_OK

    err_console.print(result.error, markup=False, highlight=False)
    # No kind means the action itself was not found
    return EXIT_FAILED if result.kind is not None else EXIT_USAGE


def main(
    argv: Optional[List[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """Entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    settings = Settings()
    setup_logging(settings.log_level, json_format=settings.log_json)

    network = Network(network_id=args.network_id) if args.network_id else None
    try:
        session = AgentSession.from_settings(settings, transport=transport, network=network)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        return EXIT_USAGE

    if args.command == "list":
        _render_actions(session)
        return EXIT_OK

    if args.command == "manifest":
        print(json.dumps(session.registry.get_manifest(session.network), indent=2))
        return EXIT_OK

    return _invoke(session, args.name, args.input)
