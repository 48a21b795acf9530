"""Argument parser for the Brave Search CLI.

Updates:
  v0.1.2 - 2026-10-19 - Imply the search subcommand after leading global options.
  v0.1.1 - 2026-10-15 - Add --limit and --json output flags to the search command.
  v0.1.0 - 2026-10-06 - Add search subcommand with token option.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

DEFAULT_COMMAND = "search"
_GLOBAL_FLAGS = frozenset({"-h", "--help", "--version", "--print-settings"})
_GLOBAL_VALUE_OPTIONS = frozenset({"--logging-config"})


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``brave-search`` launcher."""
    parser = argparse.ArgumentParser(
        prog="brave-search",
        description="A utility for interacting with the Brave Search API.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    search_parser = subparsers.add_parser(
        "search",
        help="Returns search results.",
    )
    search_parser.add_argument("query", type=str, help="Your search query.")
    search_parser.add_argument(
        "-t",
        "--token",
        type=str,
        default=None,
        help="Your API token (defaults to BRAVE_SEARCH_API_TOKEN / BRAVE_API_KEY).",
    )
    search_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results to display per section.",
    )
    search_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the decoded response as JSON instead of a numbered list.",
    )
    return parser


def _with_default_command(args: list[str]) -> list[str]:
    """Insert ``search`` after any leading global options unless a subcommand is present.

    A query that is literally ``search`` therefore needs the explicit form
    ``brave-search search search``.
    """
    index = 0
    while index < len(args):
        option = args[index]
        if option in _GLOBAL_VALUE_OPTIONS:
            index += 2
        elif option in _GLOBAL_FLAGS or option.split("=", 1)[0] in _GLOBAL_VALUE_OPTIONS:
            index += 1
        else:
            break
    if index >= len(args) or args[index] == DEFAULT_COMMAND:
        return args
    return [*args[:index], DEFAULT_COMMAND, *args[index:]]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments; ``search`` is implied when no subcommand is given."""
    parser = build_parser()
    args = list(argv) if argv is not None else sys.argv[1:]
    return parser.parse_args(_with_default_command(args))
