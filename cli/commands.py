"""CLI command handlers for the Brave Search client.

Updates:
  v0.1.2 - 2026-10-16 - Print decoded responses as JSON when --json is supplied.
  v0.1.1 - 2026-10-15 - Render numbered results through brave_search.formatting.
  v0.1.0 - 2026-10-06 - Add search command dispatch.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from brave_search import BraveSearchClient, BraveSearchError, format_search_response

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from brave_search import SearchResponse
    from config import BraveSearchSettings

CommandHandler = Callable[["BraveSearchSettings", argparse.Namespace, logging.Logger], int]

EXIT_MISSING_TOKEN = 2
EXIT_REQUEST_FAILED = 4


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def build_client(token: str, settings: BraveSearchSettings) -> BraveSearchClient:
    """Return a client configured from *settings* and the resolved *token*."""
    return BraveSearchClient(
        token,
        host=settings.host,
        timeout=settings.timeout_seconds,
    )


async def _search(client: BraveSearchClient, query: str) -> SearchResponse:
    async with client:
        return await client.search(query)


def run_search(
    settings: BraveSearchSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    token = (getattr(args, "token", None) or settings.api_token or "").strip()
    if not token:
        logger.error(
            "A subscription token is required. Pass --token or set BRAVE_SEARCH_API_TOKEN."
        )
        return EXIT_MISSING_TOKEN

    query = getattr(args, "query", "") or ""
    client = build_client(token, settings)
    try:
        response = asyncio.run(_search(client, query))
    except BraveSearchError as exc:
        logger.error("Search failed: %s", exc)
        return EXIT_REQUEST_FAILED

    if getattr(args, "as_json", False):
        print(json.dumps(response.to_payload(), indent=2, ensure_ascii=False))
        return 0
    print(format_search_response(response, limit=getattr(args, "limit", None)))
    return 0


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    "search": CommandSpec(run_search),
}


__all__ = ["COMMAND_SPECS", "CommandSpec", "build_client", "run_search"]
