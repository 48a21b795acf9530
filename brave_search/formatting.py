"""Plain-text rendering helpers for decoded search responses.

Updates:
  v0.1.1 - 2026-10-15 - Include news and video sections in the rendered block.
  v0.1.0 - 2026-10-08 - Adapt numbered result helpers for Brave Search responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Iterable, Sequence

    from .models import NewsResult, SearchResponse, SearchResult, VideoResult

SEARCH_RESULTS_START_MARKER = "--- Search Results Start ---"
SEARCH_RESULTS_END_MARKER = "--- Search Results End ---"

__all__ = [
    "SEARCH_RESULTS_END_MARKER",
    "SEARCH_RESULTS_START_MARKER",
    "build_numbered_search_results",
    "describe_result",
    "format_search_response",
    "wrap_search_results_block",
]


def build_numbered_search_results(lines: Sequence[str]) -> str:
    """Return newline-wrapped lines prefixed with incremental result numbers."""
    entries: list[str] = []
    counter = 0
    for line in lines:
        text = (line or "").strip()
        if not text:
            continue
        counter += 1
        entries.append(f"{counter}. {text}")
    return "\n".join(entries).strip()


def wrap_search_results_block(content: str, *, heading: str | None = None) -> str:
    """Wrap *content* with standardized markers and an optional heading line."""
    body = (content or "").strip()
    if not body:
        return ""
    lines = [SEARCH_RESULTS_START_MARKER]
    if heading:
        lines.append(heading)
    lines.extend((body, SEARCH_RESULTS_END_MARKER))
    return "\n".join(lines)


def describe_result(result: SearchResult | NewsResult | VideoResult) -> str:
    """Return a one-line summary for a web, news, or video result."""
    title = " ".join(result.title.split())
    description = " ".join(result.description.split())
    prefix = ""
    if getattr(result, "breaking", False):
        prefix = "[BREAKING] "
    age = f" [{result.age}]" if result.age else ""
    summary = f"{prefix}{title}{age}"
    if description:
        summary = f"{summary}: {description}"
    return f"{summary} (Source: {result.url})"


def _section(
    label: str,
    results: Iterable[SearchResult | NewsResult | VideoResult],
    limit: int | None,
) -> list[str]:
    selected = list(results)
    if limit is not None:
        selected = selected[: max(0, limit)]
    numbered = build_numbered_search_results([describe_result(item) for item in selected])
    if not numbered:
        return []
    return [f"{label}:", numbered]


def format_search_response(response: SearchResponse, *, limit: int | None = None) -> str:
    """Render *response* as a wrapped block of numbered web, news, and video results."""
    sections: list[str] = []
    if response.web is not None:
        sections.extend(_section("Web", response.web.results, limit))
    if response.news is not None:
        sections.extend(_section("News", response.news.results, limit))
    if response.videos is not None:
        sections.extend(_section("Videos", response.videos.results, limit))
    heading = f"Query: {response.query.original}"
    if not sections:
        return wrap_search_results_block("No results.", heading=heading)
    return wrap_search_results_block("\n".join(sections), heading=heading)
