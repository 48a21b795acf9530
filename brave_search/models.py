"""Typed response schema for the Brave Search API.

The records mirror the JSON returned by ``GET web/search``. They are frozen
pydantic models: optional fields that the API omits stay unset, so
:meth:`BraveModel.to_payload` reproduces the original shape instead of
emitting ``null`` placeholders.

Updates:
  v0.2.1 - 2026-10-14 - Add published_at helpers parsed from page_age timestamps.
  v0.2.0 - 2026-10-09 - Switch result collections to tuples and ignore unknown keys.
  v0.1.0 - 2026-10-06 - Introduce search, news, and video result records.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp with optional fractional seconds and ``Z`` suffix."""
    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    except ValueError:
        return None


class BraveModel(BaseModel):
    """Base class for immutable API records."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping that omits fields the API did not send."""
        return self.model_dump(mode="json", exclude_unset=True)


# Shared


class Thumbnail(BraveModel):
    src: str
    original: str
    logo: bool | None = None


class MetaURL(BraveModel):
    """Decomposed URL metadata attached to every result."""

    scheme: str
    netloc: str
    hostname: str
    favicon: str
    path: str


class _PageAgeMixin:
    @property
    def published_at(self) -> datetime | None:
        """Return ``page_age`` as a datetime when it holds an ISO-8601 timestamp."""
        return parse_timestamp(getattr(self, "page_age", None))


# Web


class Query(BraveModel):
    original: str


class Profile(BraveModel):
    name: str
    url: str
    long_name: str
    img: str


class Cluster(BraveModel):
    """A deep link grouped under a parent web result."""

    title: str
    url: str
    description: str
    family_friendly: bool
    is_source_local: bool
    is_source_both: bool


class SearchResult(_PageAgeMixin, BraveModel):
    type: str
    subtype: str
    url: str
    title: str
    description: str
    profile: Profile
    thumbnail: Thumbnail | None = None
    age: str | None = None
    page_age: str | None = None
    language: str
    family_friendly: bool
    meta_url: MetaURL
    is_source_local: bool
    is_source_both: bool
    cluster_type: str | None = None
    cluster: tuple[Cluster, ...] | None = None


class Search(BraveModel):
    type: str
    results: tuple[SearchResult, ...]
    mutated_by_goggles: bool | None = None
    family_friendly: bool | None = None


# News


class NewsResult(_PageAgeMixin, BraveModel):
    url: str
    title: str
    description: str
    is_source_local: bool
    is_source_both: bool
    age: str | None = None
    page_age: str | None = None
    family_friendly: bool
    breaking: bool
    meta_url: MetaURL
    thumbnail: Thumbnail | None = None


class News(BraveModel):
    type: str
    results: tuple[NewsResult, ...]
    mutated_by_goggles: bool | None = None
    family_friendly: bool | None = None


# Videos


class VideoResult(_PageAgeMixin, BraveModel):
    url: str
    title: str
    description: str
    type: str
    meta_url: MetaURL
    thumbnail: Thumbnail | None = None
    age: str | None = None
    page_age: str | None = None


class Videos(BraveModel):
    type: str
    results: tuple[VideoResult, ...]
    mutated_by_goggles: bool | None = None
    family_friendly: bool | None = None


class SearchResponse(BraveModel):
    """Top-level payload returned by the web search endpoint."""

    type: str
    query: Query
    web: Search | None = None
    videos: Videos | None = None
    news: News | None = None


__all__ = [
    "BraveModel",
    "Cluster",
    "MetaURL",
    "News",
    "NewsResult",
    "Profile",
    "Query",
    "Search",
    "SearchResponse",
    "SearchResult",
    "Thumbnail",
    "VideoResult",
    "Videos",
    "parse_timestamp",
]
