"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.2.0 - 2026-10-14 - Provide canned Brave Search payloads and mock transport helpers.
  v0.1.0 - 2026-10-06 - Isolate tests from developer BRAVE_* environment variables.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import httpx
import pytest

_BRAVE_ENV_VARS = (
    "BRAVE_API_KEY",
    "BRAVE_SEARCH_API_TOKEN",
    "BRAVE_SEARCH_API_KEY",
    "BRAVE_SEARCH_TOKEN",
    "BRAVE_SEARCH_HOST",
    "BRAVE_SEARCH_TIMEOUT_SECONDS",
    "BRAVE_SEARCH_LOG_LEVEL",
    "BRAVE_SEARCH_CONFIG_JSON",
)

_META_URL = {
    "scheme": "https",
    "netloc": "brave.com",
    "hostname": "brave.com",
    "favicon": "https://imgs.search.brave.com/favicon.png",
    "path": "› download",
}

SEARCH_PAYLOAD: dict[str, Any] = {
    "type": "search",
    "query": {"original": "brave browser", "show_strict_warning": False},
    "mixed": {"type": "mixed", "main": []},
    "web": {
        "type": "search",
        "family_friendly": True,
        "results": [
            {
                "type": "search_result",
                "subtype": "generic",
                "url": "https://brave.com/download/",
                "title": "Download Brave Browser",
                "description": "Fast, private and secure web browser.",
                "profile": {
                    "name": "Brave",
                    "url": "https://brave.com/download/",
                    "long_name": "brave.com",
                    "img": "https://imgs.search.brave.com/brave.png",
                },
                "language": "en",
                "family_friendly": True,
                "meta_url": _META_URL,
                "is_source_local": False,
                "is_source_both": False,
                "page_age": "2026-10-01T08:15:30.123456",
                "age": "October 1, 2026",
                "thumbnail": {
                    "src": "https://imgs.search.brave.com/thumb.jpg",
                    "original": "https://brave.com/thumb.jpg",
                    "logo": False,
                },
                "cluster_type": "generic",
                "cluster": [
                    {
                        "title": "Brave for Android",
                        "url": "https://brave.com/android/",
                        "description": "Get Brave on Android.",
                        "family_friendly": True,
                        "is_source_local": False,
                        "is_source_both": False,
                    }
                ],
            },
            {
                "type": "search_result",
                "subtype": "generic",
                "url": "https://en.wikipedia.org/wiki/Brave_(web_browser)",
                "title": "Brave (web browser) - Wikipedia",
                "description": "Brave is a free and open-source web browser.",
                "profile": {
                    "name": "Wikipedia",
                    "url": "https://en.wikipedia.org/wiki/Brave_(web_browser)",
                    "long_name": "en.wikipedia.org",
                    "img": "https://imgs.search.brave.com/wiki.png",
                },
                "language": "en",
                "family_friendly": True,
                "meta_url": {**_META_URL, "netloc": "en.wikipedia.org"},
                "is_source_local": False,
                "is_source_both": False,
            },
        ],
    },
    "news": {
        "type": "news",
        "results": [
            {
                "url": "https://example.com/news/brave",
                "title": "Brave ships a new release",
                "description": "The browser adds new privacy features.",
                "is_source_local": False,
                "is_source_both": False,
                "age": "2 hours ago",
                "page_age": "2026-10-18T10:00:00Z",
                "family_friendly": True,
                "breaking": True,
                "meta_url": _META_URL,
            }
        ],
    },
    "videos": {
        "type": "videos",
        "mutated_by_goggles": False,
        "results": [
            {
                "url": "https://video.example.com/watch?v=brave",
                "title": "Brave browser review",
                "description": "A walkthrough of Brave.",
                "type": "video_result",
                "meta_url": _META_URL,
                "thumbnail": {
                    "src": "https://imgs.search.brave.com/video.jpg",
                    "original": "https://video.example.com/video.jpg",
                },
            }
        ],
    },
}


@pytest.fixture(autouse=True)
def _isolate_brave_env(monkeypatch: pytest.MonkeyPatch) -> None:  # pyright: ignore[reportUnusedFunction]
    """Keep developer credentials and .env files out of the test run."""
    for name in _BRAVE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BRAVE_SEARCH_ENV_FILE", "")


@pytest.fixture()
def search_payload() -> dict[str, Any]:
    """Return a fresh copy of a realistic web search response."""
    return copy.deepcopy(SEARCH_PAYLOAD)


@pytest.fixture()
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def mock_client_factory(
    recorded_requests: list[httpx.Request],
) -> Callable[[httpx.Response], httpx.AsyncClient]:
    """Return a factory building AsyncClients that record requests and reply with *response*."""

    def _factory(response: httpx.Response) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return response

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory
