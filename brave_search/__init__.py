"""Typed asynchronous client for the Brave Search API.

Updates:
  v0.2.0 - 2026-10-16 - Export fetch entry points and result formatting helpers.
  v0.1.0 - 2026-10-06 - Introduce client, models, values, and exception exports.
"""

from .client import (
    DEFAULT_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    SUBSCRIPTION_TOKEN_HEADER,
    BraveSearchClient,
    HTTPMethod,
    Transport,
    normalise_host,
)
from .exceptions import (
    BraveSearchError,
    DecodingError,
    RequestError,
    ResponseError,
    UnexpectedError,
)
from .formatting import format_search_response
from .models import (
    Cluster,
    MetaURL,
    News,
    NewsResult,
    Profile,
    Query,
    Search,
    SearchResponse,
    SearchResult,
    Thumbnail,
    VideoResult,
    Videos,
)
from .values import BooleanValue, FloatValue, IntegerValue, StringValue, Value

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT_SECONDS",
    "SUBSCRIPTION_TOKEN_HEADER",
    "BooleanValue",
    "BraveSearchClient",
    "BraveSearchError",
    "Cluster",
    "DecodingError",
    "FloatValue",
    "HTTPMethod",
    "IntegerValue",
    "MetaURL",
    "News",
    "NewsResult",
    "Profile",
    "Query",
    "RequestError",
    "ResponseError",
    "Search",
    "SearchResponse",
    "SearchResult",
    "StringValue",
    "Thumbnail",
    "Transport",
    "UnexpectedError",
    "Value",
    "VideoResult",
    "Videos",
    "format_search_response",
    "normalise_host",
]
