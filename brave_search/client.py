"""HTTPX-backed gateway for the Brave Search API.

``BraveSearchClient`` owns the connection configuration (host, subscription
token, transport) and exposes two generic entry points that every endpoint
method is built on:

* :meth:`BraveSearchClient.fetch_decoded` decodes a success payload into a
  typed result and raises on any failure.
* :meth:`BraveSearchClient.fetch_succeeded` only reports whether the API
  answered with a 2xx status.

Updates:
  v0.3.1 - 2026-10-19 - Join paths as dot-relative segments so a colon never reads as a scheme.
  v0.3.0 - 2026-10-16 - Split boolean-result calls into fetch_succeeded.
  v0.2.1 - 2026-10-14 - Reject paths that resolve outside the configured host.
  v0.2.0 - 2026-10-12 - Guard transport swaps with an asyncio lock.
  v0.1.0 - 2026-10-06 - Introduce gateway, status classification, and search endpoint.
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol, Self
from urllib.parse import urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import DecodingError, RequestError, ResponseError, UnexpectedError
from .models import SearchResponse
from .values import StringValue, Value, coerce_params, params_to_json, params_to_query

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from .values import JSONScalar

DEFAULT_HOST = "https://api.search.brave.com/res/v1/"
DEFAULT_TIMEOUT_SECONDS = 15.0
SUBSCRIPTION_TOKEN_HEADER = "X-Subscription-Token"
SEARCH_PATH = "web/search"

logger = logging.getLogger("brave_search.client")


class HTTPMethod(StrEnum):
    """HTTP verbs used by the Brave Search API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Transport(Protocol):
    """Anything able to send an ``httpx.Request``; ``httpx.AsyncClient`` qualifies."""

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Perform the network exchange for *request*."""
        ...


class _ErrorResponse(BaseModel):
    error: str


def normalise_host(host: str) -> str:
    """Return *host* with a trailing path separator so relative joins append."""
    candidate = host.strip()
    if not candidate:
        raise ValueError("Brave Search host must not be empty.")
    parts = urlsplit(candidate)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise ValueError("Brave Search host must include an http(s) scheme and hostname.")
    path = parts.path or "/"
    if not path.endswith("/"):
        path = f"{path}/"
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


@functools.cache
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _failure_detail(body: bytes) -> str:
    """Return the most specific error message available in a failure *body*."""
    try:
        return _ErrorResponse.model_validate_json(body).error
    except ValidationError:
        pass
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return "Invalid response"


class BraveSearchClient:
    """Typed asynchronous client for the Brave Search API."""

    def __init__(
        self,
        token: str,
        *,
        host: str = DEFAULT_HOST,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialise the client.

        Args:
          token: Brave Search subscription token sent with every request.
          host: API base URL; a trailing ``/`` is appended when missing.
          transport: Optional transport such as a preconfigured ``httpx.AsyncClient``.
            Injected transports are never closed by the client.
          timeout: Timeout in seconds for the transport created when none is injected.
        """
        if not token or not token.strip():
            raise ValueError("Brave Search subscription token is required")
        self._token = token.strip()
        self._host = normalise_host(host)
        self._owns_transport = transport is None
        self._transport: Transport = (
            transport if transport is not None else httpx.AsyncClient(timeout=timeout)
        )
        self._transport_lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self._host!r})"

    @property
    def host(self) -> str:
        """Return the normalised API base URL."""
        return self._host

    async def configure_transport(self, transport: Transport) -> None:
        """Swap in a new transport; a transport created by the client is closed."""
        async with self._transport_lock:
            previous = self._transport
            owned = self._owns_transport
            self._transport = transport
            self._owns_transport = False
        if owned and isinstance(previous, httpx.AsyncClient):
            await previous.aclose()

    async def aclose(self) -> None:
        """Close the transport when the client created it."""
        async with self._transport_lock:
            transport = self._transport
            owned = self._owns_transport
            self._owns_transport = False
        if owned and isinstance(transport, httpx.AsyncClient):
            await transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    def build_request(
        self,
        method: HTTPMethod,
        path: str,
        params: Mapping[str, Value | JSONScalar] | None = None,
    ) -> httpx.Request:
        """Return the request for *method* and *path* without sending it."""
        relative = path.lstrip("/")
        try:
            base = httpx.URL(self._host)
            url = base.join(f"./{relative}")
        except httpx.InvalidURL as exc:
            raise RequestError(
                f'Unable to construct URL with host "{self._host}" and path "{path}"'
            ) from exc
        if (
            url.scheme != base.scheme
            or url.netloc != base.netloc
            or not url.raw_path.startswith(base.raw_path)
        ):
            raise RequestError(f'Path "{path}" resolves outside of host "{self._host}"')

        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            SUBSCRIPTION_TOKEN_HEADER: self._token,
        }
        values = coerce_params(params)
        if method is HTTPMethod.GET:
            query = params_to_query(values) if values is not None else None
            return httpx.Request(method.value, url, params=query, headers=headers)

        content: bytes | None = None
        if values is not None:
            content = json.dumps(params_to_json(values), allow_nan=False).encode("utf-8")
            headers["Content-Type"] = "application/json"
        return httpx.Request(method.value, url, content=content, headers=headers)

    async def _dispatch(
        self,
        method: HTTPMethod,
        path: str,
        params: Mapping[str, Value | JSONScalar] | None,
    ) -> tuple[httpx.Response, bytes]:
        request = self.build_request(method, path, params)
        async with self._transport_lock:
            transport = self._transport

        logger.debug("Brave Search request method=%s url=%s", request.method, request.url)
        try:
            response = await transport.send(request)
        except (httpx.RequestError, httpx.StreamError) as exc:
            logger.warning("Brave Search transport failure method=%s path=%s", method, path)
            raise UnexpectedError(f"Transport failure: {exc}") from exc

        if not isinstance(response, httpx.Response):
            raise UnexpectedError("Response is not an HTTP response")
        try:
            body = await response.aread()
        except (httpx.RequestError, httpx.StreamError) as exc:
            raise UnexpectedError(f"Unable to read response body: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "Brave Search request failed method=%s path=%s status=%s",
                method,
                path,
                response.status_code,
            )
        return response, body

    async def fetch_decoded[T](
        self,
        method: HTTPMethod,
        path: str,
        response_type: type[T],
        params: Mapping[str, Value | JSONScalar] | None = None,
    ) -> T:
        """Send a request and decode the success payload into *response_type*.

        Raises:
          RequestError: The URL could not be built.
          UnexpectedError: The transport failed before producing an HTTP response.
          ResponseError: Non-2xx status, or a 2xx status with an empty body.
          DecodingError: The 2xx payload does not match *response_type*.
        """
        response, body = await self._dispatch(method, path, params)
        status_code = response.status_code
        if not response.is_success:
            raise ResponseError(
                _failure_detail(body),
                status_code=status_code,
                response=response,
            )
        if not body:
            raise ResponseError(
                "Empty response body",
                status_code=status_code,
                response=response,
            )
        try:
            return _type_adapter(response_type).validate_json(body)
        except ValidationError as exc:
            logger.warning(
                "Brave Search response did not match %s status=%s",
                getattr(response_type, "__name__", response_type),
                status_code,
            )
            raise DecodingError(
                f"Error decoding response: {exc}",
                status_code=status_code,
                response=response,
            ) from exc

    async def fetch_succeeded(
        self,
        method: HTTPMethod,
        path: str,
        params: Mapping[str, Value | JSONScalar] | None = None,
    ) -> bool:
        """Return ``True`` for a 2xx status and ``False`` otherwise; the body is ignored."""
        response, _ = await self._dispatch(method, path, params)
        return response.is_success

    async def search(self, query: str) -> SearchResponse:
        """Run a web search for *query*."""
        params: dict[str, Value] = {"q": StringValue(query)}
        return await self.fetch_decoded(HTTPMethod.GET, SEARCH_PATH, SearchResponse, params)


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT_SECONDS",
    "SEARCH_PATH",
    "SUBSCRIPTION_TOKEN_HEADER",
    "BraveSearchClient",
    "HTTPMethod",
    "Transport",
    "normalise_host",
]
