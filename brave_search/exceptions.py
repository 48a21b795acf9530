"""Exception classes raised by the Brave Search client.

Every failure surfaced by :class:`brave_search.client.BraveSearchClient`
inherits from :class:`BraveSearchError`, so callers can catch a single base
class while still distinguishing where a request went wrong:

* :class:`RequestError` - the request could not be built locally.
* :class:`ResponseError` - the API answered with a failure status or an
  unusable success payload.
* :class:`DecodingError` - a success payload did not match the expected schema.
* :class:`UnexpectedError` - the transport never produced an HTTP response.

Updates:
  v0.2.0 - 2026-10-12 - Carry the originating httpx response on response errors.
  v0.1.0 - 2026-10-06 - Created module with the four-kind client error taxonomy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class BraveSearchError(Exception):
    """Base exception for Brave Search client failures."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class RequestError(BraveSearchError):
    """Raised when the host and path cannot be combined into a valid URL."""

    def __str__(self) -> str:
        return f"Request error: {self.detail}"


class _HTTPStatusError(BraveSearchError):
    """Shared base for failures tied to a concrete HTTP response."""

    label = "HTTP error"

    def __init__(self, detail: str, *, status_code: int, response: httpx.Response | None = None):
        super().__init__(detail)
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        return f"{self.label} (Status {self.status_code}): {self.detail}"


class ResponseError(_HTTPStatusError):
    """Raised for failure statuses and for success statuses without a body."""

    label = "Response error"


class DecodingError(_HTTPStatusError):
    """Raised when a success payload cannot be decoded into the expected type."""

    label = "Decoding error"


class UnexpectedError(BraveSearchError):
    """Raised when the transport fails without producing an HTTP response."""

    def __str__(self) -> str:
        return f"Unexpected error: {self.detail}"


__all__ = [
    "BraveSearchError",
    "DecodingError",
    "RequestError",
    "ResponseError",
    "UnexpectedError",
]
