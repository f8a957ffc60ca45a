"""Error types raised by the Pianoteq client.

Every failure of a call surfaces as exactly one of:

* :class:`TransportError`: the HTTP exchange itself failed.
* :class:`ProtocolError`: HTTP succeeded but the body broke the JSON-RPC contract.
* :class:`RemoteError`: the server answered with a JSON-RPC error object.

Cancellation is not an error kind: ``asyncio.CancelledError`` propagates untouched.
"""

from __future__ import annotations

from typing import Any

EXCERPT_LIMIT = 200


class PianoteqError(Exception):
    """Base error for all client failures."""


class TransportError(PianoteqError):
    """The HTTP request could not be completed or returned a non-success status."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        self.detail = detail
        self.status_code = status_code
        self.url = url
        super().__init__(detail)


class ProtocolError(PianoteqError):
    """The server response violated the JSON-RPC contract."""

    def __init__(self, detail: str, body: str = "") -> None:
        self.detail = detail
        self.excerpt = excerpt(body)
        msg = detail
        if self.excerpt:
            msg += f". Response was: {self.excerpt}"
        super().__init__(msg)


class RemoteError(PianoteqError):
    """The server returned a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


def excerpt(body: str, limit: int = EXCERPT_LIMIT) -> str:
    """Return at most *limit* leading characters of *body*."""
    return body[:limit]
