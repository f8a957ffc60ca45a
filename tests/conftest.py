"""Shared fixtures: an in-process fake Pianoteq JSON-RPC endpoint."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from pianoteq.client import PianoteqClient

BASE_URL = "http://pianoteq.test:8081"


class FakePianoteq:
    """Records every JSON-RPC request and answers with a configurable reply.

    By default each request gets ``{"result": self.result}`` with its own id
    echoed back. Tests override :attr:`reply` for error envelopes or raw bodies.
    """

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.urls: list[str] = []
        self.headers: list[httpx.Headers] = []
        self.result: Any = None
        self.reply: Callable[[dict[str, Any]], httpx.Response] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)
        self.urls.append(str(request.url))
        self.headers.append(request.headers)
        if self.reply is not None:
            return self.reply(payload)
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "result": self.result, "id": payload["id"]},
        )

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]

    def respond_with_body(self, body: str, status_code: int = 200) -> None:
        self.reply = lambda _payload: httpx.Response(status_code, text=body)

    def respond_with_envelope(self, **fields: Any) -> None:
        """Reply with ``{"jsonrpc": "2.0", "id": <request id>, **fields}``."""

        def _reply(payload: dict[str, Any]) -> httpx.Response:
            envelope: dict[str, Any] = {"jsonrpc": "2.0", "id": payload["id"]}
            envelope.update(fields)
            return httpx.Response(200, json=envelope)

        self.reply = _reply


@pytest.fixture()
def server() -> FakePianoteq:
    return FakePianoteq()


@pytest.fixture()
def client(server: FakePianoteq) -> Iterator[PianoteqClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    yield PianoteqClient(BASE_URL + "/", http_client=http)
