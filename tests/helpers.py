r"""Shared test helpers.

This module contains the mock transport handler used across the client
and executor tests to replay scripted responses and transport errors
without network access.
"""

from __future__ import annotations

__all__ = [
    "TEST_API_KEY",
    "TEST_BASE_URL",
    "ScriptedHandler",
    "json_of",
    "undecodable_response",
]

import json
from typing import Any

import httpx

TEST_API_KEY = "nb_test_key"
TEST_BASE_URL = "https://api.notiboost.test"


class ScriptedHandler:
    """``httpx.MockTransport`` handler replaying a script of outcomes.

    Each call consumes the next item of the script; the last item is
    repeated once the script is exhausted. Items are either
    ``httpx.Response`` objects, which are copied so they can be replayed,
    or exceptions, which are raised. The copy shares the raw byte stream of
    the scripted response, so its body is decoded by the client and not
    by the handler.

    Attributes:
        requests: Every request received, in order.
    """

    def __init__(self, *script: httpx.Response | Exception) -> None:
        if not script:
            msg = "script must contain at least one item"
            raise ValueError(msg)
        self._script = list(script)
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        item = self._script.pop(0) if len(self._script) > 1 else self._script[0]
        if isinstance(item, Exception):
            raise item
        return httpx.Response(item.status_code, headers=item.headers, stream=item.stream)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def json_of(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


def undecodable_response(status_code: int) -> httpx.Response:
    """Create a response whose gzip-encoded body is corrupt.

    The raw stream is left unread, so decoding fails when the client reads
    the body.
    """
    return httpx.Response(
        status_code,
        headers={"Content-Encoding": "gzip"},
        stream=httpx.ByteStream(b"not gzip data"),
    )
