"""Shared test helpers for faking the orchestrator over httpx."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from cubicclient import CubicClient

BASE_URL = "http://localhost:1503"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served.

    ``responses`` is consumed in order; the last entry repeats once the list
    runs out. An entry may be an ``httpx.Response`` or an exception to raise.
    """

    def __init__(self, responses: list[httpx.Response | Exception]):
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        result = self._responses[index]
        if isinstance(result, Exception):
            raise result
        return result

    def body(self, i: int = -1) -> Any:
        return json.loads(self.requests[i].content)


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=data)


def make_client(
    responses: list[httpx.Response | Exception],
    **kwargs: Any,
) -> tuple[CubicClient, RecordingTransport]:
    """Build a client wired to a RecordingTransport."""
    transport = RecordingTransport(responses)
    return CubicClient(kwargs.pop("base_url", BASE_URL), transport=transport, **kwargs), transport


def failing(exc_type: Callable[..., Exception], message: str = "boom") -> Exception:
    """Build an httpx transport exception bound to a dummy request."""
    return exc_type(message, request=httpx.Request("GET", BASE_URL))
