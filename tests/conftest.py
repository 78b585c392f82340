"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fake httpbin echo service behind httpx.MockTransport
- An httpx.AsyncClient wired to the fake service
"""

import asyncio
import json
from collections.abc import Iterator

import httpx
import pytest


def httpbin_envelope(request: httpx.Request) -> dict:
    """Build the response httpbin's /post returns for a JSON request."""
    body = request.content.decode()
    return {
        "args": {},
        "data": body,
        "files": {},
        "form": {},
        "headers": {"Content-Type": request.headers.get("content-type", "")},
        "json": json.loads(body),
        "origin": "127.0.0.1",
        "url": str(request.url),
    }


class FakeEchoService:
    """
    MockTransport handler mimicking httpbin's /post.

    Records every request. Individual calls (1-based) can be overridden
    with a canned response or an exception to raise.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._overrides: dict[int, httpx.Response | Exception] = {}

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def override_call(self, number: int, outcome: httpx.Response | Exception) -> None:
        self._overrides[number] = outcome

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self._overrides.get(self.call_count)
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is not None:
            return outcome
        return httpx.Response(200, json=httpbin_envelope(request))


@pytest.fixture
def echo_service() -> FakeEchoService:
    """Fresh fake echo service per test."""
    return FakeEchoService()


@pytest.fixture
def echo_http_client(echo_service: FakeEchoService) -> Iterator[httpx.AsyncClient]:
    """AsyncClient whose requests are answered by the fake echo service."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(echo_service))
    yield client
    asyncio.run(client.aclose())
