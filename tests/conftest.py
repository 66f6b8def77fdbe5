"""
Shared test fixtures for the Bitstamp client tests.

Provides reusable fixtures for:
- A recording mock transport (httpx.MockTransport)
- Clients with and without credentials
"""

from typing import Callable, List

import httpx
import pytest

from bitstamp_client.client import BitstampClient

TEST_KEY = "test-key"
TEST_SECRET = "test-secret"
TEST_CLIENT_ID = "123456"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport():
    """Factory: build a RecordingTransport from a handler or a fixed response."""

    def _make(handler=None, response: httpx.Response = None) -> RecordingTransport:
        if handler is None:
            fixed = response if response is not None else httpx.Response(200, json={})

            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(fixed.status_code, headers=fixed.headers, content=fixed.content)

        return RecordingTransport(handler)

    return _make


@pytest.fixture
def make_client():
    """Factory: client with test credentials wired to the given transport."""

    def _make(transport: httpx.AsyncBaseTransport, **kwargs) -> BitstampClient:
        kwargs.setdefault("key", TEST_KEY)
        kwargs.setdefault("secret", TEST_SECRET)
        kwargs.setdefault("client_id", TEST_CLIENT_ID)
        return BitstampClient(transport=transport, **kwargs)

    return _make
