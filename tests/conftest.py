"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest

from discord_sdk.http import HTTPClient
from discord_sdk.rate_limit import RateLimiter


class FakeClock:
    """Monotonic clock the tests move forward by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_sleep(clock, monkeypatch):
    """Make ``asyncio.sleep`` advance the fake clock instead of waiting.

    Returns the list of requested delays.
    """
    delays: list[float] = []
    real_sleep = asyncio.sleep

    async def sleep(delay, result=None):
        delays.append(delay)
        clock.advance(delay)
        await real_sleep(0)
        return result

    monkeypatch.setattr(asyncio, "sleep", sleep)
    return delays


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = httpx.Response(200, json={})

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            await request.aread()
            body = None
            if request.content:
                try:
                    body = json.loads(request.content)
                except ValueError:
                    body = request.content
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "headers": dict(request.headers),
                "body": body,
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport, clock):
    """HTTPClient with a mock transport and a rate limiter on the fake clock."""
    transport, calls = mock_transport
    client = HTTPClient(
        token="test-token",
        base_url="https://discord.test/api",
        rate_limiter=RateLimiter(clock=clock),
    )
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(base_url=client.base_url, transport=transport)
    return client, transport, calls
