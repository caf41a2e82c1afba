"""Shared test fixtures for Jakamo client tests."""

import asyncio

import httpx
import pytest

from jakamo_client.transport import JakamoTransport

from tests.fixtures.common import BASE_URL


@pytest.fixture
def sent_requests():
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def mock_transport(sent_requests):
    """Factory for a JakamoTransport backed by httpx.MockTransport.

    Usage:
        transport = mock_transport(200, b"<Order/>", headers={...})
        transport = mock_transport(400)
        transport = mock_transport(error=httpx.ConnectError("refused"))
        transport = mock_transport(responses=[resp1, resp2])
    """
    def _make(status_code=200, content=b"", headers=None, error=None, responses=None,
              reason_phrase=None):
        queue = list(responses or [])

        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if error is not None:
                raise error
            if queue:
                return queue.pop(0)
            extensions = {}
            if reason_phrase is not None:
                extensions["reason_phrase"] = reason_phrase
            return httpx.Response(
                status_code, content=content, headers=headers, extensions=extensions
            )

        http = httpx.AsyncClient(
            base_url=BASE_URL,
            headers={"Accept": "application/xml", "Authorization": "Basic dGVzdDp0ZXN0"},
            transport=httpx.MockTransport(handler),
        )
        return JakamoTransport.from_client(http)
    return _make


@pytest.fixture
def stalled_transport():
    """A JakamoTransport whose requests never complete.

    Returns (transport, started); ``started`` is set once the request is in
    flight, so the calling task can be cancelled mid-request.
    """
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.sleep(3600)
        return httpx.Response(200)

    http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return JakamoTransport.from_client(http), started


@pytest.fixture
def jakamo_env(monkeypatch):
    """Environment with Basic credentials and no stray Jakamo settings."""
    for name in (
        "JAKAMO_BASE_URL",
        "JAKAMO_AUTHORIZATION",
        "JAKAMO_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JAKAMO_USERNAME", "test_user")
    monkeypatch.setenv("JAKAMO_PASSWORD", "test_pass")
    # Keep a developer's .env out of the tests
    monkeypatch.setattr("jakamo_client.transport.load_dotenv", lambda *a, **k: False)
