"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from untappd_client import Settings, UntappdClient

TEST_TOKEN = "test-token"
SAMPLE_RESPONSE = {"meta": {"code": 200}, "response": {"beer": {"bid": 456}}}


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the developer's environment."""
    return Settings(
        base_url="https://api.untappd.com",
        http_timeout_seconds=5,
        access_token=None,
    )


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Every request that reached the stub transport."""
    return []


@pytest_asyncio.fixture
async def make_client(settings, sent_requests):
    """Build UntappdClients backed by an httpx.MockTransport, closed on teardown."""
    clients: list[UntappdClient] = []

    def factory(
        status_code: int = 200,
        payload=SAMPLE_RESPONSE,
        token: str | None = TEST_TOKEN,
        handler=None,
    ) -> UntappdClient:
        def respond(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, json=payload)

        client = UntappdClient(token, settings=settings, transport=httpx.MockTransport(respond))
        clients.append(client)
        return client

    try:
        yield factory
    finally:
        for client in clients:
            await client.close()


@pytest_asyncio.fixture
async def client(make_client) -> UntappdClient:
    """Client whose requests all succeed with SAMPLE_RESPONSE."""
    return make_client()
