"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and twitter_auth/domains/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os
from typing import Callable, Dict, List, Tuple, Union

import httpx
import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any settings object is built.
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("TWITTER_AUTH_CONSUMER_KEY", "test-consumer-key")
os.environ.setdefault("TWITTER_AUTH_CONSUMER_SECRET", "test-consumer-secret")


Handler = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeProvider:
    """Routes provider requests by (method, path) through ``httpx.MockTransport``.

    Every request is recorded; unrouted requests answer 404.
    """

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], Handler] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def route(self, method: str, path: str, handler: Handler) -> None:
        self._routes[(method.upper(), path)] = handler

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text="not routed")
        if isinstance(handler, httpx.Response):
            return handler
        return handler(request)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    """Settings pointing at a fake provider host."""
    from twitter_auth.core.config import TwitterAuthSettings

    return TwitterAuthSettings(
        consumer_key="ck",
        consumer_secret="cs",
        api_url="https://provider.test",
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Fake provider HTTP endpoints backed by httpx.MockTransport."""
    return FakeProvider()


@pytest.fixture
def fake_token_client():
    """Fake TokenClient that returns seeded credentials."""
    from twitter_auth.domains.oauth.fakes.token_client import FakeTokenClient

    return FakeTokenClient()


@pytest.fixture
def fake_profile_fetcher():
    """Fake ProfileFetcher that returns a seeded profile."""
    from twitter_auth.domains.identity.fakes.profile_fetcher import FakeProfileFetcher

    return FakeProfileFetcher()
