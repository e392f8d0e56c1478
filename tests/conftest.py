"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - relay_config: Relay configuration with a test credential
    - upstream: Recording stand-in for the generation API
    - app: FastAPI app whose relay talks to the recording upstream
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.chat import get_gemini_client
from src.relay.config import RelayConfig
from src.relay.gemini_client import GeminiClient

UPSTREAM_URL = "https://upstream.test/v1beta/models/gemini-pro:generateContent"


def gemini_reply(text: str) -> dict:
    """Build a generateContent response body with a single candidate."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class RecordingUpstream:
    """httpx.MockTransport handler that records requests and replies."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=gemini_reply("Hi there"))
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def relay_config() -> RelayConfig:
    """Return relay configuration with a test credential."""
    return RelayConfig(api_key="test-key", api_url=UPSTREAM_URL, timeout=5.0)


@pytest.fixture
def upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture
def make_app(upstream: RecordingUpstream) -> Callable[[RelayConfig], FastAPI]:
    """Return a factory for apps wired to the recording upstream."""

    def factory(config: RelayConfig) -> FastAPI:
        application = create_app(config)
        application.dependency_overrides[get_gemini_client] = lambda: GeminiClient(
            config, transport=httpx.MockTransport(upstream)
        )
        return application

    return factory


@pytest.fixture
def app(make_app: Callable[[RelayConfig], FastAPI], relay_config: RelayConfig) -> FastAPI:
    return make_app(relay_config)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
