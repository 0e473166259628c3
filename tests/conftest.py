"""Shared fixtures: a fake set of upstream endpoints behind httpx.MockTransport."""

import asyncio
from urllib.parse import urlsplit

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from gitpulse.main import app
from gitpulse.sources import URL_TEMPLATES, SubResource
from gitpulse.upstream import build_async_client, get_http_client

AVATAR_URL = "https://avatars.githubusercontent.com/u/583231?v=4"

_KIND_BY_HOST = {urlsplit(t).hostname: kind for kind, t in URL_TEMPLATES.items()}


class FakeUpstream:
    """Answers every template URL; per-kind status, error and delay are configurable.

    ``outcomes`` maps a kind to an HTTP status code or an exception to raise.
    """

    def __init__(self):
        self.outcomes: dict[SubResource, int | Exception] = {}
        self.delays: dict[SubResource, float] = {}
        self.delay = 0.0
        self.calls: list[SubResource] = []
        self.completed: list[SubResource] = []
        self.in_flight = 0
        self.peak = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        kind = _KIND_BY_HOST[request.url.host]
        self.calls.append(kind)
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(kind, self.delay))
            outcome = self.outcomes.get(kind, 200)
            if isinstance(outcome, Exception):
                raise outcome
        finally:
            self.in_flight -= 1
        self.completed.append(kind)

        if kind is SubResource.PROFILE:
            if outcome == 200:
                login = request.url.path.rsplit("/", 1)[-1]
                return httpx.Response(200, json={"login": login, "avatar_url": AVATAR_URL})
            return httpx.Response(outcome, json={"message": "Not Found"})
        return httpx.Response(outcome, text=f"<svg><!-- {kind.value} --></svg>",
                              headers={"Content-Type": "image/svg+xml"})


@pytest.fixture
def avatar_url():
    return AVATAR_URL


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest_asyncio.fixture
async def http_client(upstream):
    async with build_async_client(transport=httpx.MockTransport(upstream)) as client:
        yield client


@pytest.fixture
def api_client(upstream):
    http = build_async_client(transport=httpx.MockTransport(upstream))
    app.dependency_overrides[get_http_client] = lambda: http
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        asyncio.run(http.aclose())
