"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from wayfind.fixtures.provider import FixtureProvider
from wayfind.hybrid.service import HybridDataService
from wayfind.local.store import LocalStore
from wayfind.remote.client import RemoteClient

BASE_URL = "http://wayfind.test"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeApi:
    """In-memory stand-in for the remote API, served through ``httpx.MockTransport``.

    Routes are keyed by (method, path). Unknown routes answer 404; setting
    ``offline`` makes every request fail with a connection error.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []
        self.offline = False

    def add(self, method: str, path: str, payload: Any = None, *, status_code: int = 200) -> None:
        self.routes[(method, path)] = lambda _request: httpx.Response(status_code, json=payload)

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("Connection refused", request=request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text="Not Found")
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def sent_json(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'wayfind.db'}"


@pytest_asyncio.fixture
async def store(database_url: str) -> AsyncGenerator[LocalStore, None]:
    local = LocalStore(database_url)
    await local.initialize()
    yield local
    await local.close()


@pytest_asyncio.fixture
async def remote(api: FakeApi) -> AsyncGenerator[RemoteClient, None]:
    client = RemoteClient(BASE_URL, timeout_seconds=1.0, transport=api.transport)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def service(remote: RemoteClient, store: LocalStore) -> AsyncGenerator[HybridDataService, None]:
    svc = HybridDataService(remote, store, FixtureProvider())
    await svc.initialize()
    yield svc
    await svc.wait_for_background()


@pytest_asyncio.fixture
async def seeded_store(store: LocalStore) -> LocalStore:
    """Store holding one adventurer (id 1) owning one region (id 1)."""
    await store.create_adventurer({"username": "AdventureSeeker", "password": "pass123"})
    await store.create_region(
        {"adventurerid": 1, "name": "Downtown", "location": {"x": 42.96, "y": -85.67}, "radius": 500}
    )
    return store
