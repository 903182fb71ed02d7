"""Hybrid data service factory."""

from __future__ import annotations

import httpx

from wayfind.config import Settings, get_settings
from wayfind.fixtures.provider import FixtureProvider
from wayfind.hybrid.service import HybridDataService
from wayfind.local.store import LocalStore
from wayfind.remote.client import RemoteClient


def create_hybrid_service(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HybridDataService:
    """Wire the three tiers from settings. Call ``initialize()`` before first use.

    Logging is left as the host process configured it.
    """
    settings = settings or get_settings()

    remote = RemoteClient(
        settings.api_base_url,
        timeout_seconds=settings.request_timeout_seconds,
        health_endpoint=settings.health_endpoint,
        transport=transport,
    )
    local = LocalStore(settings.database_url, reset_on_init=settings.local_reset_on_init)
    return HybridDataService(remote, local, FixtureProvider())
