"""Thin async HTTP JSON client for the WayFind remote API."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import structlog

from wayfind.errors import RemoteUnavailableError

logger = structlog.get_logger()

# Response bodies are truncated to this many characters in error messages.
_BODY_PREVIEW_CHARS = 500


class RemoteClient:
    """Issue one JSON request per call against a fixed base URL.

    Every call is bounded by ``timeout_seconds`` end to end; the in-flight
    request is cancelled when the deadline passes. All failure modes are
    raised as :class:`RemoteUnavailableError` with the cause chained.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 5.0,
        health_endpoint: str = "/health",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.health_endpoint = health_endpoint
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        self._access_token: str | None = None
        self._token_expires_at: datetime | None = None

    # --- Bearer token ---

    def set_access_token(self, token: str, expires_in: timedelta | None = None) -> None:
        """Attach a bearer token to subsequent requests until it expires."""
        self._access_token = token
        self._token_expires_at = datetime.now(timezone.utc) + expires_in if expires_in is not None else None

    def clear_token(self) -> None:
        self._access_token = None
        self._token_expires_at = None

    @property
    def has_valid_token(self) -> bool:
        if self._access_token is None:
            return False
        if self._token_expires_at is None:
            return True
        return datetime.now(timezone.utc) < self._token_expires_at

    def _auth_headers(self) -> dict[str, str]:
        if not self.has_valid_token:
            return {}
        return {"Authorization": f"Bearer {self._access_token}"}

    # --- Requests ---

    async def call(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the parsed JSON body.

        Raises:
            RemoteUnavailableError: On network failure, timeout, a non-2xx
                status, or a body that is not valid JSON.
        """
        query = {key: value for key, value in (params or {}).items() if value is not None}

        try:
            response = await asyncio.wait_for(
                self._client.request(
                    method,
                    endpoint,
                    json=body,
                    params=query or None,
                    headers=self._auth_headers(),
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError as exc:
            logger.info("remote_call_timeout", endpoint=endpoint, method=method, timeout=self.timeout_seconds)
            msg = f"{method} {endpoint} timed out after {self.timeout_seconds}s"
            raise RemoteUnavailableError(msg, endpoint=endpoint) from exc
        except httpx.HTTPError as exc:
            logger.info("remote_call_failed", endpoint=endpoint, method=method, error=str(exc))
            msg = f"{method} {endpoint} failed: {exc}"
            raise RemoteUnavailableError(msg, endpoint=endpoint) from exc

        if not response.is_success:
            text = response.text[:_BODY_PREVIEW_CHARS]
            logger.info("remote_call_rejected", endpoint=endpoint, method=method, status_code=response.status_code)
            msg = f"HTTP {response.status_code}: {response.reason_phrase} - {text or 'No error details available'}"
            raise RemoteUnavailableError(msg, endpoint=endpoint, status_code=response.status_code, body=text)

        try:
            payload = response.json()
        except ValueError as exc:
            text = response.text[:_BODY_PREVIEW_CHARS]
            logger.info("remote_call_invalid_json", endpoint=endpoint, method=method, status_code=response.status_code)
            msg = f"Response from {method} {endpoint} is not valid JSON"
            raise RemoteUnavailableError(msg, endpoint=endpoint, status_code=response.status_code, body=text) from exc

        logger.debug("remote_call_succeeded", endpoint=endpoint, method=method, status_code=response.status_code)
        return payload

    async def probe(self) -> bool:
        """Lightweight health check. Never raises."""
        try:
            await self.call(self.health_endpoint)
        except RemoteUnavailableError:
            return False
        return True

    async def aclose(self) -> None:
        await self._client.aclose()
