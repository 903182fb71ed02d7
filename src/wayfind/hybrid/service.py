"""Tiered data access: remote API, then local store, then fixtures.

Reads try each tier in order and report which one answered. A successful
remote read is replicated into the local store in the background. Writes go
to the remote API when it is reachable (mirrored locally in the background)
and to the local store otherwise; fixtures never accept writes.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

import structlog
from pydantic import ValidationError

from wayfind.errors import (
    AuthenticationError,
    LocalStoreError,
    RemoteUnavailableError,
    TotalWriteFailureError,
)
from wayfind.fixtures.provider import FixtureProvider
from wayfind.hybrid.background import BackgroundWrites
from wayfind.local.store import LocalStore
from wayfind.remote.client import RemoteClient
from wayfind.schemas import (
    AdventureCreate,
    AdventurerCreate,
    AdventurerUpdate,
    CompletedAdventureCreate,
    DataResult,
    DataSource,
    EntityKind,
    LandmarkCreate,
    RegionCreate,
    SyncResult,
    SyncSnapshot,
    TierStatus,
    TokenCreate,
)

logger = structlog.get_logger()

# Collections pulled by a full sync, keyed by SyncSnapshot field.
SYNC_ENDPOINTS: dict[str, str] = {
    "adventurers": "/adventurers",
    "regions": "/regions",
    "landmarks": "/landmarks",
    "adventures": "/adventures",
    "tokens": "/tokens",
    "completed_adventures": "/completed-adventures",
}


class HybridDataService:
    """Single entry point for every entity read and write.

    Create one instance per process and pass it around; it owns the remote
    client, the local store and the background writes it schedules.
    """

    def __init__(
        self,
        remote: RemoteClient,
        local: LocalStore,
        fixtures: FixtureProvider | None = None,
    ) -> None:
        self.remote = remote
        self.local = local
        self.fixtures = fixtures or FixtureProvider()
        self._background = BackgroundWrites()
        self._last_sync_time: datetime | None = None

    async def initialize(self) -> None:
        """Prepare the local store. A failure is logged; reads then skip to fixtures."""
        try:
            await self.local.initialize()
        except LocalStoreError as exc:
            logger.error("hybrid_local_init_failed", error=str(exc))

    # ------------------------------------------------------------------
    # Cascade
    # ------------------------------------------------------------------

    async def _tiered_read(
        self,
        entity: str,
        remote_call: Callable[[], Awaitable[Any]],
        local_call: Callable[[], Awaitable[Any]],
        fixture_call: Callable[[], Any],
        *,
        kind: EntityKind,
    ) -> DataResult:
        try:
            data = await remote_call()
        except RemoteUnavailableError as exc:
            logger.info("tier_fallback", entity=entity, failed_tier="remote", error=str(exc))
        else:
            self._replicate(kind, data)
            return DataResult(data=data, source=DataSource.REMOTE)

        try:
            data = await local_call()
        except LocalStoreError as exc:
            logger.info("tier_fallback", entity=entity, failed_tier="local", error=str(exc))
        else:
            if data:
                return DataResult(data=data, source=DataSource.LOCAL)
            logger.info("tier_fallback", entity=entity, failed_tier="local", error="no rows")

        return DataResult(data=fixture_call(), source=DataSource.FIXTURE)

    def _replicate(self, kind: EntityKind, data: Any) -> None:
        records = data if isinstance(data, list) else [data]
        records = [record for record in records if isinstance(record, dict) and record.get("id") is not None]
        if records:
            self._background.schedule(self.local.upsert(kind, records), name=f"replicate_{kind.value}")

    async def _tiered_write(
        self,
        entity: str,
        remote_call: Callable[[], Awaitable[Any]],
        local_write: Callable[[], Awaitable[Any]],
        mirror: Callable[[Any], Awaitable[Any]],
    ) -> DataResult:
        """Write to the remote API, or to the local store when it is unreachable.

        Raises:
            TotalWriteFailureError: If both tiers reject the write.
        """
        try:
            result = await remote_call()
        except RemoteUnavailableError as remote_exc:
            logger.info("tier_fallback", entity=entity, failed_tier="remote", operation="write", error=str(remote_exc))
            try:
                result = await local_write()
            except LocalStoreError as local_exc:
                logger.error(
                    "write_failed_all_tiers",
                    entity=entity,
                    remote_error=str(remote_exc),
                    local_error=str(local_exc),
                )
                msg = f"Failed to write {entity} to the remote API and the local store"
                raise TotalWriteFailureError(msg, remote_error=remote_exc, local_error=local_exc) from local_exc
            return DataResult(data=result, source=DataSource.LOCAL)

        self._background.schedule(mirror(result), name=f"mirror_{entity}")
        return DataResult(data=result, source=DataSource.REMOTE)

    async def _create(
        self,
        kind: EntityKind,
        endpoint: str,
        payload: Any,
        local_create: Callable[[Any], Awaitable[dict[str, Any]]],
    ) -> DataResult:
        async def mirror(remote_record: Any) -> None:
            # Stored under the remote id.
            if isinstance(remote_record, dict) and remote_record.get("id") is not None:
                await self.local.upsert(kind, [{**payload.to_wire(), **remote_record}])
            else:
                await local_create(payload)

        return await self._tiered_write(
            kind.value,
            lambda: self.remote.call(endpoint, method="POST", body=payload.to_wire()),
            lambda: local_create(payload),
            mirror,
        )

    # ------------------------------------------------------------------
    # Adventurers
    # ------------------------------------------------------------------

    async def fetch_adventurers(self) -> DataResult:
        return await self._tiered_read(
            "adventurers",
            lambda: self.remote.call("/adventurers"),
            self.local.get_adventurers,
            self.fixtures.adventurers,
            kind=EntityKind.ADVENTURER,
        )

    async def fetch_adventurer(self, adventurer_id: int) -> DataResult:
        return await self._tiered_read(
            "adventurer",
            lambda: self.remote.call(f"/adventurers/{adventurer_id}"),
            lambda: self.local.get_adventurer(adventurer_id),
            lambda: self.fixtures.adventurer(adventurer_id),
            kind=EntityKind.ADVENTURER,
        )

    async def create_adventurer(self, data: AdventurerCreate | dict[str, Any]) -> DataResult:
        """Create an adventurer.

        WARNING: the password is sent and stored in plaintext.
        """
        payload = AdventurerCreate.model_validate(data)
        return await self._create(EntityKind.ADVENTURER, "/adventurers", payload, self.local.create_adventurer)

    async def update_adventurer(self, adventurer_id: int, data: AdventurerUpdate | dict[str, Any]) -> DataResult:
        """Apply a partial update; the remote API receives the id in the body as well."""
        fields = AdventurerUpdate.model_validate(data)
        body = {"id": adventurer_id, **fields.to_wire()}
        return await self._tiered_write(
            "adventurer",
            lambda: self.remote.call(f"/adventurers/{adventurer_id}", method="PUT", body=body),
            lambda: self.local.update_adventurer(adventurer_id, fields),
            lambda _remote_record: self.local.update_adventurer(adventurer_id, fields),
        )

    # ------------------------------------------------------------------
    # Regions and landmarks
    # ------------------------------------------------------------------

    async def fetch_regions(self, adventurer_id: int | None = None) -> DataResult:
        return await self._tiered_read(
            "regions",
            lambda: self.remote.call("/regions", params={"adventurerid": adventurer_id}),
            lambda: self.local.get_regions(adventurer_id),
            lambda: self.fixtures.regions(adventurer_id),
            kind=EntityKind.REGION,
        )

    async def create_region(self, data: RegionCreate | dict[str, Any]) -> DataResult:
        payload = RegionCreate.model_validate(data)
        return await self._create(EntityKind.REGION, "/regions", payload, self.local.create_region)

    async def fetch_landmarks(self, region_id: int | None = None) -> DataResult:
        return await self._tiered_read(
            "landmarks",
            lambda: self.remote.call("/landmarks", params={"regionid": region_id}),
            lambda: self.local.get_landmarks(region_id),
            lambda: self.fixtures.landmarks(region_id),
            kind=EntityKind.LANDMARK,
        )

    async def create_landmark(self, data: LandmarkCreate | dict[str, Any]) -> DataResult:
        payload = LandmarkCreate.model_validate(data)
        return await self._create(EntityKind.LANDMARK, "/landmarks", payload, self.local.create_landmark)

    # ------------------------------------------------------------------
    # Adventures and tokens
    # ------------------------------------------------------------------

    async def fetch_adventures(
        self,
        region_id: int | None = None,
        adventurer_id: int | None = None,
    ) -> DataResult:
        return await self._tiered_read(
            "adventures",
            lambda: self.remote.call(
                "/adventures",
                params={"regionid": region_id, "adventurerid": adventurer_id},
            ),
            lambda: self.local.get_adventures(region_id, adventurer_id),
            lambda: self.fixtures.adventures(region_id, adventurer_id),
            kind=EntityKind.ADVENTURE,
        )

    async def create_adventure(self, data: AdventureCreate | dict[str, Any]) -> DataResult:
        payload = AdventureCreate.model_validate(data)
        return await self._create(EntityKind.ADVENTURE, "/adventures", payload, self.local.create_adventure)

    async def fetch_tokens(self, adventure_id: int | None = None) -> DataResult:
        return await self._tiered_read(
            "tokens",
            lambda: self.remote.call("/tokens", params={"adventureid": adventure_id}),
            lambda: self.local.get_tokens(adventure_id),
            lambda: self.fixtures.tokens(adventure_id),
            kind=EntityKind.TOKEN,
        )

    async def create_token(self, data: TokenCreate | dict[str, Any]) -> DataResult:
        payload = TokenCreate.model_validate(data)
        return await self._create(EntityKind.TOKEN, "/tokens", payload, self.local.create_token)

    # ------------------------------------------------------------------
    # Completed adventures
    # ------------------------------------------------------------------

    async def fetch_completed_adventures(self, adventurer_id: int | None = None) -> DataResult:
        return await self._tiered_read(
            "completed_adventures",
            lambda: self.remote.call("/completed-adventures", params={"adventurerid": adventurer_id}),
            lambda: self.local.get_completed_adventures(adventurer_id),
            lambda: self.fixtures.completed_adventures(adventurer_id),
            kind=EntityKind.COMPLETED_ADVENTURE,
        )

    async def create_completed_adventure(self, data: CompletedAdventureCreate | dict[str, Any]) -> DataResult:
        payload = CompletedAdventureCreate.model_validate(data)
        return await self._create(
            EntityKind.COMPLETED_ADVENTURE,
            "/completed-adventures",
            payload,
            self.local.create_completed_adventure,
        )

    # ------------------------------------------------------------------
    # Sync, status, auth
    # ------------------------------------------------------------------

    async def full_sync(self) -> SyncResult:
        """Replace the local store with a fresh copy of every remote collection.

        All six collections are fetched concurrently. If any request fails or
        returns something other than a list, the local store is left alone.
        Never raises; failures are reported in the result.
        """
        names = list(SYNC_ENDPOINTS)
        results = await asyncio.gather(
            *(self.remote.call(SYNC_ENDPOINTS[name]) for name in names),
            return_exceptions=True,
        )

        failures = []
        for name, result in zip(names, results, strict=True):
            if isinstance(result, BaseException):
                failures.append(f"{name}: {result}")
            elif not isinstance(result, list):
                failures.append(f"{name}: expected a list, got {type(result).__name__}")
        if failures:
            error = "; ".join(failures)
            logger.warning("full_sync_failed", stage="fetch", error=error)
            return SyncResult(success=False, error=error)

        try:
            snapshot = SyncSnapshot.model_validate(dict(zip(names, results, strict=True)))
        except ValidationError as exc:
            logger.warning("full_sync_failed", stage="validate", error=str(exc))
            return SyncResult(success=False, error=f"Malformed sync payload: {exc}")

        # Pending mirror writes must land before the snapshot replaces them.
        await self._background.drain()
        try:
            await self.local.bulk_replace(snapshot)
        except LocalStoreError as exc:
            logger.warning("full_sync_failed", stage="store", error=str(exc))
            return SyncResult(success=False, error=str(exc))

        synced_at = datetime.now(timezone.utc)
        self._last_sync_time = synced_at
        logger.info(
            "full_sync_completed",
            synced_at=synced_at.isoformat(),
            **{kind.value: len(records) for kind, records in snapshot.collections()},
        )
        return SyncResult(success=True, synced_at=synced_at)

    async def get_status(self) -> TierStatus:
        remote_ok, local_ok = await asyncio.gather(self.remote.probe(), self.local.is_available())
        return TierStatus(remote=remote_ok, local=local_ok, fixture=True)

    def get_last_sync_time(self) -> datetime | None:
        return self._last_sync_time

    async def authenticate(self, username: str, password: str) -> DataResult:
        """Look up an adventurer by username and check the password.

        WARNING: passwords are compared in plaintext against whatever tier
        answered. The matching record is returned without its password.

        Raises:
            AuthenticationError: Unknown username or wrong password.
        """
        result = await self.fetch_adventurers()
        adventurers = result.data if isinstance(result.data, list) else []
        logger.warning("adventurer_password_compared_plaintext", username=username, source=result.source.value)

        for adventurer in adventurers:
            if not isinstance(adventurer, dict) or adventurer.get("username") != username:
                continue
            if adventurer.get("password") != password:
                logger.info("authentication_failed", username=username, reason="wrong_password")
                raise AuthenticationError("Invalid username or password")
            record = {key: value for key, value in adventurer.items() if key != "password"}
            logger.info("authentication_succeeded", username=username, adventurer_id=record.get("id"))
            return DataResult(data=record, source=result.source)

        logger.info("authentication_failed", username=username, reason="unknown_username")
        raise AuthenticationError("Invalid username or password")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def reset_local_store(self) -> None:
        """Drop and recreate the local schema and forget the last sync time."""
        await self._background.drain()
        await self.local.reset()
        self._last_sync_time = None

    async def wait_for_background(self) -> None:
        """Wait for every detached replication and mirror write scheduled so far."""
        await self._background.drain()

    async def aclose(self) -> None:
        await self._background.drain()
        await self.remote.aclose()
        await self.local.close()
