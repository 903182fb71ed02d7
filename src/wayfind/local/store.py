"""Embedded SQLite mirror of the remote entities.

The store initializes lazily on first use. With ``reset_on_init`` enabled
(the default) initialization drops and recreates every table, which makes
the store a disposable per-launch cache rather than durable offline data.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wayfind.errors import LocalStoreError
from wayfind.local.database import create_session_factory, create_store_engine
from wayfind.local.models import (
    Adventure,
    Adventurer,
    Base,
    CompletedAdventure,
    Landmark,
    Region,
    Token,
)
from wayfind.schemas import (
    AdventureCreate,
    AdventurerCreate,
    AdventurerUpdate,
    CompletedAdventureCreate,
    EntityKind,
    LandmarkCreate,
    RegionCreate,
    SyncSnapshot,
    TokenCreate,
    point_to_xy,
)

logger = structlog.get_logger()

MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.ADVENTURER: Adventurer,
    EntityKind.REGION: Region,
    EntityKind.LANDMARK: Landmark,
    EntityKind.ADVENTURE: Adventure,
    EntityKind.TOKEN: Token,
    EntityKind.COMPLETED_ADVENTURE: CompletedAdventure,
}


def _build_row(model: type[Base], record: dict[str, Any]) -> Base:
    """Map a wire record onto a row; unusable records raise LocalStoreError."""
    try:
        return model.from_record(record)
    except (AttributeError, TypeError, ValueError) as exc:
        msg = f"Cannot store {model.__tablename__} record {record.get('id')!r}: {exc}"
        raise LocalStoreError(msg) from exc


class LocalStore:
    """Per-entity reads and creates, adventurer update, upsert and bulk replace.

    Every public method initializes the store on demand. SQLAlchemy failures
    are raised as :class:`LocalStoreError`. Writes are serialized through a
    single lock so a bulk replace never interleaves with a background upsert.
    """

    def __init__(self, database_url: str, *, reset_on_init: bool = True) -> None:
        self.database_url = database_url
        self.reset_on_init = reset_on_init
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._init_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._session_factory is not None

    async def initialize(self) -> None:
        """Create (or recreate) the schema once per store instance."""
        if self._session_factory is not None:
            return
        async with self._init_lock:
            if self._session_factory is not None:
                return

            engine = create_store_engine(self.database_url)
            try:
                async with engine.begin() as conn:
                    if self.reset_on_init:
                        await conn.run_sync(Base.metadata.drop_all)
                    await conn.run_sync(Base.metadata.create_all)
                    adventurers = await conn.scalar(select(func.count()).select_from(Adventurer))
                    regions = await conn.scalar(select(func.count()).select_from(Region))
            except SQLAlchemyError as exc:
                await engine.dispose()
                logger.error("local_store_init_failed", url=self.database_url, error=str(exc))
                msg = f"Failed to initialize local store: {exc}"
                raise LocalStoreError(msg) from exc

            self._engine = engine
            self._session_factory = create_session_factory(engine)
            logger.info(
                "local_store_initialized",
                url=self.database_url,
                reset=self.reset_on_init,
                adventurers=adventurers,
                regions=regions,
            )

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        await self.initialize()
        if self._session_factory is None:
            msg = "Local store is not initialized"
            raise LocalStoreError(msg)
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                raise LocalStoreError(str(exc)) from exc

    async def _select(self, model: type[Base], *conditions: Any, order_by: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        stmt = select(model)
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(*(order_by or (model.id,)))
        async with self._session() as session:
            result = await session.execute(stmt)
            return [row.to_record() for row in result.scalars()]

    async def _insert(self, row: Base) -> dict[str, Any]:
        async with self._write_lock, self._session() as session:
            async with session.begin():
                session.add(row)
            return row.to_record()

    # --- Adventurers ---

    async def get_adventurers(self) -> list[dict[str, Any]]:
        return await self._select(Adventurer)

    async def get_adventurer(self, adventurer_id: int) -> dict[str, Any] | None:
        async with self._session() as session:
            row = await session.get(Adventurer, adventurer_id)
            return row.to_record() if row is not None else None

    async def create_adventurer(self, data: AdventurerCreate | dict[str, Any]) -> dict[str, Any]:
        payload = AdventurerCreate.model_validate(data)
        logger.warning("adventurer_password_stored_plaintext", username=payload.username)
        return await self._insert(
            Adventurer(
                username=payload.username,
                password=payload.password,
                profile_picture=payload.profile_picture,
            )
        )

    async def update_adventurer(self, adventurer_id: int, data: AdventurerUpdate | dict[str, Any]) -> dict[str, Any]:
        """Apply the explicitly set fields of ``data``.

        Raises:
            LocalStoreError: If no adventurer has this id.
        """
        fields = AdventurerUpdate.model_validate(data)
        async with self._write_lock, self._session() as session:
            async with session.begin():
                row = await session.get(Adventurer, adventurer_id)
                if row is None:
                    msg = f"Adventurer {adventurer_id} not found"
                    raise LocalStoreError(msg)
                if fields.username is not None:
                    row.username = fields.username
                if fields.password is not None:
                    logger.warning("adventurer_password_stored_plaintext", adventurer_id=adventurer_id)
                    row.password = fields.password
                if "profile_picture" in fields.model_fields_set:
                    row.profile_picture = fields.profile_picture
            return row.to_record()

    # --- Regions ---

    async def get_regions(self, adventurer_id: int | None = None) -> list[dict[str, Any]]:
        conditions = []
        if adventurer_id is not None:
            conditions.append(Region.adventurer_id == adventurer_id)
        return await self._select(Region, *conditions)

    async def create_region(self, data: RegionCreate | dict[str, Any]) -> dict[str, Any]:
        payload = RegionCreate.model_validate(data)
        x, y = point_to_xy(payload.location)
        return await self._insert(
            Region(
                adventurer_id=payload.adventurer_id,
                name=payload.name,
                description=payload.description,
                location_x=x,
                location_y=y,
                radius=payload.radius,
            )
        )

    # --- Landmarks ---

    async def get_landmarks(self, region_id: int | None = None) -> list[dict[str, Any]]:
        conditions = []
        if region_id is not None:
            conditions.append(Landmark.region_id == region_id)
        return await self._select(Landmark, *conditions)

    async def create_landmark(self, data: LandmarkCreate | dict[str, Any]) -> dict[str, Any]:
        payload = LandmarkCreate.model_validate(data)
        x, y = point_to_xy(payload.location)
        return await self._insert(
            Landmark(region_id=payload.region_id, name=payload.name, location_x=x, location_y=y)
        )

    # --- Adventures ---

    async def get_adventures(
        self,
        region_id: int | None = None,
        adventurer_id: int | None = None,
    ) -> list[dict[str, Any]]:
        conditions = []
        if region_id is not None:
            conditions.append(Adventure.region_id == region_id)
        if adventurer_id is not None:
            conditions.append(Adventure.adventurer_id == adventurer_id)
        return await self._select(Adventure, *conditions)

    async def create_adventure(self, data: AdventureCreate | dict[str, Any]) -> dict[str, Any]:
        payload = AdventureCreate.model_validate(data)
        x, y = point_to_xy(payload.location)
        return await self._insert(
            Adventure(
                adventurer_id=payload.adventurer_id,
                region_id=payload.region_id,
                name=payload.name,
                num_tokens=payload.num_tokens,
                location_x=x,
                location_y=y,
            )
        )

    # --- Tokens ---

    async def get_tokens(self, adventure_id: int | None = None) -> list[dict[str, Any]]:
        conditions = []
        if adventure_id is not None:
            conditions.append(Token.adventure_id == adventure_id)
        return await self._select(Token, *conditions, order_by=(Token.token_order, Token.id))

    async def create_token(self, data: TokenCreate | dict[str, Any]) -> dict[str, Any]:
        payload = TokenCreate.model_validate(data)
        x, y = point_to_xy(payload.location)
        return await self._insert(
            Token(
                adventure_id=payload.adventure_id,
                location_x=x,
                location_y=y,
                hint=payload.hint,
                token_order=payload.token_order,
            )
        )

    # --- Completed adventures ---

    async def get_completed_adventures(self, adventurer_id: int | None = None) -> list[dict[str, Any]]:
        conditions = []
        if adventurer_id is not None:
            conditions.append(CompletedAdventure.adventurer_id == adventurer_id)
        return await self._select(CompletedAdventure, *conditions)

    async def create_completed_adventure(self, data: CompletedAdventureCreate | dict[str, Any]) -> dict[str, Any]:
        payload = CompletedAdventureCreate.model_validate(data)
        return await self._insert(
            CompletedAdventure(
                adventurer_id=payload.adventurer_id,
                adventure_id=payload.adventure_id,
                completion_date=payload.completion_date,
                completion_time=payload.completion_time,
            )
        )

    # --- Replication and sync ---

    async def upsert(self, kind: EntityKind, records: list[dict[str, Any]]) -> int:
        """Insert or overwrite records keeping their ids. Returns rows written.

        Each record gets its own transaction so one foreign-key violation
        does not discard the rest. Records without an id are skipped.
        """
        model = MODELS[kind]
        written = 0
        async with self._write_lock:
            for record in records:
                if not isinstance(record, dict) or record.get("id") is None:
                    continue
                try:
                    async with self._session() as session, session.begin():
                        await session.merge(_build_row(model, record))
                except LocalStoreError as exc:
                    logger.warning("local_upsert_skipped", kind=kind.value, id=record.get("id"), error=str(exc))
                    continue
                written += 1
        return written

    async def bulk_replace(self, snapshot: SyncSnapshot | dict[str, Any]) -> None:
        """Truncate every table, then insert the snapshot parents-first, ids preserved."""
        snapshot = SyncSnapshot.model_validate(snapshot)
        collections = snapshot.collections()
        async with self._write_lock, self._session() as session:
            async with session.begin():
                for kind, _records in reversed(collections):
                    await session.execute(delete(MODELS[kind]))
                for kind, records in collections:
                    model = MODELS[kind]
                    session.add_all([_build_row(model, record) for record in records])
                    await session.flush()
        logger.info(
            "local_bulk_replace_completed",
            **{kind.value: len(records) for kind, records in collections},
        )

    async def is_available(self) -> bool:
        """True when the store is initialized and holds at least one adventurer."""
        try:
            async with self._session() as session:
                count = await session.scalar(select(func.count()).select_from(Adventurer))
        except LocalStoreError as exc:
            logger.warning("local_store_unavailable", error=str(exc))
            return False
        return bool(count)

    async def counts(self) -> dict[str, int]:
        """Row count per table."""
        totals: dict[str, int] = {}
        async with self._session() as session:
            for kind, model in MODELS.items():
                totals[kind.value] = await session.scalar(select(func.count()).select_from(model)) or 0
        return totals

    async def reset(self) -> None:
        """Drop and recreate every table."""
        await self.initialize()
        if self._engine is None:
            msg = "Local store is not initialized"
            raise LocalStoreError(msg)
        async with self._write_lock:
            try:
                async with self._engine.begin() as conn:
                    await conn.run_sync(Base.metadata.drop_all)
                    await conn.run_sync(Base.metadata.create_all)
            except SQLAlchemyError as exc:
                msg = f"Failed to reset local store: {exc}"
                raise LocalStoreError(msg) from exc
        logger.info("local_store_reset", url=self.database_url)

    async def close(self) -> None:
        """Dispose of the engine. The next call reinitializes the store."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
