"""Tests for the embedded SQLite store."""

from unittest.mock import AsyncMock, patch

import pytest

from wayfind.errors import LocalStoreError
from wayfind.fixtures.seed import SEED_DATA
from wayfind.local.store import LocalStore
from wayfind.schemas import EntityKind, SyncSnapshot


class TestInitialization:
    @pytest.mark.asyncio
    async def test_empty_store_is_not_available(self, store):
        assert store.initialized is True
        assert await store.is_available() is False

    @pytest.mark.asyncio
    async def test_reset_on_init_drops_previous_rows(self, database_url):
        first = LocalStore(database_url)
        await first.create_adventurer({"username": "dev", "password": "x"})
        await first.close()

        second = LocalStore(database_url, reset_on_init=True)
        try:
            assert await second.get_adventurers() == []
        finally:
            await second.close()

    @pytest.mark.asyncio
    async def test_rows_kept_without_reset(self, database_url):
        first = LocalStore(database_url)
        await first.create_adventurer({"username": "dev", "password": "x"})
        await first.close()

        second = LocalStore(database_url, reset_on_init=False)
        try:
            assert [row["username"] for row in await second.get_adventurers()] == ["dev"]
        finally:
            await second.close()

    @pytest.mark.asyncio
    async def test_bad_url_raises_store_error(self, tmp_path):
        broken = LocalStore(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'wayfind.db'}")
        with pytest.raises(LocalStoreError):
            await broken.initialize()
        assert await broken.is_available() is False


class TestCreatesAndReads:
    @pytest.mark.asyncio
    async def test_create_assigns_increasing_ids(self, store):
        first = await store.create_adventurer({"username": "a", "password": "x"})
        second = await store.create_adventurer({"username": "b", "password": "y", "profilepicture": "p.jpg"})

        assert second["id"] > first["id"]
        assert second["profilepicture"] == "p.jpg"
        assert await store.get_adventurer(second["id"]) == second
        assert await store.get_adventurer(999) is None

    @pytest.mark.asyncio
    async def test_region_point_round_trip(self, seeded_store):
        regions = await seeded_store.get_regions(adventurer_id=1)
        assert regions == [
            {
                "id": 1,
                "adventurerid": 1,
                "name": "Downtown",
                "description": None,
                "location": {"x": 42.96, "y": -85.67},
                "radius": 500,
            }
        ]

    @pytest.mark.asyncio
    async def test_landmark_without_location(self, seeded_store):
        landmark = await seeded_store.create_landmark({"regionid": 1, "name": "Fishing Pier"})
        assert landmark["location"] is None

    @pytest.mark.asyncio
    async def test_foreign_key_enforced(self, store):
        with pytest.raises(LocalStoreError):
            await store.create_landmark({"regionid": 42, "name": "Nowhere"})

    @pytest.mark.asyncio
    async def test_filters(self, seeded_store):
        await seeded_store.create_adventurer({"username": "other", "password": "x"})
        await seeded_store.create_region(
            {"adventurerid": 2, "name": "Elsewhere", "location": {"x": 1, "y": 1}, "radius": 10}
        )
        await seeded_store.create_adventure({"adventurerid": 1, "regionid": 1, "name": "A"})
        await seeded_store.create_adventure({"adventurerid": 2, "regionid": 1, "name": "B"})
        await seeded_store.create_adventure({"adventurerid": 2, "regionid": 2, "name": "C"})

        assert [row["name"] for row in await seeded_store.get_regions(adventurer_id=2)] == ["Elsewhere"]
        assert [row["name"] for row in await seeded_store.get_adventures(region_id=1)] == ["A", "B"]
        assert [row["name"] for row in await seeded_store.get_adventures(region_id=1, adventurer_id=2)] == ["B"]
        assert len(await seeded_store.get_adventures()) == 3

    @pytest.mark.asyncio
    async def test_tokens_ordered_by_token_order(self, seeded_store):
        adventure = await seeded_store.create_adventure({"adventurerid": 1, "regionid": 1, "name": "Walk"})
        for order in (3, 1, 2):
            await seeded_store.create_token({"adventureid": adventure["id"], "tokenorder": order, "hint": f"#{order}"})

        tokens = await seeded_store.get_tokens(adventure_id=adventure["id"])
        assert [token["tokenorder"] for token in tokens] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_completed_adventures_by_adventurer(self, seeded_store):
        adventure = await seeded_store.create_adventure({"adventurerid": 1, "regionid": 1, "name": "Walk"})
        await seeded_store.create_completed_adventure(
            {
                "adventurerid": 1,
                "adventureid": adventure["id"],
                "completiondate": "2024-10-01T00:00:00Z",
                "completiontime": "00:45:30",
            }
        )

        rows = await seeded_store.get_completed_adventures(adventurer_id=1)
        assert rows[0]["completiontime"] == "00:45:30"
        assert await seeded_store.get_completed_adventures(adventurer_id=2) == []


class TestUpdateAdventurer:
    @pytest.mark.asyncio
    async def test_partial_update(self, seeded_store):
        updated = await seeded_store.update_adventurer(1, {"profilepicture": "pictures/new.jpg"})
        assert updated["profilepicture"] == "pictures/new.jpg"
        assert updated["username"] == "AdventureSeeker"
        assert updated["password"] == "pass123"

    @pytest.mark.asyncio
    async def test_profile_picture_can_be_cleared(self, seeded_store):
        await seeded_store.update_adventurer(1, {"profilepicture": "pictures/new.jpg"})
        updated = await seeded_store.update_adventurer(1, {"profilepicture": None})
        assert updated["profilepicture"] is None

    @pytest.mark.asyncio
    async def test_unknown_id(self, store):
        with pytest.raises(LocalStoreError, match="not found"):
            await store.update_adventurer(404, {"username": "ghost"})


class TestUpsert:
    @pytest.mark.asyncio
    async def test_preserves_ids_and_overwrites(self, store):
        written = await store.upsert(
            EntityKind.ADVENTURER,
            [{"id": 10, "username": "remote", "password": "x"}, {"username": "no id", "password": "y"}],
        )
        assert written == 1

        await store.upsert(EntityKind.ADVENTURER, [{"id": 10, "username": "renamed", "password": "x"}])
        assert await store.get_adventurers() == [
            {"id": 10, "username": "renamed", "password": "x", "profilepicture": None}
        ]

    @pytest.mark.asyncio
    async def test_foreign_key_violation_skips_record_only(self, seeded_store):
        written = await seeded_store.upsert(
            EntityKind.LANDMARK,
            [
                {"id": 5, "regionid": 77, "name": "Orphan"},
                {"id": 6, "regionid": 1, "name": "Clock Tower", "location": {"x": 1.0, "y": 2.0}},
            ],
        )
        assert written == 1
        assert [row["id"] for row in await seeded_store.get_landmarks()] == [6]

    @pytest.mark.asyncio
    async def test_malformed_location_stored_empty(self, seeded_store):
        written = await seeded_store.upsert(
            EntityKind.LANDMARK,
            [{"id": 8, "regionid": 1, "name": "Bandstand", "location": "near the pond"}],
        )

        assert written == 1
        assert (await seeded_store.get_landmarks())[0]["location"] is None


class TestBulkReplace:
    @pytest.mark.asyncio
    async def test_replaces_everything_with_ids_preserved(self, seeded_store):
        await seeded_store.bulk_replace(SEED_DATA)

        counts = await seeded_store.counts()
        assert counts == {
            EntityKind.ADVENTURER.value: len(SEED_DATA["adventurers"]),
            EntityKind.REGION.value: len(SEED_DATA["regions"]),
            EntityKind.LANDMARK.value: len(SEED_DATA["landmarks"]),
            EntityKind.ADVENTURE.value: len(SEED_DATA["adventures"]),
            EntityKind.TOKEN.value: len(SEED_DATA["tokens"]),
            EntityKind.COMPLETED_ADVENTURE.value: len(SEED_DATA["completed_adventures"]),
        }
        assert await seeded_store.get_regions() == SEED_DATA["regions"]

    @pytest.mark.asyncio
    async def test_idempotent(self, store):
        snapshot = SyncSnapshot.model_validate(SEED_DATA)
        await store.bulk_replace(snapshot)
        first = await store.get_tokens()
        await store.bulk_replace(snapshot)

        assert await store.get_tokens() == first
        assert await store.counts() == {kind.value: len(rows) for kind, rows in snapshot.collections()}

    @pytest.mark.asyncio
    async def test_failure_leaves_previous_rows(self, seeded_store):
        broken = {"adventurers": [], "regions": [{"id": 3, "adventurerid": 99, "name": "Orphan"}]}
        with pytest.raises(LocalStoreError):
            await seeded_store.bulk_replace(broken)

        assert [row["username"] for row in await seeded_store.get_adventurers()] == ["AdventureSeeker"]


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_clears_rows(self, seeded_store):
        await seeded_store.reset()
        assert await seeded_store.counts() == {kind.value: 0 for kind in EntityKind}
        assert await seeded_store.is_available() is False


class TestUninitializedGuards:
    @pytest.mark.asyncio
    async def test_reads_raise_store_error(self, database_url):
        local = LocalStore(database_url)
        with patch.object(local, "initialize", AsyncMock()):
            with pytest.raises(LocalStoreError, match="not initialized"):
                await local.counts()
            with pytest.raises(LocalStoreError, match="not initialized"):
                await local.reset()
