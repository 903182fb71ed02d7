"""Read-only access to the static seed data, mirroring the local store's reads."""

from __future__ import annotations

import copy
from typing import Any

from wayfind.fixtures.seed import SEED_DATA


def _matches(record: dict[str, Any], **filters: int | None) -> bool:
    return all(record.get(field) == value for field, value in filters.items() if value is not None)


class FixtureProvider:
    """Synchronous, never-failing last tier.

    Every method returns deep copies, so callers may mutate what they get
    without touching the seed. Pass ``dataset`` (same keys as ``SEED_DATA``)
    to serve different data in tests.
    """

    def __init__(self, dataset: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._dataset = dataset if dataset is not None else SEED_DATA

    def _collection(self, name: str, **filters: int | None) -> list[dict[str, Any]]:
        rows = self._dataset.get(name, [])
        return [copy.deepcopy(row) for row in rows if _matches(row, **filters)]

    def adventurers(self) -> list[dict[str, Any]]:
        return self._collection("adventurers")

    def adventurer(self, adventurer_id: int) -> dict[str, Any] | None:
        rows = self._collection("adventurers", id=adventurer_id)
        return rows[0] if rows else None

    def regions(self, adventurer_id: int | None = None) -> list[dict[str, Any]]:
        return self._collection("regions", adventurerid=adventurer_id)

    def landmarks(self, region_id: int | None = None) -> list[dict[str, Any]]:
        return self._collection("landmarks", regionid=region_id)

    def adventures(self, region_id: int | None = None, adventurer_id: int | None = None) -> list[dict[str, Any]]:
        return self._collection("adventures", regionid=region_id, adventurerid=adventurer_id)

    def tokens(self, adventure_id: int | None = None) -> list[dict[str, Any]]:
        rows = self._collection("tokens", adventureid=adventure_id)
        # Unordered tokens first, as SQLite sorts NULL ahead of numbers.
        return sorted(
            rows,
            key=lambda row: (row.get("tokenorder") is not None, row.get("tokenorder") or 0, row.get("id") or 0),
        )

    def completed_adventures(self, adventurer_id: int | None = None) -> list[dict[str, Any]]:
        return self._collection("completed_adventures", adventurerid=adventurer_id)
