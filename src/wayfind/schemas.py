"""Pydantic models for entity payloads and data layer results.

Records travel between tiers as plain dicts keyed by the remote API's
field names (``adventurerid``, ``profilepicture``, ``tokenorder``...).
The create/update models below accept either those wire names or the
snake_case attribute names and serialize back to the wire names.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EntityKind(str, Enum):
    """Entity kinds, declared in foreign-key dependency order (parents first)."""

    ADVENTURER = "adventurer"
    REGION = "region"
    LANDMARK = "landmark"
    ADVENTURE = "adventure"
    TOKEN = "token"
    COMPLETED_ADVENTURE = "completed_adventure"


class DataSource(str, Enum):
    """The tier that produced a result."""

    REMOTE = "remote"
    LOCAL = "local"
    FIXTURE = "fixture"


# --- Points ---


class Point(BaseModel):
    x: float
    y: float


def point_from_xy(x: float | None, y: float | None) -> dict[str, float] | None:
    """Reassemble a point from two columns; a missing coordinate yields no point."""
    if x is None or y is None:
        return None
    return {"x": x, "y": y}


def point_to_xy(value: Any) -> tuple[float | None, float | None]:
    """Split a point into two column values.

    Accepts a :class:`Point`, an ``{"x", "y"}`` dict or the ``"(x,y)"`` text
    form. Anything partial or unreadable becomes ``(None, None)``.
    """
    if value is None:
        return None, None
    if isinstance(value, Point):
        return value.x, value.y
    if isinstance(value, dict):
        x, y = value.get("x"), value.get("y")
    elif isinstance(value, str):
        parts = value.strip().strip("()").split(",")
        if len(parts) != 2:
            return None, None
        x, y = parts
    else:
        return None, None
    if x is None or y is None:
        return None, None
    try:
        return float(x), float(y)
    except (TypeError, ValueError):
        return None, None


# --- Create / update payloads ---


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize using the remote API field names."""
        return self.model_dump(mode="json", by_alias=True)


class AdventurerCreate(_WireModel):
    """New adventurer.

    WARNING: the password is stored and compared in plaintext by every tier.
    Do not reuse a real password for a WayFind account.
    """

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    profile_picture: str | None = Field(default=None, alias="profilepicture")


class AdventurerUpdate(_WireModel):
    """Partial adventurer update.

    Only explicitly set fields are sent. ``username`` and ``password`` cannot
    be cleared, so a ``None`` for either is dropped; ``profilepicture`` may be
    set to ``None``.
    """

    username: str | None = Field(default=None, min_length=1)
    password: str | None = Field(default=None, min_length=1)
    profile_picture: str | None = Field(default=None, alias="profilepicture")

    def to_wire(self) -> dict[str, Any]:
        wire = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        for field in ("username", "password"):
            if wire.get(field, ...) is None:
                del wire[field]
        return wire


class RegionCreate(_WireModel):
    adventurer_id: int = Field(alias="adventurerid")
    name: str = Field(min_length=1)
    description: str | None = None
    location: Point
    radius: int = Field(ge=0)


class LandmarkCreate(_WireModel):
    region_id: int = Field(alias="regionid")
    name: str = Field(min_length=1)
    location: Point | None = None


class AdventureCreate(_WireModel):
    adventurer_id: int = Field(alias="adventurerid")
    region_id: int = Field(alias="regionid")
    name: str = Field(min_length=1)
    num_tokens: int | None = Field(default=None, alias="numtokens")
    location: Point | None = None


class TokenCreate(_WireModel):
    adventure_id: int = Field(alias="adventureid")
    location: Point | None = None
    hint: str | None = None
    token_order: int | None = Field(default=None, alias="tokenorder")


class CompletedAdventureCreate(_WireModel):
    adventurer_id: int = Field(alias="adventurerid")
    adventure_id: int = Field(alias="adventureid")
    completion_date: str | None = Field(default=None, alias="completiondate")
    completion_time: str | None = Field(default=None, alias="completiontime")


# --- Results ---


class DataResult(BaseModel):
    """Data plus the tier that satisfied the request."""

    data: Any
    source: DataSource


class SyncSnapshot(BaseModel):
    """A complete copy of every entity collection, as fetched from the remote API."""

    adventurers: list[dict[str, Any]] = []
    regions: list[dict[str, Any]] = []
    landmarks: list[dict[str, Any]] = []
    adventures: list[dict[str, Any]] = []
    tokens: list[dict[str, Any]] = []
    completed_adventures: list[dict[str, Any]] = []

    def collections(self) -> list[tuple[EntityKind, list[dict[str, Any]]]]:
        """Collections paired with their kind, parents before children."""
        return [
            (EntityKind.ADVENTURER, self.adventurers),
            (EntityKind.REGION, self.regions),
            (EntityKind.LANDMARK, self.landmarks),
            (EntityKind.ADVENTURE, self.adventures),
            (EntityKind.TOKEN, self.tokens),
            (EntityKind.COMPLETED_ADVENTURE, self.completed_adventures),
        ]


class SyncResult(BaseModel):
    success: bool
    error: str | None = None
    synced_at: datetime | None = None


class TierStatus(BaseModel):
    remote: bool
    local: bool
    fixture: bool = True
