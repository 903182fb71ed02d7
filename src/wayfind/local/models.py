"""ORM models for the on-device mirror of the remote entities.

Column names are snake_case; ``to_record``/``from_record`` translate to and
from the remote API's field names. Points are stored as two nullable REAL
columns and reassembled on read.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from wayfind.schemas import point_from_xy, point_to_xy


class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Adventurers
# ---------------------------------------------------------------------------


class Adventurer(Base):
    """A player account. The password column holds plaintext (known weakness)."""

    __tablename__ = "adventurer"
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), nullable=False)
    password: Mapped[str] = mapped_column(String(256), nullable=False)
    profile_picture: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "password": self.password,
            "profilepicture": self.profile_picture,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Adventurer:
        return cls(
            id=record.get("id"),
            username=record.get("username"),
            password=record.get("password"),
            profile_picture=record.get("profilepicture"),
        )


# ---------------------------------------------------------------------------
# Regions and landmarks
# ---------------------------------------------------------------------------


class Region(Base):
    __tablename__ = "region"
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    adventurer_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("adventurer.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location_x: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_y: Mapped[float | None] = mapped_column(Float, nullable=True)
    radius: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "adventurerid": self.adventurer_id,
            "name": self.name,
            "description": self.description,
            "location": point_from_xy(self.location_x, self.location_y),
            "radius": self.radius,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Region:
        x, y = point_to_xy(record.get("location"))
        return cls(
            id=record.get("id"),
            adventurer_id=record.get("adventurerid"),
            name=record.get("name"),
            description=record.get("description"),
            location_x=x,
            location_y=y,
            radius=record.get("radius"),
        )


class Landmark(Base):
    __tablename__ = "landmark"
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    region_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("region.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    location_x: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_y: Mapped[float | None] = mapped_column(Float, nullable=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "regionid": self.region_id,
            "name": self.name,
            "location": point_from_xy(self.location_x, self.location_y),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Landmark:
        x, y = point_to_xy(record.get("location"))
        return cls(
            id=record.get("id"),
            region_id=record.get("regionid"),
            name=record.get("name"),
            location_x=x,
            location_y=y,
        )


# ---------------------------------------------------------------------------
# Adventures and tokens
# ---------------------------------------------------------------------------


class Adventure(Base):
    __tablename__ = "adventure"
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    adventurer_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("adventurer.id"), nullable=True)
    region_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("region.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    num_tokens: Mapped[int | None] = mapped_column(Integer, nullable=True)
    location_x: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_y: Mapped[float | None] = mapped_column(Float, nullable=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "adventurerid": self.adventurer_id,
            "regionid": self.region_id,
            "name": self.name,
            "numtokens": self.num_tokens,
            "location": point_from_xy(self.location_x, self.location_y),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Adventure:
        x, y = point_to_xy(record.get("location"))
        return cls(
            id=record.get("id"),
            adventurer_id=record.get("adventurerid"),
            region_id=record.get("regionid"),
            name=record.get("name"),
            num_tokens=record.get("numtokens"),
            location_x=x,
            location_y=y,
        )


class Token(Base):
    """A collectible point within an adventure; ``token_order`` sequences collection."""

    __tablename__ = "token"
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    adventure_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("adventure.id"), nullable=True)
    location_x: Mapped[float | None] = mapped_column(Float, nullable=True)
    location_y: Mapped[float | None] = mapped_column(Float, nullable=True)
    hint: Mapped[str | None] = mapped_column(Text, nullable=True)
    token_order: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "adventureid": self.adventure_id,
            "location": point_from_xy(self.location_x, self.location_y),
            "hint": self.hint,
            "tokenorder": self.token_order,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Token:
        x, y = point_to_xy(record.get("location"))
        return cls(
            id=record.get("id"),
            adventure_id=record.get("adventureid"),
            location_x=x,
            location_y=y,
            hint=record.get("hint"),
            token_order=record.get("tokenorder"),
        )


# ---------------------------------------------------------------------------
# Completions
# ---------------------------------------------------------------------------


class CompletedAdventure(Base):
    """Join of adventurer x adventure with the completion date and elapsed time."""

    __tablename__ = "completed_adventure"
    __table_args__ = {"sqlite_autoincrement": True}  # noqa: RUF012

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    adventurer_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("adventurer.id"), nullable=True)
    adventure_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("adventure.id"), nullable=True)
    completion_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    completion_time: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "adventurerid": self.adventurer_id,
            "adventureid": self.adventure_id,
            "completiondate": self.completion_date,
            "completiontime": self.completion_time,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> CompletedAdventure:
        return cls(
            id=record.get("id"),
            adventurer_id=record.get("adventurerid"),
            adventure_id=record.get("adventureid"),
            completion_date=record.get("completiondate"),
            completion_time=record.get("completiontime"),
        )
