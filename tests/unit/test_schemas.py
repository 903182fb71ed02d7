"""Tests for payload models and point helpers."""

import pytest
from pydantic import ValidationError

from wayfind.schemas import (
    AdventurerCreate,
    AdventurerUpdate,
    EntityKind,
    Point,
    RegionCreate,
    SyncSnapshot,
    TokenCreate,
    point_from_xy,
    point_to_xy,
)


class TestPoints:
    def test_both_coordinates_make_a_point(self):
        assert point_from_xy(42.9, -85.6) == {"x": 42.9, "y": -85.6}

    def test_missing_coordinate_yields_no_point(self):
        assert point_from_xy(None, -85.6) is None
        assert point_from_xy(42.9, None) is None

    def test_split_dict_and_model(self):
        assert point_to_xy({"x": 1, "y": 2}) == (1.0, 2.0)
        assert point_to_xy(Point(x=3.5, y=4.5)) == (3.5, 4.5)

    def test_partial_point_is_dropped(self):
        assert point_to_xy({"x": 1.0}) == (None, None)
        assert point_to_xy(None) == (None, None)

    def test_text_form_is_parsed(self):
        assert point_to_xy("(42.96,-85.67)") == (42.96, -85.67)
        assert point_to_xy(" (1, 2) ") == (1.0, 2.0)

    def test_unreadable_values_are_dropped(self):
        assert point_to_xy("(1,2,3)") == (None, None)
        assert point_to_xy("somewhere") == (None, None)
        assert point_to_xy({"x": "east", "y": 1}) == (None, None)
        assert point_to_xy([1, 2]) == (None, None)
        assert point_to_xy(7) == (None, None)


class TestPayloads:
    def test_accepts_wire_aliases(self):
        payload = TokenCreate.model_validate({"adventureid": 3, "tokenorder": 2, "hint": "Look up"})
        assert payload.adventure_id == 3
        assert payload.token_order == 2

    def test_accepts_snake_case_names(self):
        payload = AdventurerCreate(username="QuestMaster", password="password789", profile_picture="a.jpg")
        assert payload.to_wire() == {
            "username": "QuestMaster",
            "password": "password789",
            "profilepicture": "a.jpg",
        }

    def test_region_requires_location(self):
        with pytest.raises(ValidationError):
            RegionCreate.model_validate({"adventurerid": 1, "name": "Park", "radius": 100})

    def test_region_rejects_negative_radius(self):
        with pytest.raises(ValidationError):
            RegionCreate.model_validate(
                {"adventurerid": 1, "name": "Park", "location": {"x": 0, "y": 0}, "radius": -5}
            )

    def test_region_serializes_point(self):
        payload = RegionCreate.model_validate(
            {"adventurerid": 1, "name": "Park", "location": {"x": 1.5, "y": 2.5}, "radius": 100}
        )
        assert payload.to_wire()["location"] == {"x": 1.5, "y": 2.5}
        assert payload.to_wire()["adventurerid"] == 1

    def test_update_sends_only_set_fields(self):
        update = AdventurerUpdate.model_validate({"profilepicture": None})
        assert update.to_wire() == {"profilepicture": None}

    def test_update_drops_null_credentials(self):
        update = AdventurerUpdate.model_validate({"username": None, "password": None, "profilepicture": "b.jpg"})
        assert update.to_wire() == {"profilepicture": "b.jpg"}

    def test_empty_username_rejected(self):
        with pytest.raises(ValidationError):
            AdventurerCreate(username="", password="x")


class TestSyncSnapshot:
    def test_collections_parents_first(self):
        kinds = [kind for kind, _ in SyncSnapshot().collections()]
        assert kinds == list(EntityKind)
        assert kinds[0] is EntityKind.ADVENTURER
        assert kinds[-1] is EntityKind.COMPLETED_ADVENTURE
