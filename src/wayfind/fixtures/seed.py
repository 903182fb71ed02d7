"""Static seed data served when neither the remote API nor the local store has rows.

Records use the remote API field names and are foreign-key consistent, so the
whole set can also be loaded into the local store with a bulk replace.
"""

from __future__ import annotations

from typing import Any

ADVENTURER_SEED_DATA: list[dict[str, Any]] = [
    {"id": 1, "username": "AdventureSeeker", "password": "pass123", "profilepicture": "pictures/avatar1.jpg"},
    {"id": 2, "username": "ExplorerMax", "password": "secure456", "profilepicture": "pictures/avatar2.jpg"},
    {"id": 3, "username": "QuestMaster", "password": "password789", "profilepicture": "pictures/avatar3.jpg"},
    {"id": 4, "username": "TreasureHunter", "password": "hunt2024", "profilepicture": "pictures/avatar4.jpg"},
    {"id": 5, "username": "WandererSarah", "password": "explore99", "profilepicture": "pictures/avatar5.jpg"},
    {"id": 6, "username": "TrailBlazer", "password": "trail2024", "profilepicture": None},
]

REGION_SEED_DATA: list[dict[str, Any]] = [
    {
        "id": 1,
        "adventurerid": 1,
        "name": "Downtown Historic District",
        "description": "Explore the rich history of downtown with landmarks dating back to the 1800s",
        "location": {"x": 42.9634, "y": -85.6681},
        "radius": 500,
    },
    {
        "id": 2,
        "adventurerid": 2,
        "name": "Riverside Nature Trail",
        "description": "Beautiful walking paths along the river with wildlife viewing opportunities",
        "location": {"x": 42.9704, "y": -85.6584},
        "radius": 750,
    },
    {
        "id": 3,
        "adventurerid": 3,
        "name": "University Campus",
        "description": "Discover hidden gems and interesting facts about the campus grounds",
        "location": {"x": 42.9313, "y": -85.5881},
        "radius": 400,
    },
    {
        "id": 4,
        "adventurerid": 4,
        "name": "Woodland Park Adventure",
        "description": "Family-friendly adventure through scenic woodland trails",
        "location": {"x": 42.9245, "y": -85.6234},
        "radius": 600,
    },
    {
        "id": 5,
        "adventurerid": 5,
        "name": "City Center Quest",
        "description": "Urban adventure through the bustling city center and shopping districts",
        "location": {"x": 42.9616, "y": -85.6557},
        "radius": 350,
    },
    {
        "id": 6,
        "adventurerid": 1,
        "name": "Lakefront Discovery",
        "description": None,
        "location": {"x": 42.9789, "y": -85.6423},
        "radius": 800,
    },
]

LANDMARK_SEED_DATA: list[dict[str, Any]] = [
    # Downtown Historic District
    {"id": 1, "regionid": 1, "name": "Old Town Hall", "location": {"x": 42.9628, "y": -85.6675}},
    {"id": 2, "regionid": 1, "name": "Historic Clock Tower", "location": {"x": 42.9640, "y": -85.6687}},
    {"id": 3, "regionid": 1, "name": "Heritage Museum", "location": {"x": 42.9622, "y": -85.6693}},
    # Riverside Nature Trail
    {"id": 4, "regionid": 2, "name": "River Overlook", "location": {"x": 42.9710, "y": -85.6578}},
    {"id": 5, "regionid": 2, "name": "Wildlife Observation Deck", "location": {"x": 42.9698, "y": -85.6590}},
    {"id": 6, "regionid": 2, "name": "Fishing Pier", "location": None},
    # University Campus
    {"id": 7, "regionid": 3, "name": "Main Library", "location": {"x": 42.9307, "y": -85.5875}},
    {"id": 8, "regionid": 3, "name": "Student Union", "location": {"x": 42.9319, "y": -85.5887}},
    {"id": 9, "regionid": 3, "name": "Science Building", "location": {"x": 42.9301, "y": -85.5869}},
    # Woodland Park Adventure
    {"id": 10, "regionid": 4, "name": "Ancient Oak Tree", "location": {"x": 42.9239, "y": -85.6228}},
    {"id": 11, "regionid": 4, "name": "Hidden Waterfall", "location": {"x": 42.9251, "y": -85.6240}},
    {"id": 12, "regionid": 4, "name": "Forest Clearing", "location": {"x": 42.9233, "y": -85.6222}},
    # City Center Quest
    {"id": 13, "regionid": 5, "name": "Central Fountain", "location": {"x": 42.9610, "y": -85.6551}},
    {"id": 14, "regionid": 5, "name": "Shopping Plaza", "location": {"x": 42.9622, "y": -85.6563}},
    {"id": 15, "regionid": 5, "name": "Business District", "location": {"x": 42.9604, "y": -85.6545}},
    # Lakefront Discovery
    {"id": 16, "regionid": 6, "name": "Lighthouse Point", "location": {"x": 42.9795, "y": -85.6417}},
    {"id": 17, "regionid": 6, "name": "Sandy Beach", "location": {"x": 42.9783, "y": -85.6429}},
    {"id": 18, "regionid": 6, "name": "Boat Launch", "location": {"x": 42.9801, "y": -85.6411}},
]

ADVENTURE_SEED_DATA: list[dict[str, Any]] = [
    {
        "id": 1,
        "adventurerid": 1,
        "regionid": 1,
        "name": "Historic Downtown Walking Tour",
        "numtokens": 3,
        "location": {"x": 42.9634, "y": -85.6681},
    },
    {
        "id": 2,
        "adventurerid": 2,
        "regionid": 2,
        "name": "Peaceful River Walk",
        "numtokens": 2,
        "location": {"x": 42.9704, "y": -85.6584},
    },
    {
        "id": 3,
        "adventurerid": 3,
        "regionid": 3,
        "name": "Campus Discovery",
        "numtokens": 3,
        "location": {"x": 42.9313, "y": -85.5881},
    },
    {
        "id": 4,
        "adventurerid": 4,
        "regionid": 4,
        "name": "Family Forest Fun",
        "numtokens": 2,
        "location": {"x": 42.9245, "y": -85.6234},
    },
    {
        "id": 5,
        "adventurerid": 5,
        "regionid": 5,
        "name": "City Center Scavenger Hunt",
        "numtokens": 3,
        "location": {"x": 42.9616, "y": -85.6557},
    },
    {
        "id": 6,
        "adventurerid": 1,
        "regionid": 6,
        "name": "Lakefront Leisure",
        "numtokens": 2,
        "location": None,
    },
    {
        "id": 7,
        "adventurerid": 1,
        "regionid": 5,
        "name": "Urban Photography Walk",
        "numtokens": 5,
        "location": {"x": 42.9620, "y": -85.6560},
    },
]

TOKEN_SEED_DATA: list[dict[str, Any]] = [
    # Historic Downtown Walking Tour
    {"id": 1, "adventureid": 1, "location": {"x": 42.9628, "y": -85.6675}, "hint": "Find the building where city decisions were made for over a century", "tokenorder": 1},
    {"id": 2, "adventureid": 1, "location": {"x": 42.9640, "y": -85.6687}, "hint": "Look up to see the timekeeper that has watched over downtown for decades", "tokenorder": 2},
    {"id": 3, "adventureid": 1, "location": {"x": 42.9622, "y": -85.6693}, "hint": "Discover where the past comes alive through exhibits and artifacts", "tokenorder": 3},
    # Peaceful River Walk
    {"id": 4, "adventureid": 2, "location": {"x": 42.9710, "y": -85.6578}, "hint": "Stand where the water meets the sky for the perfect view", "tokenorder": 1},
    {"id": 5, "adventureid": 2, "location": {"x": 42.9698, "y": -85.6590}, "hint": "Quietly observe nature from this elevated wooden platform", "tokenorder": 2},
    # Campus Discovery
    {"id": 6, "adventureid": 3, "location": {"x": 42.9307, "y": -85.5875}, "hint": "Knowledge seekers gather here among countless books and resources", "tokenorder": 1},
    {"id": 7, "adventureid": 3, "location": {"x": 42.9319, "y": -85.5887}, "hint": "The heart of student life beats strongest in this central building", "tokenorder": 2},
    {"id": 8, "adventureid": 3, "location": {"x": 42.9301, "y": -85.5869}, "hint": "Where minds explore the mysteries of the natural world", "tokenorder": 3},
    # Family Forest Fun
    {"id": 9, "adventureid": 4, "location": {"x": 42.9239, "y": -85.6228}, "hint": "This mighty giant has stood guard over the forest for generations", "tokenorder": 1},
    {"id": 10, "adventureid": 4, "location": {"x": 42.9251, "y": -85.6240}, "hint": "Listen for the sound of cascading water hidden among the trees", "tokenorder": 2},
    # City Center Scavenger Hunt
    {"id": 11, "adventureid": 5, "location": {"x": 42.9610, "y": -85.6551}, "hint": "Water dances in the heart of the city where people gather", "tokenorder": 1},
    {"id": 12, "adventureid": 5, "location": {"x": 42.9622, "y": -85.6563}, "hint": "Commerce and community come together under one roof", "tokenorder": 2},
    {"id": 13, "adventureid": 5, "location": {"x": 42.9604, "y": -85.6545}, "hint": "Where deals are made and the economy thrives", "tokenorder": 3},
    # Lakefront Leisure
    {"id": 14, "adventureid": 6, "location": {"x": 42.9795, "y": -85.6417}, "hint": "A beacon of safety guides vessels through the darkness", "tokenorder": 1},
    {"id": 15, "adventureid": 6, "location": {"x": 42.9783, "y": -85.6429}, "hint": "Feel the sand between your toes where waves meet the shore", "tokenorder": 2},
    # Urban Photography Walk, listed out of tokenorder
    {"id": 16, "adventureid": 7, "location": {"x": 42.9616, "y": -85.6557}, "hint": "Show the energy that pulses through city streets", "tokenorder": 4},
    {"id": 17, "adventureid": 7, "location": {"x": 42.9610, "y": -85.6551}, "hint": "Capture the perfect shot of urban water artistry", "tokenorder": 1},
    {"id": 18, "adventureid": 7, "location": {"x": 42.9622, "y": -85.6563}, "hint": "Frame the hustle and bustle of commercial life", "tokenorder": 2},
    {"id": 19, "adventureid": 7, "location": {"x": 42.9604, "y": -85.6545}, "hint": "Document where business dreams come to life", "tokenorder": 3},
    {"id": 20, "adventureid": 7, "location": {"x": 42.9620, "y": -85.6560}, "hint": "Your photographic journey reaches its perfect conclusion", "tokenorder": 5},
]

COMPLETED_ADVENTURE_SEED_DATA: list[dict[str, Any]] = [
    {"id": 1, "adventurerid": 1, "adventureid": 2, "completiondate": "2024-10-01T00:00:00Z", "completiontime": "00:45:30"},
    {"id": 2, "adventurerid": 1, "adventureid": 4, "completiondate": "2024-10-03T00:00:00Z", "completiontime": "00:32:15"},
    {"id": 3, "adventurerid": 1, "adventureid": 3, "completiondate": "2024-10-05T00:00:00Z", "completiontime": "00:28:45"},
    {"id": 4, "adventurerid": 2, "adventureid": 1, "completiondate": "2024-10-02T00:00:00Z", "completiontime": "01:15:20"},
    {"id": 5, "adventurerid": 2, "adventureid": 3, "completiondate": "2024-10-04T00:00:00Z", "completiontime": "00:52:30"},
    {"id": 6, "adventurerid": 4, "adventureid": 5, "completiondate": "2024-10-06T00:00:00Z", "completiontime": None},
]

SEED_DATA: dict[str, list[dict[str, Any]]] = {
    "adventurers": ADVENTURER_SEED_DATA,
    "regions": REGION_SEED_DATA,
    "landmarks": LANDMARK_SEED_DATA,
    "adventures": ADVENTURE_SEED_DATA,
    "tokens": TOKEN_SEED_DATA,
    "completed_adventures": COMPLETED_ADVENTURE_SEED_DATA,
}
