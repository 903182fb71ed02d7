"""Static fixture tier."""

from wayfind.fixtures.provider import FixtureProvider

__all__ = ["FixtureProvider"]
