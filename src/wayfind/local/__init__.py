"""Embedded SQLite tier."""

from wayfind.local.store import LocalStore

__all__ = ["LocalStore"]
