"""Remote API tier."""

from wayfind.remote.client import RemoteClient

__all__ = ["RemoteClient"]
