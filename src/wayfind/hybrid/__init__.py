"""Tiered remote/local/fixture orchestration."""

from wayfind.hybrid.service import HybridDataService

__all__ = ["HybridDataService"]
