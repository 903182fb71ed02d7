"""WayFind hybrid data access layer."""

from wayfind.errors import (
    AuthenticationError,
    LocalStoreError,
    RemoteUnavailableError,
    TotalWriteFailureError,
    WayfindError,
)
from wayfind.hybrid.service import HybridDataService
from wayfind.main import create_hybrid_service
from wayfind.schemas import DataResult, DataSource, SyncResult, TierStatus

__all__ = [
    "AuthenticationError",
    "DataResult",
    "DataSource",
    "HybridDataService",
    "LocalStoreError",
    "RemoteUnavailableError",
    "SyncResult",
    "TierStatus",
    "TotalWriteFailureError",
    "WayfindError",
    "create_hybrid_service",
]
