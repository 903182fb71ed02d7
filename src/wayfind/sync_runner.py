"""Standalone runner that mirrors the remote API into the local store.

Prints the health of each tier, runs one full sync and exits with status 1
when the sync fails.

Usage: python -m wayfind.sync_runner
"""

from __future__ import annotations

import asyncio
import sys

import structlog

from wayfind.config import get_settings
from wayfind.logging_config import setup_logging
from wayfind.main import create_hybrid_service

logger = structlog.get_logger()


async def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    logger.info("sync_runner_started", version=settings.app_version, api_base_url=settings.api_base_url)
    service = create_hybrid_service(settings)

    try:
        await service.initialize()

        status = await service.get_status()
        print(f"remote: {'up' if status.remote else 'down'}")
        print(f"local:  {'up' if status.local else 'empty'}")
        print(f"fixture: {'up' if status.fixture else 'down'}")

        result = await service.full_sync()
        if not result.success:
            logger.error("sync_runner_failed", api_base_url=settings.api_base_url, error=result.error)
            print(f"sync failed: {result.error}", file=sys.stderr)
            return 1

        counts = await service.local.counts()
        logger.info("sync_runner_completed", synced_at=result.synced_at.isoformat() if result.synced_at else None)
        print(f"synced at {result.synced_at}: " + ", ".join(f"{name}={count}" for name, count in counts.items()))
        return 0
    finally:
        await service.aclose()


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
