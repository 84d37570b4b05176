"""Health service implementation."""

import asyncio
import os
from pathlib import Path
from typing import Any, Dict

from ...config import Settings
from ..schemas.common import HealthCheckResponse
from ..storage import get_record_store
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.stores = {
            "notes": get_record_store(settings.notes_path),
            "users": get_record_store(settings.users_path),
        }

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        checks = {
            f"{name}_store": await self.check_store_health(name) for name in self.stores
        }
        checks["uploads"] = await self.check_upload_dir()

        overall_status = "healthy"
        if any(check["status"] != "healthy" for check in checks.values()):
            overall_status = "unhealthy"

        return HealthCheckResponse(
            status=overall_status,
            version=self.settings.app_version,
            checks=checks,
        )

    async def check_store_health(self, store_name: str) -> Dict[str, Any]:
        """A store is healthy when it is missing (empty) or parses cleanly."""
        store = self.stores[store_name]
        result = await store.read()
        if not result.ok:
            # The read already logged the reason; the report is public
            return {"status": "unhealthy", "records": 0}
        return {"status": "healthy", "records": len(result.records)}

    async def check_upload_dir(self) -> Dict[str, Any]:
        """Upload directory exists (or can be created) and is writable."""
        path = Path(self.settings.upload_dir)

        def _check() -> Dict[str, Any]:
            if not path.exists():
                return {"status": "healthy", "exists": False}
            writable = path.is_dir() and os.access(path, os.W_OK)
            return {
                "status": "healthy" if writable else "unhealthy",
                "exists": True,
                "writable": writable,
            }

        return await asyncio.to_thread(_check)
