"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..core.exceptions import NotFoundError
from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Get overall system health status."""
    health_service = HealthService(settings)
    return await health_service.get_health_status()


@router.get("/stores/{store_name}", response_model=Dict[str, Any])
async def store_health(store_name: str, settings: Settings = Depends(get_settings)):
    """Check one record store ("notes" or "users")."""
    health_service = HealthService(settings)
    if store_name not in health_service.stores:
        raise NotFoundError(f"Unknown store '{store_name}'")
    return await health_service.check_store_health(store_name)
