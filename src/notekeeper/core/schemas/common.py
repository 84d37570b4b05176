"""
Shared response schemas - errors, plain success, health
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Error type")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "NotFound",
                "message": "Note not found",
                "details": None,
                "timestamp": "2025-09-13T17:23:45Z",
            }
        }
    )


class SuccessResponse(BaseModel):
    """Plain acknowledgement."""

    success: bool = Field(default=True, description="Operation success status")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=_utcnow)
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "notes_store": {"status": "healthy", "records": 12},
                    "users_store": {"status": "healthy", "records": 3},
                    "uploads": {"status": "healthy", "writable": True},
                },
            }
        }
    )
