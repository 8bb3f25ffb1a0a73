"""
Shared response schemas - errors, acks, health
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error body as rendered by FastAPI for HTTPException."""

    detail: str = Field(description="Human-readable error message")

    model_config = ConfigDict(json_schema_extra={"example": {"detail": "Forbidden"}})


class OkResponse(BaseModel):
    """Acknowledgement for mutations, with the public slug when there is one."""

    ok: bool = Field(default=True)
    slug: Optional[str] = Field(default=None, description="Public link slug if the note is public")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {"status": "healthy", "response_time_ms": 15},
                    "redis": {"status": "healthy", "response_time_ms": 5},
                },
            }
        }
    )
