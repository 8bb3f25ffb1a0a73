"""Health service implementation."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ... import __version__
from ...config import get_settings
from ..redis_client import get_redis_client
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        overall_status = "healthy"
        if not db_health["connected"]:
            overall_status = "unhealthy"
        elif self.settings.redis_enabled and not redis_health["connected"]:
            # token blacklist unavailable, logins still work
            overall_status = "degraded"

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            version=__version__,
            checks={"database": db_health, "redis": redis_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        try:
            start_time = asyncio.get_running_loop().time()
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
            response_time = (asyncio.get_running_loop().time() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        except SQLAlchemyError as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": 0.0,
            }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        if not self.settings.redis_enabled:
            return {"connected": False, "status": "disabled", "response_time_ms": None}

        client = get_redis_client()
        start_time = asyncio.get_running_loop().time()
        connected = await client.ping()
        response_time = (asyncio.get_running_loop().time() - start_time) * 1000

        if connected:
            return {
                "connected": True,
                "status": "healthy",
                "response_time_ms": round(response_time, 2),
            }
        return {"connected": False, "status": "unhealthy", "response_time_ms": None}
