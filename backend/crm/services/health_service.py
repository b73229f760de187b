"""
Health service.
Provides health check functionality.
"""

import time
from sqlalchemy.ext.asyncio import AsyncSession

from crm.services.base_service import BaseService
from crm.db.repositories.health_repository import HealthRepository
from crm.schemas.health import HealthResponse


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self, session: AsyncSession) -> HealthResponse:
        """
        Get system health status.

        Args:
            session: Session used to probe the database

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}
        db_status = await HealthRepository(session).check_database()
        checks["database"] = "ok" if db_status else "error"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
        )
