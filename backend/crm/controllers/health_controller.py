"""
Health controller.
Coordinates health service to return health status.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from crm.controllers.base_controller import BaseController
from crm.schemas.health import HealthResponse
from crm.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""

    def __init__(self, health_service: Optional[HealthService] = None):
        self.health_service = health_service or HealthService()

    async def get_health(self, session: AsyncSession) -> HealthResponse:
        """Get system health status."""
        return await self.health_service.get_health(session)
