"""
Dashboard controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from crm.controllers.base_controller import BaseController
from crm.services.dashboard_service import DashboardService
from crm.schemas.dashboard import DashboardStats


class DashboardController(BaseController):
    """Controller for dashboard statistics."""

    def __init__(self, session: AsyncSession):
        self.dashboard_service = DashboardService(session)

    async def get_stats(self) -> DashboardStats:
        """Get dashboard statistics."""
        return await self.dashboard_service.get_stats()
