"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from crm.db.session import get_db
from crm.controllers.dashboard_controller import DashboardController
from crm.schemas.dashboard import DashboardStats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    db: AsyncSession = Depends(get_db),
) -> DashboardStats:
    """Totals for people, clients and jobs, with job counts per status."""
    controller = DashboardController(db)
    return await controller.get_stats()
