"""
Dashboard schemas.
"""

from pydantic import Field
from typing import Dict

from crm.schemas.common import CamelModel


class DashboardStats(CamelModel):
    """Totals shown on the dashboard."""
    total_people: int
    total_clients: int
    total_jobs: int
    jobs_by_status: Dict[str, int]
    completion_rate: int = Field(..., ge=0, le=100, description="Percent of jobs completed")
