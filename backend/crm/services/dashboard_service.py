"""
Dashboard service: totals across people, clients and jobs.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from crm.services.base_service import BaseService
from crm.services.job_service import JobService
from crm.db.repositories.person_repository import PersonRepository
from crm.db.repositories.client_repository import ClientRepository
from crm.models.job import JobStatus
from crm.schemas.dashboard import DashboardStats


class DashboardService(BaseService):
    """Service for dashboard statistics."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.person_repo = PersonRepository(session)
        self.client_repo = ClientRepository(session)
        self.job_service = JobService(session)

    async def get_stats(self) -> DashboardStats:
        """Entity totals, job counts per status and the completion rate."""
        jobs_by_status = await self.job_service.count_by_status()
        total_jobs = sum(jobs_by_status.values())
        completed = jobs_by_status[JobStatus.COMPLETED.value]
        completion_rate = round(completed * 100 / total_jobs) if total_jobs else 0

        return DashboardStats(
            total_people=await self.person_repo.count_all(),
            total_clients=await self.client_repo.count_all(),
            total_jobs=total_jobs,
            jobs_by_status=jobs_by_status,
            completion_rate=completion_rate,
        )
