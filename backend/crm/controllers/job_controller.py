"""
Job controller.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from crm.controllers.base_controller import BaseController
from crm.services.job_service import JobService
from crm.services.person_service import PersonService
from crm.services.client_service import ClientService
from crm.services.enrichment import enrich_jobs, filter_jobs
from crm.models.job import JobStatus
from crm.schemas.job import JobCreate, JobUpdate, JobResponse, JobDetailsResponse


class JobController(BaseController):
    """Controller for job operations."""

    def __init__(self, session: AsyncSession):
        self.job_service = JobService(session)
        self.person_service = PersonService(session)
        self.client_service = ClientService(session)

    async def list_jobs(
        self,
        status: Optional[JobStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> List[JobResponse]:
        """List jobs with their assigned person ids."""
        return await self.job_service.list_jobs(status=status, client_id=client_id)

    async def list_job_details(
        self,
        q: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[JobDetailsResponse]:
        """Jobs joined with their clients and assigned people, then filtered."""
        jobs = await self.job_service.get_all_jobs_with_people()
        clients = await self.client_service.list_clients()
        people = await self.person_service.list_people()
        return filter_jobs(enrich_jobs(jobs, clients, people), search=q, status=status)

    async def get_job(self, job_id: UUID) -> Optional[JobResponse]:
        """Get job by ID with its assigned person ids."""
        return await self.job_service.get_job_with_people(job_id)

    async def create_job(self, job_data: JobCreate) -> JobResponse:
        """Create a new job."""
        return await self.job_service.create_job(job_data)

    async def update_job(self, job_id: UUID, job_data: JobUpdate) -> Optional[JobResponse]:
        """Update a job."""
        return await self.job_service.update_job(job_id, job_data)

    async def delete_job(self, job_id: UUID) -> bool:
        """Delete a job."""
        return await self.job_service.delete_job(job_id)

    async def add_person_to_job(self, job_id: UUID, person_id: UUID) -> bool:
        """Assign a person to a job."""
        return await self.job_service.add_person_to_job(job_id, person_id)

    async def remove_person_from_job(self, job_id: UUID, person_id: UUID) -> bool:
        """Unassign a person from a job."""
        return await self.job_service.remove_person_from_job(job_id, person_id)
