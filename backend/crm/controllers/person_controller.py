"""
Person controller.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from crm.controllers.base_controller import BaseController
from crm.services.person_service import PersonService
from crm.services.job_service import JobService
from crm.schemas.person import PersonCreate, PersonUpdate, PersonResponse
from crm.schemas.job import JobResponse


class PersonController(BaseController):
    """Controller for person operations."""

    def __init__(self, session: AsyncSession):
        self.person_service = PersonService(session)
        self.job_service = JobService(session)

    async def list_people(self, q: Optional[str] = None) -> List[PersonResponse]:
        """List people, optionally filtered by a search string."""
        return await self.person_service.list_people(q)

    async def get_person(self, person_id: UUID) -> Optional[PersonResponse]:
        """Get person by ID."""
        return await self.person_service.get_person(person_id)

    async def list_person_jobs(self, person_id: UUID) -> Optional[List[JobResponse]]:
        """Jobs the person is assigned to."""
        return await self.job_service.list_jobs_for_person(person_id)

    async def create_person(self, person_data: PersonCreate) -> PersonResponse:
        """Create a new person."""
        return await self.person_service.create_person(person_data)

    async def update_person(
        self,
        person_id: UUID,
        person_data: PersonUpdate,
    ) -> Optional[PersonResponse]:
        """Update a person."""
        return await self.person_service.update_person(person_id, person_data)

    async def delete_person(self, person_id: UUID) -> bool:
        """Delete a person."""
        return await self.person_service.delete_person(person_id)
