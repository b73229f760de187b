"""
Person service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from crm.core.logging import get_logger
from crm.services.base_service import BaseService
from crm.db.repositories.person_repository import PersonRepository
from crm.db.repositories.assignment_repository import AssignmentRepository
from crm.models.person import Person
from crm.schemas.person import PersonCreate, PersonUpdate, PersonResponse

logger = get_logger(__name__)


def person_to_response(person: Person) -> PersonResponse:
    """Convert person model to response schema."""
    return PersonResponse(
        id=person.id,
        name=person.name,
        address=person.address,
        telephone=person.telephone,
        email=person.email,
        created_at=person.created_at,
    )


class PersonService(BaseService):
    """Service for person operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.person_repo = PersonRepository(session)
        self.assignment_repo = AssignmentRepository(session)

    async def list_people(self, q: Optional[str] = None) -> List[PersonResponse]:
        """List people alphabetically, optionally narrowed by a search string."""
        if q and q.strip():
            people = await self.person_repo.search(q.strip())
        else:
            people = await self.person_repo.list_all()
        return [person_to_response(person) for person in people]

    async def get_person(self, person_id: UUID) -> Optional[PersonResponse]:
        """Get person by ID."""
        person = await self.person_repo.get(person_id)
        if not person:
            return None
        return person_to_response(person)

    async def create_person(self, person_data: PersonCreate) -> PersonResponse:
        """Create a new person."""
        person = await self.person_repo.create(**person_data.model_dump())
        await self.commit()
        logger.info("Person created", extra={"person_id": str(person.id)})
        return person_to_response(person)

    async def update_person(
        self,
        person_id: UUID,
        person_data: PersonUpdate,
    ) -> Optional[PersonResponse]:
        """Update a person. Fields left out of the request are unchanged."""
        if not await self.person_repo.exists(person_id):
            return None

        update_dict = person_data.model_dump(exclude_unset=True)
        updated = await self.person_repo.update(person_id, **update_dict)
        await self.commit()
        return person_to_response(updated)

    async def delete_person(self, person_id: UUID) -> bool:
        """Delete a person together with their job assignments."""
        if not await self.person_repo.exists(person_id):
            return False

        removed_assignments = await self.assignment_repo.delete_for_person(person_id)
        deleted = await self.person_repo.delete(person_id)
        await self.commit()
        logger.info(
            "Person deleted",
            extra={"person_id": str(person_id), "assignments_removed": removed_assignments},
        )
        return deleted
