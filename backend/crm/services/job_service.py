"""
Job service with business logic.

Owns the Job ↔ Person assignment rules: jobs are always returned with the
ids of their assigned people (ordered by person id), created together with their initial staff in
one transaction, and an update that carries ``assigned_people`` replaces the
whole assignment set.
"""

from typing import Dict, List, Optional, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from crm.core.exceptions import ValidationError, field_error
from crm.core.logging import get_logger
from crm.services.base_service import BaseService
from crm.db.repositories.job_repository import JobRepository
from crm.db.repositories.client_repository import ClientRepository
from crm.db.repositories.person_repository import PersonRepository
from crm.db.repositories.assignment_repository import AssignmentRepository
from crm.models.job import Job, JobStatus
from crm.schemas.job import JobCreate, JobUpdate, JobResponse

logger = get_logger(__name__)


def job_to_response(job: Job, person_ids: Sequence[UUID]) -> JobResponse:
    """Convert job model plus its assignment rows to response schema."""
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        status=job.status,
        job_date=job.job_date,
        address=job.address,
        fee=job.fee,
        client_id=job.client_id,
        created_at=job.created_at,
        assigned_people=list(person_ids),
    )


class JobService(BaseService):
    """Service for job operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.job_repo = JobRepository(session)
        self.client_repo = ClientRepository(session)
        self.person_repo = PersonRepository(session)
        self.assignment_repo = AssignmentRepository(session)

    async def _with_people(self, jobs: List[Job]) -> List[JobResponse]:
        """Attach assigned person ids to jobs using one assignment query."""
        people_by_job = await self.assignment_repo.person_ids_by_job([job.id for job in jobs])
        return [job_to_response(job, people_by_job[job.id]) for job in jobs]

    async def _validate_references(
        self,
        client_id: Optional[UUID] = None,
        person_ids: Optional[List[UUID]] = None,
    ) -> None:
        """Reject writes that point at a missing client or missing people."""
        errors: List[dict] = []
        if client_id is not None and not await self.client_repo.exists(client_id):
            errors.append(field_error("clientId", f"Client {client_id} does not exist"))
        if person_ids:
            missing = set(person_ids) - await self.person_repo.existing_ids(person_ids)
            if missing:
                unknown = ", ".join(sorted(str(person_id) for person_id in missing))
                errors.append(field_error("assignedPeople", f"Unknown person id(s): {unknown}"))
        if errors:
            raise ValidationError(errors)

    async def get_all_jobs_with_people(self) -> List[JobResponse]:
        """Every job in creation order, each with its assigned person ids."""
        jobs = await self.job_repo.list_all()
        return await self._with_people(jobs)

    async def list_jobs(
        self,
        status: Optional[JobStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> List[JobResponse]:
        """List jobs with assigned person ids, optionally filtered."""
        if status is None and client_id is None:
            return await self.get_all_jobs_with_people()
        jobs = await self.job_repo.list_filtered(status=status, client_id=client_id)
        return await self._with_people(jobs)

    async def get_job_with_people(self, job_id: UUID) -> Optional[JobResponse]:
        """Get job by ID with its assigned person ids."""
        job = await self.job_repo.get(job_id)
        if not job:
            return None
        person_ids = await self.assignment_repo.person_ids_for_job(job_id)
        return job_to_response(job, person_ids)

    async def list_jobs_for_person(self, person_id: UUID) -> Optional[List[JobResponse]]:
        """Jobs a person is assigned to, or None if the person does not exist."""
        if not await self.person_repo.exists(person_id):
            return None
        job_ids = await self.assignment_repo.job_ids_for_person(person_id)
        jobs = await self.job_repo.list_by_ids(job_ids)
        return await self._with_people(jobs)

    async def list_jobs_for_client(self, client_id: UUID) -> Optional[List[JobResponse]]:
        """Jobs owned by a client, or None if the client does not exist."""
        if not await self.client_repo.exists(client_id):
            return None
        jobs = await self.job_repo.list_filtered(client_id=client_id)
        return await self._with_people(jobs)

    async def create_job(self, job_data: JobCreate) -> JobResponse:
        """
        Create a job and its initial assignments in one transaction.

        Raises:
            ValidationError: if the client or any assigned person is unknown
        """
        person_ids = list(dict.fromkeys(job_data.assigned_people))
        await self._validate_references(client_id=job_data.client_id, person_ids=person_ids)

        job = await self.job_repo.create(**job_data.model_dump(exclude={"assigned_people"}))
        await self.assignment_repo.add_many(job.id, person_ids)
        assigned = await self.assignment_repo.person_ids_for_job(job.id)
        await self.commit()

        logger.info(
            "Job created",
            extra={"job_id": str(job.id), "client_id": str(job.client_id), "assigned": len(assigned)},
        )
        return job_to_response(job, assigned)

    async def update_job(self, job_id: UUID, job_data: JobUpdate) -> Optional[JobResponse]:
        """
        Update a job.

        Only supplied fields change. A supplied ``assigned_people`` list is
        the complete new membership: rows not in it are deleted.
        """
        if not await self.job_repo.exists(job_id):
            return None

        update_dict = job_data.model_dump(exclude_unset=True)
        person_ids = update_dict.pop("assigned_people", None)
        await self._validate_references(
            client_id=update_dict.get("client_id"),
            person_ids=person_ids,
        )

        job = await self.job_repo.update(job_id, **update_dict)
        if person_ids is not None:
            await self.assignment_repo.replace(job_id, person_ids)
        assigned = await self.assignment_repo.person_ids_for_job(job_id)
        await self.commit()
        if person_ids is not None:
            logger.info(
                "Job assignments replaced",
                extra={"job_id": str(job_id), "assigned": len(assigned)},
            )
        return job_to_response(job, assigned)

    async def delete_job(self, job_id: UUID) -> bool:
        """Delete a job and its assignments."""
        if not await self.job_repo.exists(job_id):
            return False

        await self.assignment_repo.delete_for_job(job_id)
        deleted = await self.job_repo.delete(job_id)
        await self.commit()
        logger.info("Job deleted", extra={"job_id": str(job_id)})
        return deleted

    async def add_person_to_job(self, job_id: UUID, person_id: UUID) -> bool:
        """
        Assign a person to a job.

        Returns:
            False if the job or person does not exist or the person is
            already assigned; True once the assignment is stored
        """
        if not await self.job_repo.exists(job_id) or not await self.person_repo.exists(person_id):
            return False

        try:
            added = await self.assignment_repo.add(job_id, person_id)
        except IntegrityError:
            # A concurrent request inserted the same pair first
            await self.session.rollback()
            return False
        if not added:
            return False

        await self.commit()
        logger.info("Person assigned to job", extra={"job_id": str(job_id), "person_id": str(person_id)})
        return True

    async def remove_person_from_job(self, job_id: UUID, person_id: UUID) -> bool:
        """Unassign a person from a job. Returns whether an assignment was removed."""
        removed = await self.assignment_repo.remove(job_id, person_id)
        if removed:
            await self.commit()
            logger.info("Person removed from job", extra={"job_id": str(job_id), "person_id": str(person_id)})
        return removed

    async def count_by_status(self) -> Dict[str, int]:
        """Job counts for every status, zero included."""
        counts = await self.job_repo.count_by_status()
        return {status.value: counts.get(status, 0) for status in JobStatus}
