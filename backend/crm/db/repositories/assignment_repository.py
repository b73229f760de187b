"""
Assignment repository: the Job ↔ Person linking table.

The job_people rows are the only record of who works on which job. The
``assignedPeople`` list returned with every job is rebuilt from these rows
on read.
"""

from collections import defaultdict
from typing import Dict, Iterable, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert, delete, and_

from crm.models.association_tables import job_people


def _distinct(ids: Iterable[UUID]) -> List[UUID]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


class AssignmentRepository:
    """Repository for job/person assignment rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def person_ids_for_job(self, job_id: UUID) -> List[UUID]:
        """Person ids assigned to one job, ordered by id."""
        result = await self.session.execute(
            select(job_people.c.person_id)
            .where(job_people.c.job_id == job_id)
            .order_by(job_people.c.person_id)
        )
        return list(result.scalars().all())

    async def person_ids_by_job(self, job_ids: List[UUID]) -> Dict[UUID, List[UUID]]:
        """
        Person ids for many jobs in a single query.

        Args:
            job_ids: Jobs to look up

        Returns:
            Mapping of every requested job id to its person ids, ordered by
            id (empty list for jobs without assignments)
        """
        grouped: Dict[UUID, List[UUID]] = {job_id: [] for job_id in job_ids}
        if not job_ids:
            return grouped

        result = await self.session.execute(
            select(job_people.c.job_id, job_people.c.person_id)
            .where(job_people.c.job_id.in_(job_ids))
            .order_by(job_people.c.job_id, job_people.c.person_id)
        )
        for job_id, person_id in result.all():
            grouped[job_id].append(person_id)
        return grouped

    async def job_ids_for_person(self, person_id: UUID) -> List[UUID]:
        """Job ids a person is assigned to."""
        result = await self.session.execute(
            select(job_people.c.job_id).where(job_people.c.person_id == person_id)
        )
        return list(result.scalars().all())

    async def exists(self, job_id: UUID, person_id: UUID) -> bool:
        """Check whether the (job, person) pair is present."""
        result = await self.session.execute(
            select(job_people.c.job_id).where(
                and_(job_people.c.job_id == job_id, job_people.c.person_id == person_id)
            )
        )
        return result.first() is not None

    async def add(self, job_id: UUID, person_id: UUID) -> bool:
        """
        Assign a person to a job.

        Returns:
            True if a row was inserted, False if the pair already existed
        """
        if await self.exists(job_id, person_id):
            return False
        await self.session.execute(
            insert(job_people).values(job_id=job_id, person_id=person_id)
        )
        await self.session.flush()
        return True

    async def add_many(self, job_id: UUID, person_ids: Iterable[UUID]) -> int:
        """Insert one row per distinct person id. The job must have no rows for them yet."""
        rows = [{"job_id": job_id, "person_id": person_id} for person_id in _distinct(person_ids)]
        if not rows:
            return 0
        await self.session.execute(insert(job_people), rows)
        await self.session.flush()
        return len(rows)

    async def remove(self, job_id: UUID, person_id: UUID) -> bool:
        """
        Unassign a person from a job.

        Returns:
            True if a row was deleted
        """
        result = await self.session.execute(
            delete(job_people).where(
                and_(job_people.c.job_id == job_id, job_people.c.person_id == person_id)
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def replace(self, job_id: UUID, person_ids: Iterable[UUID]) -> List[UUID]:
        """
        Make ``person_ids`` the complete assignment set of a job.

        Every existing row for the job is deleted first; nothing is merged.

        Returns:
            The distinct person ids now assigned
        """
        person_ids = _distinct(person_ids)
        await self.delete_for_job(job_id)
        await self.add_many(job_id, person_ids)
        return person_ids

    async def delete_for_job(self, job_id: UUID) -> int:
        """Delete all rows for a job."""
        return await self.delete_for_jobs([job_id])

    async def delete_for_jobs(self, job_ids: List[UUID]) -> int:
        """Delete all rows for several jobs."""
        if not job_ids:
            return 0
        result = await self.session.execute(
            delete(job_people).where(job_people.c.job_id.in_(job_ids))
        )
        await self.session.flush()
        return result.rowcount

    async def delete_for_person(self, person_id: UUID) -> int:
        """Delete all rows for a person."""
        result = await self.session.execute(
            delete(job_people).where(job_people.c.person_id == person_id)
        )
        await self.session.flush()
        return result.rowcount
