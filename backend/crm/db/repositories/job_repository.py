"""
Job repository for database operations.
"""

from typing import Dict, List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func

from crm.db.repositories.base_repository import BaseRepository
from crm.models.job import Job, JobStatus


class JobRepository(BaseRepository[Job]):
    """Repository for job operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Job, session)

    def _ordering(self):
        # Creation order; id breaks ties between rows created in the same instant
        return (Job.created_at, Job.id)

    async def list_filtered(
        self,
        status: Optional[JobStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> List[Job]:
        """List jobs in creation order, optionally narrowed by status and/or client."""
        query = select(Job)
        if status is not None:
            query = query.where(Job.status == status)
        if client_id is not None:
            query = query.where(Job.client_id == client_id)
        result = await self.session.execute(query.order_by(*self._ordering()))
        return list(result.scalars().all())

    async def list_by_ids(self, ids: List[UUID]) -> List[Job]:
        """List the jobs with the given ids, in creation order."""
        if not ids:
            return []
        result = await self.session.execute(
            select(Job).where(Job.id.in_(ids)).order_by(*self._ordering())
        )
        return list(result.scalars().all())

    async def ids_for_client(self, client_id: UUID) -> List[UUID]:
        """Ids of the jobs owned by a client."""
        result = await self.session.execute(
            select(Job.id).where(Job.client_id == client_id)
        )
        return list(result.scalars().all())

    async def count_by_status(self) -> Dict[JobStatus, int]:
        """Count jobs per status. Statuses without jobs are omitted."""
        result = await self.session.execute(
            select(Job.status, func.count(Job.id)).group_by(Job.status)
        )
        return {JobStatus(row[0]): row[1] for row in result.all()}

    async def delete_by_ids(self, ids: List[UUID]) -> int:
        """Delete several jobs at once. Returns the number of rows removed."""
        if not ids:
            return 0
        result = await self.session.execute(
            delete(Job).where(Job.id.in_(ids))
        )
        await self.session.flush()
        return result.rowcount
