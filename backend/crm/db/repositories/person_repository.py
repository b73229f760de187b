"""
Person repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from crm.db.repositories.base_repository import BaseRepository
from crm.models.person import Person


class PersonRepository(BaseRepository[Person]):
    """Repository for person operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Person, session)

    def _ordering(self):
        return (Person.name, Person.created_at)

    async def search(self, q: str) -> List[Person]:
        """List people whose name or email contains the query (case-insensitive)."""
        result = await self.session.execute(
            select(Person)
            .where(
                or_(
                    Person.name.icontains(q, autoescape=True),
                    Person.email.icontains(q, autoescape=True),
                )
            )
            .order_by(*self._ordering())
        )
        return list(result.scalars().all())
