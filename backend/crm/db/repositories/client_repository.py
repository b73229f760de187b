"""
Client repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from crm.db.repositories.base_repository import BaseRepository
from crm.models.client import Client


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    def _ordering(self):
        return (Client.name, Client.created_at)

    async def search(self, q: str) -> List[Client]:
        """List clients matching the query on name, address or lead contact."""
        result = await self.session.execute(
            select(Client)
            .where(
                or_(
                    Client.name.icontains(q, autoescape=True),
                    Client.address.icontains(q, autoescape=True),
                    Client.lead_contact.icontains(q, autoescape=True),
                    Client.lead_contact_email.icontains(q, autoescape=True),
                )
            )
            .order_by(*self._ordering())
        )
        return list(result.scalars().all())
