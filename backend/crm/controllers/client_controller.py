"""
Client controller.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from crm.controllers.base_controller import BaseController
from crm.services.client_service import ClientService
from crm.services.job_service import JobService
from crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from crm.schemas.job import JobResponse


class ClientController(BaseController):
    """Controller for client operations."""

    def __init__(self, session: AsyncSession):
        self.client_service = ClientService(session)
        self.job_service = JobService(session)

    async def list_clients(self, q: Optional[str] = None) -> List[ClientResponse]:
        """List clients, optionally filtered by a search string."""
        return await self.client_service.list_clients(q)

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        return await self.client_service.get_client(client_id)

    async def list_client_jobs(self, client_id: UUID) -> Optional[List[JobResponse]]:
        """Jobs owned by the client."""
        return await self.job_service.list_jobs_for_client(client_id)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        return await self.client_service.create_client(client_data)

    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        return await self.client_service.update_client(client_id, client_data)

    async def delete_client(self, client_id: UUID) -> bool:
        """Delete a client according to the configured delete policy."""
        return await self.client_service.delete_client(client_id)
