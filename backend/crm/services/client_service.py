"""
Client service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from crm.core.config import settings
from crm.core.exceptions import ConflictError
from crm.core.logging import get_logger
from crm.services.base_service import BaseService
from crm.db.repositories.client_repository import ClientRepository
from crm.db.repositories.job_repository import JobRepository
from crm.db.repositories.assignment_repository import AssignmentRepository
from crm.models.client import Client
from crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse

logger = get_logger(__name__)

DELETE_POLICY_RESTRICT = "restrict"
DELETE_POLICY_CASCADE = "cascade"


def client_to_response(client: Client) -> ClientResponse:
    """Convert client model to response schema."""
    return ClientResponse(
        id=client.id,
        name=client.name,
        address=client.address,
        lead_contact=client.lead_contact,
        lead_contact_phone=client.lead_contact_phone,
        lead_contact_email=client.lead_contact_email,
        extra_contacts=client.extra_contacts or [],
        created_at=client.created_at,
    )


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, session: AsyncSession, delete_policy: Optional[str] = None):
        super().__init__(session)
        self.delete_policy = delete_policy or settings.CLIENT_DELETE_POLICY
        self.client_repo = ClientRepository(session)
        self.job_repo = JobRepository(session)
        self.assignment_repo = AssignmentRepository(session)

    async def list_clients(self, q: Optional[str] = None) -> List[ClientResponse]:
        """List clients alphabetically, optionally narrowed by a search string."""
        if q and q.strip():
            clients = await self.client_repo.search(q.strip())
        else:
            clients = await self.client_repo.list_all()
        return [client_to_response(client) for client in clients]

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        return client_to_response(client)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        client = await self.client_repo.create(**client_data.model_dump())
        await self.commit()
        logger.info("Client created", extra={"client_id": str(client.id)})
        return client_to_response(client)

    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client. Fields left out of the request are unchanged."""
        if not await self.client_repo.exists(client_id):
            return None

        update_dict = client_data.model_dump(exclude_unset=True)
        updated = await self.client_repo.update(client_id, **update_dict)
        await self.commit()
        return client_to_response(updated)

    async def delete_client(self, client_id: UUID) -> bool:
        """
        Delete a client.

        Under the restrict policy a client that still owns jobs is not
        deleted and ConflictError is raised. Under the cascade policy the
        client's jobs and their assignments are deleted first.
        """
        if not await self.client_repo.exists(client_id):
            return False

        job_ids = await self.job_repo.ids_for_client(client_id)
        if job_ids and self.delete_policy == DELETE_POLICY_RESTRICT:
            raise ConflictError(
                f"Client has {len(job_ids)} job(s); delete or reassign them first"
            )

        if job_ids:
            await self.assignment_repo.delete_for_jobs(job_ids)
            await self.job_repo.delete_by_ids(job_ids)

        deleted = await self.client_repo.delete(client_id)
        await self.commit()
        logger.info(
            "Client deleted",
            extra={"client_id": str(client_id), "jobs_removed": len(job_ids)},
        )
        return deleted
