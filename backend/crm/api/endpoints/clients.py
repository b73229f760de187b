"""
Client API endpoints.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from crm.db.session import get_db
from crm.controllers.client_controller import ClientController
from crm.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from crm.schemas.job import JobResponse

router = APIRouter()


@router.get("", response_model=List[ClientResponse])
async def list_clients(
    q: Optional[str] = Query(None, description="Search name, address or lead contact"),
    db: AsyncSession = Depends(get_db),
) -> List[ClientResponse]:
    """List all clients ordered by name."""
    controller = ClientController(db)
    return await controller.list_clients(q)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Get client by ID."""
    controller = ClientController(db)
    client = await controller.get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    return client


@router.get("/{client_id}/jobs", response_model=List[JobResponse])
async def list_client_jobs(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> List[JobResponse]:
    """List the jobs owned by a client."""
    controller = ClientController(db)
    jobs = await controller.list_client_jobs(client_id)
    if jobs is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    return jobs


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_data: ClientCreate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a new client."""
    controller = ClientController(db)
    return await controller.create_client(client_data)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: UUID,
    client_data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Update a client. Omitted fields are left unchanged."""
    controller = ClientController(db)
    client = await controller.update_client(client_id, client_data)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    return client


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a client. Clients that still own jobs are handled per the delete policy."""
    controller = ClientController(db)
    deleted = await controller.delete_client(client_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
