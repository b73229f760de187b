"""
People API endpoints.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from crm.db.session import get_db
from crm.controllers.person_controller import PersonController
from crm.schemas.person import PersonCreate, PersonUpdate, PersonResponse
from crm.schemas.job import JobResponse

router = APIRouter()


@router.get("", response_model=List[PersonResponse])
async def list_people(
    q: Optional[str] = Query(None, description="Search name or email"),
    db: AsyncSession = Depends(get_db),
) -> List[PersonResponse]:
    """List all people ordered by name."""
    controller = PersonController(db)
    return await controller.list_people(q)


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> PersonResponse:
    """Get person by ID."""
    controller = PersonController(db)
    person = await controller.get_person(person_id)
    if not person:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Person not found",
        )
    return person


@router.get("/{person_id}/jobs", response_model=List[JobResponse])
async def list_person_jobs(
    person_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> List[JobResponse]:
    """List the jobs a person is assigned to."""
    controller = PersonController(db)
    jobs = await controller.list_person_jobs(person_id)
    if jobs is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Person not found",
        )
    return jobs


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    person_data: PersonCreate,
    db: AsyncSession = Depends(get_db),
) -> PersonResponse:
    """Create a new person."""
    controller = PersonController(db)
    return await controller.create_person(person_data)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: UUID,
    person_data: PersonUpdate,
    db: AsyncSession = Depends(get_db),
) -> PersonResponse:
    """Update a person. Omitted fields are left unchanged."""
    controller = PersonController(db)
    person = await controller.update_person(person_id, person_data)
    if not person:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Person not found",
        )
    return person


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a person and their job assignments."""
    controller = PersonController(db)
    deleted = await controller.delete_person(person_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Person not found",
        )
