"""
Job API endpoints, including person assignment.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from crm.db.session import get_db
from crm.controllers.job_controller import JobController
from crm.models.job import JobStatus
from crm.schemas.job import JobCreate, JobUpdate, JobResponse, JobDetailsResponse
from crm.schemas.relationships import AddPersonToJobRequest, MessageResponse
from crm.services.enrichment import ALL_STATUSES

router = APIRouter()

STATUS_FILTER_PATTERN = "^(" + "|".join([ALL_STATUSES] + [s.value for s in JobStatus]) + ")$"


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    job_status: Optional[JobStatus] = Query(None, alias="status"),
    client_id: Optional[UUID] = Query(None, alias="clientId"),
    db: AsyncSession = Depends(get_db),
) -> List[JobResponse]:
    """List jobs in creation order, each with its assigned person ids."""
    controller = JobController(db)
    return await controller.list_jobs(status=job_status, client_id=client_id)


@router.get("/details", response_model=List[JobDetailsResponse])
async def list_job_details(
    q: Optional[str] = Query(None, description="Search title, description or client name"),
    job_status: Optional[str] = Query(None, alias="status", pattern=STATUS_FILTER_PATTERN),
    db: AsyncSession = Depends(get_db),
) -> List[JobDetailsResponse]:
    """List jobs joined with their client and assigned people."""
    controller = JobController(db)
    return await controller.list_job_details(q=q, status=job_status)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> JobResponse:
    """Get job by ID with its assigned person ids."""
    controller = JobController(db)
    job = await controller.get_job(job_id)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found",
        )
    return job


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreate,
    db: AsyncSession = Depends(get_db),
) -> JobResponse:
    """Create a job, optionally assigning people to it."""
    controller = JobController(db)
    return await controller.create_job(job_data)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: UUID,
    job_data: JobUpdate,
    db: AsyncSession = Depends(get_db),
) -> JobResponse:
    """Update a job. A supplied assignedPeople list replaces the current one."""
    controller = JobController(db)
    job = await controller.update_job(job_id, job_data)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found",
        )
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(
    job_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a job and its assignments."""
    controller = JobController(db)
    deleted = await controller.delete_job(job_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found",
        )


@router.post("/{job_id}/people", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_person_to_job(
    job_id: UUID,
    link_data: AddPersonToJobRequest,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Assign one person to a job."""
    controller = JobController(db)
    added = await controller.add_person_to_job(job_id, link_data.person_id)
    if not added:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found or person already assigned",
        )
    return MessageResponse(message="Person added to job successfully")


@router.delete("/{job_id}/people/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_person_from_job(
    job_id: UUID,
    person_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Unassign one person from a job."""
    controller = JobController(db)
    removed = await controller.remove_person_from_job(job_id, person_id)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job assignment not found",
        )
