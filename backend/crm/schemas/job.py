"""
Job Pydantic schemas for request/response validation.
"""

from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from crm.models.job import JobStatus
from crm.schemas.common import CamelModel, blank_to_none, reject_null
from crm.schemas.client import ClientResponse
from crm.schemas.person import PersonResponse

# Largest value a BIGINT fee column holds
MAX_FEE = 2**63 - 1


class JobBase(CamelModel):
    """Base job schema with common fields."""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    status: JobStatus = JobStatus.PENDING
    job_date: Optional[datetime] = None
    address: Optional[str] = None
    fee: Optional[int] = Field(None, ge=0, le=MAX_FEE, description="Fee in minor currency units")
    client_id: UUID

    @field_validator("description", "job_date", "address", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)


class JobCreate(JobBase):
    """Schema for creating a job, optionally with its initial staff."""
    assigned_people: List[UUID] = Field(default_factory=list)


class JobUpdate(CamelModel):
    """
    Schema for updating a job (all fields optional).

    When ``assigned_people`` is present it replaces the job's whole
    assignment set; an empty list unassigns everyone.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[JobStatus] = None
    job_date: Optional[datetime] = None
    address: Optional[str] = None
    fee: Optional[int] = Field(None, ge=0, le=MAX_FEE)
    client_id: Optional[UUID] = None
    assigned_people: Optional[List[UUID]] = None

    @field_validator("description", "job_date", "address", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)

    @field_validator("title", "status", "client_id", "assigned_people")
    @classmethod
    def _required_not_null(cls, value, info):
        return reject_null(value, info.field_name)


class JobResponse(CamelModel):
    """Schema for job response, with the ids of the assigned people."""
    id: UUID
    title: str
    description: Optional[str] = None
    status: JobStatus
    job_date: Optional[datetime] = None
    address: Optional[str] = None
    fee: Optional[int] = None
    client_id: UUID
    created_at: datetime
    assigned_people: List[UUID] = Field(default_factory=list)


class JobDetailsResponse(JobResponse):
    """Job joined with its client and the full records of its assigned people."""
    client: Optional[ClientResponse] = None
    assigned_people_details: List[PersonResponse] = Field(default_factory=list)
