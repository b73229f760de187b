"""
Person Pydantic schemas for request/response validation.
"""

from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from crm.schemas.common import CamelModel, blank_to_none, reject_null


class PersonBase(CamelModel):
    """Base person schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    telephone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None

    @field_validator("address", "telephone", "email", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)


class PersonCreate(PersonBase):
    """Schema for creating a person."""
    pass


class PersonUpdate(CamelModel):
    """Schema for updating a person (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    telephone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None

    @field_validator("address", "telephone", "email", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value):
        return reject_null(value, "name")


class PersonResponse(CamelModel):
    """Schema for person response."""
    id: UUID
    name: str
    address: Optional[str] = None
    telephone: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
