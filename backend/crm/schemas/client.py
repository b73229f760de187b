"""
Client Pydantic schemas for request/response validation.
"""

from pydantic import EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from crm.schemas.common import CamelModel, blank_to_none, reject_null


class ExtraContact(CamelModel):
    """An additional contact at a client besides the lead contact."""
    name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None

    @field_validator("phone", "email", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)


class ClientBase(CamelModel):
    """Base client schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    lead_contact: Optional[str] = Field(None, max_length=255)
    lead_contact_phone: Optional[str] = Field(None, max_length=50)
    lead_contact_email: Optional[EmailStr] = None
    extra_contacts: List[ExtraContact] = Field(default_factory=list)

    @field_validator("address", "lead_contact", "lead_contact_phone", "lead_contact_email", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    pass


class ClientUpdate(CamelModel):
    """Schema for updating a client (all fields optional)."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    lead_contact: Optional[str] = Field(None, max_length=255)
    lead_contact_phone: Optional[str] = Field(None, max_length=50)
    lead_contact_email: Optional[EmailStr] = None
    extra_contacts: Optional[List[ExtraContact]] = None

    @field_validator("address", "lead_contact", "lead_contact_phone", "lead_contact_email", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return blank_to_none(value)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value):
        return reject_null(value, "name")

    @field_validator("extra_contacts")
    @classmethod
    def _contacts_not_null(cls, value):
        # An explicit null clears the list
        return [] if value is None else value


class ClientResponse(CamelModel):
    """Schema for client response."""
    id: UUID
    name: str
    address: Optional[str] = None
    lead_contact: Optional[str] = None
    lead_contact_phone: Optional[str] = None
    lead_contact_email: Optional[str] = None
    extra_contacts: List[ExtraContact] = Field(default_factory=list)
    created_at: datetime

    @field_validator("extra_contacts", mode="before")
    @classmethod
    def _stored_contacts(cls, value):
        return value or []
