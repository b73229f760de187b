"""
Schemas for relationship management (assigning/unassigning people to jobs).
"""

from uuid import UUID

from crm.schemas.common import CamelModel


class AddPersonToJobRequest(CamelModel):
    """Request body for assigning one person to a job."""
    person_id: UUID


class MessageResponse(CamelModel):
    """Plain acknowledgement."""
    message: str
