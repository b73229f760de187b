"""
Association tables for many-to-many relationships.
"""

from sqlalchemy import Table, Column, ForeignKey, Uuid

from crm.db.base import Base

# Job ↔ Person (many-to-many). The composite key keeps each pair unique.
job_people = Table(
    "job_people",
    Base.metadata,
    Column("job_id", Uuid, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True),
    Column("person_id", Uuid, ForeignKey("people.id", ondelete="CASCADE"), primary_key=True, index=True),
)
