"""
Person model.
"""

from sqlalchemy import Column, String, Text, DateTime, Uuid
from sqlalchemy.sql import func
import uuid

from crm.db.base import Base, utcnow


class Person(Base):
    """A person who can be assigned to jobs."""

    __tablename__ = "people"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    address = Column(Text, nullable=True)
    telephone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
