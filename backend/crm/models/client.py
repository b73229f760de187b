"""
Client model.
"""

from sqlalchemy import Column, String, Text, DateTime, JSON, Uuid
from sqlalchemy.sql import func
import uuid

from crm.db.base import Base, utcnow


class Client(Base):
    """Client model (one-to-many with Job)."""

    __tablename__ = "clients"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    address = Column(Text, nullable=True)
    lead_contact = Column(String(255), nullable=True)
    lead_contact_phone = Column(String(50), nullable=True)
    lead_contact_email = Column(String(255), nullable=True)
    # List of {"name", "phone", "email"} objects
    extra_contacts = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
