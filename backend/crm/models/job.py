"""
Job model.
"""

from sqlalchemy import Column, String, Text, BigInteger, DateTime, ForeignKey, CheckConstraint, Uuid, Enum as SQLEnum
from sqlalchemy.sql import func
import uuid
import enum

from crm.db.base import Base, utcnow


class JobStatus(str, enum.Enum):
    """Job status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Job(Base):
    """Job model. Owned by a client, staffed through the job_people table."""

    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("fee IS NULL OR fee >= 0", name="ck_jobs_fee_non_negative"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        SQLEnum(JobStatus, name="job_status", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=JobStatus.PENDING,
        index=True,
    )
    job_date = Column(DateTime(timezone=True), nullable=True)
    address = Column(Text, nullable=True)
    fee = Column(BigInteger, nullable=True)  # minor currency units
    client_id = Column(Uuid, ForeignKey("clients.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
