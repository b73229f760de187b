"""
SQLAlchemy declarative base for models.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def utcnow() -> datetime:
    """Timestamp default for created_at columns."""
    return datetime.now(timezone.utc)
