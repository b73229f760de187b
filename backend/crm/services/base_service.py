"""
Base service class.
Services contain business logic and coordinate repositories.
"""

from abc import ABC
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from crm.core.exceptions import StoreError
from crm.core.logging import get_logger

logger = get_logger(__name__)


class BaseService(ABC):
    """Base class for services that write through an async session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self) -> None:
        """Commit the unit of work; on failure roll back and raise StoreError."""
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Commit failed", exc_info=True, extra={"error": str(exc)})
            raise StoreError() from exc
