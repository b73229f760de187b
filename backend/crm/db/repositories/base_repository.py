"""
Base repository class with common CRUD operations.
Repositories handle database access using async SQLAlchemy sessions.
"""

from typing import Generic, TypeVar, Type, Optional, List, Sequence, Any
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func

from crm.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    def _ordering(self) -> Sequence[Any]:
        """Columns used to order list results. Subclasses override."""
        return (self.model.id,)

    async def create(self, **kwargs) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Model attributes

        Returns:
            Created model instance, with generated fields loaded
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get(self, id: UUID) -> Optional[ModelType]:
        """
        Get a record by ID.

        Args:
            id: Record ID

        Returns:
            Model instance or None
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def exists(self, id: UUID) -> bool:
        """Check whether a record with this ID exists."""
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == id)
        )
        return result.scalar_one_or_none() is not None

    async def existing_ids(self, ids: Sequence[UUID]) -> set:
        """Return the subset of ids that exist."""
        if not ids:
            return set()
        result = await self.session.execute(
            select(self.model.id).where(self.model.id.in_(ids))
        )
        return set(result.scalars().all())

    async def list_all(self) -> List[ModelType]:
        """
        List every record in display order. Unbounded.

        Returns:
            List of model instances
        """
        result = await self.session.execute(
            select(self.model).order_by(*self._ordering())
        )
        return list(result.scalars().all())

    async def count_all(self) -> int:
        """Count all records."""
        result = await self.session.execute(
            select(func.count(self.model.id))
        )
        return result.scalar() or 0

    async def update(self, id: UUID, **kwargs) -> Optional[ModelType]:
        """
        Update a record. Only the supplied attributes change.

        Args:
            id: Record ID
            **kwargs: Attributes to update

        Returns:
            Updated model instance or None
        """
        if kwargs:
            await self.session.execute(
                update(self.model)
                .where(self.model.id == id)
                .values(**kwargs)
                .execution_options(synchronize_session="fetch")
            )
            await self.session.flush()
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def delete(self, id: UUID) -> bool:
        """
        Delete a record.

        Args:
            id: Record ID

        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(
            delete(self.model).where(self.model.id == id)
        )
        await self.session.flush()
        return result.rowcount > 0
