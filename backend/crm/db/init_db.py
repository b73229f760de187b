"""
Database bootstrapping: table creation at startup.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

import crm.models  # noqa: F401  registers every table with Base.metadata
from crm.db.base import Base
from crm.core.logging import get_logger

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables that do not exist yet.
    Existing tables are left untouched.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(
        "Database tables initialized",
        extra={"tables": sorted(Base.metadata.tables)},
    )
