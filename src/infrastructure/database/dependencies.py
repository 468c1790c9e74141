"""FastAPI dependency providing a request-scoped database session."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.session import get_async_session


async def get_db() -> AsyncGenerator[AsyncSession]:
    """Provide a database session for the lifetime of one request.

    Yields:
        AsyncGenerator[AsyncSession]: Session closed when the response is sent.

    Example:
        @router.get("/api/tax-sections")
        async def list_sections(db: DatabaseSession) -> ...:
            return await SqlTaxonomyStore(db).list_sections()
    """
    async with get_async_session() as session:
        logger.debug("Providing database session for request")
        yield session


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
