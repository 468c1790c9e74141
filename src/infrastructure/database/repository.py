"""Generic read repository for SQLAlchemy models.

The taxonomy is read-only from this service's point of view, so the
repository exposes lookups only. Driver, pool and network failures are
translated into ``StoreUnavailableError`` at this boundary; callers above
never see SQLAlchemy exceptions.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from src.core.exceptions import StoreUnavailableError
from src.infrastructure.constants import NAME_COLLATION
from src.infrastructure.database.base import BaseModel

STORE_FAILURES = (SQLAlchemyError, OSError, TimeoutError)


@asynccontextmanager
async def store_errors(operation: str, model_name: str) -> AsyncGenerator[None]:
    """Translate database failures raised in the block.

    Args:
        operation: Short description used in the log record.
        model_name: Model the operation reads.

    Raises:
        StoreUnavailableError: If the block raises a driver, pool or
            network error.
    """
    try:
        yield
    except STORE_FAILURES as e:
        logger.error(
            "Failed to {} {}: {}: {}",
            operation,
            model_name,
            type(e).__name__,
            str(e),
        )
        raise StoreUnavailableError(
            f"Failed to {operation} {model_name.replace('_', ' ')}",
            context={"operation": operation, "model": model_name},
            cause=e,
        ) from e


class BaseRepository[T: BaseModel]:
    """Read-only repository for one model class.

    Args:
        session: The async SQLAlchemy session to use for operations.
        model_class: The SQLAlchemy model class this repository manages.

    Example:
        class SectionRepository(BaseRepository[TaxSection]):
            def __init__(self, session: AsyncSession) -> None:
                super().__init__(session, TaxSection)
    """

    def __init__(self, session: AsyncSession, model_class: type[T]) -> None:
        self.session = session
        self.model_class = model_class

    @property
    def model_name(self) -> str:
        return self.model_class.__tablename__

    async def get_by_id(self, entity_id: int) -> T | None:
        """Retrieve a model instance by its ID.

        Args:
            entity_id: The primary key ID of the model to retrieve.

        Returns:
            T | None: The model instance if found, None otherwise.
        """
        logger.debug("Fetching {} by ID: {}", self.model_name, entity_id)

        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        async with store_errors("fetch", self.model_name):
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def list_ordered_by_name(self, **filters: object) -> list[T]:
        """Return instances matching ``filters`` ordered by ``name``.

        Names are compared with the ``C`` collation so the order is by
        codepoint, independent of the database locale. The model must
        have a ``name`` column.

        Args:
            **filters: Column-value equality conditions.

        Returns:
            list[T]: Matching instances, possibly empty.
        """
        name_column: InstrumentedAttribute[str] = getattr(self.model_class, "name")
        stmt = select(self.model_class)
        for column, value in filters.items():
            stmt = stmt.where(getattr(self.model_class, column) == value)
        stmt = stmt.order_by(name_column.collate(NAME_COLLATION), self.model_class.id)

        async with store_errors("fetch", self.model_name):
            result = await self.session.execute(stmt)
            instances = list(result.scalars().all())

        logger.debug(
            "Retrieved {} {} rows with filters: {}",
            len(instances),
            self.model_name,
            filters,
        )
        return instances

