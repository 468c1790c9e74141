"""FastAPI dependency providers for the domain services.

Each request gets its own ``SqlTaxonomyStore`` bound to the request's
database session. Tests replace ``get_taxonomy_store`` through
``app.dependency_overrides`` to run the API against an in-memory store.
"""

from typing import Annotated

from fastapi import Depends

from src.domain.store import TaxonomyStore
from src.domain.tax_service import TaxComputationService
from src.domain.taxonomy_service import TaxonomyQueryService
from src.infrastructure.database.dependencies import DatabaseSession
from src.infrastructure.database.taxonomy_store import SqlTaxonomyStore


async def get_taxonomy_store(db: DatabaseSession) -> TaxonomyStore:
    """Provide the taxonomy store for the current request.

    Args:
        db: The request scoped database session.

    Returns:
        TaxonomyStore: A ``SqlTaxonomyStore`` reading through ``db``.
    """
    return SqlTaxonomyStore(db)


# Type alias for cleaner dependency injection
TaxonomyStoreDep = Annotated[TaxonomyStore, Depends(get_taxonomy_store)]


async def get_query_service(store: TaxonomyStoreDep) -> TaxonomyQueryService:
    """Provide a ``TaxonomyQueryService`` over the request's store."""
    return TaxonomyQueryService(store)


async def get_tax_service(store: TaxonomyStoreDep) -> TaxComputationService:
    """Provide a ``TaxComputationService`` over the request's store."""
    return TaxComputationService(store)


QueryService = Annotated[TaxonomyQueryService, Depends(get_query_service)]
TaxService = Annotated[TaxComputationService, Depends(get_tax_service)]
