"""Domain layer: taxonomy value types, the store protocol and services.

- **models**: Filer status, taxonomy nodes and computation results
- **store**: ``TaxonomyStore`` protocol and an in-memory implementation
- **taxonomy_service**: Parent-to-children listing for each level
- **tax_service**: Rate resolution and the tax arithmetic

Nothing in this package imports FastAPI or SQLAlchemy; the store is
handed to the services by the caller.
"""

from src.domain.models import (
    FilerStatus,
    Subcategory,
    TaxComputation,
    TaxonomyNode,
)
from src.domain.store import InMemoryTaxonomyStore, TaxonomyStore
from src.domain.tax_service import TaxComputationService, calculate_tax
from src.domain.taxonomy_service import TaxonomyQueryService

__all__ = [
    "FilerStatus",
    "InMemoryTaxonomyStore",
    "Subcategory",
    "TaxComputation",
    "TaxComputationService",
    "TaxonomyNode",
    "TaxonomyQueryService",
    "TaxonomyStore",
    "calculate_tax",
]
