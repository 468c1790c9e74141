"""Async PostgreSQL access for the taxonomy.

Core components:
- **base**: Declarative base and common model fields
- **models**: The four taxonomy tables
- **session**: Async engine and session management
- **repository**: Generic read repository with error translation
- **taxonomy_store**: ``SqlTaxonomyStore`` used by the domain services
- **dependencies**: FastAPI dependency injection helpers
"""

from src.infrastructure.database.base import Base, BaseModel
from src.infrastructure.database.dependencies import DatabaseSession, get_db
from src.infrastructure.database.models import (
    TaxCategory,
    TaxSection,
    TaxSubcategory,
    TaxSubsection,
)
from src.infrastructure.database.repository import BaseRepository
from src.infrastructure.database.session import (
    check_database_connection,
    close_database,
    get_async_session,
    get_engine,
)
from src.infrastructure.database.taxonomy_store import SqlTaxonomyStore

__all__ = [
    "Base",
    "BaseModel",
    "BaseRepository",
    "DatabaseSession",
    "SqlTaxonomyStore",
    "TaxCategory",
    "TaxSection",
    "TaxSubcategory",
    "TaxSubsection",
    "check_database_connection",
    "close_database",
    "get_async_session",
    "get_db",
    "get_engine",
]
