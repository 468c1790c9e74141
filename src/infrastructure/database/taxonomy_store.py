"""PostgreSQL implementation of the domain ``TaxonomyStore`` protocol."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models import Subcategory, TaxonomyNode
from src.infrastructure.database.models import (
    TaxCategory,
    TaxSection,
    TaxSubcategory,
    TaxSubsection,
)
from src.infrastructure.database.repository import BaseRepository


def _to_node(row: TaxSection | TaxSubsection | TaxCategory) -> TaxonomyNode:
    return TaxonomyNode(id=row.id, name=row.name)


def _to_subcategory(row: TaxSubcategory) -> Subcategory:
    return Subcategory(
        id=row.id,
        name=row.name,
        filer_rate=row.filer_rate,
        non_filer_rate=row.non_filer_rate,
        tax_nature=row.tax_nature,
    )


class SqlTaxonomyStore:
    """Reads the taxonomy tables through one request-scoped session.

    Args:
        session: Session used for every query issued by this store.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.sections = BaseRepository(session, TaxSection)
        self.subsections = BaseRepository(session, TaxSubsection)
        self.categories = BaseRepository(session, TaxCategory)
        self.subcategories = BaseRepository(session, TaxSubcategory)

    async def list_sections(self) -> list[TaxonomyNode]:
        return [_to_node(row) for row in await self.sections.list_ordered_by_name()]

    async def list_subsections(self, section_id: int) -> list[TaxonomyNode]:
        rows = await self.subsections.list_ordered_by_name(section_id=section_id)
        return [_to_node(row) for row in rows]

    async def list_categories(self, subsection_id: int) -> list[TaxonomyNode]:
        rows = await self.categories.list_ordered_by_name(subsection_id=subsection_id)
        return [_to_node(row) for row in rows]

    async def list_subcategories(self, category_id: int) -> list[Subcategory]:
        rows = await self.subcategories.list_ordered_by_name(category_id=category_id)
        return [_to_subcategory(row) for row in rows]

    async def get_subcategory(self, subcategory_id: int) -> Subcategory | None:
        row = await self.subcategories.get_by_id(subcategory_id)
        return _to_subcategory(row) if row is not None else None
