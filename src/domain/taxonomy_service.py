"""Taxonomy query service: one listing operation per level.

Each operation takes the identifier of the immediate parent and returns
its immediate children ordered by name. There is no transitive fetch and
no level skipping; the client walks the tree one selection at a time.
"""

from loguru import logger

from src.domain.models import Subcategory, TaxonomyNode, parse_entity_id
from src.domain.store import TaxonomyStore


class TaxonomyQueryService:
    """Read-only traversal of the section → subcategory hierarchy.

    Args:
        store: Backing store for the taxonomy.
    """

    def __init__(self, store: TaxonomyStore) -> None:
        self.store = store

    async def list_sections(self) -> list[TaxonomyNode]:
        """Return every section ordered by name.

        Raises:
            StoreUnavailableError: If the store cannot be read.
        """
        sections = await self.store.list_sections()
        logger.info("Retrieved {} tax sections", len(sections))
        return sections

    async def list_subsections(self, section_id: int) -> list[TaxonomyNode]:
        """Return the subsections of ``section_id`` ordered by name.

        An identifier that matches no section yields an empty list.

        Raises:
            InvalidArgumentError: If ``section_id`` is not a positive integer.
            StoreUnavailableError: If the store cannot be read.
        """
        section_id = parse_entity_id(section_id, "sectionId")
        subsections = await self.store.list_subsections(section_id)
        logger.info(
            "Retrieved {} subsections for section {}",
            len(subsections),
            section_id,
        )
        return subsections

    async def list_categories(self, subsection_id: int) -> list[TaxonomyNode]:
        """Return the categories of ``subsection_id`` ordered by name."""
        subsection_id = parse_entity_id(subsection_id, "subSectionId")
        categories = await self.store.list_categories(subsection_id)
        logger.info(
            "Retrieved {} categories for subsection {}",
            len(categories),
            subsection_id,
        )
        return categories

    async def list_subcategories(self, category_id: int) -> list[Subcategory]:
        """Return the subcategories of ``category_id`` with their rates."""
        category_id = parse_entity_id(category_id, "categoryId")
        subcategories = await self.store.list_subcategories(category_id)
        logger.info(
            "Retrieved {} subcategories for category {}",
            len(subcategories),
            category_id,
        )
        return subcategories
