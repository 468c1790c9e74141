"""Read access to the taxonomy.

``TaxonomyStore`` is the only dependency of the domain services. The
production implementation lives in
``src.infrastructure.database.taxonomy_store``; ``InMemoryTaxonomyStore``
backs tests and local demos.

Every listing returns the immediate children of one parent, ordered by
name in codepoint order. An unknown parent yields an empty list.
Implementations raise ``StoreUnavailableError`` when the backing store
cannot be read.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from src.domain.models import Subcategory, TaxonomyNode


class TaxonomyStore(Protocol):
    """Async read-only access to the four taxonomy levels."""

    async def list_sections(self) -> list[TaxonomyNode]:
        """Return all sections."""
        ...

    async def list_subsections(self, section_id: int) -> list[TaxonomyNode]:
        """Return the subsections of a section."""
        ...

    async def list_categories(self, subsection_id: int) -> list[TaxonomyNode]:
        """Return the categories of a subsection."""
        ...

    async def list_subcategories(self, category_id: int) -> list[Subcategory]:
        """Return the subcategories of a category, with their rates."""
        ...

    async def get_subcategory(self, subcategory_id: int) -> Subcategory | None:
        """Return one subcategory, or None if it does not exist."""
        ...


def _by_name[T: (TaxonomyNode, Subcategory)](items: Iterable[T]) -> list[T]:
    return sorted(items, key=lambda item: (item.name, item.id))


@dataclass
class InMemoryTaxonomyStore:
    """Dictionary backed ``TaxonomyStore``.

    Children are registered together with their parent id; parents do not
    have to exist, mirroring how the SQL store filters on the foreign key
    column alone.
    """

    sections: dict[int, TaxonomyNode] = field(default_factory=dict)
    subsections: dict[int, tuple[int, TaxonomyNode]] = field(default_factory=dict)
    categories: dict[int, tuple[int, TaxonomyNode]] = field(default_factory=dict)
    subcategories: dict[int, tuple[int, Subcategory]] = field(default_factory=dict)

    def add_section(self, node: TaxonomyNode) -> None:
        """Register a top level section."""
        self.sections[node.id] = node

    def add_subsection(self, section_id: int, node: TaxonomyNode) -> None:
        """Register a subsection under ``section_id``."""
        self.subsections[node.id] = (section_id, node)

    def add_category(self, subsection_id: int, node: TaxonomyNode) -> None:
        """Register a category under ``subsection_id``."""
        self.categories[node.id] = (subsection_id, node)

    def add_subcategory(self, category_id: int, subcategory: Subcategory) -> None:
        """Register a subcategory, with its rates, under ``category_id``."""
        self.subcategories[subcategory.id] = (category_id, subcategory)

    async def list_sections(self) -> list[TaxonomyNode]:
        """Return every registered section ordered by name."""
        return _by_name(self.sections.values())

    async def list_subsections(self, section_id: int) -> list[TaxonomyNode]:
        """Return the subsections registered under ``section_id``."""
        return _by_name(n for p, n in self.subsections.values() if p == section_id)

    async def list_categories(self, subsection_id: int) -> list[TaxonomyNode]:
        """Return the categories registered under ``subsection_id``."""
        return _by_name(n for p, n in self.categories.values() if p == subsection_id)

    async def list_subcategories(self, category_id: int) -> list[Subcategory]:
        """Return the subcategories registered under ``category_id``."""
        return _by_name(s for p, s in self.subcategories.values() if p == category_id)

    async def get_subcategory(self, subcategory_id: int) -> Subcategory | None:
        """Look up a subcategory by id regardless of its parent."""
        entry = self.subcategories.get(subcategory_id)
        return entry[1] if entry else None
