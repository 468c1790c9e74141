"""Unit tests for the in-memory taxonomy store."""

from decimal import Decimal

import pytest

from src.domain.models import Subcategory, TaxonomyNode
from src.domain.store import InMemoryTaxonomyStore, TaxonomyStore


@pytest.mark.unit
@pytest.mark.asyncio
class TestInMemoryTaxonomyStore:
    """Test listing and lookup semantics."""

    async def test_satisfies_protocol(
        self, taxonomy_store: InMemoryTaxonomyStore
    ) -> None:
        store: TaxonomyStore = taxonomy_store
        assert await store.list_sections()

    async def test_sections_sorted_by_name(
        self, taxonomy_store: InMemoryTaxonomyStore
    ) -> None:
        names = [node.name for node in await taxonomy_store.list_sections()]
        assert names == ["Dividend", "Property", "Salary"]

    async def test_children_filtered_by_parent(
        self, taxonomy_store: InMemoryTaxonomyStore
    ) -> None:
        subsections = await taxonomy_store.list_subsections(1)

        assert subsections == [
            TaxonomyNode(id=11, name="Bonus"),
            TaxonomyNode(id=10, name="Employment Income"),
        ]

    async def test_unknown_parent_is_empty(
        self, taxonomy_store: InMemoryTaxonomyStore
    ) -> None:
        assert await taxonomy_store.list_subsections(999) == []
        assert await taxonomy_store.list_categories(999) == []
        assert await taxonomy_store.list_subcategories(999) == []

    async def test_codepoint_order(self) -> None:
        store = InMemoryTaxonomyStore()
        for node_id, name in enumerate(["beta", "Alpha", "alpha", "Beta"], start=1):
            store.add_section(TaxonomyNode(id=node_id, name=name))

        names = [node.name for node in await store.list_sections()]

        assert names == ["Alpha", "Beta", "alpha", "beta"]

    async def test_duplicate_names_keep_id_order(self) -> None:
        store = InMemoryTaxonomyStore()
        store.add_section(TaxonomyNode(id=5, name="Salary"))
        store.add_section(TaxonomyNode(id=2, name="Salary"))

        ids = [node.id for node in await store.list_sections()]

        assert ids == [2, 5]

    async def test_get_subcategory(
        self, taxonomy_store: InMemoryTaxonomyStore, employees: Subcategory
    ) -> None:
        assert await taxonomy_store.get_subcategory(7) == employees
        assert await taxonomy_store.get_subcategory(999) is None

    async def test_subcategories_carry_rates(
        self, taxonomy_store: InMemoryTaxonomyStore
    ) -> None:
        subcategories = await taxonomy_store.list_subcategories(100)

        assert [s.name for s in subcategories] == ["Contract Staff", "Employees"]
        assert subcategories[0].filer_rate == Decimal("10.5")
