"""Unit tests for the taxonomy query service."""

import pytest
from pytest_mock import MockerFixture

from src.core.exceptions import InvalidArgumentError, StoreUnavailableError
from src.domain.store import InMemoryTaxonomyStore
from src.domain.taxonomy_service import TaxonomyQueryService


@pytest.fixture
def service(taxonomy_store: InMemoryTaxonomyStore) -> TaxonomyQueryService:
    return TaxonomyQueryService(taxonomy_store)


@pytest.mark.unit
@pytest.mark.asyncio
class TestTaxonomyQueryService:
    """Test the four listing operations."""

    async def test_list_sections(self, service: TaxonomyQueryService) -> None:
        names = [node.name for node in await service.list_sections()]
        assert names == ["Dividend", "Property", "Salary"]

    async def test_list_subsections(self, service: TaxonomyQueryService) -> None:
        nodes = await service.list_subsections(1)
        assert [node.id for node in nodes] == [11, 10]

    async def test_list_categories(self, service: TaxonomyQueryService) -> None:
        nodes = await service.list_categories(10)
        assert [node.name for node in nodes] == ["Regular Salary"]

    async def test_list_subcategories(self, service: TaxonomyQueryService) -> None:
        subcategories = await service.list_subcategories(100)
        assert [s.id for s in subcategories] == [8, 7]

    async def test_unknown_parent_returns_empty_list(
        self, service: TaxonomyQueryService
    ) -> None:
        assert await service.list_subsections(404) == []
        assert await service.list_categories(404) == []
        assert await service.list_subcategories(404) == []

    async def test_numeric_string_ids_are_accepted(
        self, service: TaxonomyQueryService
    ) -> None:
        nodes = await service.list_subsections("1")  # type: ignore[arg-type]
        assert len(nodes) == 2

    @pytest.mark.parametrize(
        ("method", "field"),
        [
            ("list_subsections", "sectionId"),
            ("list_categories", "subSectionId"),
            ("list_subcategories", "categoryId"),
        ],
    )
    async def test_invalid_id_is_rejected_before_store_access(
        self, mocker: MockerFixture, method: str, field: str
    ) -> None:
        store = mocker.AsyncMock()
        service = TaxonomyQueryService(store)

        with pytest.raises(InvalidArgumentError) as exc_info:
            await getattr(service, method)(0)

        assert exc_info.value.context["field"] == field
        getattr(store, method).assert_not_called()

    async def test_store_failure_propagates(self, mocker: MockerFixture) -> None:
        store = mocker.AsyncMock()
        store.list_sections.side_effect = StoreUnavailableError(
            "Failed to fetch tax sections"
        )

        with pytest.raises(StoreUnavailableError, match="Failed to fetch tax sections"):
            await TaxonomyQueryService(store).list_sections()
