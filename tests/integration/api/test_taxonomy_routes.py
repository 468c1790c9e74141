"""Integration tests for the taxonomy listing endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.integration
@pytest.mark.asyncio
class TestTaxonomyRoutes:
    """Walk the taxonomy one level at a time."""

    async def test_sections_ordered_by_name(self, client: AsyncClient) -> None:
        response = await client.get("/api/tax-sections")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == [
            {"id": 2, "name": "Dividend"},
            {"id": 3, "name": "Property"},
            {"id": 1, "name": "Salary"},
        ]

    async def test_subsections(self, client: AsyncClient) -> None:
        response = await client.get("/api/tax-subsections/1")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 11, "name": "Bonus"},
            {"id": 10, "name": "Employment Income"},
        ]

    async def test_categories(self, client: AsyncClient) -> None:
        response = await client.get("/api/tax-categories/10")

        assert response.status_code == 200
        assert response.json() == [{"id": 100, "name": "Regular Salary"}]

    async def test_subcategories_include_rates(self, client: AsyncClient) -> None:
        response = await client.get("/api/tax-subcategories/100")

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": 8,
                "name": "Contract Staff",
                "filerRate": 10.5,
                "nonFilerRate": 21.0,
                "taxNature": "Adjustable",
            },
            {
                "id": 7,
                "name": "Employees",
                "filerRate": 15.0,
                "nonFilerRate": 30.0,
                "taxNature": "Final",
            },
        ]

    @pytest.mark.parametrize(
        "path",
        [
            "/api/tax-subsections/999",
            "/api/tax-categories/999",
            "/api/tax-subcategories/999",
        ],
    )
    async def test_unknown_parent_is_empty_list(
        self, client: AsyncClient, path: str
    ) -> None:
        response = await client.get(path)

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize(
        ("path", "message"),
        [
            ("/api/tax-subsections/0", "sectionId must be a positive integer identifier"),
            ("/api/tax-categories/-4", "subSectionId must be a positive integer identifier"),
            ("/api/tax-subcategories/abc", "Invalid request parameters"),
        ],
    )
    async def test_invalid_id_is_400(
        self, client: AsyncClient, path: str, message: str
    ) -> None:
        response = await client.get(path)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == message
        assert body["error_code"] == "INVALID_ARGUMENT"
