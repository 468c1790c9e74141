"""Read-only navigation of the tax taxonomy.

Each level is listed by its parent's identifier. An unknown parent yields
an empty list, not a 404, so the client can clear dependent selectors.
"""

from fastapi import APIRouter

from src.api.dependencies import QueryService
from src.api.schemas.errors import ErrorResponse
from src.api.schemas.taxonomy import SubcategoryResponse, TaxonomyNodeResponse
from src.api.utils.responses import ORJSONResponse

router = APIRouter(
    tags=["taxonomy"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid identifier"},
        503: {"model": ErrorResponse, "description": "Taxonomy store unavailable"},
    },
)


@router.get("/tax-sections", response_model=list[TaxonomyNodeResponse])
async def list_tax_sections(service: QueryService) -> list[TaxonomyNodeResponse]:
    """List all tax sections ordered by name."""
    sections = await service.list_sections()
    return [TaxonomyNodeResponse.from_domain(node) for node in sections]


@router.get(
    "/tax-subsections/{section_id}", response_model=list[TaxonomyNodeResponse]
)
async def list_tax_subsections(
    section_id: int, service: QueryService
) -> list[TaxonomyNodeResponse]:
    """List the subsections of a section ordered by name."""
    subsections = await service.list_subsections(section_id)
    return [TaxonomyNodeResponse.from_domain(node) for node in subsections]


@router.get(
    "/tax-categories/{subsection_id}", response_model=list[TaxonomyNodeResponse]
)
async def list_tax_categories(
    subsection_id: int, service: QueryService
) -> list[TaxonomyNodeResponse]:
    """List the categories of a subsection ordered by name."""
    categories = await service.list_categories(subsection_id)
    return [TaxonomyNodeResponse.from_domain(node) for node in categories]


@router.get(
    "/tax-subcategories/{category_id}", response_model=list[SubcategoryResponse]
)
async def list_tax_subcategories(
    category_id: int, service: QueryService
) -> ORJSONResponse:
    """List the subcategories of a category, with rates, ordered by name."""
    subcategories = await service.list_subcategories(category_id)
    return ORJSONResponse(
        [SubcategoryResponse.from_domain(sub) for sub in subcategories]
    )
