"""Withholding tax calculation endpoint."""

from fastapi import APIRouter

from src.api.dependencies import TaxService
from src.api.schemas.errors import ErrorResponse
from src.api.schemas.taxonomy import TaxCalculationRequest, TaxCalculationResponse
from src.api.utils.responses import ORJSONResponse

router = APIRouter(tags=["calculation"])


@router.post(
    "/calculate-tax",
    response_model=TaxCalculationResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid input"},
        404: {"model": ErrorResponse, "description": "Unknown subcategory"},
        503: {"model": ErrorResponse, "description": "Taxonomy store unavailable"},
    },
)
async def calculate_tax(
    request: TaxCalculationRequest, service: TaxService
) -> ORJSONResponse:
    """Compute tax and net amount for a gross payment.

    The rate is the subcategory's filer or non-filer rate, chosen by
    ``filerStatus``. ``taxAmount + netAmount`` always equals
    ``grossAmount`` exactly; amounts are returned with full precision.
    """
    result = await service.compute_tax(
        request.sub_category_id, request.filer_status, request.gross_amount
    )
    return ORJSONResponse(TaxCalculationResponse.from_domain(result))
