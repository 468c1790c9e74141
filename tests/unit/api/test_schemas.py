"""Unit tests for request/response models and the orjson response class."""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.api.schemas.errors import ErrorResponse
from src.api.schemas.taxonomy import (
    SubcategoryResponse,
    TaxCalculationRequest,
    TaxCalculationResponse,
    TaxonomyNodeResponse,
)
from src.api.utils.responses import ORJSONResponse
from src.domain.models import Subcategory, TaxComputation, TaxonomyNode


@pytest.mark.unit
class TestTaxonomySchemas:
    """Test JSON field naming and number rendering."""

    def test_node(self) -> None:
        response = TaxonomyNodeResponse.from_domain(TaxonomyNode(id=1, name="Salary"))
        assert response.model_dump(mode="json", by_alias=True) == {
            "id": 1,
            "name": "Salary",
        }

    def test_subcategory_uses_camel_case_and_numbers(
        self, employees: Subcategory
    ) -> None:
        response = ORJSONResponse(SubcategoryResponse.from_domain(employees))

        assert json.loads(response.body) == {
            "id": 7,
            "name": "Employees",
            "filerRate": 15,
            "nonFilerRate": 30,
            "taxNature": "Final",
        }

    def test_calculation_response(self) -> None:
        result = TaxComputation(
            gross_amount=Decimal(100000),
            tax_rate=Decimal(15),
            tax_amount=Decimal(15000),
            net_amount=Decimal(85000),
            tax_nature="Final",
        )

        response = ORJSONResponse(TaxCalculationResponse.from_domain(result))

        assert json.loads(response.body, parse_float=Decimal) == {
            "grossAmount": 100000,
            "taxRate": 15,
            "taxAmount": 15000,
            "netAmount": 85000,
            "taxNature": "Final",
        }

    def test_money_fields_are_documented_as_numbers(self) -> None:
        schema = TaxCalculationResponse.model_json_schema(mode="serialization")
        assert schema["properties"]["taxAmount"]["type"] == "number"

    def test_python_mode_keeps_decimals(self, employees: Subcategory) -> None:
        data = SubcategoryResponse.from_domain(employees).model_dump()
        assert data["filer_rate"] == Decimal(15)
        assert isinstance(data["filer_rate"], Decimal)


@pytest.mark.unit
class TestTaxCalculationRequest:
    """Test request parsing."""

    def test_camel_case_body(self) -> None:
        request = TaxCalculationRequest.model_validate(
            {"subCategoryId": 7, "filerStatus": "filer", "grossAmount": 100000}
        )

        assert request.sub_category_id == 7
        assert request.filer_status == "filer"
        assert request.gross_amount == Decimal(100000)

    def test_float_amount_keeps_shortest_repr(self) -> None:
        request = TaxCalculationRequest.model_validate({"grossAmount": 0.1})
        assert request.gross_amount == Decimal("0.1")

    def test_missing_fields_default_to_none(self) -> None:
        request = TaxCalculationRequest.model_validate({})

        assert request.sub_category_id is None
        assert request.filer_status is None
        assert request.gross_amount is None

    @pytest.mark.parametrize("field", ["subCategoryId", "grossAmount"])
    @pytest.mark.parametrize("value", [True, False])
    def test_booleans_are_rejected(self, field: str, value: bool) -> None:
        with pytest.raises(ValidationError):
            TaxCalculationRequest.model_validate({field: value})


@pytest.mark.unit
class TestORJSONResponse:
    """Test rendering."""

    def test_decimal_is_rendered_as_exact_number(self) -> None:
        response = ORJSONResponse(content={"taxAmount": Decimal("0.0105")})
        assert response.body == b'{"taxAmount":0.0105}'

    def test_decimal_keeps_digits_a_float_would_lose(self) -> None:
        response = ORJSONResponse(content={"amount": Decimal("12345678901234567.89")})
        assert response.body == b'{"amount":12345678901234567.89}'

    def test_exponent_decimal_is_written_in_plain_notation(self) -> None:
        response = ORJSONResponse(content={"amount": Decimal("1.5E+3")})
        assert json.loads(response.body) == {"amount": 1500}

    def test_non_finite_decimal(self) -> None:
        with pytest.raises(TypeError):
            ORJSONResponse(content={"amount": Decimal("NaN")})

    def test_pydantic_model(self) -> None:
        response = ORJSONResponse(
            content=ErrorResponse(error="Tax subcategory not found", error_code="NOT_FOUND")
        )

        body = json.loads(response.body)
        assert body["error"] == "Tax subcategory not found"
        assert body["error_code"] == "NOT_FOUND"

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            ORJSONResponse(content={"value": object()})
