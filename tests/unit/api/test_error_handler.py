"""Unit tests for exception-to-status mapping."""

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from src.api.middleware.error_handler import (
    INVALID_PARAMETERS_MESSAGE,
    MISSING_PARAMETERS_MESSAGE,
    _collect_field_errors,
    status_for,
    taxcalc_error_handler,
    validation_error_handler,
)
from src.core.exceptions import (
    ErrorCode,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
    TaxCalcError,
)


@pytest.mark.unit
class TestStatusFor:
    """Each failure class maps to exactly one status code."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (InvalidArgumentError("bad"), 400),
            (NotFoundError("missing"), 404),
            (StoreUnavailableError("down"), 503),
            (TaxCalcError(ErrorCode.INTERNAL_ERROR, "other"), 500),
        ],
    )
    def test_mapping(self, error: TaxCalcError, expected: int) -> None:
        assert status_for(error) == expected


@pytest.mark.unit
class TestCollectFieldErrors:
    """Validation errors are grouped per field."""

    def test_missing_field(self) -> None:
        exc = RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
        )

        field_errors, missing = _collect_field_errors(exc)

        assert missing is True
        assert field_errors == {"root": ["Field required"]}

    def test_malformed_field(self) -> None:
        exc = RequestValidationError(
            [
                {
                    "type": "int_parsing",
                    "loc": ("body", "subCategoryId"),
                    "msg": "Input should be a valid integer",
                    "input": "abc",
                }
            ]
        )

        field_errors, missing = _collect_field_errors(exc)

        assert missing is False
        assert field_errors == {"subCategoryId": ["Input should be a valid integer"]}


def _request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/x", "headers": []})


@pytest.mark.unit
@pytest.mark.asyncio
class TestHandlerTypeChecks:
    """Handlers refuse exceptions they were not registered for."""

    async def test_taxcalc_handler(self) -> None:
        with pytest.raises(TypeError, match="Expected TaxCalcError"):
            await taxcalc_error_handler(_request(), ValueError("x"))

    async def test_validation_handler(self) -> None:
        with pytest.raises(TypeError, match="Expected RequestValidationError"):
            await validation_error_handler(_request(), ValueError("x"))

    async def test_validation_messages(self) -> None:
        assert MISSING_PARAMETERS_MESSAGE == "Missing required parameters"
        assert INVALID_PARAMETERS_MESSAGE == "Invalid request parameters"
