"""Global exception handlers for the FastAPI application.

Each failure kind maps to exactly one status code:

- ``InvalidArgumentError`` and request validation failures: 400
- ``NotFoundError``: 404
- ``StoreUnavailableError``: 503
- ``HTTPException``: its own status
- anything else: 500, with internals hidden in production

Every body is an ``ErrorResponse`` whose ``error`` field holds the
human-readable message.
"""

import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from loguru import logger
from starlette.exceptions import HTTPException

from src.api.schemas.errors import ErrorResponse, ServiceInfo
from src.api.utils.responses import ORJSONResponse
from src.core.config import Settings, get_settings
from src.core.context import RequestContext, generate_request_id
from src.core.error_context import sanitize_error_context
from src.core.exceptions import (
    ErrorCode,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
    TaxCalcError,
)

MISSING_PARAMETERS_MESSAGE = "Missing required parameters"
INVALID_PARAMETERS_MESSAGE = "Invalid request parameters"


def get_service_info(settings: Settings) -> ServiceInfo:
    """Create ServiceInfo from application settings."""
    return ServiceInfo(
        name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )


def status_for(exc: TaxCalcError) -> int:
    """Return the HTTP status code for an application error."""
    if isinstance(exc, InvalidArgumentError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, StoreUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _request_id() -> str:
    return RequestContext.get_request_id() or generate_request_id()


def _error_body(response: ErrorResponse) -> dict[str, Any]:
    return response.model_dump(mode="json")


async def taxcalc_error_handler(request: Request, exc: Exception) -> Response:
    """Handle TaxCalcError exceptions.

    Args:
        request: The FastAPI request that caused the exception
        exc: The TaxCalcError exception to handle

    Returns:
        Response: ORJSONResponse with error details

    Raises:
        TypeError: If exc is not a TaxCalcError instance
    """
    if not isinstance(exc, TaxCalcError):
        raise TypeError(f"Expected TaxCalcError, got {type(exc).__name__}")

    settings = get_settings()
    correlation_id = RequestContext.get_correlation_id()
    status_code = status_for(exc)

    error_context = sanitize_error_context(
        exc,
        {
            "request_method": request.method,
            "request_path": str(request.url.path),
            "error_code": exc.error_code,
        },
    )

    log = logger.warning if exc.is_expected else logger.error
    log(
        "Handling {exception_type}: {message}",
        exception_type=type(exc).__name__,
        message=exc.message,
        correlation_id=correlation_id,
        status_code=status_code,
        **error_context,
    )

    # Store failures keep driver details out of the response body.
    details = (
        exc.context
        if exc.context and not isinstance(exc, StoreUnavailableError)
        else None
    )

    debug_info = None
    if settings.environment == "development":
        debug_info = {
            "stack_trace": exc.stack_trace,
            "error_context": error_context.get("error_details", {}),
            "exception_type": type(exc).__name__,
        }
        if exc.cause:
            debug_info["cause"] = {
                "type": type(exc.cause).__name__,
                "message": str(exc.cause),
            }

    error_response = ErrorResponse(
        error=exc.message,
        error_code=exc.error_code,
        details=details,
        correlation_id=correlation_id,
        request_id=_request_id(),
        severity=exc.severity.value,
        retryable=exc.is_retryable,
        service_info=get_service_info(settings),
        debug_info=debug_info,
    )

    return ORJSONResponse(status_code=status_code, content=_error_body(error_response))


def _collect_field_errors(exc: RequestValidationError) -> tuple[dict[str, list[str]], bool]:
    field_errors: dict[str, list[str]] = {}
    missing = False
    for error in exc.errors():
        # ("body", "grossAmount") -> "grossAmount"; a bare ("body",) is the root
        field_path = error.get("loc", ())
        field_name = ".".join(str(loc) for loc in field_path[1:] if loc != "__root__")
        if not field_name:
            field_name = "root"
        if error.get("type") == "missing" or (
            field_name == "root" and error.get("input") in (None, "", {})
        ):
            missing = True
        field_errors.setdefault(field_name, []).append(
            error.get("msg", "Invalid value")
        )
    return field_errors, missing


async def validation_error_handler(request: Request, exc: Exception) -> Response:
    """Handle FastAPI RequestValidationError exceptions.

    Malformed bodies and path parameters are client errors like any other
    invalid argument, so they are answered with 400 rather than 422.

    Args:
        request: The FastAPI request that caused the exception
        exc: The RequestValidationError exception to handle

    Returns:
        Response: ORJSONResponse with validation error details

    Raises:
        TypeError: If exc is not a RequestValidationError instance
    """
    if not isinstance(exc, RequestValidationError):
        raise TypeError(f"Expected RequestValidationError, got {type(exc).__name__}")

    settings = get_settings()
    correlation_id = RequestContext.get_correlation_id()
    field_errors, missing = _collect_field_errors(exc)
    message = MISSING_PARAMETERS_MESSAGE if missing else INVALID_PARAMETERS_MESSAGE

    error_context = sanitize_error_context(
        exc,
        {
            "path": str(request.url.path),
            "method": request.method,
            "validation_errors": field_errors,
        },
    )

    logger.warning(
        "Request validation failed: {}",
        message,
        correlation_id=correlation_id,
        status_code=status.HTTP_400_BAD_REQUEST,
        **error_context,
    )

    error_response = ErrorResponse(
        error=message,
        error_code=ErrorCode.INVALID_ARGUMENT.value,
        details={"validation_errors": field_errors},
        correlation_id=correlation_id,
        request_id=_request_id(),
        severity="LOW",
        service_info=get_service_info(settings),
    )

    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(error_response),
    )


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle Starlette HTTPException (unknown routes, wrong methods).

    Args:
        request: The FastAPI request that caused the exception
        exc: The HTTPException to handle

    Returns:
        Response: ORJSONResponse with error details

    Raises:
        TypeError: If exc is not an HTTPException instance
    """
    if not isinstance(exc, HTTPException):
        raise TypeError(f"Expected HTTPException, got {type(exc).__name__}")

    settings = get_settings()
    correlation_id = RequestContext.get_correlation_id()

    error_code = ErrorCode.INTERNAL_ERROR.value
    severity = "MEDIUM"
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error_code = ErrorCode.NOT_FOUND.value
        severity = "LOW"
    elif exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        error_code = ErrorCode.INVALID_ARGUMENT.value
        severity = "LOW"
    else:
        severity = "HIGH"

    error_context = sanitize_error_context(
        exc,
        {
            "status": exc.status_code,
            "method": request.method,
            "path": str(request.url.path),
            "detail": exc.detail,
        },
    )

    logger.warning("HTTP exception", correlation_id=correlation_id, **error_context)

    error_response = ErrorResponse(
        error=str(exc.detail),
        error_code=error_code,
        correlation_id=correlation_id,
        request_id=_request_id(),
        severity=severity,
        service_info=get_service_info(settings),
    )

    return ORJSONResponse(
        status_code=exc.status_code,
        content=_error_body(error_response),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle exceptions no other handler claimed.

    In production the response carries a generic message only.

    Args:
        request: The FastAPI request that caused the exception
        exc: The unhandled exception

    Returns:
        Response: ORJSONResponse with generic error message
    """
    settings = get_settings()
    correlation_id = RequestContext.get_correlation_id()

    error_context = sanitize_error_context(
        exc,
        {
            "request_method": request.method,
            "request_path": str(request.url.path),
        },
    )

    logger.exception(
        "Unhandled exception: {exception_type}",
        exception_type=type(exc).__name__,
        correlation_id=correlation_id,
        **error_context,
    )

    if settings.environment == "production":
        message = "An internal server error occurred"
        details = None
        debug_info = None
    else:
        message = f"Internal server error: {type(exc).__name__}"
        details = {"type": type(exc).__name__}
        debug_info = {
            "stack_trace": traceback.format_tb(exc.__traceback__),
            "error_context": {"error_message": error_context["error_message"]},
            "exception_type": type(exc).__name__,
        }

    error_response = ErrorResponse(
        error=message,
        error_code=ErrorCode.INTERNAL_ERROR.value,
        details=details,
        correlation_id=correlation_id,
        request_id=_request_id(),
        severity="CRITICAL",
        service_info=get_service_info(settings),
        debug_info=debug_info,
    )

    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(error_response),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(TaxCalcError, taxcalc_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers registered")
