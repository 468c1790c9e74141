"""Error response schema shared by every failing endpoint.

Every error body carries an ``error`` field with a human-readable
message, which is what the browser client displays. The remaining fields
are machine-oriented metadata:

- **error_code**: Stable code for programmatic handling
- **correlation_id / request_id**: Identifiers for log correlation
- **details**: Sanitized context such as the offending field
- **retryable**: Set on application errors; true for store outages
- **debug_info**: Stack trace and cause, development only
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Identity of the service that produced the error."""

    name: str = Field(..., description="Name of the service", examples=["TaxCalc"])
    version: str = Field(..., description="Version of the service", examples=["1.0.0"])
    environment: str = Field(
        ...,
        description="Environment where the service is running",
        examples=["development", "staging", "production"],
    )


class ErrorResponse(BaseModel):
    """Standardized error response model for API errors."""

    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Missing required parameters", "Tax subcategory not found"],
    )

    error_code: str = Field(
        ...,
        description="Unique error code identifying the error type",
        examples=["INVALID_ARGUMENT", "NOT_FOUND", "STORE_UNAVAILABLE"],
    )

    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details (e.g. the field that was rejected)",
        examples=[{"field": "filerStatus"}],
    )

    correlation_id: str | None = Field(
        default=None,
        description="Request correlation ID for tracing and debugging",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )

    request_id: str | None = Field(
        default=None,
        description="Unique identifier of this single request",
        examples=["req-550e8400-e29b-41d4-a716-446655440000"],
    )

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Timestamp when the error occurred (with timezone)",
    )

    severity: str | None = Field(
        default=None,
        description="Error severity (LOW, MEDIUM, HIGH, CRITICAL)",
        examples=["LOW", "HIGH"],
    )

    retryable: bool | None = Field(
        default=None,
        description="Whether repeating the same request may succeed",
        examples=[False, True],
    )

    service_info: ServiceInfo | None = Field(
        default=None,
        description="Information about the service that generated the error",
    )

    debug_info: dict[str, Any] | None = Field(
        default=None,
        description="Debug information (only populated in development environments)",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "Filer status must be 'filer' or 'non-filer'",
                    "error_code": "INVALID_ARGUMENT",
                    "details": {"field": "filerStatus"},
                    "correlation_id": "550e8400-e29b-41d4-a716-446655440000",
                    "request_id": "req-660e8400-e29b-41d4-a716-446655440000",
                    "timestamp": "2025-01-14T12:00:00+00:00",
                    "severity": "LOW",
                },
                {
                    "error": "Tax subcategory not found",
                    "error_code": "NOT_FOUND",
                    "details": {"subCategoryId": 999},
                    "timestamp": "2025-01-14T12:00:01+00:00",
                    "severity": "LOW",
                },
                {
                    "error": "Failed to fetch tax sections",
                    "error_code": "STORE_UNAVAILABLE",
                    "timestamp": "2025-01-14T12:00:02+00:00",
                    "severity": "HIGH",
                    "retryable": True,
                },
            ]
        }
    }
