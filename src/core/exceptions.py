"""Structured exception hierarchy for the tax calculator.

Key components:
- **ErrorCode enum**: Identifiers returned to clients in error bodies
- **Severity enum**: Error classification for logging and alerting
- **TaxCalcError**: Base exception with context, fingerprint and cause
- **InvalidArgumentError / NotFoundError / StoreUnavailableError**: the
  three failure classes a request can end in

Callers pick a retry policy from the class: only ``StoreUnavailableError``
is transient, the other two are terminal for the request.
"""

import hashlib
import traceback
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes returned in API error bodies."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred in the system."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    """Caller-supplied input failed validation."""

    NOT_FOUND = "NOT_FOUND"
    """A referenced identifier does not resolve to an existing entity."""

    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    """The taxonomy store could not be reached or the read failed."""


class Severity(Enum):
    """Severity levels for errors."""

    LOW = "LOW"
    """Expected errors caused by client input."""

    MEDIUM = "MEDIUM"
    """Errors that affect a single request but not the service."""

    HIGH = "HIGH"
    """Errors that point to an infrastructure problem."""

    CRITICAL = "CRITICAL"
    """Unhandled errors requiring immediate attention."""


class TaxCalcError(Exception):
    """Base exception class for all application exceptions.

    Args:
        error_code: Unique identifier for the error type (string or ErrorCode enum)
        message: Human-readable error message
        severity: Severity level of the error (defaults to MEDIUM)
        context: Additional context information about the error
        cause: The original exception that caused this error
    """

    def __init__(
        self,
        error_code: str | ErrorCode,
        message: str,
        severity: Severity = Severity.MEDIUM,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.error_code = (
            error_code.value if isinstance(error_code, ErrorCode) else error_code
        )
        self.message = message
        self.severity = severity
        self.context = context or {}
        self.cause = cause

        self.stack_trace = traceback.format_stack()[:-1]  # Exclude this frame
        self.fingerprint = self._generate_fingerprint()

        super().__init__(message)
        if cause:
            self.__cause__ = cause

    def _generate_fingerprint(self) -> str:
        """Hash the error type and raising location for log grouping.

        Returns:
            str: A 16 character hex digest
        """
        max_frames = 5
        relevant_frames = self.stack_trace[-max_frames:]

        fingerprint_data = f"{self.__class__.__name__}:{self.error_code}"
        for frame in relevant_frames:
            if "site-packages" not in frame and "src/" in frame:
                lines = frame.strip().split("\n")
                if lines:
                    fingerprint_data += f":{lines[0]}"

        return hashlib.sha256(fingerprint_data.encode()).hexdigest()[:16]

    @property
    def is_expected(self) -> bool:
        """Whether the error is part of normal operation (LOW or MEDIUM)."""
        return self.severity in (Severity.LOW, Severity.MEDIUM)

    @property
    def is_retryable(self) -> bool:
        """Whether repeating the same request may succeed."""
        return False

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        context_str = f", context={self.context}" if self.context else ""
        return (
            f"{class_name}(error_code='{self.error_code}', "
            f"message='{self.message}', severity={self.severity.value}{context_str})"
        )


class InvalidArgumentError(TaxCalcError):
    """Raised when caller-supplied input fails validation.

    Covers missing fields, malformed identifiers, unknown filer status
    tokens and missing, non-numeric or negative amounts.
    """

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.INVALID_ARGUMENT,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.LOW, context, cause)


class NotFoundError(TaxCalcError):
    """Raised when an identifier does not resolve to an existing entity."""

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.NOT_FOUND,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.LOW, context, cause)


class StoreUnavailableError(TaxCalcError):
    """Raised when the taxonomy store cannot be reached or a read fails.

    Every operation in this service is a side-effect free read, so the
    request that produced this error is safe to retry.
    """

    def __init__(
        self,
        message: str,
        error_code: str | ErrorCode = ErrorCode.STORE_UNAVAILABLE,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(error_code, message, Severity.HIGH, context, cause)

    @property
    def is_retryable(self) -> bool:
        """Store failures are transient."""
        return True
