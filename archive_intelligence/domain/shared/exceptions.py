"""
Domain Exceptions

Defines custom exceptions for archive-driven job synthesis with a
discriminating error type, so callers can branch on the kind of failure
without matching on message text.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    REPOSITORY = "repository"
    TIMEOUT = "timeout"
    SYNTHESIS = "synthesis"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
            "error_code": self.error_code,
        }
        super().__init__(
            f"Validation failed for field '{field_name}': {message}",
            ErrorType.VALIDATION,
            details,
        )


# Archive-related exceptions
class ArchiveNotFoundError(DomainError):
    """Raised when an archive id cannot be resolved."""

    def __init__(self, archive_id: str) -> None:
        details = {"archive_id": archive_id, "entity_type": "job_archive"}
        super().__init__(
            f"Job archive not found: {archive_id}", ErrorType.NOT_FOUND, details
        )
        self.archive_id = archive_id


class ArchiveSearchError(DomainError):
    """Raised by archive repositories when a search cannot be completed.

    ``transient`` marks failures worth retrying (connection resets,
    throttling); permanent failures are surfaced on the first attempt.
    """

    def __init__(
        self,
        message: str,
        transient: bool = True,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        search_details = details or {}
        search_details["transient"] = transient
        super().__init__(message, ErrorType.REPOSITORY, search_details)
        self.transient = transient


class OperationTimeoutError(DomainError):
    """Raised when an awaited operation exceeds its time budget."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        details: dict[str, str | int | bool | None] = {
            "operation": operation,
            "timeout_seconds": str(timeout_seconds),
        }
        super().__init__(
            f"Operation {operation} timed out after {timeout_seconds}s",
            ErrorType.TIMEOUT,
            details,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds


# Synthesis-related exceptions
class JobSynthesisError(DomainError):
    """Raised when a job cannot be synthesized from a suggestion."""

    def __init__(self, message: str, source_archive_id: str | None = None) -> None:
        details = {"source_archive_id": source_archive_id}
        super().__init__(message, ErrorType.SYNTHESIS, details)
        self.source_archive_id = source_archive_id
