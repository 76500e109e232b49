"""Shared domain building blocks."""

from .base import Entity, ValueObject, utc_now
from .exceptions import (
    ArchiveNotFoundError,
    ArchiveSearchError,
    DomainError,
    ErrorType,
    JobSynthesisError,
    OperationTimeoutError,
    ValidationError,
)

__all__ = [
    "ArchiveNotFoundError",
    "ArchiveSearchError",
    "DomainError",
    "Entity",
    "ErrorType",
    "JobSynthesisError",
    "OperationTimeoutError",
    "ValidationError",
    "ValueObject",
    "utc_now",
]
