"""Repository interfaces for the archives domain."""

from .archive_repository import (
    ArchiveRepository,
    ArchiveSearchCriteria,
    CancellationToken,
)

__all__ = ["ArchiveRepository", "ArchiveSearchCriteria", "CancellationToken"]
