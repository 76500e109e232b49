"""Infrastructure adapters package."""

from .resilient_archive_repository import ResilientArchiveRepository

__all__ = ["ResilientArchiveRepository"]
