from .in_memory_archive_repository import InMemoryArchiveRepository

__all__ = ["InMemoryArchiveRepository"]
