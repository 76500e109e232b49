"""
Archive Repository Interface

Defines the contract for searching the job archive store. The engine
depends only on this interface; infrastructure supplies the implementation.
"""

import asyncio
from abc import ABC, abstractmethod

from pydantic import Field

from ...shared.base import ValueObject
from ..entities.archive import JobArchive


class ArchiveSearchCriteria(ValueObject):
    """Query for archived jobs; every field is an optional filter."""

    part_name: str | None = None
    process_types: tuple[str, ...] = ()
    customer_id: str | None = None
    include_performance_data: bool = False
    include_process_data: bool = False
    max_results: int = Field(default=20, ge=1)
    archive_ids: tuple[str, ...] = ()


class CancellationToken:
    """
    Cooperative cancellation signal threaded through archive searches.

    Searches are the only suspend points in the engine; a search racing a
    cancelled token is abandoned and treated as having found nothing.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()


class ArchiveRepository(ABC):
    """
    Abstract repository interface for JobArchive records.

    Archives are append-only history; implementations expose search only.
    """

    @abstractmethod
    async def search(self, criteria: ArchiveSearchCriteria) -> list[JobArchive]:
        """
        Search archived jobs.

        Args:
            criteria: Filters to apply; ``archive_ids`` selects exact records

        Returns:
            Matching archives, at most ``criteria.max_results``

        Raises:
            ArchiveSearchError: If the store cannot complete the search
        """
        pass
