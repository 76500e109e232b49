"""
In-memory archive repository.

Serves archives held in process memory. Used for tests, demos and for
callers that load an archive export up front.
"""

from collections.abc import Iterable

from ...core.observability import get_logger
from ...domain.archives.entities.archive import JobArchive
from ...domain.archives.repositories.archive_repository import (
    ArchiveRepository,
    ArchiveSearchCriteria,
)

logger = get_logger(__name__)


class InMemoryArchiveRepository(ArchiveRepository):
    """Archive repository backed by a list, in insertion order."""

    def __init__(self, archives: Iterable[JobArchive] = ()) -> None:
        self._archives: list[JobArchive] = list(archives)
        self.searches: list[ArchiveSearchCriteria] = []

    async def search(self, criteria: ArchiveSearchCriteria) -> list[JobArchive]:
        self.searches.append(criteria)
        matches = [a for a in self._archives if self._matches(a, criteria)]
        logger.debug(
            "In-memory archive search",
            part_name=criteria.part_name,
            match_count=len(matches),
        )
        return matches[: criteria.max_results]

    @staticmethod
    def _matches(archive: JobArchive, criteria: ArchiveSearchCriteria) -> bool:
        snapshot = archive.job_snapshot

        if criteria.archive_ids and archive.id not in criteria.archive_ids:
            return False

        if criteria.part_name:
            if criteria.part_name.casefold() not in snapshot.part_name.casefold():
                return False

        if criteria.process_types:
            wanted = {p.casefold() for p in criteria.process_types}
            if not wanted & {p.casefold() for p in snapshot.assigned_processes}:
                return False

        if criteria.customer_id and archive.customer_id != criteria.customer_id:
            return False

        return True
