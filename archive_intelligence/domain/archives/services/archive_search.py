"""
Archive Search Gateway

The only place the engine suspends. Wraps an ArchiveRepository so that a
failed, timed-out or cancelled search degrades to "no archives found"
instead of failing the caller's whole pipeline.
"""

import asyncio
import contextlib
import time

from ....core.config import settings
from ....core.observability import (
    ARCHIVE_SEARCH_DURATION,
    ARCHIVE_SEARCHES,
    get_logger,
    log_error_with_context,
)
from ..entities.archive import JobArchive
from ..repositories.archive_repository import (
    ArchiveRepository,
    ArchiveSearchCriteria,
    CancellationToken,
)

logger = get_logger(__name__)


class ArchiveSearchGateway:
    """Fault-tolerant, cancellable access to the archive repository."""

    def __init__(
        self,
        repository: ArchiveRepository,
        timeout_seconds: float | None = None,
    ) -> None:
        self._repository = repository
        self._timeout_seconds = (
            timeout_seconds
            if timeout_seconds is not None
            else settings.SEARCH_TIMEOUT_SECONDS
        )

    async def search(
        self,
        criteria: ArchiveSearchCriteria,
        cancellation: CancellationToken | None = None,
    ) -> list[JobArchive]:
        """
        Search archives, treating every adapter failure as an empty result.

        Args:
            criteria: Search filters
            cancellation: Optional token; a cancelled search finds nothing

        Returns:
            Matching archives, or an empty list on failure/timeout/cancellation
        """
        if cancellation is not None and cancellation.is_cancelled:
            ARCHIVE_SEARCHES.labels(outcome="cancelled").inc()
            return []

        started = time.perf_counter()
        try:
            archives, outcome = await self._race(criteria, cancellation)
        except Exception as e:
            ARCHIVE_SEARCHES.labels(outcome="failed").inc()
            log_error_with_context(
                error=e,
                operation="archive_search",
                context={"criteria": criteria.model_dump(mode="json")},
                severity="warning",
                include_traceback=False,
            )
            return []
        finally:
            ARCHIVE_SEARCH_DURATION.observe(time.perf_counter() - started)

        ARCHIVE_SEARCHES.labels(outcome=outcome).inc()
        if outcome != "success":
            logger.warning(
                "Archive search abandoned",
                outcome=outcome,
                part_name=criteria.part_name,
                timeout_seconds=self._timeout_seconds,
            )
        return archives

    async def _race(
        self,
        criteria: ArchiveSearchCriteria,
        cancellation: CancellationToken | None,
    ) -> tuple[list[JobArchive], str]:
        search_task = asyncio.ensure_future(self._repository.search(criteria))
        waiters: set[asyncio.Future] = {search_task}
        cancel_task = None
        if cancellation is not None:
            cancel_task = asyncio.ensure_future(cancellation.wait())
            waiters.add(cancel_task)

        try:
            done, _ = await asyncio.wait(
                waiters,
                timeout=self._timeout_seconds,
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            if cancel_task is not None:
                cancel_task.cancel()
            if not search_task.done():
                search_task.cancel()
                with contextlib.suppress(asyncio.CancelledError, Exception):
                    await search_task

        if search_task in done:
            return list(search_task.result()), "success"

        if cancel_task is not None and cancel_task in done:
            return [], "cancelled"
        return [], "timeout"
