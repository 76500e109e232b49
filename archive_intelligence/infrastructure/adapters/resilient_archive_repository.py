"""
Resilient archive repository adapter.

Wraps any ArchiveRepository with a per-attempt timeout and exponential
backoff retries for transient failures. Permanent failures and exhausted
retries propagate to the caller unchanged.
"""

from ...core.config import settings
from ...core.retry_mechanisms import with_retry, with_timeout
from ...domain.archives.entities.archive import JobArchive
from ...domain.archives.repositories.archive_repository import (
    ArchiveRepository,
    ArchiveSearchCriteria,
)


class ResilientArchiveRepository(ArchiveRepository):
    """Retry/timeout decorator around another archive repository."""

    def __init__(
        self,
        inner: ArchiveRepository,
        max_attempts: int | None = None,
        min_wait: float | None = None,
        max_wait: float | None = None,
        attempt_timeout: float | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            inner: Repository performing the actual search
            max_attempts: Attempts before giving up, including the first
            min_wait: Initial backoff in seconds
            max_wait: Backoff ceiling in seconds
            attempt_timeout: Time budget for a single attempt in seconds
        """
        self._inner = inner
        self.max_attempts = (
            max_attempts if max_attempts is not None else settings.SEARCH_RETRY_ATTEMPTS
        )
        self.min_wait = min_wait if min_wait is not None else settings.SEARCH_RETRY_MIN_WAIT
        self.max_wait = max_wait if max_wait is not None else settings.SEARCH_RETRY_MAX_WAIT
        self.attempt_timeout = (
            attempt_timeout
            if attempt_timeout is not None
            else settings.SEARCH_ATTEMPT_TIMEOUT_SECONDS
        )

        self._search = with_retry(
            max_attempts=self.max_attempts,
            min_wait=self.min_wait,
            max_wait=self.max_wait,
        )(with_timeout(self.attempt_timeout)(self._inner.search))

    async def search(self, criteria: ArchiveSearchCriteria) -> list[JobArchive]:
        return await self._search(criteria)
