"""Application services for archive-driven job creation use cases."""

from .archive_job_service import ArchiveDrivenJobService

__all__ = ["ArchiveDrivenJobService"]
