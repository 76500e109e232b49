"""
Lot Job Service

Creates one job per order of a manufacturing lot. A failing order is
recorded and skipped; the rest of the lot is still created.
"""

from pydantic import Field

from ....core.observability import get_logger, log_error_with_context
from ...shared.base import ValueObject
from ...shared.exceptions import DomainError
from ..entities.suggestion import ArchiveDrivenJobSuggestion, SynthesizedJob
from ..value_objects.order import JobCustomizations
from .job_synthesizer import JobSynthesizer

logger = get_logger(__name__)


class LotJobRequest(ValueObject):
    """One order of a lot together with the suggestion chosen for it."""

    order_reference: str
    suggestion: ArchiveDrivenJobSuggestion
    customizations: JobCustomizations | None = None


class LotCreationResult(ValueObject):
    success: bool
    jobs_created: int = Field(ge=0)
    jobs: tuple[SynthesizedJob, ...] = ()
    errors: tuple[str, ...] = ()


class LotJobService:
    """Domain service synthesizing jobs for every order in a lot."""

    def __init__(self, synthesizer: JobSynthesizer | None = None) -> None:
        self._synthesizer = synthesizer or JobSynthesizer()

    def create_lot_jobs(self, requests: list[LotJobRequest]) -> LotCreationResult:
        """
        Create jobs for a lot, collecting per-order failures.

        Args:
            requests: Orders of the lot, in lot order

        Returns:
            Result listing created jobs and one error message per failed order
        """
        jobs: list[SynthesizedJob] = []
        errors: list[str] = []

        for number, request in enumerate(requests, start=1):
            try:
                jobs.append(
                    self._synthesizer.synthesize(
                        request.suggestion, request.customizations
                    )
                )
            except (DomainError, ValueError) as e:
                message = e.message if isinstance(e, DomainError) else str(e)
                errors.append(f"Order {number} ({request.order_reference}): {message}")
                log_error_with_context(
                    error=e,
                    operation="create_lot_job",
                    context={
                        "order_number": number,
                        "order_reference": request.order_reference,
                    },
                    severity="warning",
                    include_traceback=False,
                )

        logger.info(
            "Lot job creation complete",
            requested=len(requests),
            jobs_created=len(jobs),
            failed=len(errors),
        )
        return LotCreationResult(
            success=not errors,
            jobs_created=len(jobs),
            jobs=tuple(jobs),
            errors=tuple(errors),
        )
