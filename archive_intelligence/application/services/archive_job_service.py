"""
Archive-driven job application service.

Entry point for callers building new manufacturing jobs from archived
precedents. Coerces loosely typed input into domain value objects, tags
each use case with a correlation id and delegates to the domain services.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...core.observability import get_logger, set_correlation_id
from ...domain.archives.entities.archive import JobArchive
from ...domain.archives.entities.suggestion import (
    ArchiveDrivenJobSuggestion,
    SynthesizedJob,
)
from ...domain.archives.repositories.archive_repository import (
    ArchiveRepository,
    CancellationToken,
)
from ...domain.archives.services.archive_search import ArchiveSearchGateway
from ...domain.archives.services.job_synthesizer import JobSynthesizer
from ...domain.archives.services.job_validation import JobCreationValidator
from ...domain.archives.services.lot_service import (
    LotCreationResult,
    LotJobRequest,
    LotJobService,
)
from ...domain.archives.services.performance_predictor import PerformancePredictor
from ...domain.archives.services.process_inheritance import (
    ProcessInheritanceResolver,
)
from ...domain.archives.services.suggestion_ranker import SuggestionRanker
from ...domain.archives.value_objects.analysis import (
    JobCreationValidationResult,
    PerformancePrediction,
    ProcessInheritance,
)
from ...domain.archives.value_objects.order import (
    JobCreationOrderData,
    JobCustomizations,
    JobSpecification,
    OrderItem,
    TargetPartSpecs,
    as_utc,
)
from ...domain.shared.base import ValueObject, utc_now
from ...domain.shared.exceptions import ValidationError

logger = get_logger(__name__)


def _coerce(model: type[ValueObject], value: Any) -> Any:
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise TypeError(
            f"Expected {model.__name__} or mapping, got {type(value).__name__}"
        )
    try:
        return model.model_validate(value)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"]) or model.__name__
        raise ValidationError(
            field_name=field_name,
            value=None,
            message=first["msg"],
            error_code="INVALID_INPUT",
        ) from e


class ArchiveDrivenJobService:
    """
    Application service for archive-driven job creation.

    Every use case reads archives through the injected repository; nothing
    here writes to it.
    """

    def __init__(
        self,
        repository: ArchiveRepository,
        clock: Callable[[], datetime] = utc_now,
        search_timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            repository: Archive store to search
            clock: Source of the current UTC time
            search_timeout_seconds: Override for the per-search time budget
        """
        self._search = ArchiveSearchGateway(repository, search_timeout_seconds)
        self._synthesizer = JobSynthesizer(clock=clock)
        self._ranker = SuggestionRanker(self._search, self._synthesizer, clock)
        self._predictor = PerformancePredictor(self._search, clock)
        self._inheritance = ProcessInheritanceResolver(self._search)
        self._validator = JobCreationValidator(clock=clock)
        self._lots = LotJobService(self._synthesizer)

    async def generate_suggestions(
        self,
        order_items: list[OrderItem | Mapping[str, Any]],
        delivery_date: datetime | None = None,
        customer_id: str | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[ArchiveDrivenJobSuggestion]:
        """
        Generate ranked job suggestions for the items of a new order.

        Args:
            order_items: Order items as value objects or plain mappings
            delivery_date: Requested delivery date for the new jobs
            customer_id: Restricts the primary search to one customer
            cancellation: Optional token abandoning outstanding searches

        Returns:
            Up to ten suggestions ordered by confidence times similarity
        """
        set_correlation_id()
        items = [_coerce(OrderItem, item) for item in order_items]
        return await self._ranker.generate_suggestions(
            items, as_utc(delivery_date), customer_id, cancellation
        )

    async def find_similar_archived_jobs(
        self,
        order_item: OrderItem | Mapping[str, Any],
        customer_id: str | None = None,
        cancellation: CancellationToken | None = None,
    ) -> list[JobArchive]:
        set_correlation_id()
        return await self._ranker.find_similar_archived_jobs(
            _coerce(OrderItem, order_item), customer_id, cancellation
        )

    def create_job_from_suggestion(
        self,
        suggestion: ArchiveDrivenJobSuggestion,
        customizations: JobCustomizations | Mapping[str, Any] | None = None,
    ) -> SynthesizedJob:
        """
        Create a new job graph from an accepted suggestion.

        Raises:
            JobSynthesisError: If the suggestion cannot yield a consistent job
        """
        set_correlation_id()
        if customizations is not None:
            customizations = _coerce(JobCustomizations, customizations)
        return self._synthesizer.synthesize(suggestion, customizations)

    async def inherit_process(
        self,
        source_archive_id: str,
        target_part_specs: TargetPartSpecs | Mapping[str, Any],
        cancellation: CancellationToken | None = None,
    ) -> ProcessInheritance | None:
        set_correlation_id()
        return await self._inheritance.inherit(
            source_archive_id, _coerce(TargetPartSpecs, target_part_specs), cancellation
        )

    async def predict_performance(
        self,
        job_specs: JobSpecification | Mapping[str, Any],
        target_delivery_date: datetime | None = None,
        cancellation: CancellationToken | None = None,
    ) -> PerformancePrediction:
        set_correlation_id()
        return await self._predictor.predict(
            _coerce(JobSpecification, job_specs), target_delivery_date, cancellation
        )

    def validate_job_creation_data(
        self, order_data: JobCreationOrderData | Mapping[str, Any]
    ) -> JobCreationValidationResult:
        return self._validator.validate(_coerce(JobCreationOrderData, order_data))

    def create_lot_jobs(
        self, requests: list[LotJobRequest | Mapping[str, Any]]
    ) -> LotCreationResult:
        """
        Create one job per order of a lot, continuing past failed orders.

        Returns:
            Result with ``success`` False when any order failed
        """
        set_correlation_id()
        lot = [_coerce(LotJobRequest, request) for request in requests]
        logger.info("Creating lot jobs", order_count=len(lot))
        return self._lots.create_lot_jobs(lot)
