"""
Performance Predictor

Statistical estimate of duration, quality and on-time probability for a
proposed job, pooled across every matching archive.
"""

import math
from collections.abc import Callable
from datetime import datetime
from statistics import fmean

from ....core.config import settings
from ....core.observability import get_logger
from ...shared.base import utc_now
from ..repositories.archive_repository import ArchiveSearchCriteria, CancellationToken
from ..value_objects.analysis import PerformancePrediction
from ..value_objects.order import JobSpecification, as_utc
from .archive_search import ArchiveSearchGateway

logger = get_logger(__name__)

QUALITY_STANDARD = 8.0
ON_TIME_TARGET = 80.0
EXTENDED_DURATION_HOURS = 16.0
SPLIT_OPERATIONS_HOURS = 12.0
QUANTITY_SCALING = 0.3
CONFIDENCE_PER_ARCHIVE = 5.0
MAX_CONFIDENCE = 95.0

RISK_LOW_QUALITY = "Historical quality below AS9100D standard"
RISK_LATE_DELIVERY = "Historical on-time delivery challenges"
RISK_EXTENDED_DURATION = "Extended duration predicted"
RISK_TIGHT_DELIVERY = "Target delivery date leaves less time than predicted duration"

RISK_ACTIONS = {
    RISK_LOW_QUALITY: "Implement additional monitoring and quality checks",
    RISK_LATE_DELIVERY: "Add schedule buffer and track progress against milestones",
    RISK_EXTENDED_DURATION: "Reserve machine capacity early for the extended run",
    RISK_TIGHT_DELIVERY: "Expedite scheduling or negotiate the delivery date",
}

NO_HISTORY_PREDICTION = PerformancePrediction(
    predicted_duration=8.0,
    predicted_quality_score=8.0,
    on_time_delivery_probability=80.0,
    risk_factors=("No historical data available",),
    confidence_level=30.0,
    recommended_actions=("Use standard procedures and allow extra time",),
)


class PerformancePredictor:
    """Domain service predicting job performance from archive statistics."""

    def __init__(
        self,
        search_gateway: ArchiveSearchGateway,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._search = search_gateway
        self._clock = clock

    async def predict(
        self,
        job_specs: JobSpecification,
        target_delivery_date: datetime | None = None,
        cancellation: CancellationToken | None = None,
    ) -> PerformancePrediction:
        """
        Predict performance for a job specification.

        Args:
            job_specs: Part name, processes and quantity of the proposed job
            target_delivery_date: Requested delivery date, if known
            cancellation: Optional token abandoning the archive search

        Returns:
            Prediction; conservative defaults when no archive matches
        """
        archives = await self._search.search(
            ArchiveSearchCriteria(
                part_name=job_specs.part_name,
                process_types=job_specs.processes,
                include_performance_data=True,
                max_results=settings.PREDICTION_MAX_ARCHIVES,
            ),
            cancellation,
        )

        if not archives:
            logger.info("No historical data for prediction", part_name=job_specs.part_name)
            return NO_HISTORY_PREDICTION

        performance = [archive.performance_data for archive in archives]
        avg_duration = fmean(p.total_duration_hours for p in performance)
        avg_quality = fmean(p.quality_score for p in performance)
        on_time_rate = (
            sum(1 for p in performance if p.on_time_delivery) / len(performance) * 100
        )

        quantity_factor = math.log10(job_specs.quantity + 1)
        adjusted_duration = avg_duration * (1 + quantity_factor * QUANTITY_SCALING)

        risk_factors: list[str] = []
        if avg_quality < QUALITY_STANDARD:
            risk_factors.append(RISK_LOW_QUALITY)
        if on_time_rate < ON_TIME_TARGET:
            risk_factors.append(RISK_LATE_DELIVERY)
        if adjusted_duration > EXTENDED_DURATION_HOURS:
            risk_factors.append(RISK_EXTENDED_DURATION)
        if self._delivery_window_too_short(target_delivery_date, adjusted_duration):
            risk_factors.append(RISK_TIGHT_DELIVERY)

        recommended_actions = [RISK_ACTIONS[factor] for factor in risk_factors]
        if avg_duration > SPLIT_OPERATIONS_HOURS:
            recommended_actions.append("Consider breaking into multiple operations")

        confidence = min(MAX_CONFIDENCE, len(archives) * CONFIDENCE_PER_ARCHIVE)

        logger.info(
            "Performance prediction complete",
            part_name=job_specs.part_name,
            archive_count=len(archives),
            predicted_duration=round(adjusted_duration, 1),
            predicted_quality=round(avg_quality, 1),
        )

        return PerformancePrediction(
            predicted_duration=adjusted_duration,
            predicted_quality_score=avg_quality,
            on_time_delivery_probability=on_time_rate,
            risk_factors=tuple(risk_factors),
            confidence_level=confidence,
            recommended_actions=tuple(recommended_actions),
        )

    def _delivery_window_too_short(
        self, target_delivery_date: datetime | None, duration_hours: float
    ) -> bool:
        if target_delivery_date is None:
            return False
        hours_available = (
            as_utc(target_delivery_date) - self._clock()
        ).total_seconds() / 3600
        return hours_available < duration_hours
