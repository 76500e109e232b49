"""Confidence estimation for archive-driven suggestions."""

from datetime import datetime

from ..entities.archive import JobArchive

SIMILARITY_FACTOR = 0.6
QUALITY_BONUS = 20.0
QUALITY_BONUS_THRESHOLD = 8.0
ON_TIME_BONUS = 10.0
RECENCY_BONUS = 10.0
RECENCY_WINDOW_DAYS = 180
MAX_CONFIDENCE = 95.0


class ConfidenceEstimator:
    """
    Blends similarity with an archive's outcome and recency into a
    bounded confidence. A suggestion is never reported as certain.
    """

    @staticmethod
    def estimate(archive: JobArchive, similarity: float, now: datetime) -> float:
        confidence = similarity * SIMILARITY_FACTOR

        performance = archive.performance_data
        if performance.quality_score >= QUALITY_BONUS_THRESHOLD:
            confidence += QUALITY_BONUS
        if performance.on_time_delivery is True:
            confidence += ON_TIME_BONUS
        if archive.age_in_days(now) < RECENCY_WINDOW_DAYS:
            confidence += RECENCY_BONUS

        return max(0.0, min(MAX_CONFIDENCE, confidence))
