"""
Unit Tests for Confidence Estimation and Recommendation Types
"""

from datetime import timedelta

import pytest
from freezegun import freeze_time

from archive_intelligence.domain.archives.services.confidence import (
    ConfidenceEstimator,
)
from archive_intelligence.domain.archives.value_objects.enums import (
    RecommendationType,
)
from archive_intelligence.domain.shared.base import utc_now
from archive_intelligence.tests.fixtures import NOW, ArchiveFactory


class TestConfidenceEstimator:
    """Test confidence bonuses and the 95 cap."""

    def test_perfect_archive_is_capped_at_95(self):
        """Test full similarity plus every bonus never exceeds 95."""
        archive = ArchiveFactory.create()

        assert ConfidenceEstimator.estimate(archive, 100.0, NOW) == 95.0

    def test_no_bonuses(self):
        """Test a poor, late, old archive contributes only similarity."""
        archive = ArchiveFactory.create(
            quality_score=7.0, on_time_delivery=False, age_days=400
        )

        assert ConfidenceEstimator.estimate(archive, 50.0, NOW) == pytest.approx(30.0)

    def test_quality_bonus_applies_at_exactly_8(self):
        """Test quality threshold is inclusive."""
        archive = ArchiveFactory.create(
            quality_score=8.0, on_time_delivery=None, age_days=400
        )

        assert ConfidenceEstimator.estimate(archive, 0.0, NOW) == pytest.approx(20.0)

    def test_unknown_delivery_gets_no_on_time_bonus(self):
        """Test only a recorded on-time delivery earns the bonus."""
        on_time = ArchiveFactory.create(on_time_delivery=True, age_days=400)
        unknown = ArchiveFactory.create(on_time_delivery=None, age_days=400)

        assert ConfidenceEstimator.estimate(on_time, 50.0, NOW) - (
            ConfidenceEstimator.estimate(unknown, 50.0, NOW)
        ) == pytest.approx(10.0)

    @freeze_time("2025-06-01 12:00:00")
    def test_recency_window_is_strict(self):
        """Test archives exactly 180 days old miss the recency bonus."""
        now = utc_now()
        recent = ArchiveFactory.create(
            quality_score=7.0, on_time_delivery=None, age_days=0
        ).model_copy(update={"archive_date": now - timedelta(days=179)})
        boundary = recent.model_copy(update={"archive_date": now - timedelta(days=180)})

        assert ConfidenceEstimator.estimate(recent, 0.0, now) == pytest.approx(10.0)
        assert ConfidenceEstimator.estimate(boundary, 0.0, now) == pytest.approx(0.0)


class TestRecommendationType:
    """Test similarity thresholds for recommendation types."""

    @pytest.mark.parametrize(
        "similarity,expected",
        [
            (100.0, RecommendationType.EXACT_MATCH),
            (90.01, RecommendationType.EXACT_MATCH),
            (90.0, RecommendationType.SIMILAR_PART),
            (70.5, RecommendationType.SIMILAR_PART),
            (70.0, RecommendationType.SIMILAR_PROCESS),
            (50.5, RecommendationType.SIMILAR_PROCESS),
            (50.0, RecommendationType.HYBRID),
            (30.0, RecommendationType.HYBRID),
        ],
    )
    def test_thresholds_are_strict(self, similarity, expected):
        """Test boundary values fall into the lower band."""
        assert RecommendationType.from_similarity(similarity) == expected
