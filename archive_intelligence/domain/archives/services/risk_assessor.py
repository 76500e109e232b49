"""
Risk Assessor

Flags quality and schedule risks from an archive's recorded shortfalls.
Healthy archives yield no risks at all.
"""

from ..entities.archive import JobArchive
from ..value_objects.analysis import (
    HistoricalPerformance,
    JobCreationRisk,
    JobOptimization,
)
from ..value_objects.enums import RiskLevel, RiskType

QUALITY_STANDARD = 8.0
EXCELLENT_QUALITY = 9.0
MAX_RECOMMENDATIONS = 5
PLACEHOLDER_AVERAGE_COST = 1000.0


class RiskAssessor:
    """Pure domain service deriving risks and advice from one archive."""

    @staticmethod
    def assess(archive: JobArchive) -> list[JobCreationRisk]:
        risks: list[JobCreationRisk] = []
        performance = archive.performance_data

        if performance.quality_score < QUALITY_STANDARD:
            risks.append(
                JobCreationRisk(
                    risk_type=RiskType.QUALITY,
                    risk_level=RiskLevel.MEDIUM,
                    description="Historical quality performance below AS9100D standard",
                    likelihood=60,
                    impact="Potential quality issues and rework",
                    mitigation="Implement additional quality checks and inspections",
                    historical_evidence=f"Previous job scored {performance.quality_score:g}/10",
                )
            )

        if performance.on_time_delivery is False:
            risks.append(
                JobCreationRisk(
                    risk_type=RiskType.SCHEDULE,
                    risk_level=RiskLevel.MEDIUM,
                    description="Historical on-time delivery challenges",
                    likelihood=50,
                    impact="Potential delivery delays",
                    mitigation="Add buffer time to schedule and monitor progress closely",
                    historical_evidence="Similar job had delivery delays",
                )
            )

        return risks

    @staticmethod
    def recommend(
        archive: JobArchive,
        optimizations: list[JobOptimization],
        risks: list[JobCreationRisk],
    ) -> list[str]:
        """Free-text advice: optimization benefits first, then mitigations."""
        recommendations = [
            f"Apply {optimization.area.value} optimization: {optimization.expected_benefit}"
            for optimization in optimizations
            if optimization.expected_benefit
        ]
        recommendations.extend(
            f"Mitigate {risk.risk_type.value} risk: {risk.mitigation}"
            for risk in risks
            if risk.risk_level.requires_mitigation
        )
        if archive.performance_data.quality_score > EXCELLENT_QUALITY:
            recommendations.append(
                "High-quality historical performance - use proven methods"
            )
        return recommendations[:MAX_RECOMMENDATIONS]

    @staticmethod
    def summarize_performance(archive: JobArchive) -> HistoricalPerformance:
        performance = archive.performance_data
        delivery_rate = 100.0 if performance.on_time_delivery else 80.0
        return HistoricalPerformance(
            average_completion_time=performance.total_duration_hours,
            average_quality_score=performance.quality_score,
            success_rate=delivery_rate,
            on_time_delivery_rate=delivery_rate,
            average_cost=PLACEHOLDER_AVERAGE_COST,
            efficiency_rating=performance.efficiency_rating,
            common_issues=tuple(
                issue.description for issue in performance.issues_encountered
            ),
            lessons_learned=performance.lessons_learned,
        )
