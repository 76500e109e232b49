"""Derived, read-only analysis records produced from archives."""

from typing import Any

from pydantic import Field

from ...shared.base import ValueObject
from .enums import (
    EffortLevel,
    ImplementationComplexity,
    OptimizationArea,
    RiskLevel,
    RiskType,
)


class HistoricalPerformance(ValueObject):
    """Performance summary of the archive behind a suggestion."""

    average_completion_time: float
    average_quality_score: float
    success_rate: float
    on_time_delivery_rate: float
    average_cost: float
    efficiency_rating: float
    common_issues: tuple[str, ...] = ()
    lessons_learned: tuple[str, ...] = ()


class JobOptimization(ValueObject):
    """An archive-grounded improvement applicable to a synthesized job."""

    area: OptimizationArea
    optimization: str
    expected_benefit: str = ""
    implementation_effort: EffortLevel = EffortLevel.LOW
    time_impact: float = 0.0  # hours, negative saves time
    quality_impact: float = 0.0
    cost_impact: float = 0.0
    based_on_archives: int = 1


class JobCreationRisk(ValueObject):
    """A concern inferred from an archive's historical shortfalls."""

    risk_type: RiskType
    risk_level: RiskLevel
    description: str
    likelihood: float = Field(ge=0, le=100)
    impact: str = ""
    mitigation: str = ""
    historical_evidence: str = ""


class InheritedProcess(ValueObject):
    """Manufacturing process parameters carried over from an archived task."""

    original_task_id: str
    process_type: str
    process_parameters: dict[str, Any] = Field(default_factory=dict)
    historical_success: bool
    quality_outcome: float
    time_efficiency: float
    adaptation_required: bool = False
    adaptation_notes: tuple[str, ...] = ()


class ProcessOptimization(ValueObject):
    process_step: str
    original_approach: str
    optimized_approach: str
    expected_improvement: str
    based_on_successful_jobs: int = 1


class QualityImprovement(ValueObject):
    quality_aspect: str
    current_approach: str
    improved_approach: str
    expected_quality_gain: float
    implementation_complexity: ImplementationComplexity


class SetupOptimization(ValueObject):
    setup_aspect: str
    optimized_approach: str
    time_reduction: float  # minutes
    quality_benefit: str
    tooling_requirements: tuple[str, ...] = ()


class ProcessInheritance(ValueObject):
    """Processes and improvements a target part inherits from one archive."""

    source_job_id: str
    inherited_processes: tuple[InheritedProcess, ...] = ()
    process_optimizations: tuple[ProcessOptimization, ...] = ()
    quality_improvements: tuple[QualityImprovement, ...] = ()
    setup_optimizations: tuple[SetupOptimization, ...] = ()


class PerformancePrediction(ValueObject):
    """Statistical estimate for a proposed job, independent of any one archive."""

    predicted_duration: float  # hours
    predicted_quality_score: float
    on_time_delivery_probability: float  # percentage
    risk_factors: tuple[str, ...] = ()
    confidence_level: float  # percentage
    recommended_actions: tuple[str, ...] = ()


class JobCreationValidationResult(ValueObject):
    """Structured outcome of job creation data validation."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
