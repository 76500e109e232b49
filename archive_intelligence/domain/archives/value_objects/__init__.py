"""Value objects for archive-driven job synthesis."""

from .analysis import (
    HistoricalPerformance,
    InheritedProcess,
    JobCreationRisk,
    JobCreationValidationResult,
    JobOptimization,
    PerformancePrediction,
    ProcessInheritance,
    ProcessOptimization,
    QualityImprovement,
    SetupOptimization,
)
from .enums import (
    ArchiveType,
    EffortLevel,
    ImplementationComplexity,
    JobComplexity,
    JobPriority,
    JobStatus,
    OptimizationArea,
    RecommendationType,
    RiskLevel,
    RiskType,
    SubtaskStatus,
    TaskCategory,
    TaskStatus,
)
from .order import (
    JobCreationOrderData,
    JobCustomizations,
    JobSpecification,
    OrderItem,
    OrderLineItem,
    TargetPartSpecs,
)

__all__ = [
    "ArchiveType",
    "EffortLevel",
    "HistoricalPerformance",
    "ImplementationComplexity",
    "InheritedProcess",
    "JobComplexity",
    "JobCreationOrderData",
    "JobCreationRisk",
    "JobCreationValidationResult",
    "JobCustomizations",
    "JobOptimization",
    "JobPriority",
    "JobSpecification",
    "JobStatus",
    "OptimizationArea",
    "OrderItem",
    "OrderLineItem",
    "PerformancePrediction",
    "ProcessInheritance",
    "ProcessOptimization",
    "QualityImprovement",
    "RecommendationType",
    "RiskLevel",
    "RiskType",
    "SetupOptimization",
    "SubtaskStatus",
    "TargetPartSpecs",
    "TaskCategory",
    "TaskStatus",
]
