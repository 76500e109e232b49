"""Domain enums for archive-driven job synthesis."""

from enum import Enum


class RecommendationType(str, Enum):
    """How closely a suggestion's source archive matches the order item."""

    EXACT_MATCH = "exact_match"
    SIMILAR_PART = "similar_part"
    SIMILAR_PROCESS = "similar_process"
    HYBRID = "hybrid"

    @classmethod
    def from_similarity(cls, similarity: float) -> "RecommendationType":
        """Thresholds are strict: exactly 90.0 is not an exact match."""
        if similarity > 90:
            return cls.EXACT_MATCH
        if similarity > 70:
            return cls.SIMILAR_PART
        if similarity > 50:
            return cls.SIMILAR_PROCESS
        return cls.HYBRID


class OptimizationArea(str, Enum):
    """Area of a job that an archive-derived optimization targets."""

    SCHEDULING = "scheduling"
    PROCESS_SEQUENCE = "process_sequence"
    RESOURCE_ALLOCATION = "resource_allocation"
    QUALITY = "quality"
    SETUP = "setup"


class EffortLevel(str, Enum):
    """Implementation effort tier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ImplementationComplexity(str, Enum):
    """Complexity tier for quality improvements."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class RiskType(str, Enum):
    """Category of a job creation risk."""

    QUALITY = "quality"
    SCHEDULE = "schedule"
    COST = "cost"
    COMPLEXITY = "complexity"
    RESOURCE = "resource"


class RiskLevel(str, Enum):
    """Severity of a job creation risk."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def requires_mitigation(self) -> bool:
        """Check if the risk is severe enough to surface as a recommendation."""
        return self in {RiskLevel.HIGH, RiskLevel.CRITICAL}


class ArchiveType(str, Enum):
    """Reason an archive was created."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    PATTERN_CREATION = "pattern_creation"
    QUALITY_FAILURE = "quality_failure"


class JobStatus(str, Enum):
    """Job status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"


class JobPriority(str, Enum):
    """Job priority enumeration."""

    LOW = "low"
    NORMAL = "normal"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
    CRITICAL = "critical"


class TaskStatus(str, Enum):
    """Task status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"
    CANCELLED = "cancelled"


class SubtaskStatus(str, Enum):
    """Subtask status enumeration."""

    PENDING = "pending"
    COMPLETED = "completed"
    NOT_APPLICABLE = "not_applicable"
    SKIPPED = "skipped"


class TaskCategory(str, Enum):
    """Task categories recorded on archived tasks."""

    MANUFACTURING_PROCESS = "manufacturing_process"
    QUALITY = "quality"
    DOCUMENTATION = "documentation"
    PRODUCTION = "production"
    OTHER = "other"


class JobComplexity(str, Enum):
    """Complexity hint on a bare job specification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
