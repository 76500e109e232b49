"""
Job Archive

A frozen snapshot of a fully executed job: the job as it was specified, the
task/subtask graph as it was executed, and the performance it achieved.
Archives are created once, outside this engine, and are read-only input to
everything here.
"""

from datetime import datetime

from pydantic import Field, field_validator

from ...shared.base import ValueObject
from ..value_objects.enums import (
    ArchiveType,
    JobPriority,
    SubtaskStatus,
    TaskCategory,
    TaskStatus,
)
from ..value_objects.order import as_utc


class JobSnapshot(ValueObject):
    """Job fields as they were when the job was archived."""

    part_name: str = ""
    material: str | None = None
    quantity: int | None = None
    assigned_processes: tuple[str, ...] = ()
    specifications: str | None = None
    order_id: str = ""
    order_number: str = ""
    client_name: str = ""
    priority: JobPriority = JobPriority.NORMAL
    special_requirements: tuple[str, ...] = ()


class TaskSnapshot(ValueObject):
    """An executed task. Missing estimates resolve to shop defaults here."""

    id: str
    name: str
    description: str = ""
    category: TaskCategory = TaskCategory.OTHER
    status: TaskStatus = TaskStatus.COMPLETED
    operation_index: int | None = None
    manufacturing_process_type: str | None = None
    estimated_duration_hours: float = 2.0
    setup_time_minutes: float = 30.0
    cycle_time_minutes: float | None = None
    machine_type: str | None = None
    required_capabilities: tuple[str, ...] = ()

    @field_validator("category", mode="before")
    @classmethod
    def coerce_unknown_category(cls, v):
        """Categories outside the known set are kept as OTHER."""
        if isinstance(v, str) and v not in TaskCategory._value2member_map_:
            return TaskCategory.OTHER
        return v


class SubtaskSnapshot(ValueObject):
    """An executed subtask; ``task_id`` refers to the archived parent task."""

    id: str
    task_id: str = ""
    name: str
    description: str = ""
    category: str = ""
    status: SubtaskStatus = SubtaskStatus.COMPLETED
    operation_index: int | None = None
    estimated_duration_minutes: float | None = None
    is_printable: bool = False
    has_checkbox: bool = True
    instructions: str | None = None


class Issue(ValueObject):
    description: str
    resolution: str | None = None


class PerformanceData(ValueObject):
    """Recorded outcome of the archived job.

    Field defaults are the values assumed when the archive did not record
    a metric; ``on_time_delivery`` stays unknown rather than defaulting.
    """

    total_duration_hours: float = 8.0
    quality_score: float = Field(default=8.0, ge=0, le=10)
    efficiency_rating: float = 8.0
    on_time_delivery: bool | None = None
    issues_encountered: tuple[Issue, ...] = ()
    lessons_learned: tuple[str, ...] = ()


class CompletedForms(ValueObject):
    """Counts of filled manufacturing forms; a signal, never content."""

    routing_sheets: int = 0
    setup_sheets: int = 0
    tool_lists: int = 0
    fai_reports: int = 0
    inspection_records: int = 0

    @property
    def has_setup_sheets(self) -> bool:
        return self.setup_sheets > 0


class JobArchive(ValueObject):
    """Immutable historical record of an executed job."""

    id: str
    original_job_id: str
    archive_date: datetime
    archive_type: ArchiveType = ArchiveType.COMPLETED
    job_snapshot: JobSnapshot = Field(default_factory=JobSnapshot)
    task_snapshot: tuple[TaskSnapshot, ...] = ()
    subtask_snapshot: tuple[SubtaskSnapshot, ...] = ()
    performance_data: PerformanceData = Field(default_factory=PerformanceData)
    completed_forms: CompletedForms = Field(default_factory=CompletedForms)
    customer_id: str | None = None

    @field_validator("archive_date")
    @classmethod
    def normalize_archive_date(cls, v: datetime) -> datetime:
        return as_utc(v)

    def age_in_days(self, now: datetime) -> float:
        """Days elapsed between archiving and ``now``."""
        return (now - self.archive_date).total_seconds() / 86400
