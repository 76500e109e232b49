"""
Synthesized Job, Task and Subtask entities.

These are newly born records owned by the caller once created. A Task refers
to its Job through ``job_id``; a Subtask refers to its Task through
``task_id`` and to its Job through ``job_id``.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from ...shared.base import Entity
from ..value_objects.enums import (
    JobPriority,
    JobStatus,
    SubtaskStatus,
    TaskCategory,
    TaskStatus,
)


class Job(Entity):
    """Manufacturing work order synthesized from an archived precedent."""

    order_id: str = ""
    order_number: str = ""
    client_name: str = ""
    part_name: str
    material: str | None = None
    quantity: int | None = None
    assigned_processes: list[str] = Field(default_factory=list)
    specifications: str | None = None
    delivery_date: datetime | None = None
    priority: JobPriority = JobPriority.NORMAL
    status: JobStatus = JobStatus.PENDING
    special_requirements: list[str] = Field(default_factory=list)
    quality_requirements: dict[str, Any] = Field(default_factory=dict)
    source_archive_id: str | None = None
    is_archived: bool = False


class Task(Entity):
    """A unit of work within a job."""

    job_id: str = ""
    name: str
    description: str = ""
    category: TaskCategory = TaskCategory.OTHER
    status: TaskStatus = TaskStatus.PENDING
    operation_index: int | None = None
    manufacturing_process_type: str | None = None
    estimated_duration_hours: float = 2.0
    setup_time_minutes: float = 30.0
    cycle_time_minutes: float | None = None
    machine_type: str | None = None
    required_capabilities: list[str] = Field(default_factory=list)
    source_task_id: str | None = None


class Subtask(Entity):
    """A checklist item within a task."""

    task_id: str = ""
    job_id: str = ""
    name: str
    description: str = ""
    category: str = ""
    status: SubtaskStatus = SubtaskStatus.PENDING
    operation_index: int | None = None
    estimated_duration_minutes: float | None = None
    is_printable: bool = False
    has_checkbox: bool = True
    is_checked: bool = False
    instructions: str | None = None
    source_subtask_id: str | None = None
