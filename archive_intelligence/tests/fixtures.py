"""
Test Data Factories

Factory classes for creating archives, order items and suggestions.
Values are deterministic so scores can be asserted exactly.
"""

from datetime import datetime, timedelta, timezone

from archive_intelligence.domain.archives.entities.archive import (
    CompletedForms,
    Issue,
    JobArchive,
    JobSnapshot,
    PerformanceData,
    SubtaskSnapshot,
    TaskSnapshot,
)
from archive_intelligence.domain.archives.value_objects.enums import TaskCategory
from archive_intelligence.domain.archives.value_objects.order import OrderItem

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return NOW


class TaskSnapshotFactory:
    """Factory for creating archived task test instances."""

    @staticmethod
    def create_routing(prefix: str = "t") -> tuple[TaskSnapshot, ...]:
        """Three-operation routing: turn, mill, inspect."""
        return (
            TaskSnapshot(
                id=f"{prefix}1",
                name="Turn OD",
                category=TaskCategory.MANUFACTURING_PROCESS,
                operation_index=1,
                manufacturing_process_type="Turning",
                estimated_duration_hours=3.0,
                setup_time_minutes=45,
                cycle_time_minutes=12,
                machine_type="CNC Lathe",
                required_capabilities=("turning",),
            ),
            TaskSnapshot(
                id=f"{prefix}2",
                name="Mill Pockets",
                category=TaskCategory.MANUFACTURING_PROCESS,
                operation_index=2,
                manufacturing_process_type="3-Axis Milling",
                estimated_duration_hours=4.0,
                setup_time_minutes=30,
                cycle_time_minutes=20,
                machine_type="VMC",
                required_capabilities=("milling",),
            ),
            TaskSnapshot(
                id=f"{prefix}3",
                name="Final Inspection",
                category=TaskCategory.QUALITY,
                operation_index=3,
                estimated_duration_hours=1.0,
                setup_time_minutes=20,
            ),
        )


class SubtaskSnapshotFactory:
    """Factory for creating archived subtask test instances."""

    @staticmethod
    def create_checklist(prefix: str = "t") -> tuple[SubtaskSnapshot, ...]:
        return (
            SubtaskSnapshot(id="s1", task_id=f"{prefix}1", name="Load bar stock"),
            SubtaskSnapshot(id="s2", task_id=f"{prefix}2", name="Verify fixture"),
            SubtaskSnapshot(id="s3", name="Record CMM results", operation_index=3),
            SubtaskSnapshot(id="s4", name="Deburr edges"),
        )


class ArchiveFactory:
    """Factory for creating JobArchive test instances."""

    @staticmethod
    def create(
        archive_id: str = "arch-1",
        part_name: str = "Landing Gear Bracket",
        material: str | None = "Aluminum 7075",
        quantity: int | None = 50,
        processes: tuple[str, ...] = ("Turning", "3-Axis Milling"),
        quality_score: float = 9.5,
        efficiency_rating: float = 9.0,
        on_time_delivery: bool | None = True,
        total_duration_hours: float = 10.0,
        setup_sheets: int = 2,
        age_days: float = 30,
        customer_id: str | None = "cust-1",
        with_tasks: bool = True,
        with_subtasks: bool = True,
        **kwargs,
    ) -> JobArchive:
        """Create a JobArchive; defaults describe a recent, excellent job."""
        task_prefix = f"{archive_id}-t"
        return JobArchive(
            id=archive_id,
            original_job_id=f"job-{archive_id}",
            archive_date=NOW - timedelta(days=age_days),
            job_snapshot=JobSnapshot(
                part_name=part_name,
                material=material,
                quantity=quantity,
                assigned_processes=processes,
                specifications="Per drawing LG-100 rev C",
                order_id="order-old",
                order_number="PO-1001",
                client_name="Aero Dynamics",
                special_requirements=("AS9100D traceability",),
            ),
            task_snapshot=(
                TaskSnapshotFactory.create_routing(task_prefix) if with_tasks else ()
            ),
            subtask_snapshot=(
                SubtaskSnapshotFactory.create_checklist(task_prefix)
                if with_subtasks
                else ()
            ),
            performance_data=PerformanceData(
                total_duration_hours=total_duration_hours,
                quality_score=quality_score,
                efficiency_rating=efficiency_rating,
                on_time_delivery=on_time_delivery,
                issues_encountered=(
                    Issue(description="Burr on pocket edge", resolution="Added deburr"),
                ),
                lessons_learned=("Pre-stage fixtures",),
            ),
            completed_forms=CompletedForms(setup_sheets=setup_sheets, routing_sheets=1),
            customer_id=customer_id,
            **kwargs,
        )


class OrderItemFactory:
    """Factory for creating OrderItem test instances."""

    @staticmethod
    def create(
        part_name: str = "Landing Gear Bracket",
        material: str | None = "Aluminum 7075",
        quantity: int | None = 50,
        processes: tuple[str, ...] = ("Turning", "3-Axis Milling"),
        **kwargs,
    ) -> OrderItem:
        return OrderItem(
            part_name=part_name,
            material=material,
            quantity=quantity,
            assigned_processes=processes,
            **kwargs,
        )
