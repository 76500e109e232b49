"""
Job Synthesizer

Builds candidate job graphs from archives for suggestions, and turns a
chosen suggestion into a newly born Job/Task/Subtask set with fresh ids,
applied optimizations and caller customizations.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from ....core.observability import JOBS_SYNTHESIZED, get_logger
from ...shared.base import utc_now
from ...shared.exceptions import JobSynthesisError
from ..entities.archive import JobArchive, SubtaskSnapshot, TaskSnapshot
from ..entities.job import Job, Subtask, Task
from ..entities.suggestion import ArchiveDrivenJobSuggestion, SynthesizedJob
from ..value_objects.enums import JobStatus, SubtaskStatus, TaskStatus
from ..value_objects.order import JobCustomizations, OrderItem
from .optimization_engine import OptimizationEngine

logger = get_logger(__name__)

ARCHIVE_DRIVEN_MARKER = "archive_driven"


def _matches_task(subtask_name: str, subtask_index: int | None, task) -> bool:
    """Subtask belongs to a task sharing its name or operation index."""
    if task.name == subtask_name:
        return True
    return subtask_index is not None and task.operation_index == subtask_index


class JobSynthesizer:
    """Domain service building job graphs from archived precedents."""

    def __init__(
        self,
        optimization_engine: OptimizationEngine | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._optimization_engine = optimization_engine or OptimizationEngine()
        self._clock = clock

    # Candidate construction

    def build_candidate(
        self,
        archive: JobArchive,
        order_item: OrderItem,
        delivery_date: datetime | None,
    ) -> tuple[Job, list[Task], list[Subtask]]:
        """
        Build the provisional job graph proposed by a suggestion.

        The archive's snapshot supplies the structure; the order item
        overrides what the customer actually asked for. Ids are provisional
        and are re-minted by ``synthesize``.
        """
        snapshot = archive.job_snapshot
        job = Job(
            id=f"candidate_{archive.id}",
            part_name=order_item.display_name,
            material=order_item.material or snapshot.material,
            quantity=order_item.quantity or snapshot.quantity,
            assigned_processes=list(
                order_item.assigned_processes or snapshot.assigned_processes
            ),
            specifications=order_item.specifications or snapshot.specifications,
            delivery_date=delivery_date,
            priority=snapshot.priority,
            status=JobStatus.PENDING,
            special_requirements=list(snapshot.special_requirements),
            source_archive_id=archive.id,
            is_archived=False,
        )

        tasks = [
            self._candidate_task(job.id, index, snapshot_task)
            for index, snapshot_task in enumerate(archive.task_snapshot)
        ]

        if not tasks and archive.subtask_snapshot:
            logger.warning(
                "Archive has subtasks but no tasks; subtasks not carried over",
                archive_id=archive.id,
                subtask_count=len(archive.subtask_snapshot),
            )
            return job, tasks, []

        subtasks = [
            self._candidate_subtask(
                job.id,
                self._resolve_candidate_parent(
                    snapshot_subtask, archive.task_snapshot, tasks
                ),
                index,
                snapshot_subtask,
            )
            for index, snapshot_subtask in enumerate(archive.subtask_snapshot)
        ]
        return job, tasks, subtasks

    @staticmethod
    def _candidate_task(job_id: str, index: int, snapshot: TaskSnapshot) -> Task:
        return Task(
            id=f"{job_id}_task_{index + 1}",
            job_id=job_id,
            name=snapshot.name,
            description=snapshot.description,
            category=snapshot.category,
            status=TaskStatus.PENDING,
            operation_index=snapshot.operation_index,
            manufacturing_process_type=snapshot.manufacturing_process_type,
            estimated_duration_hours=snapshot.estimated_duration_hours,
            setup_time_minutes=snapshot.setup_time_minutes,
            cycle_time_minutes=snapshot.cycle_time_minutes,
            machine_type=snapshot.machine_type,
            required_capabilities=list(snapshot.required_capabilities),
            source_task_id=snapshot.id,
        )

    @staticmethod
    def _candidate_subtask(
        job_id: str, parent: Task, index: int, snapshot: SubtaskSnapshot
    ) -> Subtask:
        return Subtask(
            id=f"{parent.id}_subtask_{index + 1}",
            task_id=parent.id,
            job_id=job_id,
            name=snapshot.name,
            description=snapshot.description,
            category=snapshot.category,
            status=SubtaskStatus.PENDING,
            operation_index=snapshot.operation_index,
            estimated_duration_minutes=snapshot.estimated_duration_minutes,
            is_printable=snapshot.is_printable,
            has_checkbox=snapshot.has_checkbox,
            is_checked=False,
            instructions=snapshot.instructions,
            source_subtask_id=snapshot.id,
        )

    @staticmethod
    def _resolve_candidate_parent(
        subtask: SubtaskSnapshot,
        task_snapshots: Sequence[TaskSnapshot],
        tasks: list[Task],
    ) -> Task:
        """Archived parent first, then name/operation index, else the first task."""
        for snapshot_task, task in zip(task_snapshots, tasks):
            if subtask.task_id and snapshot_task.id == subtask.task_id:
                return task
        for snapshot_task, task in zip(task_snapshots, tasks):
            if _matches_task(subtask.name, subtask.operation_index, snapshot_task):
                return task
        return tasks[0]

    # Synthesis

    def synthesize(
        self,
        suggestion: ArchiveDrivenJobSuggestion,
        customizations: JobCustomizations | None = None,
    ) -> SynthesizedJob:
        """
        Create a new job graph from a chosen suggestion.

        Args:
            suggestion: Suggestion accepted by the caller
            customizations: Optional overrides for the new job

        Returns:
            New job, tasks and subtasks with freshly minted ids and notes

        Raises:
            JobSynthesisError: If a consistent job graph cannot be built
        """
        try:
            result = self._synthesize(suggestion, customizations)
        except PydanticValidationError as e:
            JOBS_SYNTHESIZED.labels(status="failed").inc()
            raise JobSynthesisError(
                f"Invalid job data from archive {suggestion.source_archive_id}: {e}",
                suggestion.source_archive_id,
            ) from e
        except JobSynthesisError:
            JOBS_SYNTHESIZED.labels(status="failed").inc()
            raise

        JOBS_SYNTHESIZED.labels(status="created").inc()
        logger.info(
            "Created job from archive suggestion",
            job_id=result.job.id,
            source_archive_id=suggestion.source_archive_id,
            task_count=len(result.tasks),
            subtask_count=len(result.subtasks),
        )
        return result

    def _synthesize(
        self,
        suggestion: ArchiveDrivenJobSuggestion,
        customizations: JobCustomizations | None,
    ) -> SynthesizedJob:
        original_tasks = list(suggestion.suggested_tasks)
        if suggestion.suggested_subtasks and not original_tasks:
            raise JobSynthesisError(
                "Suggestion has subtasks but no tasks to attach them to",
                suggestion.source_archive_id,
            )

        job = suggestion.suggested_job.model_copy(deep=True)
        tasks = [task.model_copy(deep=True) for task in original_tasks]
        subtasks = [
            subtask.model_copy(deep=True) for subtask in suggestion.suggested_subtasks
        ]

        if customizations is not None:
            self._apply_customizations(job, customizations)

        processing_notes: list[str] = []
        for optimization in suggestion.optimizations:
            processing_notes.append(
                f"Applied {optimization.area.value} optimization: {optimization.optimization}"
            )
            tasks = self._optimization_engine.apply(tasks, optimization)

        now = self._clock()
        job.id = self.mint_job_id(now)
        job.stamp(now)

        task_id_map: dict[str, str] = {}
        for index, task in enumerate(tasks):
            new_id = f"{job.id}_task_{index + 1}"
            task_id_map[task.id] = new_id
            task.id = new_id
            task.job_id = job.id
            task.stamp(now)

        for index, subtask in enumerate(subtasks):
            parent_id = self._resolve_parent_id(
                subtask, original_tasks, task_id_map, tasks
            )
            subtask.id = f"{parent_id}_subtask_{index + 1}"
            subtask.task_id = parent_id
            subtask.job_id = job.id
            subtask.stamp(now)

        processing_notes.append(
            f"Job created from archive {suggestion.source_archive_id} "
            f"with {len(suggestion.optimizations)} optimizations applied"
        )

        return SynthesizedJob(
            job=job,
            tasks=tasks,
            subtasks=subtasks,
            processing_notes=processing_notes,
        )

    @staticmethod
    def _apply_customizations(job: Job, customizations: JobCustomizations) -> None:
        if customizations.delivery_date is not None:
            job.delivery_date = customizations.delivery_date
        if customizations.priority is not None:
            job.priority = customizations.priority
        if customizations.special_requirements:
            job.special_requirements = [
                *job.special_requirements,
                *customizations.special_requirements,
            ]
        if customizations.quality_requirements:
            job.quality_requirements = {
                **job.quality_requirements,
                **customizations.quality_requirements,
            }

    @staticmethod
    def _resolve_parent_id(
        subtask: Subtask,
        original_tasks: list[Task],
        task_id_map: dict[str, str],
        new_tasks: list[Task],
    ) -> str:
        # Unmatched subtasks attach to the first task rather than being dropped.
        if subtask.task_id in task_id_map:
            return task_id_map[subtask.task_id]
        for task in original_tasks:
            if _matches_task(subtask.name, subtask.operation_index, task):
                return task_id_map[task.id]
        return new_tasks[0].id

    @staticmethod
    def mint_job_id(now: datetime) -> str:
        """Timestamped job id carrying the archive-driven marker."""
        timestamp_ms = int(now.timestamp() * 1000)
        return f"job_{timestamp_ms}_{uuid4().hex[:8]}_{ARCHIVE_DRIVEN_MARKER}"
