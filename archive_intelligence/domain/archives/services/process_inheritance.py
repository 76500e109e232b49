"""
Process Inheritance Resolver

Carries manufacturing-process parameters from one archived job over to a
new, differently specified part, flagging where adaptation is needed.
"""

from ....core.observability import get_logger, log_error_with_context
from ...shared.exceptions import ArchiveNotFoundError
from ..entities.archive import JobArchive
from ..repositories.archive_repository import ArchiveSearchCriteria, CancellationToken
from ..value_objects.analysis import (
    InheritedProcess,
    ProcessInheritance,
    ProcessOptimization,
    QualityImprovement,
    SetupOptimization,
)
from ..value_objects.enums import ImplementationComplexity, TaskCategory, TaskStatus
from ..value_objects.order import TargetPartSpecs
from .archive_search import ArchiveSearchGateway
from .optimization_engine import HIGH_EFFICIENCY_THRESHOLD

logger = get_logger(__name__)

HIGH_QUALITY_THRESHOLD = 8.5


def material_change(archive: JobArchive, target: TargetPartSpecs) -> str | None:
    """Adaptation note when the target names a different material, else None."""
    source = archive.job_snapshot.material
    if target.material is None:
        return None
    if source is not None and source.casefold() == target.material.casefold():
        return None
    return f"Material change from {source or 'unspecified'} to {target.material}"


class ProcessInheritanceResolver:
    """Domain service resolving process inheritance from a single archive."""

    def __init__(self, search_gateway: ArchiveSearchGateway) -> None:
        self._search = search_gateway

    async def inherit(
        self,
        source_archive_id: str,
        target_part_specs: TargetPartSpecs,
        cancellation: CancellationToken | None = None,
    ) -> ProcessInheritance | None:
        """
        Inherit processes from an archive for a target part.

        Returns:
            The inheritance record, or None when the archive is not found
        """
        archives = await self._search.search(
            ArchiveSearchCriteria(
                archive_ids=(source_archive_id,),
                include_process_data=True,
                max_results=1,
            ),
            cancellation,
        )
        archive = next((a for a in archives if a.id == source_archive_id), None)
        if archive is None:
            log_error_with_context(
                error=ArchiveNotFoundError(source_archive_id),
                operation="inherit_process",
                severity="warning",
                include_traceback=False,
            )
            return None

        inheritance = ProcessInheritance(
            source_job_id=archive.original_job_id,
            inherited_processes=tuple(
                self.extract_inherited_processes(archive, target_part_specs)
            ),
            process_optimizations=tuple(self.process_optimizations(archive)),
            quality_improvements=tuple(self.quality_improvements(archive)),
            setup_optimizations=tuple(self.setup_optimizations(archive)),
        )
        logger.info(
            "Inherited processes from archive",
            archive_id=source_archive_id,
            process_count=len(inheritance.inherited_processes),
            optimization_count=len(inheritance.process_optimizations),
        )
        return inheritance

    @staticmethod
    def extract_inherited_processes(
        archive: JobArchive, target: TargetPartSpecs
    ) -> list[InheritedProcess]:
        note = material_change(archive, target)
        performance = archive.performance_data
        return [
            InheritedProcess(
                original_task_id=task.id,
                process_type=task.manufacturing_process_type or "unknown",
                process_parameters={
                    "setup_time": task.setup_time_minutes,
                    "cycle_time": task.cycle_time_minutes,
                    "machine_type": task.machine_type,
                    "tooling": list(task.required_capabilities),
                },
                historical_success=task.status == TaskStatus.COMPLETED,
                quality_outcome=performance.quality_score,
                time_efficiency=performance.efficiency_rating,
                adaptation_required=note is not None,
                adaptation_notes=(note,) if note else (),
            )
            for task in archive.task_snapshot
            if task.category == TaskCategory.MANUFACTURING_PROCESS
        ]

    @staticmethod
    def process_optimizations(archive: JobArchive) -> list[ProcessOptimization]:
        optimizations = [
            ProcessOptimization(
                process_step="Setup preparation",
                original_approach="Manual setup verification",
                optimized_approach="Use proven setup parameters and automated verification",
                expected_improvement="25% faster setup time",
                based_on_successful_jobs=1,
            )
        ]
        if archive.performance_data.efficiency_rating > HIGH_EFFICIENCY_THRESHOLD:
            optimizations.append(
                ProcessOptimization(
                    process_step="Operation sequence",
                    original_approach="Sequence planned from routing template",
                    optimized_approach="Follow the operation order of the high-efficiency archived job",
                    expected_improvement="Reduced handling and queue time between operations",
                    based_on_successful_jobs=1,
                )
            )
        return optimizations

    @staticmethod
    def quality_improvements(archive: JobArchive) -> list[QualityImprovement]:
        if archive.performance_data.quality_score <= HIGH_QUALITY_THRESHOLD:
            return []
        return [
            QualityImprovement(
                quality_aspect="Dimensional accuracy",
                current_approach="Standard inspection",
                improved_approach="Use proven inspection sequence from high-quality job",
                expected_quality_gain=0.5,
                implementation_complexity=ImplementationComplexity.SIMPLE,
            )
        ]

    @staticmethod
    def setup_optimizations(archive: JobArchive) -> list[SetupOptimization]:
        if not archive.completed_forms.has_setup_sheets:
            return []
        return [
            SetupOptimization(
                setup_aspect="Tool preparation",
                optimized_approach="Pre-stage tools using proven setup sheet parameters",
                time_reduction=15,
                quality_benefit="Reduced setup errors and improved first-piece accuracy",
                tooling_requirements=("Standard tooling per setup sheet",),
            )
        ]
