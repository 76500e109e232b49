"""
Optimization Engine

Derives reusable improvements from an archive's own recorded success and
applies them to a candidate task list.
"""

from ..entities.archive import JobArchive
from ..entities.job import Task
from ..value_objects.analysis import JobOptimization
from ..value_objects.enums import EffortLevel, OptimizationArea
from ..value_objects.order import OrderItem

HIGH_EFFICIENCY_THRESHOLD = 8.0
MIN_SETUP_MINUTES = 15.0


class OptimizationEngine:
    """Pure domain service; archives in, optimization records out."""

    @staticmethod
    def derive_optimizations(
        archive: JobArchive, order_item: OrderItem | None = None
    ) -> list[JobOptimization]:
        """
        Inspect archive signals and emit the optimizations they justify.

        Args:
            archive: Source archive
            order_item: Target order item (reserved for item-aware rules)

        Returns:
            Zero or more optimizations, setup first
        """
        optimizations: list[JobOptimization] = []

        if archive.completed_forms.has_setup_sheets:
            optimizations.append(
                JobOptimization(
                    area=OptimizationArea.SETUP,
                    optimization="Use proven setup parameters from similar successful job",
                    expected_benefit="20-30% setup time reduction",
                    implementation_effort=EffortLevel.LOW,
                    time_impact=-0.5,
                    quality_impact=0.3,
                    cost_impact=-50,
                    based_on_archives=1,
                )
            )

        if archive.performance_data.efficiency_rating > HIGH_EFFICIENCY_THRESHOLD:
            optimizations.append(
                JobOptimization(
                    area=OptimizationArea.PROCESS_SEQUENCE,
                    optimization="Apply optimized process sequence from high-performing job",
                    expected_benefit="Improved efficiency and quality",
                    implementation_effort=EffortLevel.MEDIUM,
                    time_impact=-1.0,
                    quality_impact=0.5,
                    cost_impact=-100,
                    based_on_archives=1,
                )
            )

        return optimizations

    @staticmethod
    def apply(tasks: list[Task], optimization: JobOptimization) -> list[Task]:
        """
        Apply one optimization to a task list in place.

        Areas without a task-level effect leave the list untouched.

        Returns:
            The task list, reordered for process sequence optimizations
        """
        if optimization.area == OptimizationArea.SCHEDULING:
            for task in tasks:
                task.estimated_duration_hours = (
                    task.estimated_duration_hours + optimization.time_impact
                )
            return tasks

        if optimization.area == OptimizationArea.PROCESS_SEQUENCE:
            return sorted(tasks, key=lambda task: task.operation_index or 0)

        if optimization.area == OptimizationArea.SETUP:
            for task in tasks:
                task.setup_time_minutes = max(
                    MIN_SETUP_MINUTES,
                    task.setup_time_minutes + optimization.time_impact * 60,
                )
            return tasks

        return tasks
