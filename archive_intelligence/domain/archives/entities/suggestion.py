"""Ephemeral suggestion and synthesis result records."""

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.analysis import (
    HistoricalPerformance,
    JobCreationRisk,
    JobOptimization,
)
from ..value_objects.enums import RecommendationType
from .job import Job, Subtask, Task


class ArchiveDrivenJobSuggestion(BaseModel):
    """
    A ranked, explainable proposal to build a job from one archive.

    Computed on demand and never persisted; the candidate job/tasks/subtasks
    carry provisional ids until a job is synthesized from the suggestion.
    """

    model_config = ConfigDict(frozen=True)

    source_archive_id: str
    part_name: str
    similarity_score: float = Field(ge=0, le=100)
    confidence_level: float = Field(ge=0, le=95)
    recommendation_type: RecommendationType
    suggested_job: Job
    suggested_tasks: tuple[Task, ...] = ()
    suggested_subtasks: tuple[Subtask, ...] = ()
    historical_performance: HistoricalPerformance
    optimizations: tuple[JobOptimization, ...] = ()
    risk_assessment: tuple[JobCreationRisk, ...] = ()
    recommendations: tuple[str, ...] = ()

    @property
    def ranking_score(self) -> float:
        return self.confidence_level * self.similarity_score


class SynthesizedJob(BaseModel):
    """A newly created job graph and the notes explaining how it was built."""

    job: Job
    tasks: list[Task] = Field(default_factory=list)
    subtasks: list[Subtask] = Field(default_factory=list)
    processing_notes: list[str] = Field(default_factory=list)

    def task_by_id(self, task_id: str) -> Task | None:
        return next((task for task in self.tasks if task.id == task_id), None)
