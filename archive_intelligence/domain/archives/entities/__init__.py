from .archive import (
    CompletedForms,
    Issue,
    JobArchive,
    JobSnapshot,
    PerformanceData,
    SubtaskSnapshot,
    TaskSnapshot,
)
from .job import Job, Subtask, Task
from .suggestion import ArchiveDrivenJobSuggestion, SynthesizedJob

__all__ = [
    "ArchiveDrivenJobSuggestion",
    "CompletedForms",
    "Issue",
    "Job",
    "JobArchive",
    "JobSnapshot",
    "PerformanceData",
    "Subtask",
    "SubtaskSnapshot",
    "SynthesizedJob",
    "Task",
    "TaskSnapshot",
]
