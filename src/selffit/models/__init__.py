"""Data models for selffit."""

from .settings import AppSettings, Theme
from .stats import WeeklyStats
from .workout import CompletionStatus, WorkoutDraft, WorkoutRecord, to_local_naive
from .workout_type import DEFAULT_WORKOUT_TYPES, WorkoutType

__all__ = [
    "AppSettings",
    "CompletionStatus",
    "DEFAULT_WORKOUT_TYPES",
    "Theme",
    "WeeklyStats",
    "WorkoutDraft",
    "WorkoutRecord",
    "WorkoutType",
    "to_local_naive",
]
