"""CLI commands for selffit."""

from .init import init
from .reminders import reminders
from .serve import serve
from .settings import settings
from .stats import stats
from .types import types
from .workouts import workouts

__all__ = [
    "init",
    "reminders",
    "serve",
    "settings",
    "stats",
    "types",
    "workouts",
]
