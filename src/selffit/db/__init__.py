"""Database layer for selffit."""

from ..config import get_db_path
from .engine import init_db
from .kv import KeyValueStore
from .repositories import (
    SettingsRepository,
    WorkoutCollectionAdapter,
    WorkoutTypeRepository,
)

__all__ = [
    "get_db_path",
    "init_db",
    "KeyValueStore",
    "SettingsRepository",
    "WorkoutCollectionAdapter",
    "WorkoutTypeRepository",
]
