"""Configuration: data locations, storage keys and defaults."""

import os
from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

# Environment variable overriding DATA_DIR
DATA_DIR_ENV = "SELFFIT_DATA_DIR"

DB_FILENAME = "selffit.db"

# Key-value storage keys
WORKOUT_EVENTS_STORAGE_KEY = "@selffit/workoutEvents"
SETTINGS_STORAGE_KEY = "@selffit/settings"
WORKOUT_TYPES_STORAGE_KEY = "@selffit/workoutTypes"

# Colour used for workouts whose type no longer exists
FALLBACK_TYPE_COLOR = "#1890FF"

NOTIFICATION_ID_PREFIX = "workout-"


def get_data_dir(data_dir: Path | None = None) -> Path:
    """Resolve the data directory (argument, then environment, then default)."""
    if data_dir is None:
        override = os.environ.get(DATA_DIR_ENV)
        data_dir = Path(override).expanduser() if override else DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    return get_data_dir(data_dir) / DB_FILENAME
