"""Data access layer for selffit."""

from pathlib import Path

from ..config import SETTINGS_STORAGE_KEY, WORKOUT_TYPES_STORAGE_KEY
from ..errors import PersistenceError
from ..models.settings import AppSettings
from ..models.workout import WorkoutRecord
from ..models.workout_type import WorkoutType
from .kv import KeyValueStore


class WorkoutCollectionAdapter:
    """Serializes the workout collection to and from the key-value store.

    Holds no state besides the store it writes to.
    """

    def __init__(self, kv: KeyValueStore | None = None, db_path: Path | None = None):
        self.kv = kv or KeyValueStore(db_path)

    async def load_collection(self, key: str) -> list[WorkoutRecord]:
        """Load every record stored under ``key`` (empty when absent)."""
        data = await self.kv.get_item(key)
        if data is None:
            return []
        if not isinstance(data, list):
            raise PersistenceError(f"{key!r} must contain a JSON list")
        try:
            return [WorkoutRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Invalid workout record under {key!r}: {e}") from e

    async def save_collection(self, key: str, records: list[WorkoutRecord]) -> None:
        """Replace the collection stored under ``key``."""
        await self.kv.set_item(key, [record.to_dict() for record in records])


class SettingsRepository:
    """Repository for user settings."""

    def __init__(self, kv: KeyValueStore | None = None, db_path: Path | None = None):
        self.kv = kv or KeyValueStore(db_path)

    async def get(self) -> AppSettings | None:
        """Get stored settings merged over the defaults, or None."""
        data = await self.kv.get_item(SETTINGS_STORAGE_KEY)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise PersistenceError("Stored settings must be a JSON object")
        try:
            return AppSettings.from_dict(data)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Invalid stored settings: {e}") from e

    async def save(self, settings: AppSettings) -> None:
        await self.kv.set_item(SETTINGS_STORAGE_KEY, settings.to_dict())


class WorkoutTypeRepository:
    """Repository for the workout type catalogue."""

    def __init__(self, kv: KeyValueStore | None = None, db_path: Path | None = None):
        self.kv = kv or KeyValueStore(db_path)

    async def list_all(self) -> list[WorkoutType] | None:
        """List stored types, or None if the catalogue was never saved."""
        data = await self.kv.get_item(WORKOUT_TYPES_STORAGE_KEY)
        if data is None:
            return None
        if not isinstance(data, list):
            raise PersistenceError("Stored workout types must be a JSON list")
        try:
            return [WorkoutType.from_dict(item) for item in data]
        except (KeyError, TypeError) as e:
            raise PersistenceError(f"Invalid stored workout type: {e}") from e

    async def save_all(self, types: list[WorkoutType]) -> None:
        await self.kv.set_item(
            WORKOUT_TYPES_STORAGE_KEY, [t.to_dict() for t in types]
        )
