"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import pytest_asyncio

from selffit.db import KeyValueStore, WorkoutCollectionAdapter, init_db
from selffit.errors import NotificationError, PersistenceError
from selffit.models.settings import AppSettings
from selffit.models.workout import WorkoutDraft
from selffit.notifications import WorkoutNotificationScheduler
from selffit.services.settings_provider import SettingsProvider
from selffit.services.workout_store import WorkoutStore

# A Wednesday
NOW = datetime(2026, 10, 14, 9, 0)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingNotificationService:
    """NotificationService that records calls instead of delivering."""

    def __init__(self):
        self.scheduled: dict[str, dict] = {}
        self.calls: list[tuple[str, str]] = []

    async def schedule(self, identifier, fire_at, title, body, payload):
        self.calls.append(("schedule", identifier))
        self.scheduled[identifier] = {
            "fire_at": fire_at,
            "title": title,
            "body": body,
            "payload": payload,
        }

    async def cancel(self, identifier):
        self.calls.append(("cancel", identifier))
        self.scheduled.pop(identifier, None)


class FailingNotificationService:
    """NotificationService whose every call fails."""

    async def schedule(self, identifier, fire_at, title, body, payload):
        raise NotificationError("delivery service unavailable")

    async def cancel(self, identifier):
        raise NotificationError("delivery service unavailable")


class MemoryAdapter:
    """Workout collection adapter keeping serialized data in a dict."""

    def __init__(self):
        self.data: dict[str, list[dict]] = {}
        self.saves = 0

    async def load_collection(self, key):
        from selffit.models.workout import WorkoutRecord

        return [WorkoutRecord.from_dict(item) for item in self.data.get(key, [])]

    async def save_collection(self, key, records):
        self.saves += 1
        self.data[key] = [r.to_dict() for r in records]


class FailingAdapter:
    """Adapter whose storage is always broken."""

    async def load_collection(self, key):
        raise PersistenceError("disk on fire")

    async def save_collection(self, key, records):
        raise PersistenceError("disk on fire")


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def initialized_db(temp_db_path):
    """A temporary database with the schema created."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings_provider():
    return SettingsProvider(settings=AppSettings(reminder_lead_minutes=30, week_start_day=1))


@pytest.fixture
def notification_service():
    return RecordingNotificationService()


@pytest.fixture
def memory_adapter():
    return MemoryAdapter()


@pytest.fixture
def store(memory_adapter, settings_provider, notification_service, clock):
    """A store with in-memory storage and recorded notifications."""
    scheduler = WorkoutNotificationScheduler(
        notification_service, settings_provider, clock=clock
    )
    return WorkoutStore(memory_adapter, settings_provider, scheduler=scheduler, clock=clock)


@pytest_asyncio.fixture
async def sqlite_adapter(initialized_db):
    return WorkoutCollectionAdapter(KeyValueStore(initialized_db))


def make_draft(start: datetime, minutes: int = 60, **kwargs) -> WorkoutDraft:
    """Build a draft starting at ``start``."""
    return WorkoutDraft(
        title=kwargs.pop("title", "Morning run"),
        workout_type=kwargs.pop("workout_type", "Running"),
        start=start,
        end=start + timedelta(minutes=minutes),
        **kwargs,
    )
