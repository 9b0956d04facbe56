"""Wiring of stores and adapters for one data directory."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from ..config import get_db_path
from ..db import (
    KeyValueStore,
    SettingsRepository,
    WorkoutCollectionAdapter,
    WorkoutTypeRepository,
    init_db,
)
from ..models.settings import AppSettings
from ..notifications import LocalNotificationService, WorkoutNotificationScheduler
from .settings_provider import SettingsProvider
from .workout_store import WorkoutStore
from .workout_types import WorkoutTypeService

# Settings whose change invalidates already scheduled reminders
REMINDER_SETTINGS = {"notifications_enabled", "reminder_lead_minutes"}


@dataclass
class SelfFitApp:
    """Everything a CLI command or API request needs, created per data dir."""

    db_path: Path
    settings: SettingsProvider
    workout_types: WorkoutTypeService
    notifications: LocalNotificationService
    scheduler: WorkoutNotificationScheduler
    store: WorkoutStore

    @classmethod
    async def open(
        cls,
        data_dir: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "SelfFitApp":
        """Initialize the database and load settings, types and workouts."""
        db_path = get_db_path(data_dir)
        await init_db(db_path)

        kv = KeyValueStore(db_path)
        settings = SettingsProvider(SettingsRepository(kv))
        workout_types = WorkoutTypeService(WorkoutTypeRepository(kv))
        notifications = LocalNotificationService(db_path)
        scheduler = WorkoutNotificationScheduler(notifications, settings, clock=clock)
        store = WorkoutStore(
            WorkoutCollectionAdapter(kv), settings, scheduler=scheduler, clock=clock
        )

        await settings.load()
        await workout_types.load()
        await store.load()

        return cls(
            db_path=db_path,
            settings=settings,
            workout_types=workout_types,
            notifications=notifications,
            scheduler=scheduler,
            store=store,
        )

    async def update_settings(self, **changes) -> AppSettings:
        """Update settings and refresh reminders when they depend on them."""
        before = self.settings.settings
        after = await self.settings.update(**changes)
        if any(getattr(before, k) != getattr(after, k) for k in REMINDER_SETTINGS):
            if after.notifications_enabled:
                await self.store.reschedule_notifications()
            else:
                for record in self.store.records:
                    await self.scheduler.cancel_for(record.id)
        return after
