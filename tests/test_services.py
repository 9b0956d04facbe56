"""Tests for the settings provider, type catalogue, scheduler and app wiring."""

from datetime import datetime, timedelta

import pytest

from conftest import NOW, FakeClock, RecordingNotificationService, make_draft
from selffit.db import KeyValueStore, SettingsRepository, WorkoutTypeRepository
from selffit.errors import NotFoundError
from selffit.models.settings import AppSettings
from selffit.models.workout import WorkoutRecord
from selffit.notifications import WorkoutNotificationScheduler, identifier_for
from selffit.services.app import SelfFitApp
from selffit.services.settings_provider import SettingsProvider
from selffit.services.workout_types import WorkoutTypeService


class TestSettingsProvider:
    """Tests for SettingsProvider."""

    @pytest.mark.asyncio
    async def test_load_defaults_when_empty(self, initialized_db):
        provider = SettingsProvider(SettingsRepository(db_path=initialized_db))
        settings = await provider.load()

        assert settings == AppSettings()
        assert provider.reminder_lead_minutes == 30

    @pytest.mark.asyncio
    async def test_update_persists(self, initialized_db):
        repo = SettingsRepository(db_path=initialized_db)
        await SettingsProvider(repo).update(week_start_day=0, notifications_enabled=False)

        reloaded = SettingsProvider(repo)
        await reloaded.load()
        assert reloaded.week_start_day == 0
        assert reloaded.notifications_enabled is False

    @pytest.mark.asyncio
    async def test_load_failure_falls_back(self, initialized_db):
        kv = KeyValueStore(initialized_db)
        await kv.set_item("@selffit/settings", "garbage")

        provider = SettingsProvider(SettingsRepository(kv))
        assert await provider.load() == AppSettings()

    @pytest.mark.asyncio
    async def test_update_rejects_invalid(self):
        provider = SettingsProvider()
        with pytest.raises(ValueError):
            await provider.update(reminder_lead_minutes=-5)
        assert provider.reminder_lead_minutes == 30


class TestWorkoutTypeService:
    """Tests for WorkoutTypeService."""

    @pytest.mark.asyncio
    async def test_defaults_loaded(self, initialized_db):
        service = WorkoutTypeService(WorkoutTypeRepository(db_path=initialized_db))
        types = await service.load()
        assert [t.name for t in types] == ["Running", "Cardio", "Yoga", "Gym"]

    @pytest.mark.asyncio
    async def test_add_update_delete(self, initialized_db):
        repo = WorkoutTypeRepository(db_path=initialized_db)
        service = WorkoutTypeService(repo)
        await service.load()

        swim = await service.add("Swimming", "#0000FF")
        await service.update(swim.id, color="#00FFFF")

        reloaded = WorkoutTypeService(repo)
        await reloaded.load()
        assert reloaded.get_by_name("Swimming").color == "#00FFFF"

        await reloaded.delete(swim.id)
        assert reloaded.get_by_name("Swimming") is None

    @pytest.mark.asyncio
    async def test_duplicate_name(self):
        service = WorkoutTypeService()
        with pytest.raises(ValueError):
            await service.add("Yoga", "#123456")

    @pytest.mark.asyncio
    async def test_default_types_cannot_be_deleted(self):
        service = WorkoutTypeService()
        with pytest.raises(ValueError):
            await service.delete("1")
        assert service.get("1") is not None

    @pytest.mark.asyncio
    async def test_unknown_type(self):
        service = WorkoutTypeService()
        with pytest.raises(NotFoundError):
            await service.delete("nope")
        with pytest.raises(NotFoundError):
            await service.update("nope", name="X")

    @pytest.mark.asyncio
    async def test_rename_leaves_records_dangling(self):
        """Records keep the old name and render with the fallback colour."""
        service = WorkoutTypeService()
        climbing = await service.add("Climbing", "#AA5500")
        await service.update(climbing.id, name="Bouldering")

        assert service.resolve_color("Climbing") == "#1890FF"
        assert service.resolve_color("Bouldering") == "#AA5500"


class TestScheduler:
    """Tests for WorkoutNotificationScheduler on its own."""

    def _record(self, start: datetime) -> WorkoutRecord:
        return WorkoutRecord.from_draft(make_draft(start), id="w1", now=NOW)

    @pytest.mark.asyncio
    async def test_schedule_cancels_first(self):
        service = RecordingNotificationService()
        scheduler = WorkoutNotificationScheduler(service, SettingsProvider(), clock=FakeClock())

        assert await scheduler.schedule_for(self._record(NOW + timedelta(hours=3))) is True
        assert service.calls == [("cancel", "workout-w1"), ("schedule", "workout-w1")]

    @pytest.mark.asyncio
    async def test_zero_lead_time(self):
        service = RecordingNotificationService()
        settings = SettingsProvider(settings=AppSettings(reminder_lead_minutes=0))
        scheduler = WorkoutNotificationScheduler(service, settings, clock=FakeClock())

        start = NOW + timedelta(minutes=1)
        await scheduler.schedule_for(self._record(start))
        assert service.scheduled["workout-w1"]["fire_at"] == start

    def test_identifier(self):
        assert identifier_for("abc") == "workout-abc"


class TestSelfFitApp:
    """Tests for wiring everything to one data directory."""

    @pytest.mark.asyncio
    async def test_open_and_reload(self, tmp_path):
        clock = FakeClock()
        app = await SelfFitApp.open(tmp_path, clock=clock)
        record = await app.store.add(make_draft(NOW + timedelta(days=1)))

        reopened = await SelfFitApp.open(tmp_path, clock=clock)
        assert reopened.store.get_by_id(record.id) is not None
        assert await reopened.notifications.get(identifier_for(record.id)) is not None

    @pytest.mark.asyncio
    async def test_disabling_notifications_cancels_reminders(self, tmp_path):
        app = await SelfFitApp.open(tmp_path, clock=FakeClock())
        await app.store.add(make_draft(NOW + timedelta(days=1)))
        assert len(await app.notifications.pending()) == 1

        await app.update_settings(notifications_enabled=False)
        assert await app.notifications.pending() == []

        await app.update_settings(notifications_enabled=True)
        assert len(await app.notifications.pending()) == 1

    @pytest.mark.asyncio
    async def test_lead_time_change_reschedules(self, tmp_path):
        app = await SelfFitApp.open(tmp_path, clock=FakeClock())
        start = NOW + timedelta(days=1)
        record = await app.store.add(make_draft(start))

        await app.update_settings(reminder_lead_minutes=10)

        notification = await app.notifications.get(identifier_for(record.id))
        assert notification.fire_at == start - timedelta(minutes=10)
