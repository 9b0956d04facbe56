"""Tests for data models."""

from datetime import datetime, timedelta, timezone

import pytest

from selffit.config import FALLBACK_TYPE_COLOR
from selffit.models.settings import AppSettings, Theme
from selffit.models.stats import WeeklyStats
from selffit.models.workout import (
    CompletionStatus,
    WorkoutDraft,
    WorkoutRecord,
    to_local_naive,
    validate_changes,
)
from selffit.models.workout_type import (
    DEFAULT_WORKOUT_TYPES,
    WorkoutType,
    color_for,
    find_type,
)

START = datetime(2026, 10, 19, 7, 0)


@pytest.fixture
def record():
    return WorkoutRecord(
        id="abc",
        title="Morning run",
        workout_type="Running",
        start=START,
        end=START + timedelta(minutes=45),
        location="Park",
        created_at=datetime(2026, 10, 18, 12, 0),
        updated_at=datetime(2026, 10, 18, 12, 0),
    )


class TestWorkoutRecord:
    """Tests for WorkoutRecord."""

    def test_to_dict(self, record):
        data = record.to_dict()

        assert data["id"] == "abc"
        assert data["start"] == "2026-10-19T07:00:00"
        assert data["completion_status"] == "pending"
        assert data["notes"] is None

    def test_from_dict_restores_datetimes(self, record):
        restored = WorkoutRecord.from_dict(record.to_dict())

        assert restored == record
        assert isinstance(restored.created_at, datetime)

    def test_from_dict_legacy_completed_flag(self):
        """Older data stored completion as a nullable boolean."""
        base = {
            "id": 1700000000000,
            "title": "Yoga",
            "workoutType": "Yoga",
            "start": "2026-10-19T07:00:00",
            "end": "2026-10-19T08:00:00",
            "createdAt": "2026-10-18T12:00:00",
            "updatedAt": "2026-10-18T12:00:00",
        }

        assert WorkoutRecord.from_dict({**base, "completed": None}).completion_status == CompletionStatus.PENDING
        assert WorkoutRecord.from_dict({**base, "completed": True}).completion_status == CompletionStatus.COMPLETED
        assert WorkoutRecord.from_dict({**base, "completed": False}).completion_status == CompletionStatus.MISSED
        assert WorkoutRecord.from_dict(base).id == "1700000000000"
        assert WorkoutRecord.from_dict(base).workout_type == "Yoga"

    def test_from_dict_utc_strings_become_local(self):
        """Exported UTC timestamps load as naive local times."""
        data = {
            "id": "1",
            "title": "Yoga",
            "workout_type": "Yoga",
            "start": "2026-10-19T07:00:00Z",
            "end": "2026-10-19T08:00:00.000Z",
            "created_at": "2026-10-18T12:00:00+00:00",
            "updated_at": "2026-10-18T12:00:00+00:00",
        }
        expected_start = datetime(2026, 10, 19, 7, tzinfo=timezone.utc).astimezone()

        record = WorkoutRecord.from_dict(data)

        assert record.start.tzinfo is None
        assert record.start == expected_start.replace(tzinfo=None)
        assert record.duration_minutes == 60

    def test_to_local_naive_keeps_naive_values(self):
        value = datetime(2026, 10, 19, 7, 0)
        assert to_local_naive(value) is value

    def test_duration_minutes(self, record):
        assert record.duration_minutes == 45

    def test_displays(self, record):
        assert record.get_status_display() == "Pending"
        assert record.get_time_display() == "Mon 2026-10-19 07:00 - 07:45"


class TestWorkoutDraft:
    """Tests for boundary validation of new workouts."""

    def test_valid(self):
        WorkoutDraft("Run", "Running", START, START + timedelta(minutes=30)).validate()

    def test_end_before_start(self):
        with pytest.raises(ValueError):
            WorkoutDraft("Run", "Running", START, START - timedelta(minutes=30)).validate()

    def test_zero_length(self):
        with pytest.raises(ValueError):
            WorkoutDraft("Run", "Running", START, START).validate()

    def test_sub_minute(self):
        with pytest.raises(ValueError):
            WorkoutDraft("Run", "Running", START, START + timedelta(seconds=20)).validate()

    def test_blank_title(self):
        with pytest.raises(ValueError):
            WorkoutDraft("  ", "Running", START, START + timedelta(minutes=30)).validate()

    def test_validate_changes(self, record):
        validate_changes(record, {"title": "Long run"})
        with pytest.raises(ValueError):
            validate_changes(record, {"end": START - timedelta(minutes=1)})
        with pytest.raises(ValueError):
            validate_changes(record, {"id": "other"})


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.notifications_enabled is True
        assert settings.reminder_lead_minutes == 30
        assert settings.week_start_day == 1
        assert settings.week_start_name == "Monday"
        assert settings.theme == Theme.SYSTEM

    def test_from_dict_merges_over_defaults(self):
        settings = AppSettings.from_dict({"reminder_lead_minutes": 10, "unknown": 1})
        assert settings.reminder_lead_minutes == 10
        assert settings.week_start_day == 1

    def test_round_trip(self):
        settings = AppSettings(theme=Theme.DARK, week_start_day=0)
        assert AppSettings.from_dict(settings.to_dict()) == settings

    @pytest.mark.parametrize(
        "changes",
        [
            {"reminder_lead_minutes": -1},
            {"week_start_day": 7},
            {"default_workout_duration": 0},
            {"theme": "neon"},
            {"colour": "red"},
        ],
    )
    def test_merged_rejects_invalid(self, changes):
        with pytest.raises(ValueError):
            AppSettings().merged(**changes)


class TestWorkoutType:
    """Tests for workout types and the by-name lookup."""

    def test_defaults_present(self):
        names = [t.name for t in DEFAULT_WORKOUT_TYPES]
        assert names == ["Running", "Cardio", "Yoga", "Gym"]
        assert all(t.is_default for t in DEFAULT_WORKOUT_TYPES)

    def test_find_and_color(self):
        assert find_type(DEFAULT_WORKOUT_TYPES, "Yoga").color == "#33FF57"
        assert color_for(DEFAULT_WORKOUT_TYPES, "Yoga") == "#33FF57"

    def test_dangling_name_falls_back(self):
        assert find_type(DEFAULT_WORKOUT_TYPES, "Climbing") is None
        assert color_for(DEFAULT_WORKOUT_TYPES, "Climbing") == FALLBACK_TYPE_COLOR

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            WorkoutType(id="x", name="Swim", color="blue").validate()

    def test_from_dict_legacy_keys(self):
        workout_type = WorkoutType.from_dict(
            {"id": "1", "name": "Run", "color": "#FF5733", "isDefault": True}
        )
        assert workout_type.is_default is True


class TestWeeklyStats:
    """Tests for WeeklyStats display helpers."""

    def test_to_dict(self):
        stats = WeeklyStats(
            week_start=datetime(2026, 10, 12),
            week_end=datetime(2026, 10, 18, 23, 59, 59, 999999),
            total_count=3,
            completed_count=2,
            missed_count=1,
            total_duration_minutes=90,
            completion_rate=200 / 3,
        )
        data = stats.to_dict()

        assert data["completion_rate"] == 66.67
        assert data["completion_rate_display"] == "66.67%"
        assert stats.duration_display == "1h 30m"
