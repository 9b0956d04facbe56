"""User preference models."""

from dataclasses import dataclass, fields, replace
from enum import Enum


class Theme(str, Enum):
    """Display theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


@dataclass(frozen=True)
class AppSettings:
    """User preferences read by the workout store.

    ``week_start_day`` counts from Sunday (0) to Saturday (6).
    """

    notifications_enabled: bool = True
    reminder_lead_minutes: int = 30  # Minutes before a workout to remind
    default_workout_duration: int = 60  # In minutes
    theme: Theme = Theme.SYSTEM
    week_start_day: int = 1  # Monday

    def validate(self) -> None:
        """Raise ValueError for out-of-range values."""
        if self.reminder_lead_minutes < 0:
            raise ValueError("Reminder lead time must be zero or more minutes")
        if self.default_workout_duration <= 0:
            raise ValueError("Default workout duration must be positive")
        if self.week_start_day not in range(7):
            raise ValueError("Week start day must be between 0 (Sunday) and 6")

    def merged(self, **changes) -> "AppSettings":
        """Return a copy with ``changes`` applied and validated."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        if "theme" in changes:
            changes["theme"] = Theme(changes["theme"])
        updated = replace(self, **changes)
        updated.validate()
        return updated

    @property
    def week_start_name(self) -> str:
        return WEEKDAY_NAMES[self.week_start_day]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "notifications_enabled": self.notifications_enabled,
            "reminder_lead_minutes": self.reminder_lead_minutes,
            "default_workout_duration": self.default_workout_duration,
            "theme": self.theme.value,
            "week_start_day": self.week_start_day,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary, filling missing keys with defaults."""
        defaults = cls()
        known = {f.name for f in fields(cls)}
        return defaults.merged(**{k: v for k, v in data.items() if k in known})
