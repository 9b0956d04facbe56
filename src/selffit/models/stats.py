"""Weekly statistics model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class WeeklyStats:
    """Aggregate numbers for one calendar week (derived, never stored)."""

    week_start: datetime
    week_end: datetime
    total_count: int = 0
    completed_count: int = 0
    missed_count: int = 0
    pending_count: int = 0
    total_duration_minutes: int = 0
    completion_rate: float = 0.0  # Percentage 0-100

    @property
    def completion_rate_display(self) -> str:
        """Rate rounded to two decimals, or '-' for an empty week."""
        if self.total_count == 0:
            return "-"
        return f"{self.completion_rate:.2f}%"

    @property
    def duration_display(self) -> str:
        hours, minutes = divmod(self.total_duration_minutes, 60)
        if hours == 0:
            return f"{minutes}m"
        return f"{hours}h {minutes}m"

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
            "total_count": self.total_count,
            "completed_count": self.completed_count,
            "missed_count": self.missed_count,
            "pending_count": self.pending_count,
            "total_duration_minutes": self.total_duration_minutes,
            "completion_rate": round(self.completion_rate, 2),
            "completion_rate_display": self.completion_rate_display,
        }
