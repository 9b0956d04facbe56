"""Workout record data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


def to_local_naive(value: datetime) -> datetime:
    """Convert an offset-aware datetime to naive local time.

    Workouts are stored and compared as naive local times, so values such
    as ``2026-10-15T09:00:00Z`` are shifted into the local zone first.
    Naive values pass through unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class CompletionStatus(str, Enum):
    """Whether a scheduled workout was done."""

    PENDING = "pending"
    COMPLETED = "completed"
    MISSED = "missed"

    @classmethod
    def from_legacy(cls, completed: bool | None) -> "CompletionStatus":
        """Map the old nullable-boolean flag to a status."""
        if completed is None:
            return cls.PENDING
        return cls.COMPLETED if completed else cls.MISSED


@dataclass
class WorkoutDraft:
    """Caller-supplied fields for a new workout."""

    title: str
    workout_type: str
    start: datetime
    end: datetime
    location: str | None = None
    notes: str | None = None

    @property
    def duration_minutes(self) -> int:
        return round((self.end - self.start).total_seconds() / 60)

    def validate(self) -> None:
        """Check the draft before it reaches the store.

        Raises:
            ValueError: If the title is blank or the workout does not last
                at least one minute.
        """
        if not self.title or not self.title.strip():
            raise ValueError("Workout title must not be empty")
        if self.end <= self.start:
            raise ValueError("Workout end must be after its start")
        if self.duration_minutes <= 0:
            raise ValueError("Workout must last at least one minute")


def _parse_timestamp(value: str) -> datetime:
    # older exports wrote UTC strings with a trailing Z
    return to_local_naive(datetime.fromisoformat(value.replace("Z", "+00:00")))


# Fields callers may change through WorkoutStore.update
UPDATABLE_FIELDS = frozenset(
    {"title", "workout_type", "start", "end", "location", "notes", "completion_status"}
)


@dataclass
class WorkoutRecord:
    """A scheduled, time-boxed workout.

    ``workout_type`` holds the name of a WorkoutType. It is a lookup, not an
    ownership link: the type may have been deleted since.
    """

    id: str
    title: str
    workout_type: str
    start: datetime
    end: datetime
    created_at: datetime
    updated_at: datetime
    location: str | None = None
    notes: str | None = None
    completion_status: CompletionStatus = CompletionStatus.PENDING

    @classmethod
    def from_draft(
        cls, draft: WorkoutDraft, id: str, now: datetime
    ) -> "WorkoutRecord":
        """Create a pending record from a draft."""
        return cls(
            id=id,
            title=draft.title,
            workout_type=draft.workout_type,
            start=draft.start,
            end=draft.end,
            location=draft.location,
            notes=draft.notes,
            completion_status=CompletionStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    @property
    def duration_minutes(self) -> int:
        """Duration rounded to whole minutes."""
        return round((self.end - self.start).total_seconds() / 60)

    @property
    def is_completed(self) -> bool:
        return self.completion_status == CompletionStatus.COMPLETED

    @property
    def is_missed(self) -> bool:
        return self.completion_status == CompletionStatus.MISSED

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "workout_type": self.workout_type,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "location": self.location,
            "notes": self.notes,
            "completion_status": self.completion_status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutRecord":
        """Create from dictionary, restoring timestamps to datetimes."""
        if "completion_status" in data:
            status = CompletionStatus(data["completion_status"])
        else:
            status = CompletionStatus.from_legacy(data.get("completed"))

        return cls(
            id=str(data["id"]),
            title=data["title"],
            workout_type=data.get("workout_type", data.get("workoutType", "")),
            start=_parse_timestamp(data["start"]),
            end=_parse_timestamp(data["end"]),
            location=data.get("location"),
            notes=data.get("notes"),
            completion_status=status,
            created_at=_parse_timestamp(
                data.get("created_at", data.get("createdAt"))
            ),
            updated_at=_parse_timestamp(
                data.get("updated_at", data.get("updatedAt"))
            ),
        )

    def get_status_display(self) -> str:
        """Get a human-readable status string."""
        status_map = {
            CompletionStatus.PENDING: "Pending",
            CompletionStatus.COMPLETED: "Completed",
            CompletionStatus.MISSED: "Missed",
        }
        return status_map.get(self.completion_status, self.completion_status.value)

    def get_time_display(self) -> str:
        """Get a human-readable time range."""
        return (
            f"{self.start.strftime('%a %Y-%m-%d %H:%M')}"
            f" - {self.end.strftime('%H:%M')}"
        )


def validate_changes(current: WorkoutRecord, changes: dict) -> None:
    """Check that ``changes`` applied to ``current`` still form a valid workout.

    Raises:
        ValueError: If a field is not updatable or the result is invalid
    """
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
    WorkoutDraft(
        title=changes.get("title", current.title),
        workout_type=changes.get("workout_type", current.workout_type),
        start=changes.get("start", current.start),
        end=changes.get("end", current.end),
    ).validate()
