"""The workout store: single owner of workout records."""

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Awaitable, Callable
from uuid import uuid4

from ..config import WORKOUT_EVENTS_STORAGE_KEY
from ..db.repositories import WorkoutCollectionAdapter
from ..errors import NotFoundError, PersistenceError
from ..models.stats import WeeklyStats
from ..models.workout import (
    UPDATABLE_FIELDS,
    CompletionStatus,
    WorkoutDraft,
    WorkoutRecord,
)
from .settings_provider import SettingsProvider
from .weeks import in_week, week_bounds

if TYPE_CHECKING:
    from ..notifications.scheduler import WorkoutNotificationScheduler

logger = logging.getLogger(__name__)

PostCommitHook = Callable[[], Awaitable[object]]


class WorkoutStore:
    """Owns the in-memory workout collection and mediates every change.

    Each mutation updates memory first, then writes the whole collection
    through the adapter, then runs its post-commit hooks (reminder
    scheduling). Readers always see the post-mutation state, even while
    the write is in flight. Storage and notification failures are logged
    and never undo the in-memory change.
    """

    def __init__(
        self,
        adapter: WorkoutCollectionAdapter,
        settings: SettingsProvider,
        scheduler: "WorkoutNotificationScheduler | None" = None,
        storage_key: str = WORKOUT_EVENTS_STORAGE_KEY,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.adapter = adapter
        self.settings = settings
        self.scheduler = scheduler
        self.storage_key = storage_key
        self.clock = clock
        self.is_loading = False
        self._records: list[WorkoutRecord] = []

    @property
    def records(self) -> tuple[WorkoutRecord, ...]:
        """Snapshot of the collection in insertion order."""
        return tuple(self._records)

    async def load(self) -> list[WorkoutRecord]:
        """Replace the collection with the stored one.

        Any storage or decoding failure leaves an empty collection.
        """
        self.is_loading = True
        try:
            self._records = await self.adapter.load_collection(self.storage_key)
        except Exception:
            logger.exception("Failed to load workouts, starting with none")
            self._records = []
        finally:
            self.is_loading = False
        return list(self._records)

    async def add(self, draft: WorkoutDraft) -> WorkoutRecord:
        """Create a pending workout from a draft.

        The caller must have checked ``draft.end > draft.start``
        (``WorkoutDraft.validate``); the store does not re-check it.
        """
        now = self.clock()
        record = WorkoutRecord.from_draft(draft, id=uuid4().hex, now=now)
        self._records.append(record)
        logger.info("Added workout %s (%s)", record.id, record.title)

        await self._commit(self._schedule_hook(record))
        return record

    async def update(self, workout_id: str, **fields) -> WorkoutRecord:
        """Merge ``fields`` into a workout and reschedule its reminder.

        Raises:
            NotFoundError: If no workout has this id
            ValueError: If a field cannot be updated
        """
        index = self._index_of(workout_id)

        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        if "completion_status" in fields:
            fields["completion_status"] = CompletionStatus(fields["completion_status"])

        current = self._records[index]
        updated = replace(current, **fields, updated_at=self._next_timestamp(current))
        self._records[index] = updated
        logger.info("Updated workout %s", workout_id)

        await self._commit(self._cancel_hook(workout_id), self._schedule_hook(updated))
        return updated

    async def delete(self, workout_id: str) -> None:
        """Remove a workout and cancel its reminder.

        Raises:
            NotFoundError: If no workout has this id
        """
        index = self._index_of(workout_id)
        del self._records[index]
        logger.info("Deleted workout %s", workout_id)

        await self._commit(self._cancel_hook(workout_id))

    async def set_completion_status(
        self, workout_id: str, status: CompletionStatus | str
    ) -> WorkoutRecord:
        """Mark a workout completed, missed or pending.

        Reminders depend only on the start time, so they are left alone.

        Raises:
            NotFoundError: If no workout has this id
        """
        index = self._index_of(workout_id)
        current = self._records[index]
        updated = replace(
            current,
            completion_status=CompletionStatus(status),
            updated_at=self._next_timestamp(current),
        )
        self._records[index] = updated
        logger.info("Workout %s marked %s", workout_id, updated.completion_status.value)

        await self._commit()
        return updated

    def get_by_id(self, workout_id: str) -> WorkoutRecord | None:
        for record in self._records:
            if record.id == workout_id:
                return record
        return None

    def week_bounds(self, anchor: date | datetime) -> tuple[datetime, datetime]:
        """Inclusive bounds of the week containing ``anchor``."""
        return week_bounds(anchor, self.settings.week_start_day)

    def get_for_week(self, anchor: date | datetime) -> list[WorkoutRecord]:
        """Workouts starting within the anchor's week, in collection order."""
        bounds = self.week_bounds(anchor)
        return [record for record in self._records if in_week(record.start, bounds)]

    def compute_weekly_stats(self, anchor: date | datetime) -> WeeklyStats:
        """Counts, total duration and completion rate for one week."""
        week_start, week_end = self.week_bounds(anchor)
        workouts = self.get_for_week(anchor)

        completed = sum(1 for w in workouts if w.is_completed)
        missed = sum(1 for w in workouts if w.is_missed)
        decided = completed + missed

        return WeeklyStats(
            week_start=week_start,
            week_end=week_end,
            total_count=len(workouts),
            completed_count=completed,
            missed_count=missed,
            pending_count=len(workouts) - decided,
            total_duration_minutes=sum(w.duration_minutes for w in workouts),
            completion_rate=(completed / decided) * 100 if decided else 0.0,
        )

    async def reschedule_notifications(self) -> int:
        """Re-run reminder scheduling for every workout (after settings change)."""
        if self.scheduler is None:
            return 0
        return await self.scheduler.reschedule_all(list(self._records))

    def _index_of(self, workout_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == workout_id:
                return index
        raise NotFoundError("Workout", workout_id)

    def _next_timestamp(self, record: WorkoutRecord) -> datetime:
        # updated_at must move forward even if the clock has not ticked
        now = self.clock()
        if now <= record.updated_at:
            now = record.updated_at + timedelta(microseconds=1)
        return now

    def _schedule_hook(self, record: WorkoutRecord) -> PostCommitHook | None:
        if self.scheduler is None:
            return None
        scheduler = self.scheduler
        return lambda: scheduler.schedule_for(record)

    def _cancel_hook(self, workout_id: str) -> PostCommitHook | None:
        if self.scheduler is None:
            return None
        scheduler = self.scheduler
        return lambda: scheduler.cancel_for(workout_id)

    async def _commit(self, *hooks: PostCommitHook | None) -> None:
        """Persist the collection, then run side-effect hooks in order."""
        try:
            await self.adapter.save_collection(self.storage_key, list(self._records))
        except PersistenceError:
            logger.exception("Failed to save workouts, keeping in-memory state")

        for hook in hooks:
            if hook is None:
                continue
            try:
                await hook()
            except Exception:
                logger.exception("Post-commit hook failed")
