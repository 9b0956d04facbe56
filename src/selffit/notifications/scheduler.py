"""Workout reminder scheduling on top of a NotificationService."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable

from ..config import NOTIFICATION_ID_PREFIX
from ..models.workout import WorkoutRecord
from ..services.settings_provider import SettingsProvider
from .base import NotificationService

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Workout reminder"


def identifier_for(workout_id: str) -> str:
    """Notification identifier for a workout."""
    return f"{NOTIFICATION_ID_PREFIX}{workout_id}"


class WorkoutNotificationScheduler:
    """Schedules one reminder per workout, keyed by the workout id.

    Delivery is best-effort: errors from the underlying service are logged
    and never raised to the caller.
    """

    def __init__(
        self,
        service: NotificationService,
        settings: SettingsProvider,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.service = service
        self.settings = settings
        self.clock = clock

    def reminder_time(self, record: WorkoutRecord) -> datetime:
        """When the reminder for ``record`` should fire."""
        return record.start - timedelta(minutes=self.settings.reminder_lead_minutes)

    async def schedule_for(self, record: WorkoutRecord) -> bool:
        """Schedule the reminder for a workout.

        Returns:
            True if a notification was scheduled, False if it was skipped
            (notifications disabled, reminder time already passed) or failed
        """
        if not self.settings.notifications_enabled:
            logger.debug("Notifications disabled, not scheduling %s", record.id)
            return False

        notify_at = self.reminder_time(record)
        if notify_at <= self.clock():
            logger.debug(
                "Reminder time %s for %s has passed, skipping",
                notify_at.isoformat(),
                record.id,
            )
            return False

        await self.cancel_for(record.id)

        identifier = identifier_for(record.id)
        try:
            await self.service.schedule(
                identifier,
                notify_at,
                REMINDER_TITLE,
                f"{record.title} is about to start",
                {"workout_id": record.id},
            )
        except Exception:
            logger.exception("Failed to schedule notification %s", identifier)
            return False

        logger.debug("Scheduled %s at %s", identifier, notify_at.isoformat())
        return True

    async def cancel_for(self, workout_id: str) -> None:
        """Cancel the reminder for a workout, if any."""
        identifier = identifier_for(workout_id)
        try:
            await self.service.cancel(identifier)
        except Exception:
            logger.exception("Failed to cancel notification %s", identifier)

    async def reschedule_all(self, records: Iterable[WorkoutRecord]) -> int:
        """Cancel and re-schedule reminders for every record.

        Returns:
            Number of reminders scheduled
        """
        scheduled = 0
        for record in records:
            await self.cancel_for(record.id)
            if await self.schedule_for(record):
                scheduled += 1
        return scheduled
