"""Notification scheduling for workout reminders."""

from .base import NotificationService, ScheduledNotification
from .local import LocalNotificationService
from .scheduler import WorkoutNotificationScheduler, identifier_for

__all__ = [
    "identifier_for",
    "LocalNotificationService",
    "NotificationService",
    "ScheduledNotification",
    "WorkoutNotificationScheduler",
]
