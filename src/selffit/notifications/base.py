"""Protocol for notification delivery services."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, runtime_checkable


@dataclass
class ScheduledNotification:
    """A one-shot notification waiting to fire."""

    identifier: str
    fire_at: datetime
    title: str
    body: str
    payload: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "fire_at": self.fire_at.isoformat(),
            "title": self.title,
            "body": self.body,
            "payload": self.payload,
        }


@runtime_checkable
class NotificationService(Protocol):
    """Delivers time-triggered local notifications."""

    async def schedule(
        self,
        identifier: str,
        fire_at: datetime,
        title: str,
        body: str,
        payload: dict,
    ) -> None:
        """Schedule a notification, replacing any with the same identifier.

        Raises:
            NotificationError: If the notification could not be scheduled
        """
        ...

    async def cancel(self, identifier: str) -> None:
        """Cancel a scheduled notification. Missing identifiers are ignored.

        Raises:
            NotificationError: If the cancellation failed
        """
        ...
