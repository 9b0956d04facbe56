"""Local notification queue stored in SQLite."""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..config import get_db_path
from ..errors import NotificationError
from .base import ScheduledNotification


class LocalNotificationService:
    """NotificationService that keeps pending notifications in a table.

    Delivery is pull-based: a caller (the ``reminders due`` command, a cron
    job) asks for due notifications and marks them delivered.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def schedule(
        self,
        identifier: str,
        fire_at: datetime,
        title: str,
        body: str,
        payload: dict,
    ) -> None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT OR REPLACE INTO scheduled_notifications
                    (identifier, fire_at, title, body, payload)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (identifier, fire_at.isoformat(), title, body, json.dumps(payload)),
                )
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise NotificationError(f"Could not schedule {identifier}: {e}") from e

    async def cancel(self, identifier: str) -> None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    "DELETE FROM scheduled_notifications WHERE identifier = ?",
                    (identifier,),
                )
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise NotificationError(f"Could not cancel {identifier}: {e}") from e

    async def get(self, identifier: str) -> ScheduledNotification | None:
        """Get a scheduled notification by identifier."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM scheduled_notifications WHERE identifier = ?",
                (identifier,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_notification(row)

    async def pending(self) -> list[ScheduledNotification]:
        """List all scheduled notifications, soonest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM scheduled_notifications ORDER BY fire_at"
            )
            rows = await cursor.fetchall()
            return [self._row_to_notification(row) for row in rows]

    async def due(self, now: datetime | None = None) -> list[ScheduledNotification]:
        """List notifications whose fire time has been reached."""
        now = now or datetime.now()
        return [n for n in await self.pending() if n.fire_at <= now]

    async def mark_delivered(self, identifier: str) -> None:
        """Remove a notification once it has been shown."""
        await self.cancel(identifier)

    def _row_to_notification(self, row: aiosqlite.Row) -> ScheduledNotification:
        """Convert a database row to a ScheduledNotification."""
        return ScheduledNotification(
            identifier=row["identifier"],
            fire_at=datetime.fromisoformat(row["fire_at"]),
            title=row["title"],
            body=row["body"],
            payload=json.loads(row["payload"]) if row["payload"] else {},
        )
