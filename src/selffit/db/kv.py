"""Durable string-keyed storage backed by SQLite."""

import json
from pathlib import Path
from typing import Any

import aiosqlite

from ..config import get_db_path
from ..errors import PersistenceError


class KeyValueStore:
    """Stores one JSON document per key.

    Every failure (I/O, SQLite, undecodable JSON) is raised as
    PersistenceError so callers only deal with one error type.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_item(self, key: str) -> Any | None:
        """Get the decoded value stored under ``key``, or None."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except (aiosqlite.Error, OSError) as e:
            raise PersistenceError(f"Could not read {key!r}: {e}") from e

        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Could not decode {key!r}: {e}") from e

    async def set_item(self, key: str, value: Any) -> None:
        """Store ``value`` as JSON under ``key``, replacing any previous value."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Could not encode {key!r}: {e}") from e

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, payload),
                )
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise PersistenceError(f"Could not write {key!r}: {e}") from e

    async def remove_item(self, key: str) -> None:
        """Delete ``key`` (no error if it does not exist)."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise PersistenceError(f"Could not remove {key!r}: {e}") from e

    async def keys(self) -> list[str]:
        """List all stored keys."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute("SELECT key FROM kv_store ORDER BY key")
                rows = await cursor.fetchall()
        except (aiosqlite.Error, OSError) as e:
            raise PersistenceError(f"Could not list keys: {e}") from e
        return [row[0] for row in rows]
