"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_db_path


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Durable key-value storage (one JSON document per key)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # One-shot local notifications waiting to fire
        await db.execute("""
            CREATE TABLE IF NOT EXISTS scheduled_notifications (
                identifier TEXT PRIMARY KEY,
                fire_at TIMESTAMP NOT NULL,
                title TEXT NOT NULL,
                body TEXT NOT NULL,
                payload TEXT DEFAULT '{}',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_scheduled_notifications_fire_at
            ON scheduled_notifications(fire_at)
        """)

        await db.commit()
