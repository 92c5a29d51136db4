"""SQLite repository for key-value settings."""

import sqlite3
from dataclasses import dataclass

from meal_log.services.user_settings import SettingsRepository


@dataclass
class SqliteSettingsRepository(SettingsRepository):
    """SQLite implementation for the settings table."""

    conn: sqlite3.Connection

    def get_setting(self, key: str) -> str | None:
        """Return a stored setting value."""
        row = self.conn.execute(
            "SELECT value FROM settings WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return row["value"]

    def set_setting(self, key: str, value: str) -> None:
        """Insert or replace a setting value."""
        self.conn.execute(
            """
            INSERT INTO settings(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, value),
        )
        self.conn.commit()
