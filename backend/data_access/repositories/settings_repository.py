"""
Settings repository - sqlite-backed key-value store.
"""

import logging
import sqlite3
from typing import Optional

from ..key_value_store import KeyValueStore
from database import init_database
from .base import BaseRepository

logger = logging.getLogger(__name__)


class SqliteKeyValueStore(BaseRepository, KeyValueStore):
    """
    Stores string values in the `settings` table.

    Reads never raise: a broken or missing database is logged and reads as
    an absent key, so the game falls back to its defaults. Writes propagate
    errors after rolling back.
    """

    def __init__(self, db_path: Optional[str] = None, create_schema: bool = True):
        super().__init__(db_path)
        if create_schema:
            init_database(db_path)

    def get(self, key: str) -> Optional[str]:
        try:
            with self.read_connection() as (conn, cursor):
                cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read setting %s: %s", key, e)
            return None

        if row is None:
            return None
        return row["value"]

    def set(self, key: str, value: str) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO settings (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, str(value)),
            )

    def delete(self, key: str) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM settings WHERE key = ?", (key,))
