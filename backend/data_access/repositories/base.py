"""
Base repository for the local sqlite database.
"""

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from database import get_connection

ConnectionAndCursor = Tuple[sqlite3.Connection, sqlite3.Cursor]


class BaseRepository:
    """
    Opens one short-lived sqlite connection per operation.

    Attributes:
        db_path: sqlite file to open; None means database.get_database_path()
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path

    @contextmanager
    def _open(self, commit: bool) -> Iterator[ConnectionAndCursor]:
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if commit:
                conn.commit()
        except Exception:
            if commit:
                conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def connection(self):
        """Write access: commits on success, rolls back and re-raises on error."""
        return self._open(commit=True)

    def read_connection(self):
        return self._open(commit=False)
