"""
Database configuration and schema management for the snake arcade.

This module provides database connection management with environment-aware
path selection and schema initialization. The only table is a small
key-value `settings` table holding the persisted high score.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """
    Determine the database path.

    Returns:
        Path to the SQLite database file.
        - SNAKE_DB_PATH when set
        - backend/snake_arcade.db otherwise
    """
    db_path = os.getenv('SNAKE_DB_PATH')
    if db_path:
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return db_path

    backend_dir = Path(__file__).parent
    return str(backend_dir / 'snake_arcade.db')


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    db_path = db_path or get_database_path()
    logger.info("Initializing database at: %s", db_path)

    conn = get_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()

    except Exception as e:
        conn.rollback()
        logger.error("Error initializing database: %s", e)
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    logging.basicConfig(level=logging.INFO)
    init_database()
    print(f"Database ready at: {get_database_path()}")
