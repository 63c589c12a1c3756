"""
Data access layer for the snake arcade.

Persistent state is a handful of string keys (the high score and its
owner), stored either in memory or in the local sqlite database.
"""

from .key_value_store import KeyValueStore, InMemoryKeyValueStore
from .repositories import BaseRepository, SqliteKeyValueStore

__all__ = [
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'BaseRepository',
    'SqliteKeyValueStore',
]
