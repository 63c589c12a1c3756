"""
Repository pattern implementations for data access.

This module provides a clean abstraction over database operations
with proper connection management and error handling.
"""

from .base import BaseRepository
from .settings_repository import SqliteKeyValueStore

__all__ = ['BaseRepository', 'SqliteKeyValueStore']
