"""
Key-value store interface used for the persisted high score.
"""

from typing import Dict, Optional


class KeyValueStore:
    """
    Base class/interface for string key-value stores.

    get() returns None for missing keys rather than raising.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; values are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
