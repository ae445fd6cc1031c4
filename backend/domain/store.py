"""
Key-value store interface used by the scoreboard.

Every store exposes the same two calls:
    get(key) -> Optional[str]
    set(key, value)
Database-backed stores live in data_access; the in-memory store here is
the engine default and the test double.
"""

from typing import Dict, Optional


class KeyValueStore:
    """
    Base class/interface for a single-slot-per-key string store.
    """

    def get(self, key: str) -> Optional[str]:
        """
        Return the stored value for key.

        Returns:
            The stored string, or None if the key was never written.
        """
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under key."""
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed store. Lives only as long as the process.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = str(value)
