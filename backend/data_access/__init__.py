"""
Data access layer for the Snake game.

This module provides the key-value stores that persist the high score
between sessions and process restarts.
"""

from .key_value_store import (
    KeyValueStore,
    InMemoryKeyValueStore,
    SqliteKeyValueStore,
    PostgresKeyValueStore,
    get_default_store
)
from .repositories import BaseRepository, SettingsRepository

__all__ = [
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'SqliteKeyValueStore',
    'PostgresKeyValueStore',
    'get_default_store',
    'BaseRepository',
    'SettingsRepository',
]
