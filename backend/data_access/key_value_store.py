"""
Key-value stores backing the persisted high score.

SQLite and PostgreSQL implementations of domain.store.KeyValueStore.
The in-memory store is re-exported so callers have one import site.
"""

import logging
import sqlite3
from typing import Optional

import database
import database_postgres
from domain.store import KeyValueStore, InMemoryKeyValueStore
from .repositories import SettingsRepository

logger = logging.getLogger(__name__)


class SqliteKeyValueStore(KeyValueStore):
    """
    Store backed by the key_value table of a local SQLite file.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or database.get_database_path()
        database.init_database(self.db_path)

    def get(self, key: str) -> Optional[str]:
        conn = database.get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT value FROM key_value WHERE key = ?", (key,)
            ).fetchone()
            return row['value'] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = database.get_connection(self.db_path)
        try:
            conn.execute("""
                INSERT INTO key_value (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
            """, (key, str(value)))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Failed to write key {key!r} to {self.db_path}: {e}")
            raise
        finally:
            conn.close()


class PostgresKeyValueStore(KeyValueStore):
    """
    Store backed by the key_value table on PostgreSQL.

    The table is created on construction unless a repository is injected.
    """

    def __init__(self, repository: Optional[SettingsRepository] = None):
        if repository is None:
            repository = SettingsRepository()
            repository.ensure_table()
        self.repository = repository

    def get(self, key: str) -> Optional[str]:
        return self.repository.get_value(key)

    def set(self, key: str, value: str) -> None:
        self.repository.set_value(key, str(value))


def get_default_store() -> KeyValueStore:
    """
    Pick the persistent store for this environment.

    Priority:
    1. PostgreSQL when DATABASE_URL or the full PG* set is configured
    2. Local SQLite file otherwise
    """
    if database_postgres.is_configured():
        logger.info("Using PostgreSQL key-value store")
        return PostgresKeyValueStore()

    if database_postgres.is_partially_configured():
        logger.warning(
            "Incomplete PG* configuration (need PGHOST, PGUSER, PGPASSWORD, PGDATABASE); "
            "falling back to SQLite"
        )

    store = SqliteKeyValueStore()
    logger.info(f"Using SQLite key-value store at {store.db_path}")
    return store
