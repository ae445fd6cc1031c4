"""
Settings repository for the key_value table on PostgreSQL.
"""

from typing import Optional

from database_postgres import KEY_VALUE_SCHEMA

from .base import BaseRepository


class SettingsRepository(BaseRepository):
    """
    Repository for key_value table operations.
    """

    def ensure_table(self) -> None:
        """Create the key_value table if it does not exist yet."""
        with self.connection() as (conn, cursor):
            cursor.execute(KEY_VALUE_SCHEMA)

    def get_value(self, key: str) -> Optional[str]:
        """
        Get the value stored under key.

        Args:
            key: Setting name (e.g. 'highScore')

        Returns:
            The stored string or None if the key is absent
        """
        with self.read_connection() as (conn, cursor):
            cursor.execute(
                "SELECT value FROM key_value WHERE key = %s",
                (key,)
            )
            row = cursor.fetchone()
            return row['value'] if row else None

    def set_value(self, key: str, value: str) -> None:
        """
        Insert or overwrite the value stored under key.

        Args:
            key: Setting name
            value: New value
        """
        with self.connection() as (conn, cursor):
            cursor.execute("""
                INSERT INTO key_value (key, value, updated_at)
                VALUES (%s, %s, NOW())
                ON CONFLICT (key) DO UPDATE SET
                    value = EXCLUDED.value,
                    updated_at = NOW()
            """, (key, value))
